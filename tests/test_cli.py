"""Tests for the graindisplay command line."""

import io

import pytest

from graindisplay import cli
from graindisplay.core.gsettings import GSettingsClient
from graindisplay.exceptions import CommandFailedError
from graindisplay.tools import ToolRegistry, load_all_tools


@pytest.fixture
def registry(fake_store):
    return load_all_tools(ToolRegistry(), lambda: GSettingsClient(fake_store))


@pytest.fixture
def run_cli(registry):
    """run_cli(*argv, answers=[...]) -> (exit_code, output)"""
    def _run(*argv, answers=()):
        out = io.StringIO()
        pending = list(answers)

        def fake_input(prompt):
            out.write(prompt)
            if not pending:
                raise EOFError
            return pending.pop(0)

        code = cli.run(list(argv), registry=registry, input_fn=fake_input, out=out)
        return code, out.getvalue()
    return _run


def write_config(home, text):
    config_dir = home / ".config" / "graindisplay"
    config_dir.mkdir(parents=True, exist_ok=True)
    path = config_dir / "config.cfg"
    path.write_text(text, encoding="utf-8")
    return path


def set_keys(store):
    return [call[3] for call in store.calls if call[1] == "set"]


class TestApply:

    def test_no_arguments_reapplies_current(self, run_cli, fake_store):
        code, output = run_cli()

        assert code == 0
        assert "✅ Configuration applied!" in output
        assert fake_store.values["night-light-temperature"] == "3000"
        assert len(set_keys(fake_store)) == 5

    def test_preset_alias(self, run_cli, fake_store):
        code, _ = run_cli("--preset", "most-warm")

        assert code == 0
        assert fake_store.values["night-light-temperature"] == "1700"
        assert fake_store.values["night-light-schedule-from"] == "0"
        assert fake_store.values["night-light-schedule-to"] == "24"

    def test_unknown_preset(self, run_cli, fake_store):
        code, output = run_cli("-p", "sunset")

        assert code == 1
        assert "Unknown preset: sunset" in output
        assert "daylight-movie" in output
        assert set_keys(fake_store) == []

    def test_flags_override_preset(self, run_cli, fake_store):
        code, _ = run_cli("-p", "warmer", "--disable", "-t", "3300")

        assert code == 0
        assert fake_store.values["night-light-enabled"] == "false"
        assert fake_store.values["night-light-temperature"] == "3300"

    def test_mode_prints_note(self, run_cli):
        code, output = run_cli("--mode", "red-green")

        assert code == 0
        assert "Note:" in output

    def test_font_scale(self, run_cli, fake_store):
        code, _ = run_cli("--font-scale", "1.5")

        assert code == 0
        assert set_keys(fake_store)[-1] == "text-scaling-factor"
        assert fake_store.values["text-scaling-factor"] == "1.5"

    @pytest.mark.parametrize("argv", [
        ["--mode", "sepia"],
        ["--temperature", "warm"],
        ["--temperature", "-5"],
        ["--temperature", "4294967296"],
        ["--font-scale", "0"],
        ["--enable", "--disable"],
        ["--bogus"],
    ])
    def test_argument_errors_exit_2(self, run_cli, argv):
        with pytest.raises(SystemExit) as exc:
            run_cli(*argv)
        assert exc.value.code == 2

    def test_gsettings_failure_exits_1(self, run_cli, fake_store):
        fake_store.fail_on["night-light-temperature"] = "Failed to connect"

        code, output = run_cli("--preset", "warmer")

        assert code == 1
        assert "❌" in output
        assert "Configuration applied" not in output


class TestPreferencesFile:

    def test_home_config_supplies_defaults(self, run_cli, fake_store, isolated_home):
        write_config(isolated_home, "preset = extra-warm\nfont_scale = 1.25\nmode = monochrome\n")

        code, output = run_cli()

        assert code == 0
        assert fake_store.values["night-light-temperature"] == "2500"
        assert fake_store.values["text-scaling-factor"] == "1.25"
        assert "Note:" in output

    def test_flags_win_over_file(self, run_cli, fake_store, isolated_home):
        write_config(isolated_home, "temperature = 2000\nenable = false\nfont_scale = 1.25\n")

        code, _ = run_cli("-t", "3100", "-s", "1.75")

        assert code == 0
        assert fake_store.values["night-light-temperature"] == "3100"
        assert fake_store.values["night-light-enabled"] == "false"
        assert fake_store.values["text-scaling-factor"] == "1.75"

    def test_cli_preset_discards_file_overrides(self, run_cli, fake_store, isolated_home):
        write_config(isolated_home, "temperature = 2000\nenable = false\n")

        code, _ = run_cli("--preset", "warmer")

        assert code == 0
        assert fake_store.values["night-light-temperature"] == "2800"
        assert fake_store.values["night-light-enabled"] == "true"

    def test_no_config(self, run_cli, fake_store, isolated_home):
        write_config(isolated_home, "temperature = 2000\n")

        code, _ = run_cli("--no-config")

        assert code == 0
        assert fake_store.values["night-light-temperature"] == "3000"

    def test_explicit_config_path(self, run_cli, fake_store, tmp_path):
        path = tmp_path / "custom.cfg"
        path.write_text("temperature = 4100\n", encoding="utf-8")

        code, _ = run_cli("--config", str(path))

        assert code == 0
        assert fake_store.values["night-light-temperature"] == "4100"

    def test_unreadable_config(self, run_cli, fake_store, tmp_path):
        code, output = run_cli("--config", str(tmp_path))

        assert code == 1
        assert "Could not read preferences" in output
        assert fake_store.calls == []


    def test_out_of_range_temperature_line_is_skipped(self, run_cli, fake_store, isolated_home):
        write_config(isolated_home, "temperature = 4294967296\nenable = false\n")

        code, _ = run_cli()

        assert code == 0
        assert fake_store.values["night-light-enabled"] == "false"
        assert fake_store.values["night-light-temperature"] == "3000"

    def test_file_mode_kept_when_flags_change_temperature(self, run_cli, fake_store, isolated_home):
        write_config(isolated_home, "mode = monochrome\n")

        code, output = run_cli("-t", "2900")

        assert code == 0
        assert fake_store.values["night-light-temperature"] == "2900"
        assert "Note:" in output

    def test_normal_mode_flag_clears_file_effects(self, run_cli, isolated_home):
        write_config(isolated_home, "mode = red-green\n")

        code, output = run_cli("--mode", "normal")

        assert code == 0
        assert "Note:" not in output


class TestShow:

    def test_full(self, run_cli):
        code, output = run_cli("-f")

        assert code == 0
        assert output.splitlines() == [
            "Current Night Light Configuration:",
            "  Enabled: true",
            "  Temperature: 3000K (warm)",
            "  Schedule automatic: false",
            "  Schedule from: 0.0h",
            "  Schedule to: 24.0h",
            "  Text scaling: 1x",
        ]

    def test_full_hides_times_for_automatic_schedule(self, run_cli, fake_store):
        fake_store.values["night-light-schedule-automatic"] = "true"
        fake_store.values["night-light-temperature"] = "4600"

        _, output = run_cli("--full")

        assert "Schedule from" not in output
        assert "4600K (cool)" in output

    def test_full_failure(self, run_cli, fake_store):
        fake_store.fail_on["text-scaling-factor"] = "No such schema"

        code, output = run_cli("--full")

        assert code == 1
        assert "No such schema" in output

    def test_list_actions(self, run_cli):
        code, output = run_cli("--list-actions")

        assert code == 0
        assert "Total actions: 5" in output
        assert "display.night_light.apply: [actuate]" in output


class TestInteractive:

    def test_answers_are_applied(self, run_cli, fake_store):
        code, output = run_cli("-i", answers=["n", "2600"])

        assert code == 0
        assert "Enable Night Light? (y/n, default: y): " in output
        assert "default: 3000" in output
        assert fake_store.values["night-light-enabled"] == "false"
        assert fake_store.values["night-light-temperature"] == "2600"
        assert "✅ Configuration applied!" in output

    def test_blank_answers_keep_current(self, run_cli, fake_store):
        code, _ = run_cli("--interactive", answers=["", ""])

        assert code == 0
        assert fake_store.values["night-light-enabled"] == "true"
        assert fake_store.values["night-light-temperature"] == "3000"

    def test_end_of_input_keeps_current(self, run_cli, fake_store):
        code, _ = run_cli("-i")

        assert code == 0
        assert fake_store.values["night-light-temperature"] == "3000"

    def test_invalid_temperature(self, run_cli, fake_store):
        code, output = run_cli("-i", answers=["y", "hot"])

        assert code == 1
        assert "invalid temperature" in output
        assert set_keys(fake_store) == []

    def test_out_of_range_temperature(self, run_cli, fake_store):
        code, output = run_cli("-i", answers=["y", "99999999999"])

        assert code == 1
        assert "out of range" in output
        assert set_keys(fake_store) == []


class TestMain:

    def test_settings_error_exits_1(self, monkeypatch, capsys):
        def failing_run():
            raise CommandFailedError(["gsettings", "get", "s", "k"], "Exited with status 1", returncode=1)
        monkeypatch.setattr(cli, "run", failing_run)

        assert cli.main() == 1
        assert "Exited with status 1" in capsys.readouterr().out

    def test_keyboard_interrupt_exits_130(self, monkeypatch, capsys):
        def interrupted():
            raise KeyboardInterrupt
        monkeypatch.setattr(cli, "run", interrupted)

        assert cli.main() == 130
        assert "Cancelled" in capsys.readouterr().out
