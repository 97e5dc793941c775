import pytest
from typing import Dict, List, Sequence, Tuple

from graindisplay.core.gsettings import GSettingsClient
from graindisplay.core.runner import CommandRunner
from graindisplay.exceptions import CommandFailedError


class ScriptedRunner(CommandRunner):
    """Test-only runner: expects an exact sequence of argv and returns canned output."""

    def __init__(self, steps: Sequence[Tuple[Sequence[str], str]]):
        self.steps = [(list(argv), response) for argv, response in steps]
        self.index = 0

    def run(self, args: Sequence[str]) -> bytes:
        if self.index >= len(self.steps):
            raise AssertionError(f"Unexpected command: {list(args)}")
        expected, response = self.steps[self.index]
        self.index += 1
        assert list(args) == expected
        return response.encode("utf-8")

    @property
    def exhausted(self) -> bool:
        return self.index == len(self.steps)


class RecordingRunner(CommandRunner):
    """Test-only runner: records every argv and returns empty output."""

    def __init__(self):
        self.calls: List[List[str]] = []

    def run(self, args: Sequence[str]) -> bytes:
        self.calls.append(list(args))
        return b""


class FakeStore(CommandRunner):
    """Test-only runner backed by a dict, answering like gsettings does.

    `types` maps key -> type tag ("uint32", "double") for typed reads.
    """

    def __init__(self, types: Dict[str, str], values: Dict[str, str] = None):
        self.types = types
        self.values: Dict[str, str] = dict(values or {})
        self.calls: List[List[str]] = []
        self.fail_on: Dict[str, str] = {}

    def run(self, args: Sequence[str]) -> bytes:
        argv = list(args)
        self.calls.append(argv)
        _, verb, schema, key, *rest = argv
        if key in self.fail_on:
            raise CommandFailedError(argv, self.fail_on[key], returncode=1)
        if verb == "set":
            self.values[key] = rest[0]
            return b""
        value = self.values[key]
        tag = self.types.get(key)
        text = f"{tag} {value}" if tag else value
        return f"{text}\n".encode("utf-8")


NIGHT_LIGHT_TYPES = {
    "night-light-temperature": "uint32",
    "night-light-schedule-from": "double",
    "night-light-schedule-to": "double",
    "text-scaling-factor": "double",
}


@pytest.fixture
def scripted():
    """Factory: scripted(steps) -> (client, runner)."""
    def _factory(steps):
        runner = ScriptedRunner(steps)
        return GSettingsClient(runner), runner
    return _factory


@pytest.fixture
def recording_runner():
    return RecordingRunner()


@pytest.fixture
def fake_store():
    return FakeStore(
        NIGHT_LIGHT_TYPES,
        {
            "night-light-enabled": "true",
            "night-light-temperature": "3000",
            "night-light-schedule-automatic": "false",
            "night-light-schedule-from": "0.0",
            "night-light-schedule-to": "24.0",
            "text-scaling-factor": "1.0",
        },
    )


@pytest.fixture
def store_client(fake_store):
    return GSettingsClient(fake_store)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point HOME at an empty directory so no real config.cfg is picked up."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home
