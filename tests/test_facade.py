"""Tests for the module-level helpers in graindisplay."""

import pytest

import graindisplay
from graindisplay.core.runner import SystemRunner
from graindisplay.core.types import InterfaceConfig, SystemConfig


@pytest.fixture
def patched_store(monkeypatch, fake_store):
    """Make every helper talk to the fake store instead of gsettings."""
    monkeypatch.setattr(graindisplay, "system_runner", lambda: fake_store)
    return fake_store


def test_open_defaults_to_system_runner():
    client = graindisplay.open()
    assert isinstance(client.runner, SystemRunner)
    assert client.executable == "gsettings"


def test_read_config(patched_store):
    config = graindisplay.read_config()

    assert config == graindisplay.DEFAULT_WARM
    assert graindisplay.read_night_light() == config
    assert patched_store.calls[0] == [
        "gsettings", "get", "org.gnome.settings-daemon.plugins.color", "night-light-enabled",
    ]


def test_apply_config(patched_store):
    graindisplay.apply_config(graindisplay.get_preset("most-warm"))

    assert patched_store.values["night-light-temperature"] == "1700"


def test_apply_system_config(patched_store):
    config = SystemConfig(interface=InterfaceConfig(text_scale=1.75))

    graindisplay.apply_system_config(config)

    assert graindisplay.read_system() == config
    assert graindisplay.read_interface().text_scale == 1.75
