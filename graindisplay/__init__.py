"""graindisplay - warm display configuration for GNOME Night Light

Blue light from the display can interfere with sleep. graindisplay makes the
screen warmer (more orange, less blue) by driving GNOME's Night Light through
gsettings, and can also set the desktop text-scaling factor.

Each helper below opens a fresh client bound to the real gsettings tool.
For tests or custom runners, build a GSettingsClient directly.
"""

from typing import Optional

from .core.gsettings import GSettingsClient
from .core.presets import (
    DAYLIGHT_MOVIE,
    DEFAULT_WARM,
    EXTRA_WARM,
    MODERATE_WARM,
    PRESETS,
    TEXT_SCALE_DEFAULT,
    TEXT_SCALE_EXTRA_LARGE,
    TEXT_SCALE_LARGE,
    TEXT_SCALE_MAX,
    TEXT_SCALE_VERY_LARGE,
    VERY_WARM,
    WARMER,
    get_preset,
)
from .core.runner import CommandRunner, SystemRunner
from .core.settings_config import SettingsConfig
from .core.types import (
    DisplayConfig,
    DisplayEffect,
    DisplayEffects,
    DisplayMode,
    InterfaceConfig,
    NightLightConfig,
    SystemConfig,
)
from .exceptions import (
    ArgumentOverflowError,
    CommandFailedError,
    GrainDisplayError,
    InvalidFormatError,
    UnknownPresetError,
    ValueParseError,
)

__version__ = "0.3.0"


def system_runner() -> CommandRunner:
    return SystemRunner()


def open(runner: Optional[CommandRunner] = None) -> GSettingsClient:
    """Client bound to `runner`, or to the real gsettings tool."""
    settings = SettingsConfig.get()
    return GSettingsClient(
        runner or system_runner(),
        executable=settings.gsettings_executable,
        color_schema=settings.color_schema,
        interface_schema=settings.interface_schema,
    )


def read_night_light() -> NightLightConfig:
    return open().read_night_light()


def read_config() -> NightLightConfig:
    return read_night_light()


def apply_config(config: NightLightConfig) -> None:
    open().apply_night_light(config)


def read_display() -> DisplayConfig:
    return open().read_display()


def apply_display_config(config: DisplayConfig) -> None:
    open().apply_display(config)


def read_interface() -> InterfaceConfig:
    return open().read_interface()


def apply_interface(config: InterfaceConfig) -> None:
    open().apply_interface(config)


def read_system() -> SystemConfig:
    return open().read_system()


def apply_system_config(config: SystemConfig) -> None:
    open().apply_system(config)


__all__ = [
    "open",
    "system_runner",
    "read_night_light",
    "read_config",
    "apply_config",
    "read_display",
    "apply_display_config",
    "read_interface",
    "apply_interface",
    "read_system",
    "apply_system_config",
    "get_preset",
    "PRESETS",
    "DEFAULT_WARM",
    "EXTRA_WARM",
    "WARMER",
    "VERY_WARM",
    "MODERATE_WARM",
    "DAYLIGHT_MOVIE",
    "TEXT_SCALE_DEFAULT",
    "TEXT_SCALE_LARGE",
    "TEXT_SCALE_EXTRA_LARGE",
    "TEXT_SCALE_VERY_LARGE",
    "TEXT_SCALE_MAX",
    "CommandRunner",
    "SystemRunner",
    "GSettingsClient",
    "SettingsConfig",
    "DisplayConfig",
    "DisplayEffect",
    "DisplayEffects",
    "DisplayMode",
    "InterfaceConfig",
    "NightLightConfig",
    "SystemConfig",
    "GrainDisplayError",
    "CommandFailedError",
    "InvalidFormatError",
    "ValueParseError",
    "ArgumentOverflowError",
    "UnknownPresetError",
]
