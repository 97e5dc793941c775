"""Core module - settings client, value types, presets and preferences

Structure:
    core/
    ├── runner.py           # CommandRunner seam (subprocess in production)
    ├── gsettings.py        # GSettingsClient - typed gsettings get/set
    ├── types.py            # Frozen config values
    ├── presets.py          # Named Night Light / text-scale values
    ├── preferences.py      # ~/.config/graindisplay/config.cfg
    └── settings_config.py  # settings.yaml singleton
"""

from .runner import CommandRunner, SystemRunner
from .gsettings import GSettingsClient, COLOR_SCHEMA, INTERFACE_SCHEMA
from .types import (
    DisplayConfig,
    DisplayEffect,
    DisplayEffects,
    DisplayMode,
    InterfaceConfig,
    NightLightConfig,
    SystemConfig,
)

__all__ = [
    # Runner
    "CommandRunner",
    "SystemRunner",
    # Client
    "GSettingsClient",
    "COLOR_SCHEMA",
    "INTERFACE_SCHEMA",
    # Types
    "DisplayConfig",
    "DisplayEffect",
    "DisplayEffects",
    "DisplayMode",
    "InterfaceConfig",
    "NightLightConfig",
    "SystemConfig",
]
