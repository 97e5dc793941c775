"""Settings Configuration - Single Authority for Application Settings

Provides access to how graindisplay reaches the settings store.

RESPONSIBILITY:
- Load config/settings.yaml
- Provide get() singleton
- Expose the gsettings executable, schema ids, output cap and log setup

DOES NOT:
- Read user display preferences (preferences.py's job)
- Talk to gsettings (GSettingsClient's job)
"""

import logging
from pathlib import Path
from typing import Dict, Any, Optional

import yaml


class SettingsConfig:
    """Singleton settings configuration authority.

    Usage:
        config = SettingsConfig.get()
        executable = config.gsettings_executable
    """

    _instance: Optional["SettingsConfig"] = None
    _config: Dict[str, Any] = {}

    # Defaults (used if yaml missing or invalid)
    DEFAULTS = {
        "gsettings": {
            "executable": "gsettings",
            "max_output_bytes": 2048,
            "schemas": {
                "color": "org.gnome.settings-daemon.plugins.color",
                "interface": "org.gnome.desktop.interface",
            },
        },
        "preferences": {
            "dir_name": "graindisplay",
            "file_name": "config.cfg",
        },
        "logging": {
            "level": "WARNING",
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
    }

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._load()
        return cls._instance

    @classmethod
    def get(cls) -> "SettingsConfig":
        """Get singleton instance."""
        return cls()

    def _load(self) -> None:
        """Load configuration from settings.yaml."""
        config_path = Path(__file__).parent.parent / "config" / "settings.yaml"

        raw_config: Dict[str, Any] = {}

        if config_path.exists():
            try:
                with open(config_path, encoding="utf-8") as f:
                    raw_config = yaml.safe_load(f) or {}
                    logging.debug(f"Loaded settings config from {config_path}")
            except (OSError, yaml.YAMLError) as e:
                logging.warning(f"Failed to load settings.yaml: {e}, using defaults")
        else:
            logging.debug(f"No settings.yaml found at {config_path}, using defaults")

        # Merge with defaults (deep merge for nested dicts)
        self._config = self._deep_merge(self.DEFAULTS.copy(), raw_config)

        logging.debug(f"SettingsConfig loaded: gsettings={self._config.get('gsettings', {})}")

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    @property
    def gsettings_executable(self) -> str:
        return self._config["gsettings"]["executable"]

    @property
    def max_output_bytes(self) -> int:
        return int(self._config["gsettings"]["max_output_bytes"])

    @property
    def color_schema(self) -> str:
        return self._config["gsettings"]["schemas"]["color"]

    @property
    def interface_schema(self) -> str:
        return self._config["gsettings"]["schemas"]["interface"]

    @property
    def preferences_dir_name(self) -> str:
        return self._config["preferences"]["dir_name"]

    @property
    def preferences_file_name(self) -> str:
        return self._config["preferences"]["file_name"]

    @property
    def log_level(self) -> str:
        return str(self._config["logging"]["level"]).upper()

    @property
    def log_format(self) -> str:
        return self._config["logging"]["format"]

    def reload(self) -> None:
        """Force reload configuration (for testing)."""
        self._load()
