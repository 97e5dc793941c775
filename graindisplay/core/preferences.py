"""User Preferences - optional defaults from ~/.config/graindisplay/config.cfg

File format (UTF-8, one setting per line):

    # comment
    preset = very-warm
    temperature = 3200
    enable = true
    mode = monochrome, red-green
    font_scale = 1.75

Parsing is best effort: unknown keys and malformed values are dropped line by
line, so one bad line never invalidates the rest of the file. Only I/O errors
other than "file not found" propagate.
"""

import logging
import os
import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Union

from ..exceptions import UnknownPresetError
from .gsettings import U32_MAX
from .presets import canonical_preset_name, get_preset
from .settings_config import SettingsConfig
from .types import DisplayConfig, DisplayEffect, DisplayEffects, InterfaceConfig


_CLEAR_WORDS = ("normal", "none")
_EFFECT_SPLIT_RE = re.compile(r"[, ]+")
_UNSIGNED_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Preference:
    """Overrides read from config.cfg. None means "not set"."""
    preset: Optional[str] = None
    temperature: Optional[int] = None
    enable: Optional[bool] = None
    effects: Optional[DisplayEffects] = None
    clear_effects: bool = False
    font_scale: Optional[float] = None

    def is_empty(self) -> bool:
        return self == Preference()

    def override(self, other: "Preference") -> "Preference":
        """Layer `other` on top of these preferences; its set fields win.

        A preset in `other` starts over from that preset, so this layer's
        enable and temperature are dropped with it.
        """
        preset, enable, temperature = self.preset, self.enable, self.temperature
        if other.preset is not None:
            preset, enable, temperature = other.preset, None, None
        if other.enable is not None:
            enable = other.enable
        if other.temperature is not None:
            temperature = other.temperature

        effects, clear_effects = self.effects, self.clear_effects
        if other.effects is not None or other.clear_effects:
            effects, clear_effects = other.effects, other.clear_effects

        font_scale = self.font_scale if other.font_scale is None else other.font_scale

        return Preference(
            preset=preset,
            temperature=temperature,
            enable=enable,
            effects=effects,
            clear_effects=clear_effects,
            font_scale=font_scale,
        )

    def merge_into_display(self, display: DisplayConfig) -> DisplayConfig:
        """Layer these preferences over `display`; unset fields leave it alone.

        The preset replaces the whole Night Light block, then temperature and
        enable override individual fields.
        """
        night_light = display.night_light
        if self.preset is not None:
            night_light = get_preset(self.preset)
        if self.enable is not None:
            night_light = replace(night_light, enabled=self.enable)
        if self.temperature is not None:
            night_light = replace(night_light, temperature=self.temperature)

        effects = display.effects
        if self.clear_effects:
            effects = effects.clear()
        if self.effects is not None:
            effects = self.effects

        return replace(display, night_light=night_light, effects=effects)

    def merge_into_interface(self, interface: InterfaceConfig) -> InterfaceConfig:
        if self.font_scale is None:
            return interface
        return replace(interface, text_scale=self.font_scale)


def default_path() -> Optional[Path]:
    """<HOME>/.config/<app>/config.cfg, or None when HOME is unset."""
    home = os.environ.get("HOME")
    if not home:
        return None
    settings = SettingsConfig.get()
    return Path(home) / ".config" / settings.preferences_dir_name / settings.preferences_file_name


def load_default() -> Optional[Preference]:
    """Load the per-user preferences file.

    Returns:
        Preference, or None if HOME is unset or the file does not exist
    """
    path = default_path()
    if path is None:
        logging.debug("HOME is not set, skipping preferences")
        return None
    return load_file(path)


def load_file(path: Union[str, Path]) -> Optional[Preference]:
    """Load preferences from `path`.

    Returns:
        None if the file does not exist, an empty Preference if it is empty

    Raises:
        OSError: for any failure other than the file being absent
    """
    try:
        data = Path(path).read_bytes()
    except FileNotFoundError:
        logging.debug(f"No preferences file at {path}")
        return None

    if not data:
        return Preference()

    prefs = parse(data)
    logging.info(f"Loaded preferences from {path}")
    return prefs


def parse(data: Union[bytes, str]) -> Preference:
    """Parse config.cfg content. Never fails on content."""
    if isinstance(data, bytes):
        data = data.decode("utf-8", errors="replace")

    fields = {}
    effects: Optional[DisplayEffects] = None
    clear_effects = False

    for line in data.split("\n"):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not value:
            continue

        if key == "preset":
            preset = _parse_preset(value)
            if preset is not None:
                fields["preset"] = preset
        elif key == "temperature":
            if _UNSIGNED_RE.fullmatch(value) and int(value) <= U32_MAX:
                fields["temperature"] = int(value)
        elif key == "enable":
            enable = _parse_bool(value)
            if enable is not None:
                fields["enable"] = enable
        elif key == "mode":
            if value.lower() in _CLEAR_WORDS:
                clear_effects = True
                continue
            combined = effects or DisplayEffects()
            recognised = False
            for token in _EFFECT_SPLIT_RE.split(value):
                if not token:
                    continue
                if token.lower() in _CLEAR_WORDS:
                    clear_effects = True
                    continue
                effect = _parse_effect(token)
                if effect is not None:
                    combined = combined.enable(effect)
                    recognised = True
            if recognised:
                effects = combined
        elif key == "font_scale":
            try:
                fields["font_scale"] = float(value)
            except ValueError:
                continue
        else:
            # Unknown keys are ignored to keep the file forward compatible
            continue

    return Preference(effects=effects, clear_effects=clear_effects, **fields)


def _parse_bool(value: str) -> Optional[bool]:
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


def _parse_preset(value: str) -> Optional[str]:
    try:
        return canonical_preset_name(value)
    except UnknownPresetError:
        logging.debug(f"Ignoring unknown preset {value!r} in preferences")
        return None


def _parse_effect(token: str) -> Optional[DisplayEffect]:
    try:
        return DisplayEffect(token)
    except ValueError:
        return None
