"""Presets - Named Night Light and text-scale values shipped with graindisplay

Every Night Light preset disables the automatic schedule and covers the whole
day (0.0 -> 24.0) so it takes effect as soon as it is applied, instead of
waiting for sunset.
"""

from typing import Dict, List

from ..exceptions import UnknownPresetError
from .types import NightLightConfig, InterfaceConfig


def _always_on(temperature: int) -> NightLightConfig:
    return NightLightConfig(
        enabled=True,
        temperature=temperature,
        schedule_automatic=False,
        schedule_from=0.0,
        schedule_to=24.0,
    )


DEFAULT_WARM = _always_on(3000)     # Balanced warmth
EXTRA_WARM = _always_on(2500)       # Candlelight
WARMER = _always_on(2800)           # Reading lamp
VERY_WARM = _always_on(1700)        # Warmest possible
MODERATE_WARM = _always_on(4000)    # Gentle warmth
DAYLIGHT_MOVIE = _always_on(4500)   # Subtle warmth for daytime viewing

PRESETS: Dict[str, NightLightConfig] = {
    "default-warm": DEFAULT_WARM,
    "extra-warm": EXTRA_WARM,
    "warmer": WARMER,
    "very-warm": VERY_WARM,
    "moderate-warm": MODERATE_WARM,
    "daylight-movie": DAYLIGHT_MOVIE,
}

# Previous name of very-warm, still accepted on the command line and in config.cfg
PRESET_ALIASES: Dict[str, str] = {
    "most-warm": "very-warm",
}

PRESET_DESCRIPTIONS: Dict[str, str] = {
    "default-warm": "Balanced warmth (3000K)",
    "extra-warm": "Extra warm (2500K)",
    "warmer": "Warm reading lamp (2800K)",
    "very-warm": "Warmest possible (1700K)",
    "moderate-warm": "Gentle warmth (4000K)",
    "daylight-movie": "Subtle warmth for movies (4500K)",
}

TEXT_SCALE_DEFAULT = InterfaceConfig(text_scale=1.0)
TEXT_SCALE_LARGE = InterfaceConfig(text_scale=1.25)
TEXT_SCALE_EXTRA_LARGE = InterfaceConfig(text_scale=1.5)
TEXT_SCALE_VERY_LARGE = InterfaceConfig(text_scale=1.75)
TEXT_SCALE_MAX = InterfaceConfig(text_scale=2.0)


def preset_names() -> List[str]:
    """Canonical preset names, in display order."""
    return list(PRESETS)


def canonical_preset_name(name: str) -> str:
    """Resolve an alias to its preset name. Case-sensitive.

    Raises:
        UnknownPresetError: if `name` is neither a preset nor an alias
    """
    name = PRESET_ALIASES.get(name, name)
    if name not in PRESETS:
        raise UnknownPresetError(name, preset_names())
    return name


def get_preset(name: str) -> NightLightConfig:
    """Look up a preset by name or alias."""
    return PRESETS[canonical_preset_name(name)]
