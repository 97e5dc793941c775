"""Display Types - Immutable value objects for display configuration

GNOME's Night Light measures warmth as a colour temperature in Kelvin.
Lower values = warmer (more orange), higher values = cooler (more blue).

CRITICAL CONSTRAINTS:
- Every type is frozen; build a new value with dataclasses.replace()
- Types do not talk to gsettings (GSettingsClient's job)
- Types do not know about presets by name (presets.py's job)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, List


class DisplayEffect(Enum):
    """Single colour effect. Values are the names used on the command line."""
    MONOCHROME = "monochrome"
    RED_GREEN = "red-green"


class DisplayMode(Enum):
    """Colour mode selector accepted by --mode."""
    NORMAL = "normal"
    MONOCHROME = "monochrome"
    RED_GREEN = "red-green"

    def to_effects(self) -> "DisplayEffects":
        if self is DisplayMode.MONOCHROME:
            return DisplayEffects(monochrome=True)
        if self is DisplayMode.RED_GREEN:
            return DisplayEffects(red_green=True)
        return DisplayEffects()


@dataclass(frozen=True)
class NightLightConfig:
    """Night Light settings as stored under the colour schema.

    Fields:
        enabled: Night Light active at all
        temperature: Kelvin, nominal 1700 (warmest) to 4700
        schedule_automatic: True = sunset to sunrise, decided by the desktop
        schedule_from: Manual start, hours past midnight (0.0-24.0)
        schedule_to: Manual end, hours past midnight (0.0-24.0)

    schedule_from/schedule_to only matter when schedule_automatic is False.
    """
    enabled: bool = True
    temperature: int = 3500
    schedule_automatic: bool = True
    schedule_from: float = 18.0  # 6:00 PM
    schedule_to: float = 7.0     # 7:00 AM

    def describe_temperature(self) -> str:
        """Human label for the temperature, as printed by --full."""
        if self.temperature <= 2500:
            return "very warm"
        if self.temperature <= 3000:
            return "warm"
        if self.temperature <= 4000:
            return "moderate"
        return "cool"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "enabled": self.enabled,
            "temperature": self.temperature,
            "schedule_automatic": self.schedule_automatic,
            "schedule_from": self.schedule_from,
            "schedule_to": self.schedule_to,
        }


@dataclass(frozen=True)
class DisplayEffects:
    """Combinable set of colour effects.

    No effect at all is equivalent to "normal" mode.
    """
    monochrome: bool = False
    red_green: bool = False

    def is_normal(self) -> bool:
        return not self.monochrome and not self.red_green

    def enable(self, effect: DisplayEffect) -> "DisplayEffects":
        """Return a copy with `effect` switched on."""
        if effect is DisplayEffect.MONOCHROME:
            return DisplayEffects(monochrome=True, red_green=self.red_green)
        return DisplayEffects(monochrome=self.monochrome, red_green=True)

    def clear(self) -> "DisplayEffects":
        return DisplayEffects()

    def names(self) -> List[str]:
        """Enabled effects as command-line names, e.g. ["monochrome"]."""
        names = []
        if self.monochrome:
            names.append(DisplayEffect.MONOCHROME.value)
        if self.red_green:
            names.append(DisplayEffect.RED_GREEN.value)
        return names

    def describe(self) -> str:
        if self.monochrome and self.red_green:
            return "monochrome + red-green"
        if self.monochrome:
            return "monochrome"
        if self.red_green:
            return "red-green"
        return "normal"


def _default_night_light() -> NightLightConfig:
    # Local import: presets.py builds on this module
    from .presets import DEFAULT_WARM
    return DEFAULT_WARM


@dataclass(frozen=True)
class DisplayConfig:
    """Night Light plus colour effects.

    red_intensity / green_intensity (0.0-1.0) are reserved for the red-green
    effect and are not read by anything yet.
    """
    night_light: NightLightConfig = field(default_factory=_default_night_light)
    effects: DisplayEffects = field(default_factory=DisplayEffects)
    red_intensity: float = 1.0
    green_intensity: float = 1.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "night_light": self.night_light.to_dict(),
            "effects": self.effects.describe(),
            "red_intensity": self.red_intensity,
            "green_intensity": self.green_intensity,
        }


@dataclass(frozen=True)
class InterfaceConfig:
    """Font scaling multiplier. 1.0 = default size, 1.75 = 75% larger.

    Not range-checked here; callers validate positivity.
    """
    text_scale: float = 1.0

    def to_dict(self) -> Dict[str, Any]:
        return {"text_scale": self.text_scale}


@dataclass(frozen=True)
class SystemConfig:
    """Display and interface settings applied or read together."""
    display: DisplayConfig = field(default_factory=DisplayConfig)
    interface: InterfaceConfig = field(default_factory=InterfaceConfig)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "display": self.display.to_dict(),
            "interface": self.interface.to_dict(),
        }
