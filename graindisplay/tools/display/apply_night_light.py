"""Tool: display.night_light.apply

Applies Night Light settings and colour effects.

Category: actuate
Side Effects: display_state_changed

Starting point is the current Night Light state, replaced by `preset` when
given; `enable` and `temperature` then override single fields. `effects`
selects the colour effects (empty list = normal).

Monochrome and red-green have no backend yet: they are accepted and reported,
but only the Night Light write happens.
"""

import logging
from typing import Any, Dict

from ...core.preferences import Preference
from ...core.presets import preset_names
from ...core.types import DisplayConfig, DisplayEffect, DisplayEffects
from ...exceptions import GrainDisplayError, UnknownPresetError
from ..base import Tool


class ApplyNightLight(Tool):
    """Write Night Light settings (idempotent)"""

    @property
    def name(self) -> str:
        return "display.night_light.apply"

    @property
    def description(self) -> str:
        return "Applies a Night Light preset, temperature, enable flag and colour effects"

    @property
    def side_effects(self) -> list[str]:
        return ["display_state_changed"]

    @property
    def reversible(self) -> bool:
        return True

    @property
    def schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "preset": {
                    "type": "string",
                    "enum": preset_names(),
                    "description": "Preset to start from instead of the current settings"
                },
                "enable": {
                    "type": "boolean",
                    "description": "True to enable Night Light, False to disable"
                },
                "temperature": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Colour temperature in Kelvin (1700-4700)"
                },
                "effects": {
                    "type": "array",
                    "items": {"type": "string", "enum": [e.value for e in DisplayEffect]},
                    "description": "Colour effects to combine; empty for normal"
                }
            },
            "required": []
        }

    def execute(self, args: Dict[str, Any]) -> Dict[str, Any]:
        """Execute Night Light apply"""
        if not self.validate_args(args):
            return {"status": "error", "error": "Invalid arguments", "failure_class": "logical"}

        try:
            overrides = self._overrides(args)
        except ValueError as e:
            return {"status": "error", "error": str(e), "failure_class": "logical"}

        try:
            client = self.client()
            # A preset replaces the whole Night Light block, so skip the read
            if overrides.preset is not None:
                current = DisplayConfig()
            else:
                current = client.read_display()
            display = overrides.merge_into_display(current)
            client.apply_display(display)
        except UnknownPresetError as e:
            return {"status": "error", "error": str(e), "failure_class": "logical"}
        except GrainDisplayError as e:
            logging.error(f"Failed to apply Night Light: {e}")
            return self.error_result(e)

        result = {
            "status": "success",
            "action": "apply_night_light",
            "night_light": display.night_light.to_dict(),
            "effects": display.effects.describe(),
        }
        if not display.effects.is_normal():
            result["note"] = (
                "Special color modes (monochrome/red-green) may require "
                "additional Wayland protocol support."
            )
        return result

    @staticmethod
    def _overrides(args: Dict[str, Any]) -> Preference:
        """Tool arguments as a Preference layer; an empty effects list means normal."""
        effects = None
        names = args.get("effects")
        if names is not None:
            effects = DisplayEffects()
            for name in names:
                effects = effects.enable(DisplayEffect(name))
        return Preference(
            preset=args.get("preset"),
            enable=args.get("enable"),
            temperature=args.get("temperature"),
            effects=effects,
        )
