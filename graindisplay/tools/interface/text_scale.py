"""Tools: interface.text_scale.show / interface.text_scale.set

Reads and writes GNOME's text-scaling-factor (1.0 = default font size).
"""

from typing import Any, Dict

from ...core.types import InterfaceConfig
from ...exceptions import GrainDisplayError
from ..base import Tool


class ShowTextScale(Tool):
    """Get current text scaling factor"""

    @property
    def name(self) -> str:
        return "interface.text_scale.show"

    @property
    def description(self) -> str:
        return "Returns the current text scaling factor"

    @property
    def capability_class(self) -> str:
        return "observe"

    @property
    def schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {},
            "required": []
        }

    def execute(self, args: Dict[str, Any]) -> Dict[str, Any]:
        if not self.validate_args(args):
            raise ValueError(f"Invalid arguments for {self.name}")

        try:
            interface = self.client().read_interface()
        except GrainDisplayError as e:
            return self.error_result(e)

        return {"status": "success", "text_scale": interface.text_scale}


class SetTextScale(Tool):
    """Set text scaling factor

    IDEMPOTENT: Takes explicit scale, not a step.
    """

    @property
    def name(self) -> str:
        return "interface.text_scale.set"

    @property
    def description(self) -> str:
        return "Sets the text scaling factor (e.g. 1.25 for 25% larger fonts)"

    @property
    def side_effects(self) -> list[str]:
        return ["font_size_changed"]

    @property
    def reversible(self) -> bool:
        return True

    @property
    def schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "scale": {
                    "type": "number",
                    "exclusiveMinimum": 0,
                    "description": "Multiplier applied to the base font size"
                }
            },
            "required": ["scale"]
        }

    def execute(self, args: Dict[str, Any]) -> Dict[str, Any]:
        if not self.validate_args(args) or args["scale"] is None:
            return {
                "status": "error",
                "error": "Required argument 'scale' not provided",
                "failure_class": "logical"
            }

        scale = float(args["scale"])
        if scale <= 0:
            return {
                "status": "error",
                "error": f"Text scale must be positive, got {scale}",
                "failure_class": "logical"
            }

        try:
            self.client().apply_interface(InterfaceConfig(text_scale=scale))
        except GrainDisplayError as e:
            return self.error_result(e)

        return {"status": "success", "action": "set_text_scale", "text_scale": scale}
