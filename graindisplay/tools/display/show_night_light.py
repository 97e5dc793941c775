"""Tool: display.night_light.show

Returns the current Night Light configuration.

Category: observe
Side Effects: none
"""

from typing import Any, Dict

from ...exceptions import GrainDisplayError
from ..base import Tool


class ShowNightLight(Tool):
    """Read Night Light settings from gsettings"""

    @property
    def name(self) -> str:
        return "display.night_light.show"

    @property
    def description(self) -> str:
        return "Shows the current Night Light configuration"

    @property
    def capability_class(self) -> str:
        return "observe"

    @property
    def reversible(self) -> bool:
        return True  # Nothing to reverse

    @property
    def schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {},
            "required": []
        }

    def execute(self, args: Dict[str, Any]) -> Dict[str, Any]:
        """Execute Night Light query"""
        if not self.validate_args(args):
            raise ValueError(f"Invalid arguments for {self.name}")

        try:
            config = self.client().read_night_light()
        except GrainDisplayError as e:
            return self.error_result(e)

        return {
            "status": "success",
            "night_light": config.to_dict(),
            "warmth": config.describe_temperature(),
        }
