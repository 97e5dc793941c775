"""Tool: system.config.show

Returns Night Light, colour effects and text scaling in one snapshot.

Category: observe
Side Effects: none
"""

from typing import Any, Dict

from ...exceptions import GrainDisplayError
from ..base import Tool


class ShowSystemConfig(Tool):
    """Read the full display + interface configuration"""

    @property
    def name(self) -> str:
        return "system.config.show"

    @property
    def description(self) -> str:
        return "Shows Night Light and text scaling together"

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
            system = self.client().read_system()
        except GrainDisplayError as e:
            return self.error_result(e)

        result = {"status": "success"}
        result.update(system.to_dict())
        result["warmth"] = system.display.night_light.describe_temperature()
        return result
