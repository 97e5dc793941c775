"""Tool base class - ALL graindisplay actions inherit from this

Tools are thin and deterministic. They translate a plain argument dict into
GSettingsClient calls and report back a result dict with a "status" key.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict

from ..core.gsettings import GSettingsClient
from ..exceptions import (
    CommandFailedError,
    GrainDisplayError,
    InvalidFormatError,
    ValueParseError,
)


ClientFactory = Callable[[], GSettingsClient]


class Tool(ABC):
    """Base class for all tools

    Tools:
    - Have a name and description
    - Define their input schema (JSON Schema)
    - Open a settings client per execution via the injected factory
    - Return structured results
    """

    def __init__(self, client_factory: ClientFactory):
        self._client_factory = client_factory

    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name (must be unique)"""
        raise NotImplementedError

    @property
    @abstractmethod
    def description(self) -> str:
        """One-line description, shown by `graindisplay --list-actions`"""
        raise NotImplementedError

    @property
    @abstractmethod
    def schema(self) -> Dict[str, Any]:
        """JSON Schema for tool arguments

        Example:
        {
            "type": "object",
            "properties": {
                "temperature": {"type": "integer"}
            },
            "required": []
        }
        """
        raise NotImplementedError

    @property
    def side_effects(self) -> list[str]:
        """List of side effects (e.g., 'display_state_changed')"""
        return []

    @property
    def reversible(self) -> bool:
        """Can this action be reversed trivially?"""
        return False

    @property
    def capability_class(self) -> str:
        """What this tool does to the settings store.

        MUST be one of: "actuate", "observe"
        - actuate: writes settings (default)
        - observe: reads settings without modification
        """
        return "actuate"

    @abstractmethod
    def execute(self, args: Dict[str, Any]) -> Dict[str, Any]:
        """Execute the tool with given arguments

        Args:
            args: Arguments matching the schema

        Returns:
            Dict with execution result. Must include "status" key.
            Example: {"status": "success", "text_scale": 1.25}
        """
        raise NotImplementedError

    def client(self) -> GSettingsClient:
        return self._client_factory()

    def error_result(self, error: GrainDisplayError) -> Dict[str, Any]:
        """Result dict for a failed settings call.

        failure_class:
        - environmental: gsettings failed or could not run
        - logical: gsettings answered with something we cannot use
        """
        if isinstance(error, CommandFailedError):
            failure_class = "environmental"
        elif isinstance(error, (InvalidFormatError, ValueParseError)):
            failure_class = "logical"
        else:
            failure_class = "unknown"
        return {
            "status": "error",
            "error": str(error),
            "failure_class": failure_class,
        }

    def validate_args(self, args: Dict[str, Any]) -> bool:
        """Validate arguments against schema (basic validation)"""
        if not isinstance(args, dict):
            return False

        # Check required fields
        required = self.schema.get("required", [])
        for field in required:
            if field not in args:
                return False

        # Basic type checking; None means "not given"
        properties = self.schema.get("properties", {})
        for key, value in args.items():
            if key not in properties or value is None:
                continue
            expected_type = properties[key].get("type")
            if expected_type == "string" and not isinstance(value, str):
                return False
            elif expected_type == "integer" and (isinstance(value, bool) or not isinstance(value, int)):
                return False
            elif expected_type == "number" and (isinstance(value, bool) or not isinstance(value, (int, float))):
                return False
            elif expected_type == "boolean" and not isinstance(value, bool):
                return False
            elif expected_type == "array" and not isinstance(value, list):
                return False

        return True

    def to_dict(self) -> Dict[str, Any]:
        """Export tool metadata"""
        return {
            "name": self.name,
            "description": self.description,
            "schema": self.schema,
            "side_effects": self.side_effects,
            "reversible": self.reversible,
            "capability_class": self.capability_class,
        }
