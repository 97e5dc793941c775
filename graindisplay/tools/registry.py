"""Tool Registry - central registry for all available actions

This is the deterministic router between the CLI and the settings client.
"""

from typing import Any, Dict, Optional

from .base import Tool


class ToolRegistry:
    """Central registry for all tools"""

    def __init__(self):
        self._tools: Dict[str, Tool] = {}

    def register(self, tool: Tool):
        """Register a tool"""
        if not isinstance(tool, Tool):
            raise TypeError("Tool must inherit from Tool base class")

        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")

        self._tools[tool.name] = tool

    def get(self, tool_name: str) -> Optional[Tool]:
        """Get a tool by name"""
        return self._tools.get(tool_name)

    def has(self, tool_name: str) -> bool:
        """Check if tool exists"""
        return tool_name in self._tools

    def execute(self, tool_name: str, args: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Run a registered tool by name.

        Raises:
            KeyError: if no tool is registered under `tool_name`
        """
        tool = self._tools.get(tool_name)
        if tool is None:
            raise KeyError(f"Tool '{tool_name}' is not registered")
        return tool.execute(args or {})

    def list_all(self) -> Dict[str, Dict[str, Any]]:
        """List all registered tools with metadata"""
        return {
            name: tool.to_dict()
            for name, tool in self._tools.items()
        }


# Global registry instance
_registry: Optional[ToolRegistry] = None


def get_registry() -> ToolRegistry:
    """Get global tool registry, populated with the built-in tools"""
    global _registry
    if _registry is None:
        from . import load_all_tools
        _registry = ToolRegistry()
        load_all_tools(_registry)
    return _registry


def reset_registry() -> None:
    """Drop the global registry (for testing)."""
    global _registry
    _registry = None
