"""Tools Package - the actions the CLI can run

Structure:
    tools/
    ├── base.py        # Tool ABC
    ├── registry.py    # ToolRegistry + get_registry()
    ├── display/       # Night Light show/apply
    ├── interface/     # Text scaling show/set
    └── system/        # Whole-config snapshot
"""

from typing import Optional

from .base import ClientFactory, Tool
from .registry import ToolRegistry, get_registry


def load_all_tools(registry: ToolRegistry, client_factory: Optional[ClientFactory] = None) -> ToolRegistry:
    """Register every built-in tool on `registry`.

    `client_factory` defaults to graindisplay.open, i.e. the real gsettings tool.
    """
    from .display.apply_night_light import ApplyNightLight
    from .display.show_night_light import ShowNightLight
    from .interface.text_scale import SetTextScale, ShowTextScale
    from .system.show_config import ShowSystemConfig

    if client_factory is None:
        from .. import open as open_client
        client_factory = open_client

    for tool_cls in (ShowNightLight, ApplyNightLight, ShowTextScale, SetTextScale, ShowSystemConfig):
        registry.register(tool_cls(client_factory))
    return registry


__all__ = ["Tool", "ToolRegistry", "get_registry", "load_all_tools"]
