"""Tool registry and the single entry point used to run a transform."""

from __future__ import annotations

from typing import Any, Dict, List

from ...core.utils import get_logger
from ...exceptions import InvalidOptionError
from .interfaces import BaseTool, TransformContext

LOGGER = get_logger("pdfrelay.tools")


class ToolRegistry:
    """Maps transform names such as ``"split"`` to their tool classes."""

    def __init__(self) -> None:
        self._tools: Dict[str, type[BaseTool]] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def register(self, name: str, tool_class: type[BaseTool]) -> None:
        if name in self._tools:
            raise ValueError(f"Tool '{name}' is already registered")
        self._tools[name] = tool_class

    def create(self, name: str, context: TransformContext) -> BaseTool:
        """Instantiate the tool registered as ``name`` bound to ``context``.

        Raises:
            InvalidOptionError: If no tool is registered under ``name``.
        """

        tool_class = self._tools.get(name)
        if tool_class is None:
            available = ", ".join(self.names()) or "none"
            raise InvalidOptionError(f"Unknown transform '{name}' (available: {available})")
        return tool_class(context)

    def names(self) -> List[str]:
        return sorted(self._tools)


registry = ToolRegistry()


def register_tool(name: str):
    """Class decorator adding a :class:`BaseTool` subclass to the shared registry."""

    def decorator(cls: type[BaseTool]) -> type[BaseTool]:
        registry.register(name, cls)
        return cls

    return decorator


def run_tool(name: str, context: TransformContext, *, tools: ToolRegistry | None = None) -> Any:
    """Run the tool registered as ``name`` against ``context`` and return its result."""

    tool = (tools or registry).create(name, context)
    LOGGER.debug("Running %s (%d input document(s))", name, len(context.documents) or int(context.data is not None))
    return tool.run()


__all__ = ["ToolRegistry", "registry", "register_tool", "run_tool", "TransformContext", "BaseTool"]
