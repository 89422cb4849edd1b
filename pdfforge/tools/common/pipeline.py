"""Name to tool-class registry used by the CLI."""

from __future__ import annotations

import logging
from typing import Dict, Iterable

from .interfaces import BaseTool, ConversionContext

LOGGER = logging.getLogger("pdfforge.tools")


class ToolRegistry:
    """Maps CLI command names to :class:`BaseTool` subclasses."""

    def __init__(self) -> None:
        self._tools: Dict[str, type[BaseTool]] = {}

    def register(self, name: str, tool_class: type[BaseTool]) -> None:
        if name in self._tools:
            raise ValueError(f"Tool '{name}' is already registered")
        self._tools[name] = tool_class
        LOGGER.debug("Registered tool %s -> %s", name, tool_class.__name__)

    def create(self, name: str, context: ConversionContext) -> BaseTool:
        """Instantiate the tool registered as *name* for *context*."""

        try:
            tool_class = self._tools[name]
        except KeyError as exc:
            raise KeyError(f"Tool '{name}' is not registered") from exc
        return tool_class(context)

    def names(self) -> Iterable[str]:
        return sorted(self._tools)


registry = ToolRegistry()


def register_tool(name: str):
    """Class decorator adding a tool to the shared :data:`registry`."""

    def decorator(cls: type[BaseTool]) -> type[BaseTool]:
        registry.register(name, cls)
        return cls

    return decorator


__all__ = ["ToolRegistry", "registry", "register_tool"]
