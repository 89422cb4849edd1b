"""Shared plumbing for pdfforge tools."""

from .interfaces import BaseTool, ConversionContext
from .pipeline import ToolRegistry, register_tool, registry

__all__ = ["BaseTool", "ConversionContext", "ToolRegistry", "register_tool", "registry"]
