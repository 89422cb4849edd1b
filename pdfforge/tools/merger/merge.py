"""Plugin exposing PDF merge capabilities through the registry."""

from __future__ import annotations

from pathlib import Path

from ...core.utils import get_logger
from ...exceptions import InputValidationError
from ...merge.merger import merge_pdfs
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfforge.tools.merge")


@register_tool("merge")
class MergeTool(BaseTool):
    name = "merge"

    def run(self) -> Path:
        context = self.context
        inputs = context.input_paths()
        output = context.output_path
        if output is None:
            raise InputValidationError("Merge tool requires an output path")

        LOGGER.debug("Merging %d input(s) into %s", len(inputs), output)
        result = merge_pdfs(
            inputs,
            output,
            metadata=context.config.get("metadata", True),
            bookmarks=context.config.get("bookmarks", False),
        )
        context.resources["result"] = result
        return result
