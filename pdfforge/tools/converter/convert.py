"""Plugin converting images and Office documents into a PDF."""

from __future__ import annotations

from pathlib import Path

from ...config import get_settings
from ...core.utils import get_logger
from ...exceptions import InputValidationError
from ...merge.utils import read_input
from ...service import default_converter
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfforge.tools.convert")


@register_tool("convert")
class ConvertTool(BaseTool):
    name = "convert"

    def run(self) -> Path:
        context = self.context
        output = context.output_path
        if output is None:
            raise InputValidationError("Convert tool requires an output path")

        files = [read_input(path) for path in context.input_paths()]
        converter = context.resources.get("converter") or default_converter(
            context.config.get("settings") or get_settings()
        )
        LOGGER.debug("Converting %d input(s) into %s", len(files), output)
        data = converter.convert(files)

        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(data)
        LOGGER.info("Wrote converted PDF to %s", output)
        context.resources["result"] = output
        return output
