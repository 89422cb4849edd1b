"""Plugin downloading the TrueType font used for text pages."""

from __future__ import annotations

from pathlib import Path

from ...config import get_settings
from ...convert.fonts import download_font
from ...core.utils import get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfforge.tools.fonts")


@register_tool("fetch-font")
class FetchFontTool(BaseTool):
    name = "fetch-font"

    def run(self) -> Path:
        context = self.context
        settings = context.config.get("settings") or get_settings()
        if context.output_path is not None:
            settings = settings.with_updates(font_path=context.output_path)
        result = download_font(
            settings,
            force=context.config.get("force", False),
            client=context.resources.get("client"),
        )
        LOGGER.info("Font available at %s", result)
        context.resources["result"] = result
        return result
