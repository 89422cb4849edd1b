"""Text font resource used for measuring and drawing extracted text."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

import httpx
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont, TTFError

from ..config import Settings, get_settings
from ..exceptions import FontDownloadError

LOGGER = logging.getLogger("pdfforge.fonts")

BUILTIN_FONT = "Helvetica"
TTF_FONT_NAME = "PdfForgeText"

_FONT_LOCK = threading.Lock()
_FONT: "FontResource | None" = None

__all__ = ["FontResource", "get_font", "download_font", "BUILTIN_FONT"]


@dataclass(frozen=True)
class FontResource:
    """A font registered with reportlab plus its width metric."""

    name: str
    path: Path | None = None

    @classmethod
    def builtin(cls) -> "FontResource":
        return cls(name=BUILTIN_FONT)

    @classmethod
    def from_file(cls, path: Path, name: str = TTF_FONT_NAME) -> "FontResource":
        try:
            pdfmetrics.registerFont(TTFont(name, str(path)))
        except (TTFError, OSError) as exc:
            raise ValueError(f"Unusable TrueType font {path}: {exc}") from exc
        return cls(name=name, path=path)

    @property
    def is_builtin(self) -> bool:
        return self.path is None

    def prepare(self, text: str) -> str:
        """Return *text* restricted to what this font can encode."""

        if self.is_builtin:
            # Standard Type 1 fonts only cover WinAnsi.
            return text.encode("cp1252", errors="replace").decode("cp1252")
        return text

    def measure(self, text: str, size: float) -> float:
        return pdfmetrics.stringWidth(self.prepare(text), self.name, size)

    def metric(self, size: float) -> Callable[[str], float]:
        """Return a width function bound to *size*."""

        def _measure(text: str) -> float:
            return self.measure(text, size)

        return _measure


def _load_font(settings: Settings) -> FontResource:
    font_path = settings.resolved_font_path
    if font_path.is_file():
        try:
            font = FontResource.from_file(font_path)
        except ValueError as exc:
            LOGGER.warning("%s; falling back to %s", exc, BUILTIN_FONT)
        else:
            LOGGER.info("Loaded text font from %s", font_path)
            return font
    else:
        LOGGER.warning(
            "Font file %s not found (run 'pdfforge fetch-font'); using %s",
            font_path,
            BUILTIN_FONT,
        )
    return FontResource.builtin()


def get_font(settings: Settings | None = None) -> FontResource:
    """Return the process-wide font, loading it on first use.

    The font is loaded once and reused by every later request. *settings*
    only matters for the call that performs the load.
    """

    global _FONT
    if _FONT is not None:
        return _FONT
    with _FONT_LOCK:
        if _FONT is None:
            _FONT = _load_font(settings or get_settings())
    return _FONT


def download_font(
    settings: Settings | None = None,
    *,
    force: bool = False,
    client: httpx.Client | None = None,
) -> Path:
    """Fetch the configured font file unless it is already present."""

    settings = settings or get_settings()
    destination = settings.resolved_font_path
    if destination.exists() and not force:
        LOGGER.debug("Font already present at %s; skipping download", destination)
        return destination

    url = settings.font_url
    LOGGER.info("Downloading font from %s", url)
    destination.parent.mkdir(parents=True, exist_ok=True)

    try:
        if client is None:
            with httpx.Client(follow_redirects=True, timeout=30.0) as owned:
                response = owned.get(url)
        else:
            response = client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        LOGGER.error("Font download failed: %s", exc)
        raise FontDownloadError(f"Failed to download font from {url}: {exc}") from exc

    partial = destination.with_name(destination.name + ".part")
    partial.write_bytes(response.content)
    partial.replace(destination)
    LOGGER.info("Saved font to %s (%d bytes)", destination, len(response.content))
    return destination
