"""Slide text extraction from PowerPoint packages."""

from __future__ import annotations

import io
import logging
import re
import zipfile
from concurrent.futures import ThreadPoolExecutor
from xml.etree import ElementTree

LOGGER = logging.getLogger("pdfforge.office")

DRAWINGML_NS = "http://schemas.openxmlformats.org/drawingml/2006/main"
SLIDE_PART = re.compile(r"^ppt/slides/slide(\d+)\.xml$")

UNREADABLE_PLACEHOLDER = "Unable to extract text from this presentation."
EMPTY_PLACEHOLDER = "No text content found in this presentation."


class SlideParseError(ValueError):
    """Raised when the presentation package or a slide part is unreadable."""


def read_slide_parts(data: bytes) -> list[tuple[int, bytes]]:
    """Return ``(slide number, xml)`` pairs sorted by slide number."""

    try:
        with zipfile.ZipFile(io.BytesIO(data)) as package:
            parts = []
            for name in package.namelist():
                match = SLIDE_PART.match(name)
                if match:
                    parts.append((int(match.group(1)), package.read(name)))
    except (zipfile.BadZipFile, KeyError, OSError) as exc:
        raise SlideParseError(f"Unreadable presentation package: {exc}") from exc
    parts.sort(key=lambda part: part[0])
    return parts


def slide_text(xml: bytes) -> str:
    """Join the text runs of one slide with single spaces."""

    try:
        root = ElementTree.fromstring(xml)
    except ElementTree.ParseError as exc:
        raise SlideParseError(f"Malformed slide XML: {exc}") from exc
    runs = [node.text for node in root.iter(f"{{{DRAWINGML_NS}}}t") if node.text]
    return " ".join(runs).strip()


def extract_slide_texts(data: bytes, *, max_workers: int = 4) -> list[tuple[int, str]]:
    """Parse all slides concurrently and return texts in slide order."""

    parts = read_slide_parts(data)
    if not parts:
        return []
    with ThreadPoolExecutor(max_workers=max(1, max_workers)) as pool:
        texts = list(pool.map(slide_text, (xml for _, xml in parts)))
    results = [(number, text) for (number, _), text in zip(parts, texts)]
    results.sort(key=lambda item: item[0])
    return results


def extract_powerpoint_text(data: bytes, *, filename: str, max_workers: int = 4) -> str:
    """Return slide texts separated by blank lines.

    Never fails: unreadable packages produce :data:`UNREADABLE_PLACEHOLDER`
    and presentations without any text produce :data:`EMPTY_PLACEHOLDER`.
    """

    try:
        slides = extract_slide_texts(data, max_workers=max_workers)
    except SlideParseError as exc:
        LOGGER.warning("Falling back to placeholder text for %s: %s", filename, exc)
        return UNREADABLE_PLACEHOLDER

    texts = [text for _, text in slides if text]
    LOGGER.debug("Extracted text from %d of %d slide(s) in %s", len(texts), len(slides), filename)
    if not texts:
        return EMPTY_PLACEHOLDER
    return "\n\n".join(texts)


__all__ = [
    "extract_powerpoint_text",
    "extract_slide_texts",
    "slide_text",
    "read_slide_parts",
    "SlideParseError",
    "UNREADABLE_PLACEHOLDER",
    "EMPTY_PLACEHOLDER",
]
