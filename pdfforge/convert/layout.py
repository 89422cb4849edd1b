"""Greedy word wrapping and pagination of extracted text."""

from __future__ import annotations

import re
from typing import Callable

from ..core.model import LaidOutPage, PageGeometry, PlacedLine

Measure = Callable[[str], float]

_LINE_BREAK = re.compile(r"\r\n|\r|\n")

__all__ = ["Measure", "TextPaginator", "paginate", "wrap_paragraph"]


def wrap_paragraph(paragraph: str, measure: Measure, max_width: float) -> list[str]:
    """Split *paragraph* into lines no wider than *max_width*.

    Words are added greedily; a word that alone exceeds *max_width* is
    kept on its own line rather than broken. An empty paragraph yields a
    single empty line.
    """

    words = paragraph.split()
    if not words:
        return [""]

    lines: list[str] = []
    current = words[0]
    for word in words[1:]:
        candidate = f"{current} {word}"
        if measure(candidate) <= max_width:
            current = candidate
        else:
            lines.append(current)
            current = word
    lines.append(current)
    return lines


class TextPaginator:
    """Lays lines onto fixed-size pages, tracking the vertical cursor."""

    def __init__(self, measure: Measure, geometry: PageGeometry) -> None:
        self.measure = measure
        self.geometry = geometry
        self.pages: list[LaidOutPage] = []
        self._page: LaidOutPage | None = None
        self._cursor = geometry.height - geometry.margin

    def _start_page(self) -> LaidOutPage:
        page = LaidOutPage()
        self.pages.append(page)
        self._page = page
        self._cursor = self.geometry.height - self.geometry.margin
        return page

    def _place(self, text: str) -> None:
        geometry = self.geometry
        page = self._page
        if page is None or self._cursor - geometry.line_height < geometry.margin:
            if not text:
                # Blank lines never open a page; the next text line will.
                self._page = None
                return
            page = self._start_page()
        self._cursor -= geometry.line_height
        if text:
            page.lines.append(PlacedLine(text=text, x=geometry.margin, y=self._cursor))

    def add_text(self, text: str) -> None:
        for paragraph in _LINE_BREAK.split(text):
            for line in wrap_paragraph(paragraph, self.measure, self.geometry.text_width):
                self._place(line)


def paginate(text: str, measure: Measure, geometry: PageGeometry) -> list[LaidOutPage]:
    """Lay *text* out on pages of *geometry* using the *measure* metric.

    Returns an empty list when *text* holds nothing but whitespace.
    """

    if not text.strip():
        return []
    paginator = TextPaginator(measure, geometry)
    paginator.add_text(text.strip())
    return paginator.pages
