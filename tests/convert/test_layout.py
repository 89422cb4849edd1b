from __future__ import annotations

from conftest import fixed_measure
from pdfforge.convert.fonts import FontResource
from pdfforge.convert.layout import TextPaginator, paginate, wrap_paragraph
from pdfforge.core.model import PageGeometry


def _small_geometry(lines_per_page: int = 3) -> PageGeometry:
    # 10 points of line height; margins of 10 leave room for exactly N lines.
    return PageGeometry(
        width=200,
        height=20 + 10 * lines_per_page,
        margin=10,
        line_height=10,
        font_size=8,
    )


def test_wrap_paragraph_is_greedy() -> None:
    lines = wrap_paragraph("aa bb cc dd", fixed_measure, max_width=30)
    # "aa bb" is 5 chars = 30 points, "aa bb cc" would be 48.
    assert lines == ["aa bb", "cc dd"]


def test_wrap_keeps_overlong_word_on_its_own_line() -> None:
    lines = wrap_paragraph("a supercalifragilistic b", fixed_measure, max_width=30)
    assert lines == ["a", "supercalifragilistic", "b"]


def test_wrap_empty_paragraph_yields_blank_line() -> None:
    assert wrap_paragraph("   ", fixed_measure, 100) == [""]


def test_lines_start_at_top_margin_and_step_down() -> None:
    geometry = _small_geometry()
    pages = paginate("one\ntwo", fixed_measure, geometry)

    assert len(pages) == 1
    assert [(line.text, line.x, line.y) for line in pages[0].lines] == [
        ("one", 10, 30),
        ("two", 10, 20),
    ]


def test_page_break_when_bottom_margin_reached() -> None:
    geometry = _small_geometry(lines_per_page=3)
    text = "\n".join(f"line{i}" for i in range(7))

    pages = paginate(text, fixed_measure, geometry)

    assert [len(page.lines) for page in pages] == [3, 3, 1]
    assert pages[1].lines[0].y == geometry.height - geometry.margin - geometry.line_height
    for page in pages:
        for line in page.lines:
            assert line.y >= geometry.margin


def test_blank_paragraphs_advance_without_drawing() -> None:
    geometry = _small_geometry()
    pages = paginate("top\n\nbottom", fixed_measure, geometry)

    assert [(line.text, line.y) for line in pages[0].lines] == [("top", 30), ("bottom", 10)]


def test_blank_lines_at_a_page_break_are_dropped() -> None:
    geometry = _small_geometry(lines_per_page=3)

    pages = paginate("a" + "\n" * 10 + "b", fixed_measure, geometry)

    assert [[line.text for line in page.lines] for page in pages] == [["a"], ["b"]]
    assert pages[1].lines[0].y == geometry.height - geometry.margin - geometry.line_height


def test_every_page_carries_text() -> None:
    text = "\n\n\n".join(f"para{i}" for i in range(9))

    pages = paginate(text, fixed_measure, _small_geometry(lines_per_page=2))

    assert all(page.lines for page in pages)
    assert [line.text for page in pages for line in page.lines] == [f"para{i}" for i in range(9)]


def test_whitespace_only_text_produces_no_pages() -> None:
    assert paginate("", fixed_measure, PageGeometry()) == []
    assert paginate(" \n\t\n", fixed_measure, PageGeometry()) == []


def test_lines_fit_the_text_width() -> None:
    geometry = PageGeometry()
    words = " ".join(["lorem", "ipsum", "dolor", "sit", "amet"] * 60)

    pages = paginate(words, fixed_measure, geometry)

    for page in pages:
        for line in page.lines:
            assert fixed_measure(line.text) <= geometry.text_width


def test_pagination_is_deterministic() -> None:
    text = "alpha beta gamma\r\ndelta\repsilon " * 40
    geometry = _small_geometry(lines_per_page=5)
    assert paginate(text, fixed_measure, geometry) == paginate(text, fixed_measure, geometry)


def test_paginator_accumulates_pages() -> None:
    paginator = TextPaginator(fixed_measure, _small_geometry(lines_per_page=2))
    paginator.add_text("a\nb\nc")
    assert len(paginator.pages) == 2


def test_builtin_font_metric_matches_reportlab() -> None:
    font = FontResource.builtin()
    measure = font.metric(11)

    assert measure("") == 0
    assert measure("WWW") > measure("iii")
    assert measure("abc") == font.measure("abc", 11)
