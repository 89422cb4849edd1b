from __future__ import annotations

import io
import sys
import zipfile
from pathlib import Path
from typing import Callable, Sequence

import pytest
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pdfforge.convert import fonts  # noqa: E402
from pdfforge.convert.converter import DocumentConverter  # noqa: E402
from pdfforge.core.model import PageGeometry  # noqa: E402

PALETTE = [(255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 255, 255)]

SLIDE_TEMPLATE = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<p:sld xmlns:a="http://schemas.openxmlformats.org/drawingml/2006/main" '
    'xmlns:p="http://schemas.openxmlformats.org/presentationml/2006/main">'
    "<p:cSld><p:spTree><p:sp><p:txBody>{runs}</p:txBody></p:sp></p:spTree></p:cSld>"
    "</p:sld>"
)


def make_pdf_bytes(pages: int = 1, width: float = 72, height: float = 72, title: str | None = None) -> bytes:
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=width, height=height)
    if title is not None:
        writer.add_metadata({"/Title": title})
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def make_image_bytes(fmt: str, size: tuple[int, int] = (4, 3), mode: str = "RGB", color=(10, 20, 30)) -> bytes:
    from PIL import Image

    buffer = io.BytesIO()
    Image.new(mode, size, color).save(buffer, format=fmt)
    return buffer.getvalue()


def make_docx_bytes(paragraphs: Sequence[str]) -> bytes:
    from docx import Document

    document = Document()
    for text in paragraphs:
        document.add_paragraph(text)
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def make_xlsx_bytes(sheets: dict[str, list[list[object]]]) -> bytes:
    from openpyxl import Workbook

    workbook = Workbook()
    workbook.remove(workbook.active)
    for name, rows in sheets.items():
        worksheet = workbook.create_sheet(title=name)
        for row in rows:
            worksheet.append(row)
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def make_xls_bytes(sheets: dict[str, list[list[object]]]) -> bytes:
    """Build a legacy BIFF8 workbook; dates get a ``YYYY-MM-DD`` number format."""

    import datetime

    import xlwt

    date_style = xlwt.easyxf(num_format_str="YYYY-MM-DD")
    workbook = xlwt.Workbook()
    for name, rows in sheets.items():
        worksheet = workbook.add_sheet(name)
        for row_index, row in enumerate(rows):
            for col_index, value in enumerate(row):
                if value is None:
                    continue
                if isinstance(value, (datetime.date, datetime.datetime)):
                    worksheet.write(row_index, col_index, value, date_style)
                else:
                    worksheet.write(row_index, col_index, value)
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def make_pptx_bytes(slides: dict[int, list[str]]) -> bytes:
    """Build a minimal package holding ``ppt/slides/slide<N>.xml`` parts."""

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as package:
        package.writestr("[Content_Types].xml", "<Types/>")
        for number, runs in slides.items():
            body = "".join(f"<a:p><a:r><a:t>{text}</a:t></a:r></a:p>" for text in runs)
            package.writestr(f"ppt/slides/slide{number}.xml", SLIDE_TEMPLATE.format(runs=body))
    return buffer.getvalue()


def lzw_encode_literal(indices: bytes, min_code_size: int = 2) -> bytes:
    """Encode *indices* as literal codes, clearing before the code width grows."""

    clear_code = 1 << min_code_size
    end_code = clear_code + 1
    code_size = min_code_size + 1
    run = (1 << min_code_size) - 2

    codes: list[int] = []
    for start in range(0, len(indices), run):
        codes.append(clear_code)
        codes.extend(indices[start : start + run])
    codes.extend([clear_code, end_code])

    output = bytearray()
    bit_buffer = 0
    bit_count = 0
    for code in codes:
        bit_buffer |= code << bit_count
        bit_count += code_size
        while bit_count >= 8:
            output.append(bit_buffer & 0xFF)
            bit_buffer >>= 8
            bit_count -= 8
    if bit_count:
        output.append(bit_buffer & 0xFF)
    return bytes(output)


def _sub_blocks(data: bytes) -> bytes:
    out = bytearray()
    for start in range(0, len(data), 255):
        chunk = data[start : start + 255]
        out.append(len(chunk))
        out.extend(chunk)
    out.append(0)
    return bytes(out)


def _palette_bytes(palette: Sequence[tuple[int, int, int]]) -> bytes:
    return b"".join(bytes(color) for color in palette)


def make_gif_bytes(
    screen: tuple[int, int],
    frames: Sequence[dict],
    palette: Sequence[tuple[int, int, int]] | None = PALETTE,
    trailer: bool = True,
) -> bytes:
    """Build a GIF89a stream with four-colour tables.

    Each frame is a mapping with ``indices``, ``width`` and ``height`` and
    optional ``left``, ``top``, ``transparent``, ``palette`` and
    ``interlaced`` keys. Interlaced frames take their indices in stored
    (pass) order.
    """

    out = bytearray(b"GIF89a")
    out += screen[0].to_bytes(2, "little") + screen[1].to_bytes(2, "little")
    if palette is not None:
        out += bytes((0x81, 0, 0)) + _palette_bytes(palette)
    else:
        out += bytes((0x00, 0, 0))

    for frame in frames:
        transparent = frame.get("transparent")
        if transparent is not None:
            out += bytes((0x21, 0xF9, 4, 0x01, 0, 0, transparent, 0))
        out.append(0x2C)
        for key in ("left", "top", "width", "height"):
            out += int(frame.get(key, 0)).to_bytes(2, "little")
        packed = 0
        local = frame.get("palette")
        if local is not None:
            packed |= 0x81
        if frame.get("interlaced"):
            packed |= 0x40
        out.append(packed)
        if local is not None:
            out += _palette_bytes(local)
        out.append(2)
        out += _sub_blocks(lzw_encode_literal(bytes(frame["indices"])))

    if trailer:
        out.append(0x3B)
    return bytes(out)


def fixed_measure(text: str) -> float:
    return len(text) * 6.0


@pytest.fixture(autouse=True)
def builtin_font(monkeypatch: pytest.MonkeyPatch) -> fonts.FontResource:
    font = fonts.FontResource.builtin()
    monkeypatch.setattr(fonts, "_FONT", font)
    return font


@pytest.fixture()
def converter(builtin_font: fonts.FontResource) -> DocumentConverter:
    return DocumentConverter(builtin_font, PageGeometry(), max_workers=2)


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(filename: str, title: str | None = None, pages: int = 1) -> Path:
        path = tmp_path / filename
        path.write_bytes(make_pdf_bytes(pages=pages, title=title))
        return path

    return _create


@pytest.fixture()
def sample_pdfs(pdf_factory: Callable[..., Path]) -> list[Path]:
    pdf1 = pdf_factory("one.pdf", title="Document One")
    pdf2 = pdf_factory("two.pdf", pages=2)
    return [pdf1, pdf2]


@pytest.fixture()
def empty_pdf(tmp_path: Path) -> Path:
    pdf_path = tmp_path / "empty.pdf"
    writer = PdfWriter()
    with pdf_path.open("wb") as stream:
        writer.write(stream)
    return pdf_path
