"""Flattened text dumps of Excel workbooks."""

from __future__ import annotations

import io
import logging
import zipfile
from typing import Iterable, Iterator

import xlrd
from openpyxl import load_workbook

from ..exceptions import DocumentFormatError

LOGGER = logging.getLogger("pdfforge.office")

OLE_SIGNATURE = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"
CELL_SEPARATOR = ", "

Sheet = tuple[str, list[list[object]]]


def format_cell(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def format_row(values: Iterable[object]) -> str:
    cells = [format_cell(value) for value in values]
    while cells and not cells[-1]:
        cells.pop()
    return CELL_SEPARATOR.join(cells)


def render_sheets(sheets: Iterable[Sheet]) -> str:
    """Render ``(name, rows)`` pairs as ``Sheet: <name>`` sections."""

    sections: list[str] = []
    for name, rows in sheets:
        lines = [f"Sheet: {name}"]
        lines.extend(line for line in (format_row(row) for row in rows) if line)
        sections.append("\n".join(lines))
    return "\n\n".join(sections)


def _read_xlsx(data: bytes) -> Iterator[Sheet]:
    workbook = load_workbook(io.BytesIO(data), read_only=True, data_only=True)
    try:
        for worksheet in workbook.worksheets:
            rows = [list(row) for row in worksheet.iter_rows(values_only=True)]
            yield worksheet.title, rows
    finally:
        workbook.close()


def _read_xls(data: bytes) -> Iterator[Sheet]:
    book = xlrd.open_workbook(file_contents=data)
    for sheet in book.sheets():
        rows: list[list[object]] = []
        for row_index in range(sheet.nrows):
            row: list[object] = []
            for cell in sheet.row(row_index):
                if cell.ctype == xlrd.XL_CELL_DATE:
                    row.append(xlrd.xldate_as_datetime(cell.value, book.datemode))
                elif cell.ctype == xlrd.XL_CELL_BOOLEAN:
                    row.append(bool(cell.value))
                elif cell.ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK, xlrd.XL_CELL_ERROR):
                    row.append(None)
                else:
                    row.append(cell.value)
            rows.append(row)
        yield sheet.name, rows


def extract_excel_text(data: bytes, *, filename: str) -> str:
    """Return every sheet of a workbook as a flattened, row-major dump."""

    if zipfile.is_zipfile(io.BytesIO(data)):
        reader = _read_xlsx
    elif data.startswith(OLE_SIGNATURE):
        reader = _read_xls
    else:
        raise DocumentFormatError(filename, "not an Excel workbook")

    try:
        sheets = list(reader(data))
    except Exception as exc:
        LOGGER.error("Failed to read workbook %s: %s", filename, exc)
        raise DocumentFormatError(filename, "not a valid Excel workbook") from exc

    LOGGER.debug("Read %d sheet(s) from %s", len(sheets), filename)
    return render_sheets(sheets)


__all__ = ["extract_excel_text", "render_sheets", "format_row", "format_cell"]
