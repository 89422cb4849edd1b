"""Raw text extraction for Word, Excel and PowerPoint inputs."""

from __future__ import annotations

from ..exceptions import UnsupportedMediaTypeError
from .excel import extract_excel_text
from .powerpoint import extract_powerpoint_text
from .word import extract_word_text

__all__ = [
    "extract_text",
    "extract_word_text",
    "extract_excel_text",
    "extract_powerpoint_text",
]


def extract_text(data: bytes, family: str, *, filename: str, max_workers: int = 4) -> str:
    """Return the flat text of an Office document of the given *family*."""

    if family == "word":
        return extract_word_text(data, filename=filename)
    if family == "excel":
        return extract_excel_text(data, filename=filename)
    if family == "powerpoint":
        return extract_powerpoint_text(data, filename=filename, max_workers=max_workers)
    raise UnsupportedMediaTypeError(filename, family)
