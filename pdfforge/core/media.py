"""Media type tables and dispatch helpers."""

from __future__ import annotations

from pathlib import PurePath

from .model import InputFile

JPEG = "image/jpeg"
PNG = "image/png"
BMP = "image/bmp"
GIF = "image/gif"
PDF = "application/pdf"
DOC = "application/msword"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
XLS = "application/vnd.ms-excel"
XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
PPT = "application/vnd.ms-powerpoint"
PPTX = "application/vnd.openxmlformats-officedocument.presentationml.presentation"

MEDIA_FAMILIES: dict[str, str] = {
    JPEG: "jpeg",
    PNG: "png",
    BMP: "bmp",
    GIF: "gif",
    DOC: "word",
    DOCX: "word",
    XLS: "excel",
    XLSX: "excel",
    PPT: "powerpoint",
    PPTX: "powerpoint",
    PDF: "pdf",
}

EXTENSION_TYPES: dict[str, str] = {
    ".jpg": JPEG,
    ".jpeg": JPEG,
    ".png": PNG,
    ".bmp": BMP,
    ".gif": GIF,
    ".doc": DOC,
    ".docx": DOCX,
    ".xls": XLS,
    ".xlsx": XLSX,
    ".ppt": PPT,
    ".pptx": PPTX,
    ".pdf": PDF,
}

OFFICE_FAMILIES = frozenset({"word", "excel", "powerpoint"})

_GENERIC_TYPES = {"", "application/octet-stream"}


def guess_media_type(filename: str) -> str:
    """Return the media type implied by *filename*'s extension, or ``""``."""

    return EXTENSION_TYPES.get(PurePath(filename).suffix.lower(), "")


def resolve_media_type(file: InputFile) -> str:
    """Return the effective media type of *file*.

    A known declared type wins. Generic or missing declarations fall back
    to the file extension; anything else is returned untouched so callers
    can report it as unsupported.
    """

    declared = (file.media_type or "").split(";", 1)[0].strip().lower()
    if declared in MEDIA_FAMILIES:
        return declared
    if declared in _GENERIC_TYPES:
        return guess_media_type(file.name) or declared
    return declared


def media_family(media_type: str) -> str | None:
    return MEDIA_FAMILIES.get(media_type)


__all__ = [
    "JPEG",
    "PNG",
    "BMP",
    "GIF",
    "PDF",
    "DOC",
    "DOCX",
    "XLS",
    "XLSX",
    "PPT",
    "PPTX",
    "MEDIA_FAMILIES",
    "EXTENSION_TYPES",
    "OFFICE_FAMILIES",
    "guess_media_type",
    "resolve_media_type",
    "media_family",
]
