"""Request-level entry points returning :class:`OperationResult` values."""

from __future__ import annotations

import logging
from typing import Sequence

from .config import Settings, get_settings
from .convert.converter import DocumentConverter
from .convert.fonts import get_font
from .core.model import InputFile, OperationResult
from .core.utils import to_data_uri
from .exceptions import PdfForgeError
from .merge.merger import merge_pdf_bytes

LOGGER = logging.getLogger("pdfforge.service")

MERGE_FAILED_MESSAGE = "Failed to merge PDFs. Please ensure all files are valid PDFs."
CONVERT_FAILED_MESSAGE = "Failed to convert files to PDF. Please ensure all files are valid."

__all__ = [
    "merge",
    "convert",
    "default_converter",
    "MERGE_FAILED_MESSAGE",
    "CONVERT_FAILED_MESSAGE",
]


def default_converter(settings: Settings | None = None) -> DocumentConverter:
    """Return a converter wired to the configured font and page geometry."""

    settings = settings or get_settings()
    return DocumentConverter(
        get_font(settings),
        settings.geometry(),
        max_workers=settings.max_workers,
    )


def merge(
    files: Sequence[InputFile],
    *,
    metadata: bool = True,
    bookmarks: bool = False,
) -> OperationResult:
    """Concatenate the pages of every PDF in *files* into one document."""

    LOGGER.debug("Merge requested for %d file(s)", len(files))
    try:
        data = merge_pdf_bytes(files, metadata=metadata, bookmarks=bookmarks)
    except PdfForgeError as exc:
        LOGGER.warning("Merge rejected: %s", exc)
        return OperationResult.failed(str(exc))
    except Exception:
        LOGGER.exception("Unexpected error while merging PDFs")
        return OperationResult.failed(MERGE_FAILED_MESSAGE)
    return OperationResult.ok(to_data_uri(data))


def convert(
    files: Sequence[InputFile],
    *,
    converter: DocumentConverter | None = None,
) -> OperationResult:
    """Convert images and Office documents in *files* into one PDF."""

    LOGGER.debug("Convert requested for %d file(s)", len(files))
    try:
        converter = converter or default_converter()
        data = converter.convert(files)
    except PdfForgeError as exc:
        LOGGER.warning("Conversion rejected: %s", exc)
        return OperationResult.failed(str(exc))
    except Exception:
        LOGGER.exception("Unexpected error while converting files")
        return OperationResult.failed(CONVERT_FAILED_MESSAGE)
    return OperationResult.ok(to_data_uri(data))
