"""Validation utilities for the :mod:`pdfforge.merge` package."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from pypdf import PdfReader

from ..core.model import InputFile
from ..exceptions import DocumentFormatError
from .utils import PathLike, ensure_path

LOGGER = logging.getLogger("pdfforge.merge")


@dataclass(frozen=True)
class PDFInfo:
    """Summary information describing a PDF document."""

    name: str
    num_pages: int
    is_encrypted: bool
    metadata: Dict[str, Any]


def _decrypt(reader: PdfReader, name: str) -> None:
    LOGGER.debug("Attempting to decrypt encrypted PDF %s", name)
    try:
        reader.decrypt("")
    except Exception as exc:  # pragma: no cover - decrypt errors vary
        LOGGER.error("Encrypted PDF %s cannot be decrypted: %s", name, exc)
        raise DocumentFormatError(name, "encrypted PDF cannot be decrypted") from exc


def open_pdf(file: InputFile) -> PdfReader:
    """Return a reader for *file* with at least one page.

    ``DocumentFormatError`` naming the file is raised if the bytes cannot
    be read as PDF or the document contains no pages.
    """

    LOGGER.debug("Validating PDF %s", file.name)
    try:
        reader = PdfReader(io.BytesIO(file.data))
        if reader.is_encrypted:
            _decrypt(reader, file.name)
        page_count = len(reader.pages)
    except DocumentFormatError:
        raise
    except Exception as exc:  # pragma: no cover - dependency exceptions vary
        LOGGER.error("Failed to read PDF %s: %s", file.name, exc)
        raise DocumentFormatError(file.name, "not a valid PDF") from exc

    if page_count == 0:
        LOGGER.error("PDF %s contains no pages", file.name)
        raise DocumentFormatError(file.name, "PDF contains no pages")
    return reader


def validate_pdf(path: PathLike) -> bool:
    """Return ``True`` if *path* points to a valid, readable PDF."""

    pdf_path = ensure_path(path)
    open_pdf(InputFile(name=pdf_path.name, data=pdf_path.read_bytes()))
    LOGGER.info("Validated PDF %s successfully", pdf_path)
    return True


def pdf_metadata(reader: PdfReader) -> Dict[str, Any]:
    if not reader.metadata:
        return {}
    return {key: value for key, value in reader.metadata.items() if value is not None}


def get_pdf_info(path: PathLike) -> PDFInfo:
    """Return :class:`PDFInfo` describing the PDF located at *path*."""

    pdf_path: Path = ensure_path(path)
    reader = open_pdf(InputFile(name=pdf_path.name, data=pdf_path.read_bytes()))
    info = PDFInfo(
        name=pdf_path.name,
        num_pages=len(reader.pages),
        is_encrypted=reader.is_encrypted,
        metadata=pdf_metadata(reader),
    )
    LOGGER.info(
        "PDF info: name=%s, pages=%s, encrypted=%s",
        info.name,
        info.num_pages,
        info.is_encrypted,
    )
    return info


__all__ = ["open_pdf", "validate_pdf", "get_pdf_info", "pdf_metadata", "PDFInfo"]
