"""pdfforge: merge PDFs and convert images and Office documents to PDF.

The request-level operations live in :mod:`pdfforge.service`::

    from pdfforge import service
    result = service.convert([InputFile("photo.png", data, "image/png")])
"""

from __future__ import annotations

from . import service
from .config import Settings, get_settings
from .core.model import InputFile, OperationResult, PageGeometry
from .exceptions import (
    DocumentFormatError,
    EmptyContentError,
    FontDownloadError,
    InputValidationError,
    PdfForgeError,
    UnsupportedMediaTypeError,
)

__version__ = "0.1.0"

__all__ = [
    "service",
    "Settings",
    "get_settings",
    "InputFile",
    "OperationResult",
    "PageGeometry",
    "PdfForgeError",
    "InputValidationError",
    "DocumentFormatError",
    "UnsupportedMediaTypeError",
    "EmptyContentError",
    "FontDownloadError",
    "__version__",
]
