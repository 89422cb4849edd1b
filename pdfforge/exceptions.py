"""Custom exceptions raised by :mod:`pdfforge`."""

from __future__ import annotations


class PdfForgeError(Exception):
    """Base exception for all errors raised by :mod:`pdfforge`.

    ``filename`` names the offending input when the failure can be
    attributed to a single file.
    """

    def __init__(self, message: str, *, filename: str | None = None) -> None:
        super().__init__(message)
        self.filename = filename


class InputValidationError(PdfForgeError):
    """Raised when the submitted batch is unusable as a whole."""


class DocumentFormatError(PdfForgeError):
    """Raised when a file's bytes do not parse as its declared type."""

    def __init__(self, filename: str, detail: str | None = None) -> None:
        message = f'Could not read "{filename}"'
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, filename=filename)


class UnsupportedMediaTypeError(PdfForgeError):
    """Raised when no handler exists for a file's media type."""

    def __init__(self, filename: str, media_type: str | None = None) -> None:
        message = f'File type for "{filename}" is not supported'
        if media_type:
            message = f"{message} ({media_type})"
        super().__init__(f"{message}.", filename=filename)
        self.media_type = media_type


class EmptyContentError(PdfForgeError):
    """Raised when conversion produces nothing to render."""


class FontDownloadError(PdfForgeError):
    """Raised when the text font cannot be fetched."""


__all__ = [
    "PdfForgeError",
    "InputValidationError",
    "DocumentFormatError",
    "UnsupportedMediaTypeError",
    "EmptyContentError",
    "FontDownloadError",
]
