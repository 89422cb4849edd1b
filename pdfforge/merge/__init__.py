"""Merge utilities for the :mod:`pdfforge` toolkit."""

from __future__ import annotations

from .merger import TOO_FEW_INPUTS_MESSAGE, merge_into, merge_pdf_bytes, merge_pdfs
from .validators import PDFInfo, get_pdf_info, open_pdf, validate_pdf

__all__ = [
    "merge_pdfs",
    "merge_pdf_bytes",
    "merge_into",
    "open_pdf",
    "validate_pdf",
    "get_pdf_info",
    "PDFInfo",
    "TOO_FEW_INPUTS_MESSAGE",
]
