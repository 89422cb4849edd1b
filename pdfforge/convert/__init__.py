"""Image and Office to PDF conversion for :mod:`pdfforge`."""

from __future__ import annotations

from .assembler import PdfAssembler
from .converter import NO_FILES_MESSAGE, DocumentConverter
from .fonts import FontResource, download_font, get_font
from .layout import TextPaginator, paginate, wrap_paragraph
from .pixels import decode_bmp, decode_gif
from .png import encode_png

__all__ = [
    "DocumentConverter",
    "NO_FILES_MESSAGE",
    "PdfAssembler",
    "FontResource",
    "get_font",
    "download_font",
    "TextPaginator",
    "paginate",
    "wrap_paragraph",
    "decode_bmp",
    "decode_gif",
    "encode_png",
]
