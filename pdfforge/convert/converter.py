"""Conversion of images and Office documents into a single PDF."""

from __future__ import annotations

import io
import logging
from typing import Sequence

from PIL import Image, UnidentifiedImageError

from ..core.media import OFFICE_FAMILIES, media_family, resolve_media_type
from ..core.model import InputFile, PageGeometry
from ..exceptions import (
    DocumentFormatError,
    EmptyContentError,
    InputValidationError,
    UnsupportedMediaTypeError,
)
from ..office import extract_text
from .assembler import PdfAssembler
from .fonts import FontResource
from .layout import paginate
from .pixels import decode_bmp, decode_gif
from .png import encode_png

LOGGER = logging.getLogger("pdfforge.convert")

NO_FILES_MESSAGE = "Please upload at least one file to convert."

_PILLOW_FORMATS = {"jpeg": "JPEG", "png": "PNG"}

__all__ = ["DocumentConverter", "NO_FILES_MESSAGE"]


def _image_size(file: InputFile, family: str) -> tuple[int, int]:
    """Return the pixel size of a JPEG or PNG after checking its format."""

    expected = _PILLOW_FORMATS[family]
    try:
        with Image.open(io.BytesIO(file.data)) as image:
            detected = image.format
            size = image.size
    except (UnidentifiedImageError, OSError) as exc:
        LOGGER.error("Failed to open image %s: %s", file.name, exc)
        raise DocumentFormatError(file.name, f"not a valid {expected} image") from exc

    if detected != expected:
        LOGGER.error("Image %s is %s, expected %s", file.name, detected, expected)
        raise DocumentFormatError(file.name, f"not a valid {expected} image")
    return size


class DocumentConverter:
    """Turn a batch of input files into one PDF, in input order.

    The font and page geometry are injected so that tests and callers can
    use a fixed metric without touching the process-wide font cache.
    """

    def __init__(
        self,
        font: FontResource,
        geometry: PageGeometry | None = None,
        *,
        max_workers: int = 4,
    ) -> None:
        self.font = font
        self.geometry = geometry or PageGeometry()
        self.max_workers = max_workers

    def convert(self, files: Sequence[InputFile]) -> bytes:
        """Return the serialised PDF built from *files*."""

        return self.build(files).to_bytes()

    def build(self, files: Sequence[InputFile]) -> PdfAssembler:
        if not files:
            raise InputValidationError(NO_FILES_MESSAGE)

        assembler = PdfAssembler()
        for file in files:
            self.add_file(assembler, file)

        if assembler.page_count == 0:
            raise EmptyContentError("No pages could be produced from the uploaded files.")
        LOGGER.info("Converted %d file(s) into %d page(s)", len(files), assembler.page_count)
        return assembler

    def add_file(self, assembler: PdfAssembler, file: InputFile) -> int:
        """Append the pages for *file* and return how many were added."""

        media_type = resolve_media_type(file)
        family = media_family(media_type)
        LOGGER.debug("Converting %s as %s", file.name, family or media_type or "unknown")
        before = assembler.page_count

        if family in _PILLOW_FORMATS:
            width, height = _image_size(file, family)
            assembler.add_image_page(file.data, width, height)
        elif family == "bmp":
            buffer = decode_bmp(file.data, filename=file.name)
            assembler.add_image_page(encode_png(buffer), buffer.width, buffer.height)
        elif family == "gif":
            for _frame, buffer in decode_gif(file.data, filename=file.name):
                assembler.add_image_page(encode_png(buffer), buffer.width, buffer.height)
        elif family in OFFICE_FAMILIES:
            self._add_document(assembler, file, family)
        else:
            LOGGER.error("No converter for %s (%s)", file.name, media_type or "no type")
            raise UnsupportedMediaTypeError(file.name, media_type or None)

        return assembler.page_count - before

    def _add_document(self, assembler: PdfAssembler, file: InputFile, family: str) -> None:
        text = extract_text(file.data, family, filename=file.name, max_workers=self.max_workers)
        pages = paginate(text, self.font.metric(self.geometry.font_size), self.geometry)
        if not pages:
            LOGGER.error("No text content found in %s", file.name)
            raise EmptyContentError(f'No text content found in "{file.name}".', filename=file.name)
        assembler.add_text_pages(pages, self.font, self.geometry)
