"""Assembly of the output PDF from image pages, text pages and copied pages."""

from __future__ import annotations

import io
import logging
from typing import Mapping, Sequence

from pypdf import PdfReader, PdfWriter
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from ..core.model import LaidOutPage, PageGeometry
from ..core.utils import to_data_uri
from .fonts import FontResource

LOGGER = logging.getLogger("pdfforge.assembler")

__all__ = ["PdfAssembler"]


class PdfAssembler:
    """Grows a single output document page by page.

    Pages are only ever appended. The document is serialised on demand by
    :meth:`to_bytes`; nothing is exposed before that point.
    """

    def __init__(self) -> None:
        self.writer = PdfWriter()

    @property
    def page_count(self) -> int:
        return len(self.writer.pages)

    def _append_rendered(self, buffer: io.BytesIO) -> int:
        buffer.seek(0)
        reader = PdfReader(buffer)
        for page in reader.pages:
            self.writer.add_page(page)
        return len(reader.pages)

    def add_image_page(self, image_bytes: bytes, width: int, height: int) -> None:
        """Append a page of ``width x height`` points filled by the image."""

        buffer = io.BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=(width, height))
        pdf.drawImage(
            ImageReader(io.BytesIO(image_bytes)),
            0,
            0,
            width=width,
            height=height,
            mask="auto",
        )
        pdf.showPage()
        pdf.save()
        self._append_rendered(buffer)
        LOGGER.debug("Added %dx%d image page (page %d)", width, height, self.page_count)

    def add_text_pages(
        self,
        pages: Sequence[LaidOutPage],
        font: FontResource,
        geometry: PageGeometry,
    ) -> int:
        """Append one page per laid-out page and return how many were added."""

        if not pages:
            return 0

        buffer = io.BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=(geometry.width, geometry.height))
        for page in pages:
            pdf.setFont(font.name, geometry.font_size)
            for line in page.lines:
                pdf.drawString(line.x, line.y, font.prepare(line.text))
            pdf.showPage()
        pdf.save()
        added = self._append_rendered(buffer)
        LOGGER.debug("Added %d text page(s) using %s", added, font.name)
        return added

    def copy_pages(self, reader: PdfReader) -> int:
        """Append every page of *reader* in its original order."""

        for page_index, page in enumerate(reader.pages):
            LOGGER.debug("Copying page %s", page_index)
            self.writer.add_page(page)
        return len(reader.pages)

    def add_metadata(self, metadata: Mapping[str, str]) -> None:
        self.writer.add_metadata(dict(metadata))

    def add_bookmark(self, title: str, page_index: int) -> None:
        self.writer.add_outline_item(title, self.writer.pages[page_index])

    def to_bytes(self) -> bytes:
        buffer = io.BytesIO()
        self.writer.write(buffer)
        return buffer.getvalue()

    def to_data_uri(self) -> str:
        return to_data_uri(self.to_bytes())
