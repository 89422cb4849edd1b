"""Merge functionality for the :mod:`pdfforge.merge` package."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence

from ..convert.assembler import PdfAssembler
from ..core.model import InputFile
from ..exceptions import InputValidationError, UnsupportedMediaTypeError
from .utils import PathLike, ensure_path, is_pdf, read_input
from .validators import open_pdf, pdf_metadata

LOGGER = logging.getLogger("pdfforge.merge")

MIN_MERGE_INPUTS = 2
TOO_FEW_INPUTS_MESSAGE = "Please upload at least two PDFs to merge."


def merge_into(
    assembler: PdfAssembler,
    files: Sequence[InputFile],
    *,
    metadata: bool = True,
    bookmarks: bool = False,
) -> PdfAssembler:
    """Append all pages of *files* to *assembler* in input order.

    Every input is validated before any page is copied, so a bad file
    aborts the batch without touching the output document.
    """

    if len(files) < MIN_MERGE_INPUTS:
        raise InputValidationError(TOO_FEW_INPUTS_MESSAGE)

    readers = []
    for file in files:
        if not is_pdf(file):
            raise UnsupportedMediaTypeError(file.name, file.media_type or None)
        readers.append(open_pdf(file))

    first_metadata: Optional[dict[str, str]] = None
    for index, (file, reader) in enumerate(zip(files, readers), start=1):
        LOGGER.debug("Processing input PDF %s", file.name)
        start_page_index = assembler.page_count
        assembler.copy_pages(reader)

        if bookmarks:
            title = Path(file.name).stem or f"Document {index}"
            assembler.add_bookmark(title, start_page_index)

        if metadata and first_metadata is None:
            first_metadata = {
                key: str(value)
                for key, value in pdf_metadata(reader).items()
                if isinstance(key, str)
            }

    if first_metadata:
        LOGGER.debug("Setting metadata on merged PDF: %s", first_metadata)
        assembler.add_metadata(first_metadata)

    LOGGER.info("Merged %d PDFs into %d page(s)", len(files), assembler.page_count)
    return assembler


def merge_pdf_bytes(
    files: Sequence[InputFile],
    *,
    metadata: bool = True,
    bookmarks: bool = False,
) -> bytes:
    """Merge in-memory PDF *files* and return the serialised result."""

    assembler = merge_into(PdfAssembler(), list(files), metadata=metadata, bookmarks=bookmarks)
    return assembler.to_bytes()


def merge_pdfs(
    inputs: Iterable[PathLike],
    output: PathLike,
    *,
    metadata: bool = True,
    bookmarks: bool = False,
) -> Path:
    """Merge *inputs* into *output* and return the resulting path.

    Args:
        inputs: Paths of at least two readable PDF files.
        output: The output file path that will contain the merged PDF.
        metadata: When ``True`` metadata from the first input file is
            copied into the merged document.
        bookmarks: When ``True`` an outline entry is added for each input.
    """

    files = [read_input(path) for path in inputs]
    output_path = ensure_path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    data = merge_pdf_bytes(files, metadata=metadata, bookmarks=bookmarks)
    output_path.write_bytes(data)
    LOGGER.info("Wrote merged PDF to %s", output_path)
    return output_path


__all__ = ["merge_pdfs", "merge_pdf_bytes", "merge_into", "TOO_FEW_INPUTS_MESSAGE"]
