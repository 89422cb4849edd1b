"""Raw text extraction from Word documents."""

from __future__ import annotations

import io
import logging
import shutil
import subprocess
import tempfile
import zipfile
from pathlib import Path

from docx import Document

from ..exceptions import DocumentFormatError

LOGGER = logging.getLogger("pdfforge.office")

LIBREOFFICE_TIMEOUT = 120


def _libreoffice_available() -> str | None:
    return shutil.which("soffice") or shutil.which("libreoffice")


def convert_doc_to_docx(data: bytes, *, filename: str) -> bytes:
    """Convert a legacy binary ``.doc`` to ``.docx`` with headless LibreOffice.

    ``DocumentFormatError`` is raised when LibreOffice is not installed or
    the conversion produces no document.
    """

    executable = _libreoffice_available()
    if not executable:
        LOGGER.error("LibreOffice not available; cannot read %s", filename)
        raise DocumentFormatError(
            filename,
            "legacy binary Word documents need LibreOffice, save it as .docx",
        )

    with tempfile.TemporaryDirectory(prefix="pdfforge-doc-") as workdir:
        work_path = Path(workdir)
        source = work_path / "document.doc"
        source.write_bytes(data)
        command = [
            executable,
            "--headless",
            "--convert-to",
            "docx",
            "--outdir",
            str(work_path),
            str(source),
        ]
        LOGGER.debug("Running LibreOffice command: %s", command)
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=False,
                timeout=LIBREOFFICE_TIMEOUT,
            )
        except (OSError, subprocess.TimeoutExpired) as exc:
            LOGGER.error("Failed to execute LibreOffice for %s: %s", filename, exc)
            raise DocumentFormatError(filename, "LibreOffice conversion failed") from exc

        converted = work_path / "document.docx"
        if result.returncode != 0 or not converted.is_file():
            LOGGER.error(
                "LibreOffice failed with code %s for %s: %s",
                result.returncode,
                filename,
                result.stderr,
            )
            raise DocumentFormatError(filename, "LibreOffice conversion failed")

        LOGGER.info("Converted legacy Word document %s with LibreOffice", filename)
        return converted.read_bytes()


def extract_word_text(data: bytes, *, filename: str) -> str:
    """Return the paragraph text of a Word document, one paragraph per line.

    Legacy ``.doc`` files are converted with LibreOffice first. Tables,
    headers, footers and embedded objects are ignored.
    """

    if not zipfile.is_zipfile(io.BytesIO(data)):
        data = convert_doc_to_docx(data, filename=filename)

    try:
        document = Document(io.BytesIO(data))
    except Exception as exc:  # pragma: no cover - dependency exceptions vary
        LOGGER.error("Failed to open Word document %s: %s", filename, exc)
        raise DocumentFormatError(filename, "not a valid Word document") from exc

    paragraphs = [paragraph.text for paragraph in document.paragraphs]
    LOGGER.debug("Extracted %d paragraph(s) from %s", len(paragraphs), filename)
    return "\n".join(paragraphs)


__all__ = ["extract_word_text", "convert_doc_to_docx"]
