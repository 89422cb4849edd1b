"""Utilities shared by pdfforge tools."""

from __future__ import annotations

import base64
import logging
from pathlib import Path

PDF_DATA_URI_PREFIX = "data:application/pdf;base64,"


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def resolve_path(path: str | Path | None) -> Path:
    if path is None:
        raise ValueError("Path must not be None")
    resolved = Path(path).expanduser().resolve()
    return resolved


def to_data_uri(pdf_bytes: bytes) -> str:
    """Embed *pdf_bytes* in a Base64 ``data:`` URI."""

    return PDF_DATA_URI_PREFIX + base64.b64encode(pdf_bytes).decode("ascii")
