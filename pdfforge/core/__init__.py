"""Core models and helpers shared by the merge and convert pipelines."""

from __future__ import annotations

from .media import media_family, resolve_media_type
from .model import (
    GifFrame,
    InputFile,
    LaidOutPage,
    OperationResult,
    PageGeometry,
    PixelBuffer,
    PlacedLine,
)
from .utils import get_logger, to_data_uri

__all__ = [
    "GifFrame",
    "InputFile",
    "LaidOutPage",
    "OperationResult",
    "PageGeometry",
    "PixelBuffer",
    "PlacedLine",
    "get_logger",
    "media_family",
    "resolve_media_type",
    "to_data_uri",
]
