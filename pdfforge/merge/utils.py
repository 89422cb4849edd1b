"""Utility helpers for :mod:`pdfforge.merge`."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from ..core.media import PDF, resolve_media_type
from ..core.model import InputFile

PathLike = Union[str, Path]


def ensure_path(path: PathLike) -> Path:
    """Return a :class:`~pathlib.Path` instance for *path*."""

    resolved = Path(path).expanduser()
    try:
        return resolved.resolve(strict=False)
    except FileNotFoundError:  # pragma: no cover - defensive
        return resolved


def is_pdf(file: InputFile) -> bool:
    return resolve_media_type(file) == PDF


def read_input(path: PathLike, media_type: str = "") -> InputFile:
    """Load *path* into an :class:`InputFile`, keeping its file name."""

    resolved = ensure_path(path)
    return InputFile(name=resolved.name, data=resolved.read_bytes(), media_type=media_type)


__all__ = ["PathLike", "ensure_path", "is_pdf", "read_input"]
