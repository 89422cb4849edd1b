"""Shared domain models used across pdfforge."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

RGB = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class InputFile:
    """A named byte blob submitted by a caller."""

    name: str
    data: bytes
    media_type: str = ""


@dataclass(frozen=True, slots=True)
class PixelBuffer:
    """Row-major, top-to-bottom RGBA pixels (4 bytes per pixel)."""

    width: int
    height: int
    pixels: bytes

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Pixel buffer dimensions must be positive")
        expected = self.width * self.height * 4
        if len(self.pixels) != expected:
            raise ValueError(
                f"Pixel buffer holds {len(self.pixels)} bytes, expected {expected}"
            )

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        offset = (y * self.width + x) * 4
        r, g, b, a = self.pixels[offset : offset + 4]
        return r, g, b, a


@dataclass(frozen=True, slots=True)
class GifFrame:
    """One image block of a GIF with its own sub-rectangle and palette."""

    width: int
    height: int
    left: int
    top: int
    indices: bytes
    palette: Sequence[RGB]
    transparent_index: int | None = None

    def to_pixel_buffer(self) -> PixelBuffer:
        """Expand palette indices into a canonical RGBA buffer."""

        lookup: list[bytes] = []
        for index, (r, g, b) in enumerate(self.palette):
            alpha = 0 if index == self.transparent_index else 255
            lookup.append(bytes((r, g, b, alpha)))
        # Indices past the end of the colour table render opaque black.
        missing = bytes((0, 0, 0, 255))
        table = lookup + [missing] * (256 - len(lookup))
        if self.transparent_index is not None and self.transparent_index >= len(lookup):
            table[self.transparent_index] = bytes((0, 0, 0, 0))
        pixels = b"".join(table[index] for index in self.indices)
        return PixelBuffer(self.width, self.height, pixels)


@dataclass(frozen=True, slots=True)
class PageGeometry:
    """Fixed page layout used for text pages, in PDF points."""

    width: float = 595.28
    height: float = 841.89
    margin: float = 50.0
    line_height: float = 14.0
    font_size: float = 11.0

    def __post_init__(self) -> None:
        if self.text_width <= 0:
            raise ValueError("Margins leave no room for text")
        if self.line_height <= 0 or self.font_size <= 0:
            raise ValueError("Line height and font size must be positive")
        if self.height - 2 * self.margin < self.line_height:
            raise ValueError("Margins leave no room for a single line")

    @property
    def text_width(self) -> float:
        return self.width - 2 * self.margin


@dataclass(frozen=True, slots=True)
class PlacedLine:
    """A line of text positioned at its baseline in PDF user space."""

    text: str
    x: float
    y: float


@dataclass(slots=True)
class LaidOutPage:
    lines: list[PlacedLine] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Normalized result returned by the merge and convert operations."""

    success: bool
    download_url: str | None = None
    error: str | None = None

    @classmethod
    def ok(cls, download_url: str) -> "OperationResult":
        return cls(success=True, download_url=download_url)

    @classmethod
    def failed(cls, error: str) -> "OperationResult":
        return cls(success=False, error=error)

    def as_dict(self) -> dict[str, Any]:
        if self.success:
            return {"success": True, "downloadUrl": self.download_url}
        return {"success": False, "error": self.error}


__all__ = [
    "RGB",
    "InputFile",
    "PixelBuffer",
    "GifFrame",
    "PageGeometry",
    "PlacedLine",
    "LaidOutPage",
    "OperationResult",
]
