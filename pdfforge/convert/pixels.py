"""Decoding of BMP and GIF inputs into canonical RGBA pixel buffers.

BMP channel mapping: the stored blue, green, red (and optional alpha)
samples are mapped to R, G, B, A in that order. Bitmaps whose header
carries no alpha mask are treated as opaque (alpha 255); palette bitmaps
are expanded through their colour table first.
"""

from __future__ import annotations

import io
import logging

from PIL import Image, UnidentifiedImageError

from ..core.model import GifFrame, PixelBuffer
from ..exceptions import DocumentFormatError, EmptyContentError
from .gif import GifDecodeError, parse_gif

LOGGER = logging.getLogger("pdfforge.convert")

__all__ = ["decode_bmp", "decode_gif"]


def decode_bmp(data: bytes, *, filename: str) -> PixelBuffer:
    """Decode a Windows bitmap into a :class:`PixelBuffer`."""

    try:
        with Image.open(io.BytesIO(data)) as image:
            if image.format not in ("BMP", "DIB"):
                raise DocumentFormatError(filename, "not a BMP image")
            image.load()
            source_mode = image.mode
            rgba = image.convert("RGBA")
    except DocumentFormatError:
        raise
    except (UnidentifiedImageError, OSError, ValueError) as exc:
        LOGGER.error("Failed to decode BMP %s: %s", filename, exc)
        raise DocumentFormatError(filename, "not a valid BMP image") from exc

    width, height = rgba.size
    LOGGER.debug("Decoded BMP %s (%dx%d, source mode %s)", filename, width, height, source_mode)
    return PixelBuffer(width, height, rgba.tobytes())


def decode_gif(data: bytes, *, filename: str) -> list[tuple[GifFrame, PixelBuffer]]:
    """Decode every frame of a GIF, each at its own sub-rectangle size."""

    try:
        screen = parse_gif(data)
    except GifDecodeError as exc:
        LOGGER.error("Failed to decode GIF %s: %s", filename, exc)
        raise DocumentFormatError(filename, str(exc)) from exc

    if not screen.frames:
        raise EmptyContentError(f'Could not extract frames from GIF "{filename}".', filename=filename)

    decoded = [(frame, frame.to_pixel_buffer()) for frame in screen.frames]
    LOGGER.debug(
        "Decoded GIF %s: %d frame(s) on a %dx%d canvas",
        filename,
        len(decoded),
        screen.width,
        screen.height,
    )
    return decoded
