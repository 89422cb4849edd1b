"""Lossless PNG re-encoding of canonical RGBA pixel buffers."""

from __future__ import annotations

import struct
import zlib

from ..core.model import PixelBuffer

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

__all__ = ["PNG_SIGNATURE", "encode_png"]


def _chunk(tag: bytes, data: bytes) -> bytes:
    return (
        struct.pack(">I", len(data))
        + tag
        + data
        + struct.pack(">I", zlib.crc32(tag + data) & 0xFFFFFFFF)
    )


def encode_png(buffer: PixelBuffer, *, level: int = 6) -> bytes:
    """Serialise *buffer* as an 8-bit RGBA PNG with identical dimensions."""

    width, height = buffer.width, buffer.height
    raw = buffer.pixels

    rows = bytearray()
    row_stride = width * 4
    for row in range(height):
        start = row * row_stride
        rows.append(0)
        rows.extend(raw[start : start + row_stride])

    header = _chunk(
        b"IHDR",
        struct.pack(">IIBBBBB", width, height, 8, 6, 0, 0, 0),
    )
    data = _chunk(b"IDAT", zlib.compress(bytes(rows), level))
    end = _chunk(b"IEND", b"")
    return PNG_SIGNATURE + header + data + end
