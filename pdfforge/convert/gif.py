"""GIF container parsing and LZW decoding.

Frames are returned exactly as stored: each keeps its own sub-rectangle,
colour table and transparent index. No compositing onto the logical
screen is performed, so every frame can become an independent page.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from ..core.model import RGB, GifFrame

__all__ = ["GifDecodeError", "GifScreen", "parse_gif", "lzw_decode"]

_EXTENSION = 0x21
_IMAGE_DESCRIPTOR = 0x2C
_TRAILER = 0x3B
_GRAPHIC_CONTROL = 0xF9
_MAX_CODE_SIZE = 12

# (start row, step) for the four interlace passes.
_INTERLACE_PASSES = ((0, 8), (4, 8), (2, 4), (1, 2))


class GifDecodeError(ValueError):
    """Raised when a byte stream is not a decodable GIF."""


@dataclass(frozen=True, slots=True)
class GifScreen:
    width: int
    height: int
    frames: list[GifFrame]


class _Cursor:
    def __init__(self, data: bytes) -> None:
        self.data = data
        self.offset = 0

    def take(self, count: int) -> bytes:
        end = self.offset + count
        if end > len(self.data):
            raise GifDecodeError("Unexpected end of GIF data")
        chunk = self.data[self.offset : end]
        self.offset = end
        return chunk

    def byte(self) -> int:
        return self.take(1)[0]

    def u16(self) -> int:
        low, high = self.take(2)
        return low | (high << 8)

    def sub_blocks(self) -> Iterator[bytes]:
        while True:
            size = self.byte()
            if size == 0:
                return
            yield self.take(size)


def _read_color_table(cursor: _Cursor, packed: int) -> list[RGB]:
    entries = 1 << ((packed & 0x07) + 1)
    raw = cursor.take(entries * 3)
    return [(raw[i], raw[i + 1], raw[i + 2]) for i in range(0, len(raw), 3)]


def lzw_decode(data: bytes, min_code_size: int, pixel_count: int) -> bytes:
    """Decode GIF-flavoured LZW *data* into at most *pixel_count* indices.

    Short streams are padded with index 0 so the result always holds
    exactly *pixel_count* entries.
    """

    if not 2 <= min_code_size <= 11:
        raise GifDecodeError(f"Invalid LZW minimum code size {min_code_size}")

    clear_code = 1 << min_code_size
    end_code = clear_code + 1
    base_table = [bytes((i,)) for i in range(clear_code)] + [b"", b""]

    table = list(base_table)
    code_size = min_code_size + 1
    previous: bytes | None = None
    output = bytearray()

    bit_buffer = 0
    bit_count = 0
    for byte in data:
        bit_buffer |= byte << bit_count
        bit_count += 8
        while bit_count >= code_size:
            code = bit_buffer & ((1 << code_size) - 1)
            bit_buffer >>= code_size
            bit_count -= code_size

            if code == clear_code:
                table = list(base_table)
                code_size = min_code_size + 1
                previous = None
                continue
            if code == end_code:
                return _fit(output, pixel_count)

            if previous is None:
                if code >= len(table):
                    raise GifDecodeError("LZW stream starts with an undefined code")
                entry = table[code]
            else:
                if code < len(table):
                    entry = table[code]
                    addition = previous + entry[:1]
                elif code == len(table):
                    entry = previous + previous[:1]
                    addition = entry
                else:
                    raise GifDecodeError(f"Invalid LZW code {code}")
                # A full table stops growing until the next clear code.
                if len(table) < (1 << _MAX_CODE_SIZE):
                    table.append(addition)
                    if len(table) == (1 << code_size) and code_size < _MAX_CODE_SIZE:
                        code_size += 1

            output.extend(entry)
            previous = entry
            if len(output) >= pixel_count:
                return _fit(output, pixel_count)

    return _fit(output, pixel_count)


def _fit(output: bytearray, pixel_count: int) -> bytes:
    if len(output) < pixel_count:
        output.extend(bytes(pixel_count - len(output)))
    return bytes(output[:pixel_count])


def _deinterlace(indices: bytes, width: int, height: int) -> bytes:
    rows = [indices[i * width : (i + 1) * width] for i in range(height)]
    ordered: list[bytes] = [b""] * height
    source = 0
    for start, step in _INTERLACE_PASSES:
        for target in range(start, height, step):
            ordered[target] = rows[source]
            source += 1
    return b"".join(ordered)


def parse_gif(data: bytes) -> GifScreen:
    """Parse *data* and return the logical screen with every image frame."""

    cursor = _Cursor(data)
    signature = cursor.take(6)
    if signature not in (b"GIF87a", b"GIF89a"):
        raise GifDecodeError("Missing GIF signature")

    screen_width = cursor.u16()
    screen_height = cursor.u16()
    packed = cursor.byte()
    cursor.take(2)  # background colour index, pixel aspect ratio
    global_table = _read_color_table(cursor, packed) if packed & 0x80 else None

    frames: list[GifFrame] = []
    transparent_index: int | None = None

    while True:
        try:
            block = cursor.byte()
        except GifDecodeError:
            # Missing trailer; keep whatever frames were complete.
            break

        if block == _TRAILER:
            break

        if block == _EXTENSION:
            label = cursor.byte()
            payloads = list(cursor.sub_blocks())
            if label == _GRAPHIC_CONTROL and payloads and len(payloads[0]) >= 4:
                control = payloads[0]
                transparent_index = control[3] if control[0] & 0x01 else None
            continue

        if block != _IMAGE_DESCRIPTOR:
            raise GifDecodeError(f"Unknown GIF block 0x{block:02x}")

        left = cursor.u16()
        top = cursor.u16()
        width = cursor.u16()
        height = cursor.u16()
        image_packed = cursor.byte()
        local_table = (
            _read_color_table(cursor, image_packed) if image_packed & 0x80 else None
        )
        min_code_size = cursor.byte()
        compressed = b"".join(cursor.sub_blocks())

        palette = local_table if local_table is not None else global_table
        if palette is None:
            raise GifDecodeError("GIF frame has no colour table")

        if width == 0 or height == 0:
            transparent_index = None
            continue

        indices = lzw_decode(compressed, min_code_size, width * height)
        if image_packed & 0x40:
            indices = _deinterlace(indices, width, height)

        frames.append(
            GifFrame(
                width=width,
                height=height,
                left=left,
                top=top,
                indices=indices,
                palette=tuple(palette),
                transparent_index=transparent_index,
            )
        )
        # A graphic control extension applies to the next image only.
        transparent_index = None

    return GifScreen(width=screen_width, height=screen_height, frames=frames)
