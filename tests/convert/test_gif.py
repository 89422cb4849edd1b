from __future__ import annotations

import io
import random

import pytest
from PIL import Image

from conftest import PALETTE, lzw_encode_literal, make_gif_bytes
from pdfforge.convert.gif import GifDecodeError, lzw_decode, parse_gif
from pdfforge.convert.pixels import decode_gif
from pdfforge.exceptions import DocumentFormatError, EmptyContentError


def test_lzw_decode_literal_stream() -> None:
    indices = bytes([0, 1, 2, 3, 3, 2, 1])
    assert lzw_decode(lzw_encode_literal(indices), 2, len(indices)) == indices


def test_lzw_decode_pads_short_stream() -> None:
    encoded = lzw_encode_literal(bytes([3, 3]))
    assert lzw_decode(encoded, 2, 5) == bytes([3, 3, 0, 0, 0])


def test_lzw_decode_rejects_bad_code_size() -> None:
    with pytest.raises(GifDecodeError):
        lzw_decode(b"\x00", 1, 4)


def test_parse_single_frame_with_global_palette() -> None:
    data = make_gif_bytes((2, 2), [{"width": 2, "height": 2, "indices": [0, 1, 2, 3]}])

    screen = parse_gif(data)

    assert (screen.width, screen.height) == (2, 2)
    assert len(screen.frames) == 1
    frame = screen.frames[0]
    assert frame.indices == bytes([0, 1, 2, 3])
    assert list(frame.palette) == PALETTE
    assert frame.transparent_index is None


def test_frames_keep_their_own_rectangles() -> None:
    data = make_gif_bytes(
        (10, 10),
        [
            {"width": 3, "height": 2, "indices": [0] * 6},
            {"width": 2, "height": 4, "left": 5, "top": 6, "indices": [1] * 8},
        ],
    )

    frames = parse_gif(data).frames

    assert [(f.width, f.height) for f in frames] == [(3, 2), (2, 4)]
    assert (frames[1].left, frames[1].top) == (5, 6)


def test_transparency_applies_to_next_frame_only() -> None:
    data = make_gif_bytes(
        (1, 2),
        [
            {"width": 1, "height": 2, "indices": [2, 1], "transparent": 2},
            {"width": 1, "height": 2, "indices": [2, 1]},
        ],
    )

    first, second = decode_gif(data, filename="anim.gif")

    assert first[1].pixel(0, 0) == (0, 0, 255, 0)
    assert first[1].pixel(0, 1) == (0, 255, 0, 255)
    assert second[1].pixel(0, 0) == (0, 0, 255, 255)


def test_local_palette_overrides_global() -> None:
    local = [(1, 2, 3), (4, 5, 6), (7, 8, 9), (10, 11, 12)]
    data = make_gif_bytes((1, 1), [{"width": 1, "height": 1, "indices": [1], "palette": local}])

    [(frame, buffer)] = decode_gif(data, filename="local.gif")

    assert buffer.pixel(0, 0) == (4, 5, 6, 255)


def test_interlaced_rows_are_reordered() -> None:
    # Stored pass order for 4 rows: row 0, row 2, row 1, row 3.
    stored = [0, 2, 1, 3]
    data = make_gif_bytes(
        (1, 4),
        [{"width": 1, "height": 4, "indices": stored, "interlaced": True}],
    )

    frame = parse_gif(data).frames[0]

    assert frame.indices == bytes([0, 1, 2, 3])


def test_missing_trailer_keeps_complete_frames() -> None:
    data = make_gif_bytes((1, 1), [{"width": 1, "height": 1, "indices": [0]}], trailer=False)
    assert len(parse_gif(data).frames) == 1


def test_zero_sized_frames_are_skipped() -> None:
    data = make_gif_bytes(
        (2, 2),
        [
            {"width": 0, "height": 0, "indices": []},
            {"width": 1, "height": 1, "indices": [3]},
        ],
    )
    assert [(f.width, f.height) for f in parse_gif(data).frames] == [(1, 1)]


def test_missing_palette_is_an_error() -> None:
    data = make_gif_bytes((1, 1), [{"width": 1, "height": 1, "indices": [0]}], palette=None)
    with pytest.raises(GifDecodeError):
        parse_gif(data)


def test_decode_gif_wraps_errors_with_filename() -> None:
    with pytest.raises(DocumentFormatError) as excinfo:
        decode_gif(b"not a gif", filename="broken.gif")
    assert excinfo.value.filename == "broken.gif"
    assert "broken.gif" in str(excinfo.value)


def test_decode_gif_without_frames_is_empty() -> None:
    data = make_gif_bytes((1, 1), [])
    with pytest.raises(EmptyContentError):
        decode_gif(data, filename="blank.gif")


def _palette_image(size: tuple[int, int], indices: bytes, colours: int) -> Image.Image:
    image = Image.frombytes("P", size, indices)
    image.putpalette([(i * 37 + channel * 91) % 256 for i in range(colours) for channel in range(3)])
    return image


def _pillow_gif(image: Image.Image, **options) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="GIF", **options)
    return buffer.getvalue()


def _assert_matches_pillow(data: bytes) -> None:
    [frame] = parse_gif(data).frames
    [(_, pixels)] = decode_gif(data, filename="pillow.gif")
    with Image.open(io.BytesIO(data)) as reference:
        assert reference.mode == "P"
        assert (frame.width, frame.height) == reference.size
        assert frame.indices == reference.tobytes()
        assert pixels.pixels == reference.convert("RGBA").tobytes()


def test_random_pixels_fill_the_code_table() -> None:
    # 60k random 8-bit indices grow codes to 12 bits and force table resets.
    rng = random.Random(1234)
    size = (300, 200)
    indices = bytes(rng.randrange(256) for _ in range(size[0] * size[1]))

    _assert_matches_pillow(_pillow_gif(_palette_image(size, indices, 256)))


def test_repetitive_pixels_use_long_codes() -> None:
    # Long runs produce codes that reference the entry being defined.
    width, height = 512, 512
    indices = bytes(((x // 16) + (y // 16)) % 4 for y in range(height) for x in range(width))

    _assert_matches_pillow(_pillow_gif(_palette_image((width, height), indices, 4)))


def test_single_colour_image_decodes() -> None:
    _assert_matches_pillow(_pillow_gif(_palette_image((97, 61), bytes(97 * 61), 4)))


def test_pillow_animation_yields_one_frame_per_image() -> None:
    width, height = 40, 30
    frames = [
        _palette_image(
            (width, height),
            bytes((x + y + shift) % 4 for y in range(height) for x in range(width)),
            4,
        )
        for shift in range(3)
    ]
    data = _pillow_gif(frames[0], save_all=True, append_images=frames[1:], duration=100, loop=0)

    decoded = decode_gif(data, filename="anim.gif")

    assert [(buffer.width, buffer.height) for _, buffer in decoded] == [(width, height)] * 3
    assert decoded[0][0].indices == frames[0].tobytes()
