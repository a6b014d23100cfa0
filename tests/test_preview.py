import pytest

from watchyconv.rendering import PAPER_COLORS, PreviewColors, bitmap_to_image, plane_to_image, render_rgba


def test_bitmap_to_image_colors():
    img = bitmap_to_image(b"\x80", 8, 1)
    assert img.mode == "RGB"
    assert img.getpixel((0, 0)) == (255, 255, 255)
    assert img.getpixel((1, 0)) == (0, 0, 0)


def test_short_buffer_preview():
    img = bitmap_to_image(b"", 8, 2)
    assert img.size == (8, 2)
    assert img.getpixel((7, 1)) == (0, 0, 0)


def test_custom_colors():
    img = plane_to_image([255, 0], 2, 1, PAPER_COLORS)
    assert img.getpixel((0, 0)) == PAPER_COLORS.on
    assert img.getpixel((1, 0)) == PAPER_COLORS.off


def test_render_into_caller_buffer():
    out = bytearray(16)
    colors = PreviewColors(on=(1, 2, 3), off=(9, 9, 9))
    result = render_rgba(b"\xa0", 4, 1, colors, out)
    assert result is out
    assert bytes(out) == bytes([1, 2, 3, 255, 9, 9, 9, 255, 1, 2, 3, 255, 9, 9, 9, 255])


def test_render_buffer_size_checked():
    with pytest.raises(ValueError):
        render_rgba(b"\x00", 8, 1, out=bytearray(4))
