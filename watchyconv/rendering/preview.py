from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from PIL import Image, ImageOps

from ..codec.dither import ON
from ..codec.pipeline import unpack_bitmap

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class PreviewColors:
    """Display colours for on (bit set) and off pixels."""

    on: Color = (255, 255, 255)
    off: Color = (0, 0, 0)


DEFAULT_COLORS = PreviewColors()
PAPER_COLORS = PreviewColors(on=(0xEB, 0xDB, 0xB2), off=(0, 0, 0))


def plane_to_image(
    plane: Sequence[int], width: int, height: int, colors: PreviewColors = DEFAULT_COLORS
) -> Image.Image:
    """Render a 0/255 plane as an RGB image."""
    if len(plane) != width * height:
        raise ValueError(f"Plane length {len(plane)} does not match {width}x{height}")
    img = Image.frombytes("L", (width, height), bytes(plane))
    if colors == DEFAULT_COLORS:
        return img.convert("RGB")
    return ImageOps.colorize(img, black=colors.off, white=colors.on)


def bitmap_to_image(
    data: Sequence[int], width: int, height: int, colors: PreviewColors = DEFAULT_COLORS
) -> Image.Image:
    """Render a packed buffer of any length as an RGB preview image."""
    return plane_to_image(unpack_bitmap(data, width, height), width, height, colors)


def render_rgba(
    data: Sequence[int],
    width: int,
    height: int,
    colors: PreviewColors = DEFAULT_COLORS,
    out: Optional[bytearray] = None,
) -> bytearray:
    """Write an opaque RGBA rendering of a packed buffer into ``out`` (allocated if omitted)."""
    size = width * height * 4
    if out is None:
        out = bytearray(size)
    elif len(out) != size:
        raise ValueError(f"Output buffer holds {len(out)} bytes, expected {size}")
    on = bytes(colors.on) + b"\xff"
    off = bytes(colors.off) + b"\xff"
    for index, value in enumerate(unpack_bitmap(data, width, height)):
        out[index * 4 : index * 4 + 4] = on if value == ON else off
    return out


def save_preview(img: Image.Image, path: str) -> None:
    img.save(path, format="PNG")
