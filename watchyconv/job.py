from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from PIL import Image

from .codec import (
    DitherConfig,
    DitherStrategy,
    Raster,
    extract_array_name,
    extract_bytes_from_text,
    infer_dimensions,
    pack_plane,
    packed_size,
    raster_to_binary_plane,
)
from .displays import PRIMARY_DISPLAY
from .errors import CodecError, EmptyInput, InsufficientBytes
from .export import format_arduino_array, format_hex_dump, name_from_filename, sanitize_name
from .rendering import DEFAULT_COLORS, PreviewColors, bitmap_to_image, load_raster, plane_to_image

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 128


@dataclass
class ConvertSettings:
    strategy: DitherStrategy = DitherStrategy.FLOYD_STEINBERG
    threshold: int = DEFAULT_THRESHOLD
    invert: bool = False
    width: int = PRIMARY_DISPLAY.width
    height: int = PRIMARY_DISPLAY.height
    name: Optional[str] = None

    def dither_config(self) -> DitherConfig:
        return DitherConfig(strategy=self.strategy, threshold=self.threshold, invert=self.invert)


@dataclass(frozen=True)
class ConvertedBitmap:
    """Result of converting one image: the packed buffer plus what produced it."""

    data: bytes
    plane: bytes
    width: int
    height: int
    name: str

    def arduino_source(self) -> str:
        return format_arduino_array(self.data, self.name, self.width, self.height)

    def hex_dump(self) -> str:
        return format_hex_dump(self.data)

    def preview(self, colors: PreviewColors = DEFAULT_COLORS) -> Image.Image:
        return plane_to_image(self.plane, self.width, self.height, colors)


class BitmapJobBuilder:
    def __init__(self, settings: Optional[ConvertSettings] = None) -> None:
        self.settings = settings or ConvertSettings()

    def build_from_file(self, path: str) -> ConvertedBitmap:
        raster = load_raster(path, self.settings.width, self.settings.height)
        name = self.settings.name or name_from_filename(path)
        return self.build_from_raster(raster, name)

    def build_from_raster(self, raster: Raster, name: Optional[str] = None) -> ConvertedBitmap:
        width = self.settings.width
        height = self.settings.height
        plane = raster_to_binary_plane(raster, width, height, self.settings.dither_config())
        data = pack_plane(plane, width, height)
        return ConvertedBitmap(
            data=data,
            plane=bytes(plane),
            width=width,
            height=height,
            name=sanitize_name(name or self.settings.name or ""),
        )


@dataclass(frozen=True)
class ParseResult:
    """Outcome of decoding pasted source; ``error`` is set instead of raising."""

    ok: bool
    data: bytes = b""
    name: str = ""
    width: int = 0
    height: int = 0
    error: Optional[CodecError] = field(default=None, compare=False)

    def error_info(self) -> Optional[Dict[str, Any]]:
        return self.error.as_dict() if self.error else None

    def preview(self, colors: PreviewColors = DEFAULT_COLORS) -> Image.Image:
        if not self.ok:
            raise ValueError("No decoded bitmap to preview")
        return bitmap_to_image(self.data, self.width, self.height, colors)


def decode_source(
    text: str,
    width: Optional[int] = None,
    height: Optional[int] = None,
    min_bytes: Optional[int] = None,
) -> ParseResult:
    """Decode pasted source into a bitmap, raising CodecError on failure.

    Dimensions are inferred from the text and byte count unless both are
    given. Input shorter than ``min_bytes`` is rejected; input longer than
    the packed size of the chosen dimensions is truncated.
    """
    if not text or not text.strip():
        raise EmptyInput()
    name = extract_array_name(text)
    values: List[int] = extract_bytes_from_text(text)
    if width and height:
        width, height = int(width), int(height)
    else:
        width, height = infer_dimensions(len(values), text)
    if min_bytes is not None and len(values) < min_bytes:
        raise InsufficientBytes(len(values), min_bytes, width, height)
    limit = packed_size(width, height)
    if len(values) > limit:
        logger.debug("Truncating %d bytes to %d for %dx%d", len(values), limit, width, height)
        values = values[:limit]
    return ParseResult(ok=True, data=bytes(values), name=name, width=width, height=height)


def parse_code(
    text: str,
    width: Optional[int] = None,
    height: Optional[int] = None,
    min_bytes: Optional[int] = None,
) -> ParseResult:
    """Like :func:`decode_source`, but codec failures come back in the result."""
    try:
        return decode_source(text, width, height, min_bytes)
    except CodecError as exc:
        logger.debug("Code parse failed: %s", exc.message)
        return ParseResult(ok=False, error=exc)
