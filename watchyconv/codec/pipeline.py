from __future__ import annotations

import logging
from typing import Optional, Sequence

from .dither import dither
from .luma import extract_luma
from .packing import pack_plane, unpack_plane
from .types import DitherConfig, Raster

logger = logging.getLogger(__name__)


def _check_raster(raster: Raster, width: int, height: int) -> None:
    raster.validate()
    if (raster.width, raster.height) != (width, height):
        raise ValueError(
            f"Raster is {raster.width}x{raster.height}, expected {width}x{height}"
        )


def raster_to_binary_plane(
    raster: Raster, width: int, height: int, config: Optional[DitherConfig] = None
) -> bytearray:
    """Run luma extraction and dithering, returning the 0/255 plane."""
    _check_raster(raster, width, height)
    config = config or DitherConfig()
    return dither(extract_luma(raster), width, height, config)


def convert_to_bitmap(
    raster: Raster, width: int, height: int, config: Optional[DitherConfig] = None
) -> bytes:
    """Convert an RGBA raster into a packed 1bpp buffer, MSB-first, row-major."""
    plane = raster_to_binary_plane(raster, width, height, config)
    data = pack_plane(plane, width, height)
    logger.debug("Packed %dx%d raster into %d bytes", width, height, len(data))
    return data


def unpack_bitmap(data: Sequence[int], width: int, height: int) -> bytearray:
    """Expand a packed buffer into a 0/255 plane; short buffers render as off pixels."""
    return unpack_plane(data, width, height)
