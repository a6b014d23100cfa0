from __future__ import annotations

from array import array

from .types import Raster

# NTSC weights; alpha is ignored.
LUMA_RED = 0.299
LUMA_GREEN = 0.587
LUMA_BLUE = 0.114


def extract_luma(raster: Raster) -> array:
    """Return the single-precision intensity plane (0-255) of an RGBA raster."""
    raster.validate()
    data = raster.data
    return array(
        "f",
        (
            LUMA_RED * data[i] + LUMA_GREEN * data[i + 1] + LUMA_BLUE * data[i + 2]
            for i in range(0, len(data), 4)
        ),
    )
