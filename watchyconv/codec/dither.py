from __future__ import annotations

import logging
from array import array
from typing import Callable, Dict, Sequence, Tuple

from .types import DitherConfig, DitherStrategy

logger = logging.getLogger(__name__)

OFF = 0
ON = 255

BAYER_4X4: Tuple[Tuple[int, ...], ...] = (
    (0, 8, 2, 10),
    (12, 4, 14, 6),
    (3, 11, 1, 9),
    (15, 7, 13, 5),
)

Ditherer = Callable[[Sequence[float], int, int, float], bytearray]


def _check_plane(plane: Sequence[float], width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError("Plane dimensions must be greater than zero")
    if len(plane) != width * height:
        raise ValueError(f"Plane length {len(plane)} does not match {width}x{height}")


def threshold_dither(plane: Sequence[float], width: int, height: int, threshold: float) -> bytearray:
    """Cut every pixel at a single global threshold."""
    return bytearray(OFF if value < threshold else ON for value in plane)


def bayer_threshold(x: int, y: int) -> float:
    """Return the ordered-dither cutoff for pixel (x, y)."""
    return ((BAYER_4X4[y % 4][x % 4] + 0.5) / 16) * 255


def ordered_dither(plane: Sequence[float], width: int, height: int, threshold: float = 0) -> bytearray:
    """Bayer 4x4 ordered dither. The global threshold is not used."""
    out = bytearray(width * height)
    for y in range(height):
        row = y * width
        for x in range(width):
            out[row + x] = ON if plane[row + x] > bayer_threshold(x, y) else OFF
    return out


def floyd_steinberg_dither(plane: Sequence[float], width: int, height: int, threshold: float) -> bytearray:
    """Floyd-Steinberg error diffusion, left to right on every row."""
    data = array("f", plane)
    out = bytearray(width * height)
    for y in range(height):
        for x in range(width):
            idx = y * width + x
            old = data[idx]
            new = OFF if old < threshold else ON
            out[idx] = new
            error = old - new

            if x + 1 < width:
                data[idx + 1] += error * 7 / 16
            if y + 1 < height:
                if x > 0:
                    data[idx + width - 1] += error * 3 / 16
                data[idx + width] += error * 5 / 16
                if x + 1 < width:
                    data[idx + width + 1] += error * 1 / 16
    return out


def atkinson_dither(plane: Sequence[float], width: int, height: int, threshold: float) -> bytearray:
    """Atkinson error diffusion: six neighbours get 1/8 each, 2/8 is dropped."""
    data = array("f", plane)
    out = bytearray(width * height)
    for y in range(height):
        for x in range(width):
            idx = y * width + x
            old = data[idx]
            new = OFF if old < threshold else ON
            out[idx] = new
            error = (old - new) / 8

            if x + 1 < width:
                data[idx + 1] += error
            if x + 2 < width:
                data[idx + 2] += error
            if y + 1 < height:
                if x > 0:
                    data[idx + width - 1] += error
                data[idx + width] += error
                if x + 1 < width:
                    data[idx + width + 1] += error
            if y + 2 < height:
                data[idx + 2 * width] += error
    return out


DITHERERS: Dict[DitherStrategy, Ditherer] = {
    DitherStrategy.THRESHOLD: threshold_dither,
    DitherStrategy.ORDERED: ordered_dither,
    DitherStrategy.FLOYD_STEINBERG: floyd_steinberg_dither,
    DitherStrategy.ATKINSON: atkinson_dither,
}


def invert_plane(plane: Sequence[int]) -> bytearray:
    """Swap on and off pixels."""
    return bytearray(ON if value == OFF else OFF for value in plane)


def dither(plane: Sequence[float], width: int, height: int, config: DitherConfig) -> bytearray:
    """Run the configured strategy, then the optional inversion pass.

    The caller's plane is never modified; error diffusion works on a copy.
    """
    _check_plane(plane, width, height)
    logger.debug(
        "Dithering %dx%d plane with %s (threshold=%d, invert=%s)",
        width,
        height,
        config.strategy.value,
        config.threshold,
        config.invert,
    )
    out = DITHERERS[config.strategy](plane, width, height, config.threshold)
    if config.invert:
        out = invert_plane(out)
    return out
