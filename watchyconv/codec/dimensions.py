from __future__ import annotations

import logging
import math
import re
from typing import Optional, Tuple

from ..displays import PRIMARY_DISPLAY, DisplaySizeRegistry

logger = logging.getLogger(__name__)

_WIDTH_RE = re.compile(r"(?<![a-z])width\s*[:=]\s*(\d+)", re.IGNORECASE)
_HEIGHT_RE = re.compile(r"(?<![a-z])height\s*[:=]\s*(\d+)", re.IGNORECASE)
_DEFINE_WIDTH_RE = re.compile(r"#define\s+\w*width\s+(\d+)", re.IGNORECASE)
_DEFINE_HEIGHT_RE = re.compile(r"#define\s+\w*height\s+(\d+)", re.IGNORECASE)
_SIZE_PAIR_RE = re.compile(r"(?<![A-Za-z0-9.])([1-9]\d*)\s*[x×]\s*([1-9]\d*)(?![\d.])", re.IGNORECASE)


def _first_positive(*patterns: "re.Pattern[str]", text: str) -> Optional[int]:
    for pattern in patterns:
        for match in pattern.finditer(text):
            value = int(match.group(1))
            if value > 0:
                return value
    return None


def dimensions_from_hints(text: str) -> Optional[Tuple[int, int]]:
    """Return dimensions declared in the text (``width: N``/``height=M`` or ``NxM``)."""
    width = _first_positive(_WIDTH_RE, _DEFINE_WIDTH_RE, text=text)
    height = _first_positive(_HEIGHT_RE, _DEFINE_HEIGHT_RE, text=text)
    if width and height:
        return width, height
    match = _SIZE_PAIR_RE.search(text)
    if match:
        return int(match.group(1)), int(match.group(2))
    return None


def infer_dimensions(
    byte_count: int,
    text: str = "",
    registry: Optional[DisplaySizeRegistry] = None,
) -> Tuple[int, int]:
    """Return a best-guess (width, height) for ``byte_count`` packed bytes.

    Text hints win, then an exact known-size match, then 200x200 for large
    buffers, then a perfect square, then 200x200 regardless of fit.
    """
    hinted = dimensions_from_hints(text or "")
    if hinted:
        logger.debug("Dimensions %dx%d taken from text hints", *hinted)
        return hinted

    registry = registry or DisplaySizeRegistry.load()
    known = registry.match_byte_count(byte_count)
    if known:
        logger.debug("Byte count %d matches known size %s", byte_count, known.label)
        return known.width, known.height

    total_bits = max(0, byte_count) * 8
    if total_bits >= PRIMARY_DISPLAY.width * PRIMARY_DISPLAY.height:
        return PRIMARY_DISPLAY.width, PRIMARY_DISPLAY.height

    side = math.isqrt(total_bits)
    if side > 0 and side * side == total_bits:
        logger.debug("Byte count %d fits a %dx%d square", byte_count, side, side)
        return side, side

    logger.debug("No dimension fit for %d bytes, using %s", byte_count, PRIMARY_DISPLAY.label)
    return PRIMARY_DISPLAY.width, PRIMARY_DISPLAY.height
