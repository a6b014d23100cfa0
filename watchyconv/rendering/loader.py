from __future__ import annotations

import logging
import os
from typing import Set

from PIL import Image, ImageOps

from ..codec.types import Raster

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS: Set[str] = {".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp"}

BACKGROUND = (255, 255, 255, 255)


class ImageLoader:
    """Load image files and fit them onto a fixed-size white canvas."""

    def load(self, path: str, width: int, height: int) -> Raster:
        img = self._load_image(path)
        logger.debug("Loaded %s (%dx%d, mode %s)", path, img.width, img.height, img.mode)
        return image_to_raster(self._cover_fit(self._flatten(img), width, height))

    @staticmethod
    def _load_image(path: str) -> Image.Image:
        with Image.open(path) as img:
            img = ImageOps.exif_transpose(img)
            return img.copy()

    @staticmethod
    def _flatten(img: Image.Image) -> Image.Image:
        img = img.convert("RGBA")
        canvas = Image.new("RGBA", img.size, BACKGROUND)
        canvas.alpha_composite(img)
        return canvas

    @staticmethod
    def _cover_fit(img: Image.Image, width: int, height: int) -> Image.Image:
        if img.size == (width, height):
            return img
        return ImageOps.fit(img, (width, height), Image.LANCZOS, centering=(0.5, 0.5))


def image_to_raster(img: Image.Image) -> Raster:
    """Wrap a Pillow image as an RGBA raster of the same size."""
    img = img.convert("RGBA")
    return Raster(img.tobytes(), img.width, img.height)


def load_raster(path: str, width: int, height: int) -> Raster:
    ext = os.path.splitext(path)[1].lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValueError("Supported formats: " + ", ".join(sorted(SUPPORTED_EXTENSIONS)))
    if not os.path.isfile(path):
        raise FileNotFoundError(f"File not found: {path}")
    return ImageLoader().load(path, width, height)
