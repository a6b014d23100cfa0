from .loader import SUPPORTED_EXTENSIONS, ImageLoader, image_to_raster, load_raster
from .preview import (
    DEFAULT_COLORS,
    PAPER_COLORS,
    PreviewColors,
    bitmap_to_image,
    plane_to_image,
    render_rgba,
    save_preview,
)

__all__ = [
    "bitmap_to_image",
    "DEFAULT_COLORS",
    "image_to_raster",
    "ImageLoader",
    "load_raster",
    "PAPER_COLORS",
    "plane_to_image",
    "PreviewColors",
    "render_rgba",
    "save_preview",
    "SUPPORTED_EXTENSIONS",
]
