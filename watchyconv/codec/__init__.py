from .dimensions import dimensions_from_hints, infer_dimensions
from .dither import (
    BAYER_4X4,
    DITHERERS,
    OFF,
    ON,
    atkinson_dither,
    bayer_threshold,
    dither,
    floyd_steinberg_dither,
    invert_plane,
    ordered_dither,
    threshold_dither,
)
from .literals import extract_array_name, extract_bytes_from_text, find_initializer, strip_comments
from .luma import extract_luma
from .packing import pack_line, pack_plane, packed_size, row_stride, unpack_line, unpack_plane
from .pipeline import convert_to_bitmap, raster_to_binary_plane, unpack_bitmap
from .types import DitherConfig, DitherStrategy, Raster

__all__ = [
    "atkinson_dither",
    "BAYER_4X4",
    "bayer_threshold",
    "convert_to_bitmap",
    "dimensions_from_hints",
    "dither",
    "DitherConfig",
    "DITHERERS",
    "DitherStrategy",
    "extract_array_name",
    "extract_bytes_from_text",
    "extract_luma",
    "find_initializer",
    "floyd_steinberg_dither",
    "infer_dimensions",
    "invert_plane",
    "OFF",
    "ON",
    "ordered_dither",
    "pack_line",
    "pack_plane",
    "packed_size",
    "Raster",
    "raster_to_binary_plane",
    "row_stride",
    "strip_comments",
    "threshold_dither",
    "unpack_bitmap",
    "unpack_line",
    "unpack_plane",
]
