from .source import (
    format_arduino_array,
    format_hex_dump,
    header_filename,
    name_from_filename,
    preview_filename,
    sanitize_name,
)

__all__ = [
    "format_arduino_array",
    "format_hex_dump",
    "header_filename",
    "name_from_filename",
    "preview_filename",
    "sanitize_name",
]
