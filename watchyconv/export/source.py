from __future__ import annotations

import os
import re
from typing import List, Sequence

DEFAULT_NAME = "image"
BYTES_PER_SOURCE_LINE = 16
BYTES_PER_DUMP_LINE = 25

_INVALID_IDENT_RE = re.compile(r"[^a-z0-9_]")
_INVALID_STEM_RE = re.compile(r"[^a-z0-9]")


def sanitize_name(name: str) -> str:
    """Turn a user-supplied name into a lowercase C identifier."""
    name = _INVALID_IDENT_RE.sub("_", (name or DEFAULT_NAME).lower())
    if name[0].isdigit():
        name = "_" + name
    return name


def name_from_filename(path: str) -> str:
    """Derive an image name from a file name, e.g. ``My Logo.png`` -> ``my_logo``."""
    stem = os.path.splitext(os.path.basename(path))[0]
    return _INVALID_STEM_RE.sub("_", stem.lower()) or DEFAULT_NAME


def format_arduino_array(data: Sequence[int], name: str, width: int, height: int) -> str:
    """Render ``data`` as a PROGMEM ``unsigned char`` initializer, 16 bytes per line."""
    name = sanitize_name(name)
    parts: List[str] = [f"// '{name}', {width}x{height}px\n", f"const unsigned char {name}[] PROGMEM = {{\n"]
    last = len(data) - 1
    for i, value in enumerate(data):
        if i % BYTES_PER_SOURCE_LINE == 0:
            parts.append("  ")
        parts.append(f"0x{value:02x}")
        if i < last:
            parts.append(", ")
        if (i + 1) % BYTES_PER_SOURCE_LINE == 0:
            parts.append("\n")
    parts.append("\n};")
    return "".join(parts)


def format_hex_dump(data: Sequence[int]) -> str:
    """Render ``data`` as lowercase hex pairs, 25 per line, space separated."""
    parts: List[str] = []
    last = len(data) - 1
    for i, value in enumerate(data):
        parts.append(f"{value:02x}")
        if (i + 1) % BYTES_PER_DUMP_LINE == 0:
            parts.append("\n")
        elif i < last:
            parts.append(" ")
    return "".join(parts)


def header_filename(name: str) -> str:
    return f"{sanitize_name(name)}.h"


def preview_filename(name: str, width: int, height: int) -> str:
    return f"{name or DEFAULT_NAME}_{width}x{height}.png"
