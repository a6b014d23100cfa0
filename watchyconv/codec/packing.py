from __future__ import annotations

from typing import Sequence

from .dither import OFF, ON


def row_stride(width: int) -> int:
    """Bytes per packed row: eight pixels per byte, no row padding beyond that."""
    return (width + 7) // 8


def packed_size(width: int, height: int) -> int:
    """Total packed buffer length for a width x height plane."""
    return row_stride(width) * height


def pack_line(line: Sequence[int]) -> bytes:
    """Pack one row MSB-first; a set bit means the pixel is on (255)."""
    out = bytearray()
    for i in range(0, len(line), 8):
        chunk = list(line[i : i + 8])
        if len(chunk) < 8:
            chunk = chunk + [OFF] * (8 - len(chunk))
        value = 0
        for bit, pix in enumerate(chunk):
            if pix == ON:
                value |= 1 << (7 - bit)
        out.append(value)
    return bytes(out)


def pack_plane(plane: Sequence[int], width: int, height: int) -> bytes:
    """Pack a binary plane row by row into a contiguous byte buffer."""
    if width <= 0 or height <= 0:
        raise ValueError("Plane dimensions must be greater than zero")
    if len(plane) != width * height:
        raise ValueError(f"Plane length {len(plane)} does not match {width}x{height}")
    out = bytearray()
    for row in range(height):
        out += pack_line(plane[row * width : (row + 1) * width])
    return bytes(out)


def unpack_line(data: Sequence[int], width: int) -> bytearray:
    """Expand one packed row; missing bytes read as off pixels."""
    out = bytearray(width)
    for x in range(width):
        index = x // 8
        if index < len(data) and (data[index] >> (7 - (x % 8))) & 1:
            out[x] = ON
    return out


def unpack_plane(data: Sequence[int], width: int, height: int) -> bytearray:
    """Expand a packed buffer of any length into a width x height binary plane."""
    if width <= 0 or height <= 0:
        raise ValueError("Plane dimensions must be greater than zero")
    stride = row_stride(width)
    out = bytearray()
    for row in range(height):
        out += unpack_line(data[row * stride : (row + 1) * stride], width)
    return out
