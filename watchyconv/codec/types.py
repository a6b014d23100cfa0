from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class DitherStrategy(str, Enum):
    THRESHOLD = "threshold"
    ORDERED = "ordered"
    FLOYD_STEINBERG = "floyd-steinberg"
    ATKINSON = "atkinson"

    @classmethod
    def parse(cls, value: Union[str, "DitherStrategy"]) -> "DitherStrategy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower().replace("_", "-"))
        except ValueError:
            choices = ", ".join(item.value for item in cls)
            raise ValueError(f"Unknown dither strategy '{value}' (choose from {choices})") from None


@dataclass(frozen=True)
class DitherConfig:
    """Per-conversion dithering options. ``threshold`` is ignored by ordered dithering."""

    strategy: DitherStrategy = DitherStrategy.FLOYD_STEINBERG
    threshold: int = 128
    invert: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "strategy", DitherStrategy.parse(self.strategy))
        if not 0 <= self.threshold <= 255:
            raise ValueError("Threshold must be between 0 and 255")


@dataclass(frozen=True)
class Raster:
    """Row-major RGBA samples, 4 bytes per pixel."""

    data: bytes
    width: int
    height: int

    def validate(self) -> None:
        """Validate that the sample buffer matches the declared dimensions."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Raster dimensions must be greater than zero")
        if len(self.data) != self.width * self.height * 4:
            raise ValueError(
                f"Raster data length {len(self.data)} does not match {self.width}x{self.height} RGBA"
            )

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @classmethod
    def blank(cls, width: int, height: int, value: int = 255) -> "Raster":
        """Return an opaque raster filled with one grey level."""
        pixel = bytes([value, value, value, 255])
        return cls(pixel * (width * height), width, height)
