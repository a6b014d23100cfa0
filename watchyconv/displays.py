from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional

DATA_PATH = Path(__file__).resolve().parent / "data" / "display_sizes.json"


@dataclass(frozen=True)
class DisplaySize:
    name: str
    width: int
    height: int

    @property
    def byte_count(self) -> int:
        return (self.width + 7) // 8 * self.height

    @property
    def label(self) -> str:
        return f"{self.width}x{self.height}"


PRIMARY_DISPLAY = DisplaySize("watchy", 200, 200)


class DisplaySizeRegistry:
    """Known target sizes, in lookup order."""

    def __init__(self, sizes: Iterable[DisplaySize]) -> None:
        self._sizes = tuple(sizes)

    @classmethod
    def load(cls, path: Path = DATA_PATH) -> "DisplaySizeRegistry":
        return _load_registry(path.resolve())

    @property
    def sizes(self) -> List[DisplaySize]:
        return list(self._sizes)

    def match_byte_count(self, byte_count: int) -> Optional[DisplaySize]:
        """Return the first size whose packed buffer is exactly ``byte_count`` bytes."""
        return next((size for size in self._sizes if size.byte_count == byte_count), None)


@lru_cache(maxsize=None)
def _load_registry(path: Path) -> DisplaySizeRegistry:
    raw = json.loads(path.read_text(encoding="utf-8"))
    return DisplaySizeRegistry(DisplaySize(**item) for item in raw)
