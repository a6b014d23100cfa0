from __future__ import annotations

from typing import Dict


class CodecError(ValueError):
    """Base class for recoverable codec failures, reported as kind + message."""

    kind = "CodecError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def as_dict(self) -> Dict[str, str]:
        return {"kind": self.kind, "message": self.message}


class EmptyInput(CodecError):
    kind = "EmptyInput"

    def __init__(self, message: str = "Please paste some Arduino bitmap code first.") -> None:
        super().__init__(message)


class NoArrayFound(CodecError):
    kind = "NoArrayFound"

    def __init__(self, message: str = "No array initializer found. Paste code containing { ... } byte data.") -> None:
        super().__init__(message)


class NoLiteralsFound(CodecError):
    kind = "NoLiteralsFound"

    def __init__(
        self,
        message: str = "No valid byte data found. Use 0xNN, 0bNNNNNNNN or decimal (0-255) values.",
    ) -> None:
        super().__init__(message)


class InsufficientBytes(CodecError):
    kind = "InsufficientBytes"

    def __init__(self, found: int, expected: int, width: int = 0, height: int = 0) -> None:
        target = f" for a {width}x{height} image" if width and height else ""
        super().__init__(f"Not enough data: found {found} bytes, expected {expected} bytes{target}.")
        self.found = found
        self.expected = expected


__all__ = ["CodecError", "EmptyInput", "InsufficientBytes", "NoArrayFound", "NoLiteralsFound"]
