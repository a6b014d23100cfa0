from __future__ import annotations

import logging
import re
from typing import List, Tuple

from ..errors import NoArrayFound, NoLiteralsFound

logger = logging.getLogger(__name__)

DEFAULT_ARRAY_NAME = "parsed_image"

_COMMENT_RE = re.compile(r"//[^\n]*|/\*.*?\*/", re.DOTALL)
_HEX_RE = re.compile(r"\b0[xX]([0-9a-fA-F]{1,2})\b")
_BINARY_RE = re.compile(r"\b0[bB]([01]{8})\b")
_DECIMAL_RE = re.compile(r"(?<![\w.\-])(\d+)(?![\w.])")
_ARRAY_NAME_RE = re.compile(r"(?:const\s+)?unsigned\s+char\s+(\w+)\s*\[\s*\]")


def strip_comments(text: str) -> str:
    """Remove ``//`` line comments and ``/* */`` block comments in one pass.

    Whichever comment opens first wins, so ``/*`` inside a line comment does
    not start a block. Block comments keep their line breaks.
    """
    return _COMMENT_RE.sub(_blank_comment, text)


def _blank_comment(match: "re.Match[str]") -> str:
    comment = match.group(0)
    if comment.startswith("//"):
        return ""
    return " " + "\n" * comment.count("\n")


def find_initializer(text: str) -> str:
    """Return the contents of the first ``{ ... }`` span of comment-free text."""
    start = text.find("{")
    if start < 0:
        raise NoArrayFound()
    end = text.find("}", start + 1)
    if end < 0:
        raise NoArrayFound("Array initializer is missing its closing '}'.")
    return text[start + 1 : end]


def scan_literals(body: str) -> Tuple[str, List[int]]:
    """Return the literal form that matched and its values, or raise NoLiteralsFound."""
    values = [int(match, 16) for match in _HEX_RE.findall(body)]
    if values:
        return "hex", values
    values = [int(match, 2) for match in _BINARY_RE.findall(body)]
    if values:
        return "binary", values
    values = [value for value in (int(match) for match in _DECIMAL_RE.findall(body)) if value <= 255]
    if values:
        return "decimal", values
    raise NoLiteralsFound()


def extract_bytes_from_text(text: str) -> List[int]:
    """Extract the ordered byte values of the first initializer list in ``text``.

    Only the span between the first ``{`` and the next ``}`` is scanned. Hex,
    8-digit binary and decimal 0-255 literals are tried in that order; the
    first form with any match decides the result.
    """
    body = find_initializer(strip_comments(text))
    form, values = scan_literals(body)
    logger.debug("Extracted %d %s literals", len(values), form)
    return values


def extract_array_name(text: str, default: str = DEFAULT_ARRAY_NAME) -> str:
    """Return the declared ``unsigned char`` array name, or ``default``."""
    match = _ARRAY_NAME_RE.search(strip_comments(text))
    return match.group(1) if match else default
