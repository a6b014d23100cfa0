from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .codec import DitherStrategy
from .diagnostics import configure_logging
from .displays import PRIMARY_DISPLAY, DisplaySizeRegistry
from .export import header_filename, preview_filename
from .job import DEFAULT_THRESHOLD, BitmapJobBuilder, ConvertSettings, ParseResult, parse_code
from .rendering import DEFAULT_COLORS, PAPER_COLORS, PreviewColors, save_preview

logger = logging.getLogger(__name__)


def _threshold(value: str) -> int:
    number = int(value)
    if not 0 <= number <= 255:
        raise argparse.ArgumentTypeError("threshold must be between 0 and 255")
    return number


def _positive(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError("must be greater than zero")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="watchyconv",
        description="Convert images to 1-bit bitmaps for the Watchy e-paper display, or preview bitmap source code.",
    )
    parser.add_argument("path", nargs="?", help="Image to convert (.png/.jpg/.gif/.bmp/.webp)")
    parser.add_argument(
        "--dither",
        choices=[item.value for item in DitherStrategy],
        default=DitherStrategy.FLOYD_STEINBERG.value,
        help="Dithering method (default: floyd-steinberg)",
    )
    parser.add_argument(
        "--threshold", type=_threshold, default=DEFAULT_THRESHOLD, help="Cutoff 0-255 (ignored by ordered)"
    )
    parser.add_argument("--invert", action="store_true", help="Swap black and white after dithering")
    parser.add_argument("--name", help="Array name (default: derived from the file name)")
    parser.add_argument("--width", type=_positive, help=f"Target width (default: {PRIMARY_DISPLAY.width})")
    parser.add_argument("--height", type=_positive, help=f"Target height (default: {PRIMARY_DISPLAY.height})")
    parser.add_argument("--header", metavar="PATH", help="Write Arduino source (use '-' for <name>.h)")
    parser.add_argument("--raw", metavar="PATH", help="Write the raw hex dump")
    parser.add_argument("--png", metavar="PATH", help="Write a PNG preview (use '-' for <name>_<W>x<H>.png)")
    parser.add_argument("--paper", action="store_true", help="Use the paper tint for PNG previews")
    parser.add_argument("--parse-code", metavar="FILE", help="Preview bitmap source code instead of converting")
    parser.add_argument(
        "--auto-size",
        action="store_true",
        help="With --parse-code: infer dimensions from the code and byte count",
    )
    parser.add_argument("--expect-bytes", type=_positive, help="With --parse-code: minimum byte count")
    parser.add_argument("--list-sizes", action="store_true", help="List known display sizes and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def list_sizes() -> int:
    registry = DisplaySizeRegistry.load()
    for size in registry.sizes:
        print(f"{size.name}: {size.label} ({size.byte_count} bytes)")
    return 0


def _colors(args: argparse.Namespace) -> PreviewColors:
    return PAPER_COLORS if args.paper else DEFAULT_COLORS


def _write_text(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)


def convert_image(args: argparse.Namespace) -> int:
    settings = ConvertSettings(
        strategy=DitherStrategy.parse(args.dither),
        threshold=args.threshold,
        invert=args.invert,
        width=args.width or PRIMARY_DISPLAY.width,
        height=args.height or PRIMARY_DISPLAY.height,
        name=args.name,
    )
    bitmap = BitmapJobBuilder(settings).build_from_file(args.path)
    logger.info("Converted %s to %d bytes", args.path, len(bitmap.data))
    wrote = False
    if args.header:
        path = header_filename(bitmap.name) if args.header == "-" else args.header
        _write_text(path, bitmap.arduino_source())
        wrote = True
    if args.raw:
        _write_text(args.raw, bitmap.hex_dump())
        wrote = True
    if args.png:
        path = preview_filename(bitmap.name, bitmap.width, bitmap.height) if args.png == "-" else args.png
        save_preview(bitmap.preview(_colors(args)), path)
        wrote = True
    if not wrote:
        print(bitmap.arduino_source())
    return 0


def _parse_request(args: argparse.Namespace, text: str) -> ParseResult:
    if args.width and args.height:
        min_bytes = args.expect_bytes or (args.width + 7) // 8 * args.height
        return parse_code(text, args.width, args.height, min_bytes)
    if args.auto_size:
        return parse_code(text, min_bytes=args.expect_bytes)
    min_bytes = args.expect_bytes or PRIMARY_DISPLAY.byte_count
    return parse_code(text, PRIMARY_DISPLAY.width, PRIMARY_DISPLAY.height, min_bytes)


def preview_code(args: argparse.Namespace) -> int:
    with open(args.parse_code, "r", encoding="utf-8", errors="replace") as handle:
        text = handle.read()
    result = _parse_request(args, text)
    if not result.ok:
        print(result.error.message, file=sys.stderr)
        return 2
    path = args.png if args.png not in (None, "-") else preview_filename(result.name, result.width, result.height)
    save_preview(result.preview(_colors(args)), path)
    print(f"{result.name}: {result.width}x{result.height}, {len(result.data)} bytes -> {path}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    if args.list_sizes:
        return list_sizes()
    if args.path and args.parse_code:
        print("Provide either an image path or --parse-code, not both. Use --help for usage.", file=sys.stderr)
        return 2
    if bool(args.width) != bool(args.height):
        print("--width and --height must be given together.", file=sys.stderr)
        return 2
    try:
        if args.parse_code:
            return preview_code(args)
        if not args.path:
            print("Missing image path or --parse-code. Use --help for usage.", file=sys.stderr)
            return 2
        return convert_image(args)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
