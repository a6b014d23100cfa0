import pytest
from PIL import Image

from watchyconv.codec import DitherStrategy, Raster
from watchyconv.errors import InsufficientBytes
from watchyconv.export import format_arduino_array
from watchyconv.job import BitmapJobBuilder, ConvertSettings, decode_source, parse_code


def test_build_from_raster():
    settings = ConvertSettings(strategy=DitherStrategy.THRESHOLD, width=16, height=8, name="Tile")
    bitmap = BitmapJobBuilder(settings).build_from_raster(Raster.blank(16, 8, 255))
    assert bitmap.data == b"\xff" * 16
    assert bitmap.name == "tile"
    assert bitmap.arduino_source().startswith("// 'tile', 16x8px\n")
    assert bitmap.hex_dump().split() == ["ff"] * 16


def test_build_from_file_fits_to_target(tmp_path):
    path = tmp_path / "Night Sky.png"
    Image.new("RGB", (400, 300), "black").save(path)
    bitmap = BitmapJobBuilder().build_from_file(str(path))
    assert (bitmap.width, bitmap.height) == (200, 200)
    assert bitmap.data == b"\x00" * 5000
    assert bitmap.name == "night_sky"
    assert bitmap.preview().size == (200, 200)


def test_transparent_pixels_become_white(tmp_path):
    path = tmp_path / "clear.png"
    Image.new("RGBA", (50, 50), (0, 0, 0, 0)).save(path)
    settings = ConvertSettings(width=48, height=48)
    bitmap = BitmapJobBuilder(settings).build_from_file(str(path))
    assert bitmap.data == b"\xff" * 288


def test_unsupported_extension(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("hello", encoding="utf-8")
    with pytest.raises(ValueError):
        BitmapJobBuilder().build_from_file(str(path))


def test_parse_code_round_trip():
    data = bytes((i * 13) % 256 for i in range(5000))
    text = format_arduino_array(data, "face", 200, 200)
    result = parse_code(text, 200, 200, min_bytes=5000)
    assert result.ok
    assert result.data == data
    assert result.name == "face"
    assert result.preview().getpixel((0, 0)) == (0, 0, 0)


def test_parse_code_truncates_long_input():
    text = "{" + ", ".join(["0xff"] * 5100) + "}"
    result = parse_code(text, 200, 200, min_bytes=5000)
    assert len(result.data) == 5000
    assert result.name == "parsed_image"


def test_parse_code_reports_short_input():
    result = parse_code("{0x00, 0x01}", 200, 200, min_bytes=5000)
    assert not result.ok
    assert result.error_info() == {
        "kind": "InsufficientBytes",
        "message": "Not enough data: found 2 bytes, expected 5000 bytes for a 200x200 image.",
    }
    with pytest.raises(InsufficientBytes) as info:
        decode_source("{0x00, 0x01}", 200, 200, min_bytes=5000)
    assert (info.value.found, info.value.expected) == (2, 5000)


@pytest.mark.parametrize(
    "text, kind",
    [
        ("   ", "EmptyInput"),
        ("0x00 0x01", "NoArrayFound"),
        ("int main() { return x; }", "NoLiteralsFound"),
    ],
)
def test_parse_code_errors(text, kind):
    result = parse_code(text)
    assert not result.ok
    assert result.error.kind == kind
    with pytest.raises(ValueError):
        result.preview()


def test_parse_code_infers_size():
    text = "// 'dot', 16x16px\nconst unsigned char dot[] = {" + ", ".join(["0x00"] * 32) + "};"
    result = parse_code(text)
    assert (result.width, result.height) == (16, 16)
    assert result.name == "dot"
