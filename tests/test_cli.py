from PIL import Image

from watchyconv.cli import main
from watchyconv.export import format_arduino_array


def test_list_sizes(capsys):
    assert main(["--list-sizes"]) == 0
    assert "watchy: 200x200 (5000 bytes)" in capsys.readouterr().out


def test_convert_prints_source(tmp_path, capsys):
    path = tmp_path / "dark.png"
    Image.new("L", (20, 20), 0).save(path)
    assert main([str(path), "--dither", "ordered", "--width", "16", "--height", "16"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("// 'dark', 16x16px\nconst unsigned char dark[] PROGMEM = {")


def test_convert_writes_outputs(tmp_path):
    path = tmp_path / "face.png"
    Image.new("RGB", (200, 200), "white").save(path)
    header = tmp_path / "out.h"
    raw = tmp_path / "out.txt"
    png = tmp_path / "out.png"
    code = main([str(path), "--invert", "--header", str(header), "--raw", str(raw), "--png", str(png)])
    assert code == 0
    assert "0x00" in header.read_text(encoding="utf-8")
    assert raw.read_text(encoding="utf-8").split() == ["00"] * 5000
    with Image.open(png) as img:
        assert img.size == (200, 200)


def test_parse_code_preview(tmp_path, capsys):
    source = tmp_path / "face.h"
    source.write_text(format_arduino_array([0xFF] * 5000, "face", 200, 200), encoding="utf-8")
    png = tmp_path / "face.png"
    assert main(["--parse-code", str(source), "--png", str(png)]) == 0
    assert "face: 200x200, 5000 bytes" in capsys.readouterr().out
    with Image.open(png) as img:
        assert img.convert("RGB").getpixel((199, 199)) == (255, 255, 255)


def test_parse_code_auto_size(tmp_path):
    source = tmp_path / "icon.h"
    source.write_text(format_arduino_array([0] * 32, "icon", 16, 16), encoding="utf-8")
    png = tmp_path / "icon.png"
    assert main(["--parse-code", str(source), "--auto-size", "--png", str(png)]) == 0
    with Image.open(png) as img:
        assert img.size == (16, 16)


def test_parse_code_short_input_fails(tmp_path, capsys):
    source = tmp_path / "short.h"
    source.write_text("const unsigned char s[] = { 0x00, 0x01 };", encoding="utf-8")
    assert main(["--parse-code", str(source), "--png", str(tmp_path / "s.png")]) == 2
    assert "found 2 bytes, expected 5000" in capsys.readouterr().err


def test_usage_errors(tmp_path, capsys):
    assert main([]) == 2
    assert main(["a.png", "--parse-code", "b.h"]) == 2
    assert main(["a.png", "--width", "16"]) == 2
    err = capsys.readouterr().err
    assert "Missing image path" in err
