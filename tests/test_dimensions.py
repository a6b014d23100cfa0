from watchyconv.codec import dimensions_from_hints, infer_dimensions
from watchyconv.displays import DisplaySize, DisplaySizeRegistry


def test_primary_size():
    assert infer_dimensions(5000) == (200, 200)
    assert infer_dimensions(5000, "const unsigned char x[] = {0x00};") == (200, 200)


def test_known_sizes():
    assert infer_dimensions(128) == (32, 32)
    assert infer_dimensions(1300) == (100, 100)
    assert infer_dimensions(288) == (48, 48)


def test_large_buffers_default_to_primary():
    assert infer_dimensions(6000) == (200, 200)


def test_square_fit():
    assert infer_dimensions(50) == (20, 20)


def test_fallback_never_fails():
    assert infer_dimensions(3) == (200, 200)
    assert infer_dimensions(0) == (200, 200)


def test_explicit_hints_win():
    assert infer_dimensions(5000, "// width: 64\n// height=32") == (64, 32)
    assert infer_dimensions(5000, "#define LOGO_WIDTH 40\n#define LOGO_HEIGHT 20\n") == (40, 20)


def test_size_pair_hint():
    assert dimensions_from_hints("// 'logo', 48x24px") == (48, 24)
    assert dimensions_from_hints("icon 16 x 8") == (16, 8)


def test_hex_literals_are_not_size_hints():
    assert dimensions_from_hints("{ 0x10, 0x20, 0x0 }") is None


def test_width_without_height_is_ignored():
    assert dimensions_from_hints("width: 64") is None


def test_custom_registry():
    registry = DisplaySizeRegistry([DisplaySize("strip", 16, 4)])
    assert infer_dimensions(8, registry=registry) == (16, 4)
