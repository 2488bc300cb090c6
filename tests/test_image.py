import pytest

from solong.image import TRANSPARENT, Image, good_color, rgb_to_int


def _color_map(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def test_new_image_geometry():
    img = Image(42, 42)
    assert img.bpp == 32
    assert img.size_line == 42 * img.bpp // 8
    assert img.endian == 0
    assert len(img.data) == img.size_line * 42


def test_new_image_is_black():
    img = Image(3, 2)
    assert all(img.get_pixel(x, y) == 0 for x in range(3) for y in range(2))


@pytest.mark.parametrize("size,kind", [(42, 1), (242, 1), (242, 2)])
def test_fill_and_read_back_color_map(size, kind):
    img = Image(size, size)
    for y in range(size):
        for x in range(size):
            img.put_pixel(x, y, good_color(_color_map(x, y, size, size, kind), 24, ()))
    for y in range(0, size, 7):
        for x in range(0, size, 5):
            assert img.get_pixel(x, y) == _color_map(x, y, size, size, kind)


def test_pixel_bytes_are_little_endian():
    img = Image(2, 2)
    img.put_pixel(1, 1, 0x11223344)
    offset = 1 * 4 + 1 * img.size_line
    assert img.data[offset:offset + 4] == bytes([0x44, 0x33, 0x22, 0x11])


def test_put_pixel_keeps_low_32_bits():
    img = Image(1, 1)
    img.put_pixel(0, 0, -1)
    assert img.get_pixel(0, 0) == 0xFFFFFFFF


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_pixel_out_of_range(x, y):
    img = Image(4, 3)
    with pytest.raises(IndexError):
        img.get_pixel(x, y)
    with pytest.raises(IndexError):
        img.put_pixel(x, y, 1)


def test_invalid_size():
    with pytest.raises(ValueError):
        Image(0, 5)


def test_rgb_to_int():
    assert rgb_to_int(0, 255, 255, 255) == 0xFFFFFF
    assert rgb_to_int(0, 255, 255, 255) == TRANSPARENT
    assert rgb_to_int(255, 0, 0, 0) == 0xFF000000
    assert rgb_to_int(0, 0x12, 0x34, 0x56) == 0x123456


def test_good_color_deep_display_is_identity():
    assert good_color(0xFF99FF, 24, (0, 8, 8, 8, 16, 8)) == 0xFF99FF
    assert good_color(0x00FFFF, 32, ()) == 0x00FFFF


def test_good_color_rgb565():
    shifts = (11, 5, 5, 6, 0, 5)
    assert good_color(0xFFFFFF, 16, shifts) == 0xFFFF
    assert good_color(0xFF0000, 16, shifts) == 0xF800
    assert good_color(0x000000, 16, shifts) == 0


def test_good_color_needs_six_shifts():
    with pytest.raises(ValueError):
        good_color(0x123456, 16, (1, 2))


def test_draw_square_skips_transparent():
    tile = Image(40, 40)
    for y in range(40):
        for x in range(40):
            tile.put_pixel(x, y, TRANSPARENT if (x + y) % 2 else 0xFF0000)
    canvas = Image(80, 80)
    canvas.put_pixel(41, 40, 0x00FF00)
    canvas.draw_square(tile, 40, 40)
    assert canvas.get_pixel(40, 40) == 0xFF0000
    assert canvas.get_pixel(41, 40) == 0x00FF00
    assert canvas.get_pixel(79, 79) == 0xFF0000
    assert canvas.get_pixel(39, 39) == 0


def test_draw_square_clips_at_edges():
    tile = Image(40, 40)
    for y in range(40):
        for x in range(40):
            tile.put_pixel(x, y, 0x0000FF)
    canvas = Image(50, 50)
    canvas.draw_square(tile, 30, 30)
    assert canvas.get_pixel(49, 49) == 0x0000FF
    assert canvas.get_pixel(29, 29) == 0