import pytest

from fractview.colors import channel_shifts, good_color
from fractview.image import Image

IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242


def color_map(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def fill(image, kind):
    shifts = channel_shifts(0xFF0000, 0x00FF00, 0x0000FF)
    for y in range(image.height):
        for x in range(image.width):
            image.put_pixel(x, y, good_color(color_map(x, y, image.width, image.height, kind), 24, shifts))


@pytest.mark.parametrize("width,height", [(IM1_SX, IM1_SY), (IM3_SX, IM3_SY)])
def test_new_image_layout(width, height):
    image = Image(width, height)
    assert image.bits_per_pixel == 32
    assert image.size_line == width * 4
    assert image.endian == 0
    assert len(image.data) == image.size_line * height
    assert not any(image.data)


@pytest.mark.parametrize("kind", [1, 2])
def test_color_map_round_trip(kind):
    image = Image(IM1_SX, IM1_SY)
    fill(image, kind)
    for y in range(IM1_SY):
        for x in range(IM1_SX):
            assert image.get_pixel(x, y) == color_map(x, y, IM1_SX, IM1_SY, kind)


def test_little_endian_byte_layout():
    image = Image(IM1_SX, IM1_SY)
    fill(image, 1)
    x, y = 20, 20
    color = color_map(x, y, IM1_SX, IM1_SY, 1)
    offset = y * image.size_line + x * 4
    assert image.data[offset] == color & 0xFF
    assert image.data[offset + 1] == (color >> 8) & 0xFF
    assert image.data[offset + 2] == (color >> 16) & 0xFF


def test_put_pixel_keeps_low_32_bits():
    image = Image(3, 3)
    image.put_pixel(1, 1, -1)
    assert image.get_pixel(1, 1) == 0xFFFFFFFF
    image.put_pixel(2, 2, 0x1_2345_6789)
    assert image.get_pixel(2, 2) == 0x2345_6789


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (IM1_SX, 0), (0, IM1_SY)])
def test_out_of_range_pixels(x, y):
    image = Image(IM1_SX, IM1_SY)
    with pytest.raises(IndexError):
        image.put_pixel(x, y, 0xFFFFFF)
    with pytest.raises(IndexError):
        image.get_pixel(x, y)


def test_invalid_size():
    with pytest.raises(ValueError):
        Image(0, 5)
    with pytest.raises(ValueError):
        Image(5, -1)


def test_clear():
    image = Image(IM1_SX, IM1_SY)
    fill(image, 1)
    image.clear()
    assert not any(image.data)
    assert len(image.data) == IM1_SX * IM1_SY * 4


def test_rows():
    image = Image(IM1_SX, IM1_SY)
    fill(image, 2)
    rows = list(image.rows())
    assert len(rows) == IM1_SY
    assert all(len(row) == image.size_line for row in rows)
    assert b"".join(rows) == bytes(image.data)


def test_to_rgb_bytes():
    image = Image(IM1_SX, IM1_SY)
    fill(image, 1)
    rgb = image.to_rgb_bytes()
    assert len(rgb) == IM1_SX * IM1_SY * 3
    for x, y in [(0, 0), (41, 0), (10, 30), (41, 41)]:
        color = color_map(x, y, IM1_SX, IM1_SY, 1)
        i = (y * IM1_SX + x) * 3
        assert tuple(rgb[i:i + 3]) == ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)