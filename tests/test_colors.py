import pytest

from fractview.colors import Palette, channel_shifts, good_color


def test_inside_color_is_fixed():
    palette = Palette()
    assert palette.color(10, 10) == 0xFF508C7D
    assert palette.alpha == 255


def test_inside_color_independent_of_limit():
    palette = Palette()
    assert palette.color(3, 3) == palette.color(500, 500)


def test_escaped_color_lowers_alpha():
    palette = Palette()
    palette.color(10, 10)
    before = palette.alpha
    result = palette.color(3, 10)
    assert palette.alpha == before - 5
    assert (result >> 24) & 0xFF == palette.alpha


def test_escaped_color_blue_channel_is_iterations():
    palette = Palette()
    palette.color(20, 20)
    result = palette.color(7, 20)
    assert result & 0xFF == 7


def test_colors_are_32_bit_unsigned():
    palette = Palette()
    for iterations in range(0, 60):
        value = palette.color(iterations, 100)
        assert 0 <= value <= 0xFFFFFFFF


def test_inside_resets_alpha_after_escapes():
    palette = Palette()
    first = palette.color(5, 5)
    for _ in range(10):
        palette.color(1, 5)
    assert palette.color(5, 5) == first


def test_channel_shifts_truecolor():
    assert channel_shifts(0xFF0000, 0x00FF00, 0x0000FF) == (16, 8, 8, 8, 0, 8)


def test_channel_shifts_rejects_empty_mask():
    with pytest.raises(ValueError):
        channel_shifts(0, 0xFF00, 0xFF)


def test_good_color_deep_visual_is_identity():
    shifts = channel_shifts(0xFF0000, 0x00FF00, 0x0000FF)
    assert good_color(0x123456, 24, shifts) == 0x123456
    assert good_color(0xABCDEF, 32, shifts) == 0xABCDEF


def test_good_color_pure_channels_fill_masks():
    masks = (0xF800, 0x07E0, 0x001F)
    shifts = channel_shifts(*masks)
    assert good_color(0xFF0000, 16, shifts) == masks[0]
    assert good_color(0x00FF00, 16, shifts) == masks[1]
    assert good_color(0x0000FF, 16, shifts) == masks[2]
    assert good_color(0xFFFFFF, 16, shifts) == masks[0] | masks[1] | masks[2]


def test_good_color_black_is_zero():
    shifts = channel_shifts(0xF800, 0x07E0, 0x001F)
    assert good_color(0, 16, shifts) == 0


def test_good_color_rejects_bad_shifts():
    with pytest.raises(ValueError):
        good_color(0xFFFFFF, 16, (1, 2, 3))