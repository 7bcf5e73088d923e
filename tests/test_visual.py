import pytest

from sotile.visual import good_color, rgb_shifts

RGB888 = (0xFF0000, 0x00FF00, 0x0000FF)
RGB565 = (0xF800, 0x07E0, 0x001F)


def color_map(x, y, w, h, kind=1):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def test_shifts_for_24_bit_masks():
    assert rgb_shifts(*RGB888) == (16, 8, 8, 8, 0, 8)


def test_shifts_for_16_bit_masks():
    assert rgb_shifts(*RGB565) == (11, 5, 5, 6, 0, 5)


def test_zero_mask_is_rejected():
    with pytest.raises(ValueError):
        rgb_shifts(0, 0x00FF00, 0x0000FF)


@pytest.mark.parametrize("depth", [24, 32])
def test_deep_visual_keeps_colour(depth):
    shifts = rgb_shifts(*RGB565)
    assert good_color(0xFF99FF, depth, shifts) == 0xFF99FF
    assert good_color(0x00FFFF, depth, shifts) == 0x00FFFF


def test_white_on_565():
    assert good_color(0xFFFFFF, 16, rgb_shifts(*RGB565)) == 0xFFFF


def test_black_on_565():
    assert good_color(0, 16, rgb_shifts(*RGB565)) == 0


def test_pure_channels_on_565():
    shifts = rgb_shifts(*RGB565)
    assert good_color(0xFF0000, 16, shifts) == 0xF800
    assert good_color(0x00FF00, 16, shifts) == 0x07E0
    assert good_color(0x0000FF, 16, shifts) == 0x001F


@pytest.mark.parametrize("kind", [1, 2])
@pytest.mark.parametrize("w,h", [(42, 42), (242, 242)])
def test_888_layout_at_low_depth_is_identity(kind, w, h):
    shifts = rgb_shifts(*RGB888)
    for x in range(0, w, 7):
        for y in range(0, h, 11):
            color = color_map(x, y, w, h, kind)
            assert good_color(color, 16, shifts) == color


def test_565_result_fits_mask():
    shifts = rgb_shifts(*RGB565)
    for x in range(0, 242, 13):
        for y in range(0, 242, 17):
            pixel = good_color(color_map(x, y, 242, 242), 16, shifts)
            assert 0 <= pixel <= 0xFFFF