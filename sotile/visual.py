"""Pixel value conversion for TrueColor visuals of any depth."""

from __future__ import annotations

Shifts = tuple[int, int, int, int, int, int]


def _mask_shift(mask: int) -> tuple[int, int]:
    """Return (offset, width) of the contiguous run of set bits in a mask."""
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit field, got {mask:#x}")
    offset = (mask & -mask).bit_length() - 1
    mask >>= offset
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return offset, width


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> Shifts:
    """Return the bit offset and width of each channel mask.

    The result is (red offset, red width, green offset, green width,
    blue offset, blue width).
    """
    red = _mask_shift(red_mask)
    green = _mask_shift(green_mask)
    blue = _mask_shift(blue_mask)
    return (*red, *green, *blue)


def good_color(color: int, depth: int, shifts: Shifts) -> int:
    """Convert a 0xRRGGBB colour into a pixel value for the given visual.

    Visuals of depth 24 or more take the colour unchanged; shallower ones
    have each channel cut down to its mask width and moved to its offset.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts[1])) << shifts[0])
        + ((green >> (16 - shifts[3])) << shifts[2])
        + ((blue >> (16 - shifts[5])) << shifts[4])
    )