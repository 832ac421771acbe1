"""Colour conversion for display visuals and local-display detection."""

from __future__ import annotations

__all__ = ["channel_shifts", "rgb_to_pixel", "display_is_local"]

_LOCALHOST = "localhost"
# Longest host name taken into account when matching a display name.
_HOSTNAME_LIMIT = 32


def _mask_layout(mask, channel):
    if mask <= 0:
        raise ValueError(f"{channel} mask must be a positive bit mask, got {mask!r}")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


def channel_shifts(red_mask, green_mask, blue_mask):
    """Return (red shift, red bits, green shift, green bits, blue shift, blue bits).

    Each shift is the position of a mask's lowest set bit and each bit count
    the length of the run of ones starting there. A zero mask raises
    ValueError.
    """
    return (
        *_mask_layout(red_mask, "red"),
        *_mask_layout(green_mask, "green"),
        *_mask_layout(blue_mask, "blue"),
    )


def rgb_to_pixel(color, depth, shifts):
    """Convert 0xRRGGBB into a pixel value for a visual.

    Visuals of depth 24 or more take the colour as it is; shallower ones
    keep the top bits of each channel and move them to the place the
    ``shifts`` from channel_shifts give.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )


def display_is_local(display, hostname):
    """Tell whether a display name refers to this machine.

    An unset or empty name, one starting with ':', one starting with the
    host name, or one starting with "localhost" counts as local.
    """
    if not display or display.startswith(":"):
        return True
    hostname = hostname[:_HOSTNAME_LIMIT]
    return display.startswith(hostname) or display.startswith(_LOCALHOST)