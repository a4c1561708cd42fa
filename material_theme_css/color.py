import re

import numpy as np
from skimage.color import rgb2lab

BLACK_RGB = (0, 0, 0)

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def parse_hex(hex_color):
    """Parse a 3 or 6 digit hex color (``#`` optional) into an RGB tuple.

    Raises:
        TypeError: if ``hex_color`` is not a string
        ValueError: if it is not a 3 or 6 digit hex color
    """
    if not isinstance(hex_color, str):
        raise TypeError(f"Expected a hex color string, got {type(hex_color).__name__}")

    digits = hex_color[1:] if hex_color.startswith("#") else hex_color
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) != 6 or not _HEX_DIGITS.fullmatch(digits):
        raise ValueError(f"Unknown hex color: {hex_color!r}")

    return tuple(int(digits[i : i + 2], 16) for i in (0, 2, 4))


def hex_to_rgb(hex_color):
    """Convert a hex color to an (r, g, b) tuple, falling back to black.

    Malformed values (wrong length, non-hex digits, empty or non-string
    input) map to (0, 0, 0) instead of raising.
    """
    if not hex_color:
        return BLACK_RGB
    try:
        return parse_hex(hex_color)
    except (TypeError, ValueError):
        return BLACK_RGB


def hex_to_rgb_values(hex_color):
    """Format a hex color as the CSS component string ``"R, G, B"``."""
    r, g, b = hex_to_rgb(hex_color)
    return f"{r}, {g}, {b}"


def rgb_to_hex(r, g, b):
    return f"#{r:02x}{g:02x}{b:02x}"


def lch_lightness(hex_color):
    """CIE L* (0-100) of a hex color"""
    rgb = np.array([parse_hex(hex_color)], dtype=float) / 255
    return float(rgb2lab(rgb)[0, 0])
