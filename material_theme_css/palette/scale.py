import math

import numpy as np
from skimage.color import lab2rgb, rgb2lab

from ..color import parse_hex, rgb_to_hex

# skimage's sRGB matrix and D65 white disagree slightly, so white and greys
# land a few thousandths off the neutral axis
ACHROMATIC_CHROMA = 1e-2


def hex_to_lch(hex_color):
    """Convert a hex color to CIE LCh (D65).

    Returns:
        tuple: (lightness, chroma, hue). Hue is NaN for achromatic colors.
    """
    rgb = np.array([parse_hex(hex_color)], dtype=float) / 255
    lightness, a, b = (float(v) for v in rgb2lab(rgb)[0])
    chroma = math.hypot(a, b)
    if chroma < ACHROMATIC_CHROMA:
        hue = math.nan
    else:
        hue = math.degrees(math.atan2(b, a)) % 360
    return lightness, chroma, hue


def _interpolate_hue(hue0, hue1, t):
    """Interpolate hue along the shortest arc; NaN hues borrow the other stop's"""
    if math.isnan(hue0) and math.isnan(hue1):
        return np.zeros_like(t)
    if math.isnan(hue0):
        return np.full_like(t, hue1)
    if math.isnan(hue1):
        return np.full_like(t, hue0)

    dh = hue1 - hue0
    if dh > 180:
        dh -= 360
    elif dh < -180:
        dh += 360
    return hue0 + t * dh


class ColorScale:
    """Two-stop color scale interpolated in CIE LCh.

    Args:
        colors: (start, end) hex colors
        mode: interpolation space; only "lch" is supported
        padding: (left, right) fractions of the scale to cut off each end
    """

    def __init__(self, colors, mode="lch", padding=(0, 0)):
        if mode != "lch":
            raise ValueError(f"Unsupported interpolation mode: {mode}")
        if len(colors) != 2:
            raise ValueError("A color scale needs exactly two colors")
        self.start = hex_to_lch(colors[0])
        self.end = hex_to_lch(colors[1])
        self.padding = padding

    def _positions(self, n):
        left, right = self.padding
        t = np.linspace(0.0, 1.0, n) if n > 1 else np.zeros(1)
        return left + t * (1 - left - right)

    def colors(self, n):
        """Sample ``n`` evenly spaced colors along the scale as hex strings."""
        t = self._positions(n)
        l0, c0, h0 = self.start
        l1, c1, h1 = self.end

        lightness = l0 + t * (l1 - l0)
        chroma = c0 + t * (c1 - c0)
        hue = np.radians(_interpolate_hue(h0, h1, t))

        lab = np.stack(
            [lightness, chroma * np.cos(hue), chroma * np.sin(hue)], axis=-1
        )
        rgb = np.clip(lab2rgb(lab), 0, 1)
        rgb = np.floor(rgb * 255 + 0.5).astype(int)
        return [rgb_to_hex(*(int(c) for c in row)) for row in rgb]
