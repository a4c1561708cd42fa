from .loader import ThemeFormatError, load_theme_from_json
from .scale import ColorScale
from .tonal import SHADES, create_tonal_palette

__all__ = [
    "ColorScale",
    "SHADES",
    "ThemeFormatError",
    "create_tonal_palette",
    "load_theme_from_json",
]
