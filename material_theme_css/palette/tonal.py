import sys

from .scale import ColorScale

SHADES = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

LIGHT_ENDPOINT = "#ffffff"
DARK_ENDPOINT = "#09090b"

# Trim the near-base and near-black ends of the darkening scale
DARK_PADDING = (0.1, 0.25)


def create_tonal_palette(base_hex):
    """Generate an 11 shade tonal palette with ``base_hex`` as shade 100.

    Shade 50 is halfway between white and the base in LCh. Shades 200-950
    walk from the base towards near-black, skipping the first sample.

    Args:
        base_hex: Base hex color, used verbatim as shade 100

    Returns:
        dict mapping shade number to hex string, or None if the base color
        could not be parsed
    """
    try:
        lighter = ColorScale([LIGHT_ENDPOINT, base_hex], mode="lch").colors(3)[1]
        darker = ColorScale(
            [base_hex, DARK_ENDPOINT], mode="lch", padding=DARK_PADDING
        ).colors(10)[1:]
    except (TypeError, ValueError) as e:
        print(f"Error generating palette for {base_hex}: {e}", file=sys.stderr)
        return None

    generated = [lighter, base_hex, *darker]
    return dict(zip(SHADES, generated))
