import os

from ..color import hex_to_rgb_values
from ..naming import role_label, to_kebab_case
from ..palette import create_tonal_palette

# Neutral and surface roles that don't get a tonal palette
DEFAULT_SKIP_ROLES = frozenset(
    {
        "background",
        "surface",
        "surfaceTint",
        "shadow",
        "scrim",
        "outline",
        "outlineVariant",
        "surfaceDim",
        "surfaceBright",
    }
)

RULE = "/* ================================================================== */"


def _scheme_lines(scheme, skip_roles, indent, registrations=None):
    """Build the custom property lines for one color scheme.

    Args:
        scheme: dict of role name to hex color
        skip_roles: roles that get no tonal palette
        indent: prefix for every declaration
        registrations: optional list that collects the matching @theme lines

    Returns:
        list of CSS lines
    """
    lines = []
    for role, color_hex in scheme.items():
        role_kebab = to_kebab_case(role)
        label = role_label(role_kebab)

        lines.append(f"\n{indent}/* --- {label} --- */")
        lines.append(
            f"{indent}--md-sys-color-{role_kebab}: {hex_to_rgb_values(color_hex)}; /* Locked Color */"
        )
        if registrations is not None:
            registrations.append(f"\n  /* {label} */")
            registrations.append(
                f"  --color-{role_kebab}: var(--md-sys-color-{role_kebab}); /* Locked Color */"
            )

        if role in skip_roles:
            continue
        palette = create_tonal_palette(color_hex)
        if palette is None:
            continue

        for shade, shade_hex in palette.items():
            name = f"{role_kebab}-{shade}"
            lines.append(f"{indent}--md-sys-color-{name}: {hex_to_rgb_values(shade_hex)};")
            if registrations is not None:
                registrations.append(f"  --color-{name}: var(--md-sys-color-{name});")

    return lines


def build_theme_css(schemes, skip_roles=DEFAULT_SKIP_ROLES):
    """Render light/dark color schemes as CSS RGB custom properties.

    The light scheme goes in ``:root``, the dark scheme in a
    ``prefers-color-scheme: dark`` media query, followed by a Tailwind v4
    ``@theme`` block registering the light scheme variables.

    Args:
        schemes: dict with "light" and "dark" role -> hex mappings
        skip_roles: roles that get no tonal palette

    Returns:
        The stylesheet text
    """
    registrations = ["@theme {"]

    output = [
        RULE,
        "/* MATERIAL DESIGN COLOR TOKENS (LIGHT & DARK)                  */",
        RULE + "\n",
        ":root {",
    ]
    output.extend(
        _scheme_lines(schemes.get("light", {}), skip_roles, "  ", registrations)
    )
    output.append("}\n")

    # Dark palettes reuse the light variable names, so @theme only registers light
    output.append("@media (prefers-color-scheme: dark) {")
    output.append("  :root {")
    output.extend(_scheme_lines(schemes.get("dark", {}), skip_roles, "    "))
    output.append("  }")
    output.append("}\n")

    registrations.append("}")

    output.extend(
        [
            RULE,
            "/* TOKEN REGISTRATION FOR TAILWIND v4 @theme                    */",
            RULE,
        ]
    )
    output.extend(registrations)
    return "\n".join(output)


def export_css(schemes, filepath, skip_roles=DEFAULT_SKIP_ROLES):
    """Write the theme stylesheet for ``schemes`` to ``filepath``."""
    css = build_theme_css(schemes, skip_roles=skip_roles)
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(css)


def default_output_path(input_path):
    """my-theme.json -> my-theme-rgb.css (in the current directory)"""
    name = os.path.basename(input_path)
    if name.endswith(".json") and name != ".json":
        name = name[: -len(".json")]
    return f"{name}-rgb.css"
