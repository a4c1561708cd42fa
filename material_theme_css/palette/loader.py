import json

SCHEMES = ("light", "dark")


class ThemeFormatError(ValueError):
    """Raised when a theme JSON document does not have the expected shape."""


def load_theme_from_json(json_path):
    """Load the light and dark color schemes from a Material theme JSON file.

    Args:
        json_path: Path to the theme JSON file

    Returns:
        dict: {"light": {role: hex}, "dark": {role: hex}}, roles in file order
    """
    with open(json_path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ThemeFormatError(f"{json_path}: expected a JSON object at the top level")

    schemes = {}
    for name in SCHEMES:
        # A missing scheme just produces no declarations
        scheme = data.get(name, {})
        if not isinstance(scheme, dict):
            raise ThemeFormatError(f"{json_path}: '{name}' must be an object of role colors")
        schemes[name] = scheme

    return schemes
