from .css_export import DEFAULT_SKIP_ROLES, build_theme_css, default_output_path, export_css

__all__ = ["DEFAULT_SKIP_ROLES", "build_theme_css", "default_output_path", "export_css"]
