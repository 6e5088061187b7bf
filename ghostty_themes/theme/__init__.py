"""Theme parsing and discovery."""

from .engine import Theme, ThemeColors, ThemeEngine, parse_theme_file
from .paths import candidate_theme_dirs, resolve_themes_dir, resolve_config_path

__all__ = [
    "Theme",
    "ThemeColors",
    "ThemeEngine",
    "parse_theme_file",
    "candidate_theme_dirs",
    "resolve_themes_dir",
    "resolve_config_path",
]
