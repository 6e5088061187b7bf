"""
ghostty-themes - Browse installed Ghostty themes and apply one.

- Theme files parsed into a flat color record
- Theme directory autodetection (app bundle, system and user paths)
- Config update that rewrites only the theme directive
- Ghostty reload through macOS UI scripting
- Scripting API and click CLI
"""

__version__ = "0.1.0"

from .errors import (
    GhosttyThemesError,
    ThemeDirectoryError,
    ThemeNotFoundError,
    ThemeFileError,
    ConfigWriteError,
    ReloadError,
)
from .theme.engine import Theme, ThemeColors, ThemeEngine, parse_theme_file
from .ghostty.updater import ConfigUpdater, ApplyResult, rewrite_theme_directive
from .ghostty.reload import ReloadController, AppleScriptReloader, NullReloader

__all__ = [
    # Errors
    "GhosttyThemesError",
    "ThemeDirectoryError",
    "ThemeNotFoundError",
    "ThemeFileError",
    "ConfigWriteError",
    "ReloadError",
    # Themes
    "Theme",
    "ThemeColors",
    "ThemeEngine",
    "parse_theme_file",
    # Config
    "ConfigUpdater",
    "ApplyResult",
    "rewrite_theme_directive",
    # Reload
    "ReloadController",
    "AppleScriptReloader",
    "NullReloader",
]
