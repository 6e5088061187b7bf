"""Ghostty config editing and reload."""

from .reload import ReloadController, AppleScriptReloader, NullReloader
from .updater import ConfigUpdater, ApplyResult, rewrite_theme_directive, read_theme_directive

__all__ = [
    "ReloadController",
    "AppleScriptReloader",
    "NullReloader",
    "ConfigUpdater",
    "ApplyResult",
    "rewrite_theme_directive",
    "read_theme_directive",
]
