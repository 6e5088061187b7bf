"""
ghostty_themes.scripting - Scripting API for ghostty-themes

Quick Start (IPython):
    from ghostty_themes.scripting import get_api
    api = get_api()

    api.themes()                 # List installed themes
    api.search("gruvbox")        # Search themes
    api.apply("Dracula")         # Apply and reload Ghostty

    api.help()                   # Show all commands
"""

from .api import ThemesAPI, get_api, reset_api

__all__ = [
    "ThemesAPI",
    "get_api",
    "reset_api",
]
