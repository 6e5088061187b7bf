"""
Exceptions raised by ghostty_themes.
"""


class GhosttyThemesError(Exception):
    """Base class for all ghostty_themes errors."""
    pass


class ThemeDirectoryError(GhosttyThemesError):
    """The theme directory could not be read."""
    pass


class ThemeNotFoundError(GhosttyThemesError):
    """No installed theme has the requested name."""
    pass


class ConfigWriteError(GhosttyThemesError):
    """The Ghostty config file could not be read or written."""
    pass


class ReloadError(GhosttyThemesError):
    """Ghostty could not be asked to reload its configuration."""
    pass


class ThemeFileError(GhosttyThemesError):
    """An exported theme file could not be read."""
    pass
