"""
ghostty_themes/scripting/api.py

Scripting API for ghostty-themes - usable from IPython or the CLI.
"""

from __future__ import annotations
import fnmatch
import logging
from pathlib import Path
from typing import Optional, List, Dict, Any

import yaml

from ..config import SettingsManager, get_settings_manager
from ..errors import ThemeNotFoundError, ThemeFileError
from ..ghostty.reload import ReloadController, AppleScriptReloader
from ..ghostty.updater import ConfigUpdater, ApplyResult
from ..theme.engine import Theme, ThemeEngine
from ..theme.paths import candidate_theme_dirs, resolve_themes_dir, resolve_config_path

logger = logging.getLogger(__name__)


class ThemesAPI:
    """
    Scripting interface for ghostty-themes.

    Usage:
        api = ThemesAPI()

        # List and search themes
        api.themes()
        api.themes("Gruvbox*")
        api.search("dark")
        api.theme("Dracula")

        # Apply (rewrites the Ghostty config, reloads Ghostty)
        api.apply("Dracula")
        api.current_theme()
    """

    def __init__(
        self,
        themes_dir: Path = None,
        config_path: Path = None,
        reloader: ReloadController = None,
        settings_manager: SettingsManager = None,
    ):
        self._settings_manager = settings_manager or get_settings_manager()
        settings = self._settings_manager.settings

        self._configured_themes_dir = themes_dir or settings.themes_dir
        self.themes_dir = resolve_themes_dir(self._configured_themes_dir)
        self.config_path = resolve_config_path(config_path or settings.config_path)

        self._engine = ThemeEngine(self.themes_dir)
        self._updater = ConfigUpdater(
            self.config_path,
            reloader or AppleScriptReloader(settings.app_name, settings.reload_menu_item),
            skip_reload_when_not_running=settings.skip_reload_when_not_running,
        )

    # -------------------------------------------------------------------------
    # Listing
    # -------------------------------------------------------------------------

    def themes(self, pattern: str = None) -> List[Theme]:
        """
        List installed themes.

        Args:
            pattern: Optional glob pattern to filter by name (e.g., "Gruvbox*")

        Returns:
            Themes sorted by name

        Raises:
            ThemeDirectoryError: If the theme directory cannot be read
        """
        themes = self._engine.themes()
        if pattern:
            themes = [t for t in themes if fnmatch.fnmatch(t.name, pattern)]
        return themes

    def search(self, query: str) -> List[Theme]:
        """Themes whose name contains query (case-insensitive)."""
        return self._engine.search(query)

    def theme(self, name: str) -> Optional[Theme]:
        """Get a specific theme by name."""
        return self._engine.get_theme(name)

    def require_theme(self, name: str) -> Theme:
        """Like theme(), but raises ThemeNotFoundError for unknown names."""
        theme = self.theme(name)
        if theme is None:
            raise ThemeNotFoundError(f"Theme '{name}' not found in {self.themes_dir}")
        return theme

    def load_exported(self, path: Path) -> Theme:
        """
        Read a theme written by export.

        Raises:
            ThemeFileError: If the file is missing or not an exported theme
        """
        try:
            return Theme.load(path)
        except (OSError, yaml.YAMLError, KeyError, TypeError, AttributeError) as e:
            raise ThemeFileError(f"Cannot read exported theme {path}: {e}") from e

    # -------------------------------------------------------------------------
    # Applying
    # -------------------------------------------------------------------------

    def current_theme(self) -> Optional[str]:
        """Theme selected in the Ghostty config file."""
        return self._updater.current_theme()

    def apply(self, name: str) -> ApplyResult:
        """
        Select a theme in the Ghostty config and reload Ghostty.

        Raises:
            ConfigWriteError: If the config file could not be written
            ReloadError: If Ghostty is running but could not be reloaded
        """
        result = self._updater.apply(name)

        settings = self._settings_manager.settings
        settings.add_recent_theme(name)
        self._settings_manager.save()

        logger.info(f"Applied theme {name}")
        return result

    def recent(self) -> List[str]:
        """Recently applied themes, newest first."""
        return list(self._settings_manager.settings.recent_themes)

    # -------------------------------------------------------------------------
    # Info
    # -------------------------------------------------------------------------

    def paths(self) -> Dict[str, Any]:
        """Where themes and config are looked for."""
        return {
            "candidates": [str(p) for p in candidate_theme_dirs(self._configured_themes_dir)],
            "themes_dir": str(self.themes_dir),
            "config_path": str(self.config_path),
            "settings_path": str(self._settings_manager.config_path),
        }

    def status(self) -> Dict[str, Any]:
        """Summary of the current state."""
        return {
            "themes_dir": str(self.themes_dir),
            "themes_dir_exists": self.themes_dir.exists(),
            "themes": len(self.themes()) if self.themes_dir.exists() else 0,
            "config_path": str(self.config_path),
            "config_exists": self.config_path.exists(),
            "current_theme": self.current_theme(),
            "recent_themes": self.recent(),
        }

    def __repr__(self) -> str:
        return f"<ThemesAPI themes_dir={self.themes_dir} config={self.config_path}>"

    def help(self) -> None:
        """Show available commands."""
        print("""
ghostty-themes Scripting API

Listing:
  api.themes(pattern=None)    List installed themes (glob filter)
  api.search(query)           Themes whose name contains query
  api.theme(name)             Get a specific theme
  api.require_theme(name)     Same, raising ThemeNotFoundError
  api.load_exported(path)      Theme from a YAML file written by export

Applying:
  api.apply(name)             Set theme in Ghostty config and reload
  api.current_theme()         Theme selected in the Ghostty config
  api.recent()                Recently applied themes

Info:
  api.paths()                 Candidate theme dirs and config location
  api.status()                Summary

Examples:
  for t in api.search("gruvbox"):
      print(t.name, t.colors.background)

  api.apply("Dracula")
""")


# Singleton for convenience in IPython
_default_api: Optional[ThemesAPI] = None


def get_api() -> ThemesAPI:
    """Get or create default API instance."""
    global _default_api
    if _default_api is None:
        _default_api = ThemesAPI()
    return _default_api


def reset_api() -> ThemesAPI:
    """Reset and return fresh API instance."""
    global _default_api
    _default_api = ThemesAPI()
    return _default_api
