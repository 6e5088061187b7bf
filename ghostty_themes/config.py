"""
Persistent application settings for ghostty-themes.
Stored in ~/.ghostty-themes/config.json
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field, fields, asdict, MISSING
from pathlib import Path
from typing import Optional

from ghostty_themes.ghostty.reload import DEFAULT_APP_NAME, DEFAULT_MENU_ITEM

logger = logging.getLogger(__name__)

# Default config location
DEFAULT_CONFIG_DIR = Path.home() / ".ghostty-themes"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.json"


def _matches_default_type(value, default) -> bool:
    """Does value have the type implied by a field default?"""
    if default is None:
        # Optional path settings
        return value is None or isinstance(value, str)
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, int):
        return isinstance(value, int) and not isinstance(value, bool)
    if isinstance(default, list):
        return isinstance(value, list) and all(isinstance(v, str) for v in value)
    return isinstance(value, type(default))


@dataclass
class AppSettings:
    """
    Application settings that persist across runs.
    """
    # Locations (None = autodetect)
    themes_dir: Optional[str] = None
    config_path: Optional[str] = None

    # Reload
    app_name: str = DEFAULT_APP_NAME
    reload_menu_item: str = DEFAULT_MENU_ITEM
    skip_reload_when_not_running: bool = True

    # Recently applied themes, newest first
    recent_themes: list[str] = field(default_factory=list)
    max_recent: int = 10

    def to_dict(self) -> dict:
        """Serialize to dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> AppSettings:
        """
        Deserialize from dict.

        Unknown keys are ignored. Values whose type does not match the
        field's default are dropped, so the default is used instead.
        """
        filtered = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            default = f.default if f.default is not MISSING else f.default_factory()
            value = data[f.name]
            if _matches_default_type(value, default):
                filtered[f.name] = value
            else:
                logger.warning(f"Ignoring setting {f.name}={value!r}: wrong type")
        return cls(**filtered)

    def add_recent_theme(self, theme_name: str) -> None:
        """Add a theme to recent list (moves to front if exists)."""
        if theme_name in self.recent_themes:
            self.recent_themes.remove(theme_name)
        self.recent_themes.insert(0, theme_name)
        self.recent_themes = self.recent_themes[:self.max_recent]


class SettingsManager:
    """
    Manages loading and saving application settings.

    Usage:
        manager = SettingsManager()
        settings = manager.settings

        settings.themes_dir = "~/ghostty-themes"
        manager.save()
    """

    def __init__(self, config_path: Path = None):
        self._config_path = config_path or DEFAULT_CONFIG_FILE
        self._settings: Optional[AppSettings] = None

    @property
    def settings(self) -> AppSettings:
        """Get current settings, loading from disk if needed."""
        if self._settings is None:
            self._settings = self.load()
        return self._settings

    @property
    def config_path(self) -> Path:
        return self._config_path

    def load(self) -> AppSettings:
        """Load settings from disk, or return defaults."""
        if self._config_path.exists():
            try:
                data = json.loads(self._config_path.read_text(encoding="utf-8"))
                logger.debug(f"Loaded settings from {self._config_path}")
                return AppSettings.from_dict(data)
            except (json.JSONDecodeError, TypeError, AttributeError, OSError) as e:
                logger.warning(f"Failed to load settings: {e}, using defaults")
                return AppSettings()
        else:
            logger.debug("No settings file found, using defaults")
            return AppSettings()

    def save(self) -> None:
        """Save current settings to disk."""
        if self._settings is None:
            return

        try:
            self._config_path.parent.mkdir(parents=True, exist_ok=True)
            self._config_path.write_text(
                json.dumps(self._settings.to_dict(), indent=2), encoding="utf-8"
            )
            logger.debug(f"Saved settings to {self._config_path}")
        except OSError as e:
            logger.error(f"Failed to save settings: {e}")


# Global instance for convenience
_manager: Optional[SettingsManager] = None


def get_settings_manager() -> SettingsManager:
    """Get the global settings manager instance."""
    global _manager
    if _manager is None:
        _manager = SettingsManager()
    return _manager


def get_settings() -> AppSettings:
    """Convenience function to get current settings."""
    return get_settings_manager().settings
