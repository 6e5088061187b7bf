"""
Rewriting the theme directive of the Ghostty config file.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ghostty_themes.errors import ConfigWriteError
from .reload import ReloadController, NullReloader

logger = logging.getLogger(__name__)

THEME_KEY = "theme"


def theme_directive(name: str) -> str:
    """The config line selecting a theme."""
    return f'{THEME_KEY} = "{name}"'


def rewrite_theme_directive(text: str, name: str) -> str:
    """
    Point every theme directive in config text at name.

    Lines are split on newlines and joined back the same way, so all
    other lines and any trailing newline are kept as they were. Without
    an existing directive, one is added as the first line.

    Args:
        text: Current config file contents
        name: Theme to select

    Returns:
        New config file contents
    """
    directive = theme_directive(name)
    found = False

    lines = []
    for line in text.split("\n"):
        if line.strip().startswith(THEME_KEY):
            found = True
            lines.append(directive)
        else:
            lines.append(line)

    if not found:
        lines.insert(0, directive)

    return "\n".join(lines)


def read_theme_directive(text: str) -> Optional[str]:
    """Value of the first theme directive, unquoted."""
    for line in text.split("\n"):
        trimmed = line.strip()
        if not trimmed.startswith(THEME_KEY) or "=" not in trimmed:
            continue
        key, value = trimmed.split("=", 1)
        if key.strip() != THEME_KEY:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] == '"':
            value = value[1:-1]
        return value or None
    return None


@dataclass
class ApplyResult:
    """Outcome of applying a theme."""
    theme: str
    config_path: Path
    created: bool = False
    reloaded: bool = False


class ConfigUpdater:
    """
    Applies themes by editing the Ghostty config file.

    Usage:
        updater = ConfigUpdater(Path("~/.config/ghostty/config").expanduser(),
                                AppleScriptReloader())
        result = updater.apply("Dracula")
    """

    def __init__(
            self,
            config_path: Path,
            reloader: ReloadController,
            skip_reload_when_not_running: bool = True,
    ):
        self.config_path = Path(config_path)
        self.reloader = reloader
        self.skip_reload_when_not_running = skip_reload_when_not_running

    def current_theme(self) -> Optional[str]:
        """Theme currently selected in the config file, if any."""
        if not self.config_path.exists():
            return None
        try:
            return read_theme_directive(self.config_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read {self.config_path}: {e}")
            return None

    def write_theme(self, name: str) -> bool:
        """
        Write the theme directive without reloading.

        Returns:
            True if the config file was created

        Raises:
            ConfigWriteError: If the file cannot be read or written
        """
        try:
            if not self.config_path.exists():
                self.config_path.parent.mkdir(parents=True, exist_ok=True)
                with open(self.config_path, "w", encoding="utf-8", newline="") as f:
                    f.write(theme_directive(name) + "\n")
                logger.debug(f"Created {self.config_path} with theme {name}")
                return True

            # newline="" keeps line endings byte for byte
            with open(self.config_path, encoding="utf-8", newline="") as f:
                content = f.read()
            with open(self.config_path, "w", encoding="utf-8", newline="") as f:
                f.write(rewrite_theme_directive(content, name))
            logger.debug(f"Set theme {name} in {self.config_path}")
            return False
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigWriteError(f"Cannot update {self.config_path}: {e}") from e

    def reload(self) -> bool:
        """
        Ask the terminal to reload, honoring the skip policy.

        Returns:
            True if a reload was requested

        Raises:
            ReloadError: If the reload request failed
        """
        if isinstance(self.reloader, NullReloader):
            logger.debug("Reload disabled")
            return False

        if self.skip_reload_when_not_running and not self.reloader.is_target_running():
            logger.info("Terminal is not running, skipping reload")
            return False

        self.reloader.request_reload()
        return True

    def apply(self, name: str) -> ApplyResult:
        """
        Select a theme and reload the terminal.

        Args:
            name: Theme file name

        Returns:
            ApplyResult describing what happened

        Raises:
            ConfigWriteError: If the config file could not be written
            ReloadError: If the reload request failed
        """
        created = self.write_theme(name)
        reloaded = self.reload()
        return ApplyResult(theme=name, config_path=self.config_path, created=created, reloaded=reloaded)
