"""
Asking a running Ghostty to reload its configuration.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
import logging
import shutil
import subprocess

from ghostty_themes.errors import ReloadError

logger = logging.getLogger(__name__)

DEFAULT_APP_NAME = "Ghostty"
DEFAULT_MENU_ITEM = "Reload Configuration"

# Seconds to wait on pgrep / osascript
COMMAND_TIMEOUT = 10


def quote_applescript(value: str) -> str:
    """Quote value as an AppleScript string literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class ReloadController(ABC):
    """
    Abstract reload interface.

    The config updater talks to this and does not know how the
    application is actually driven.
    """

    @abstractmethod
    def is_target_running(self) -> bool:
        """Is the application currently running?"""
        pass

    @abstractmethod
    def request_reload(self) -> None:
        """
        Ask the application to reload its configuration.

        Raises:
            ReloadError: If the request could not be delivered
        """
        pass


class NullReloader(ReloadController):
    """Never reloads. Used when the caller opts out of reloading."""

    def is_target_running(self) -> bool:
        return False

    def request_reload(self) -> None:
        pass


class AppleScriptReloader(ReloadController):
    """
    Reload through macOS UI scripting.

    Clicks the reload menu item in the application's menu via
    System Events. Liveness is checked with pgrep.
    """

    def __init__(self, app_name: str = DEFAULT_APP_NAME, menu_item: str = DEFAULT_MENU_ITEM):
        self.app_name = app_name
        self.menu_item = menu_item

    def build_script(self) -> str:
        """AppleScript that clicks the reload menu item."""
        app = quote_applescript(self.app_name)
        item = quote_applescript(self.menu_item)
        return (
            'tell application "System Events"\n'
            f'  tell process {app}\n'
            f'    click menu item {item} of menu {app} of menu bar 1\n'
            '  end tell\n'
            'end tell'
        )

    def is_target_running(self) -> bool:
        if not shutil.which("pgrep"):
            logger.debug("pgrep not found, assuming target is not running")
            return False

        # The macOS executable is lowercase "ghostty" while the app is "Ghostty"
        try:
            result = subprocess.run(
                ["pgrep", "-xi", self.app_name],
                capture_output=True,
                timeout=COMMAND_TIMEOUT,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.warning(f"Liveness check for {self.app_name} failed: {e}")
            return False

        running = result.returncode == 0
        logger.debug(f"{self.app_name} running: {running}")
        return running

    def request_reload(self) -> None:
        try:
            result = subprocess.run(
                ["osascript", "-e", self.build_script()],
                capture_output=True,
                text=True,
                timeout=COMMAND_TIMEOUT,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise ReloadError(f"Failed to run osascript: {e}") from e

        if result.returncode != 0:
            message = result.stderr.strip() or f"osascript exited with {result.returncode}"
            raise ReloadError(f"Failed to reload {self.app_name}: {message}")

        logger.debug(f"Requested {self.app_name} reload")
