"""
Locating the installed theme directory and the Ghostty config file.

Candidates are checked top to bottom; the first one that exists wins.
"""

from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Callable, Optional, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# macOS app bundle
DEFAULT_THEMES_DIR = Path("/Applications/Ghostty.app/Contents/Resources/ghostty/themes")

FALLBACK_THEMES_DIRS = [
    Path("/usr/share/ghostty/themes"),
    Path("/usr/local/share/ghostty/themes"),
    Path("/opt/homebrew/share/ghostty/themes"),
    Path("~/.config/ghostty/themes"),
]

DEFAULT_CONFIG_PATH = Path("~/.config/ghostty/config")


def candidate_theme_dirs(configured: Optional[PathLike] = None) -> list[Path]:
    """
    Theme directories in the order they are tried.

    Args:
        configured: Explicit directory from settings or the command line

    Returns:
        Ordered candidate list, user home expanded
    """
    candidates = []
    if configured:
        candidates.append(Path(configured).expanduser())
    candidates.append(DEFAULT_THEMES_DIR)
    candidates.extend(p.expanduser() for p in FALLBACK_THEMES_DIRS)
    return candidates


def resolve_themes_dir(
        configured: Optional[PathLike] = None,
        exists: Callable[[PathLike], bool] = os.path.exists,
) -> Path:
    """
    Pick the theme directory to list.

    Args:
        configured: Explicit directory, tried first
        exists: Existence check, injectable for tests

    Returns:
        First existing candidate, or the default install path
    """
    for candidate in candidate_theme_dirs(configured):
        if exists(candidate):
            logger.debug(f"Using theme directory {candidate}")
            return candidate

    logger.debug(f"No theme directory found, falling back to {DEFAULT_THEMES_DIR}")
    return DEFAULT_THEMES_DIR


def resolve_config_path(configured: Optional[PathLike] = None) -> Path:
    """Ghostty config file location."""
    if configured:
        return Path(configured).expanduser()
    return DEFAULT_CONFIG_PATH.expanduser()
