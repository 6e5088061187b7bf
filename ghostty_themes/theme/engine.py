"""
Theme system.

Ghostty theme files are plain ``key = value`` directives. Only the
colors needed to describe a theme are read; everything else is ignored.
"""

from __future__ import annotations
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional
import logging
import re
import yaml

from ghostty_themes.errors import ThemeDirectoryError

logger = logging.getLogger(__name__)

PALETTE_SIZE = 16

DEFAULT_BACKGROUND = "#1a1a1a"
DEFAULT_FOREGROUND = "#ffffff"
DEFAULT_CURSOR = "#ffffff"
DEFAULT_PALETTE_COLOR = "#888888"

_DIRECTIVE_RE = re.compile(r"^([^=]+?)\s*=\s*(.+)$")
_PALETTE_RE = re.compile(r"^([0-9]+)=(.+)$")


def _default_palette() -> list[str]:
    return [DEFAULT_PALETTE_COLOR] * PALETTE_SIZE


@dataclass
class ThemeColors:
    """Terminal colors of a theme."""
    background: str = DEFAULT_BACKGROUND
    foreground: str = DEFAULT_FOREGROUND
    cursor: str = DEFAULT_CURSOR

    # ANSI colors 0-15
    palette: list[str] = field(default_factory=_default_palette)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> ThemeColors:
        """Build from dict, padding or truncating the palette to 16 slots."""
        palette = list(data.get("palette") or [])[:PALETTE_SIZE]
        palette += [DEFAULT_PALETTE_COLOR] * (PALETTE_SIZE - len(palette))
        return cls(
            background=data.get("background", DEFAULT_BACKGROUND),
            foreground=data.get("foreground", DEFAULT_FOREGROUND),
            cursor=data.get("cursor", DEFAULT_CURSOR),
            palette=palette,
        )


def parse_theme_file(content: str) -> ThemeColors:
    """
    Parse Ghostty theme file text.

    Args:
        content: Raw theme file contents

    Returns:
        ThemeColors with defaults for anything the file does not set
    """
    colors = ThemeColors()

    for line in content.split("\n"):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue

        match = _DIRECTIVE_RE.match(trimmed)
        if not match:
            continue

        key, value = match.group(1).strip(), match.group(2).strip()

        if key == "background":
            colors.background = value
        elif key == "foreground":
            colors.foreground = value
        elif key == "cursor-color":
            colors.cursor = value
        elif key == "palette":
            palette_match = _PALETTE_RE.match(value)
            if palette_match:
                index = int(palette_match.group(1))
                if 0 <= index < PALETTE_SIZE:
                    colors.palette[index] = palette_match.group(2)

    return colors


@dataclass
class Theme:
    """An installed theme: file name plus parsed colors."""
    name: str
    colors: ThemeColors = field(default_factory=ThemeColors)

    @classmethod
    def from_file(cls, path: Path) -> Theme:
        """Read and parse a Ghostty theme file."""
        content = path.read_text(encoding="utf-8")
        return cls(name=path.name, colors=parse_theme_file(content))

    @classmethod
    def load(cls, path: Path) -> Theme:
        """Load theme from YAML file."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls(name=data["name"], colors=ThemeColors.from_dict(data.get("colors", {})))

    def save(self, path: Path) -> None:
        """Save theme to YAML file."""
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.to_yaml())

    def to_yaml(self) -> str:
        return yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)

    def to_dict(self) -> dict:
        return {"name": self.name, "colors": self.colors.to_dict()}


class ThemeEngine:
    """Lists and looks up the themes installed in a directory."""

    def __init__(self, theme_dir: Path):
        """
        Initialize theme engine.

        Args:
            theme_dir: Directory holding Ghostty theme files
        """
        self.theme_dir = Path(theme_dir)
        self._themes: Optional[dict[str, Theme]] = None

    def load_themes(self) -> list[Theme]:
        """
        Read every theme file in the theme directory.

        Files that cannot be read are skipped.

        Returns:
            Themes sorted by name

        Raises:
            ThemeDirectoryError: If the directory itself cannot be read
        """
        try:
            paths = list(self.theme_dir.iterdir())
        except OSError as e:
            raise ThemeDirectoryError(f"Cannot read theme directory {self.theme_dir}: {e}") from e

        themes = []
        for path in paths:
            try:
                themes.append(Theme.from_file(path))
            except (OSError, UnicodeDecodeError) as e:
                logger.debug(f"Skipping theme file {path}: {e}")

        themes.sort(key=lambda t: t.name)
        self._themes = {t.name: t for t in themes}
        logger.debug(f"Loaded {len(themes)} themes from {self.theme_dir}")
        return themes

    def reload(self) -> list[Theme]:
        """Discard cached themes and read the directory again."""
        self._themes = None
        return self.themes()

    def themes(self) -> list[Theme]:
        """All themes, loading them on first use."""
        if self._themes is None:
            return self.load_themes()
        return list(self._themes.values())

    def get_theme(self, name: str) -> Optional[Theme]:
        """
        Get theme by name.

        Args:
            name: Theme file name

        Returns:
            Theme if found, None otherwise
        """
        self.themes()
        return self._themes.get(name)

    def list_themes(self) -> list[str]:
        """
        List available theme names.

        Returns:
            List of theme names
        """
        return [t.name for t in self.themes()]

    def search(self, query: str) -> list[Theme]:
        """Themes whose name contains query, ignoring case."""
        if not query:
            return self.themes()
        lower = query.lower()
        return [t for t in self.themes() if lower in t.name.lower()]
