import pytest

from ghostty_themes.config import SettingsManager
from ghostty_themes.errors import ReloadError
from ghostty_themes.ghostty.reload import ReloadController


DRACULA = """\
# Dracula
palette = 0=#21222c
palette = 1=#ff5555
palette = 2=#50fa7b
background = #282a36
foreground = #f8f8f2
cursor-color = #f8f8f2
"""

NORD = """\
background = #2e3440
foreground = #d8dee9
palette = 4=#81a1c1
"""


class FakeReloader(ReloadController):
    """Records reload requests instead of driving the OS."""

    def __init__(self, running: bool = True, fail: bool = False):
        self.running = running
        self.fail = fail
        self.reloads = 0

    def is_target_running(self) -> bool:
        return self.running

    def request_reload(self) -> None:
        if self.fail:
            raise ReloadError("menu item not found")
        self.reloads += 1


@pytest.fixture
def themes_dir(tmp_path):
    path = tmp_path / "themes"
    path.mkdir()
    (path / "Dracula").write_text(DRACULA, encoding="utf-8")
    (path / "Nord").write_text(NORD, encoding="utf-8")
    return path


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "ghostty" / "config"


@pytest.fixture
def settings_manager(tmp_path):
    return SettingsManager(tmp_path / "settings" / "config.json")


@pytest.fixture
def reloader():
    return FakeReloader()
