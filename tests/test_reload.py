import subprocess

import pytest

from ghostty_themes.errors import ReloadError
from ghostty_themes.ghostty import reload as reload_mod
from ghostty_themes.ghostty.reload import AppleScriptReloader, NullReloader, quote_applescript


class Recorder:
    """Stands in for subprocess.run."""

    def __init__(self, returncode=0, stderr="", exc=None):
        self.returncode = returncode
        self.stderr = stderr
        self.exc = exc
        self.calls = []

    def __call__(self, args, **kwargs):
        self.calls.append(args)
        if self.exc:
            raise self.exc
        return subprocess.CompletedProcess(args, self.returncode, stdout="", stderr=self.stderr)


@pytest.fixture
def with_pgrep(monkeypatch):
    monkeypatch.setattr(reload_mod.shutil, "which", lambda name: f"/usr/bin/{name}")


def test_script_targets_menu_item():
    script = AppleScriptReloader().build_script()
    assert 'tell process "Ghostty"' in script
    assert 'click menu item "Reload Configuration" of menu "Ghostty" of menu bar 1' in script


def test_running_when_pgrep_matches(monkeypatch, with_pgrep):
    run = Recorder(returncode=0)
    monkeypatch.setattr(reload_mod.subprocess, "run", run)

    assert AppleScriptReloader().is_target_running() is True
    assert run.calls == [["pgrep", "-xi", "Ghostty"]]


def test_not_running_when_pgrep_finds_nothing(monkeypatch, with_pgrep):
    monkeypatch.setattr(reload_mod.subprocess, "run", Recorder(returncode=1))
    assert AppleScriptReloader().is_target_running() is False


def test_not_running_without_pgrep(monkeypatch):
    monkeypatch.setattr(reload_mod.shutil, "which", lambda name: None)
    assert AppleScriptReloader().is_target_running() is False


def test_request_reload_runs_osascript(monkeypatch):
    run = Recorder(returncode=0)
    monkeypatch.setattr(reload_mod.subprocess, "run", run)

    reloader = AppleScriptReloader()
    reloader.request_reload()

    assert run.calls == [["osascript", "-e", reloader.build_script()]]


def test_request_reload_failure(monkeypatch):
    monkeypatch.setattr(reload_mod.subprocess, "run", Recorder(returncode=1, stderr="not allowed assistive access"))

    with pytest.raises(ReloadError, match="not allowed assistive access"):
        AppleScriptReloader().request_reload()


def test_request_reload_missing_osascript(monkeypatch):
    monkeypatch.setattr(reload_mod.subprocess, "run", Recorder(exc=FileNotFoundError("osascript")))

    with pytest.raises(ReloadError):
        AppleScriptReloader().request_reload()


def test_null_reloader():
    reloader = NullReloader()
    assert reloader.is_target_running() is False
    reloader.request_reload()


def test_quote_applescript():
    assert quote_applescript("Ghostty") == '"Ghostty"'
    assert quote_applescript('Say "hi"') == '"Say \\"hi\\""'
    assert quote_applescript("a\\b") == '"a\\\\b"'


def test_script_escapes_settings_values():
    script = AppleScriptReloader(app_name='My "Term"', menu_item="Reload\\Now").build_script()
    assert 'tell process "My \\"Term\\""' in script
    assert 'click menu item "Reload\\\\Now" of menu "My \\"Term\\"" of menu bar 1' in script
