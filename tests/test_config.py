import json

from ghostty_themes.config import AppSettings, SettingsManager


def test_defaults_when_missing(settings_manager):
    settings = settings_manager.settings
    assert settings.themes_dir is None
    assert settings.app_name == "Ghostty"
    assert settings.skip_reload_when_not_running is True


def test_save_and_load(settings_manager):
    settings_manager.settings.themes_dir = "/custom/themes"
    settings_manager.settings.add_recent_theme("Nord")
    settings_manager.save()

    loaded = SettingsManager(settings_manager.config_path).load()
    assert loaded.themes_dir == "/custom/themes"
    assert loaded.recent_themes == ["Nord"]


def test_invalid_file_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert SettingsManager(path).load() == AppSettings()


def test_unknown_keys_ignored(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"config_path": "/tmp/ghostty", "bogus": 1}), encoding="utf-8")
    assert SettingsManager(path).load().config_path == "/tmp/ghostty"


def test_recent_themes_move_to_front_and_cap():
    settings = AppSettings(max_recent=3)
    for name in ["A", "B", "C", "A", "D"]:
        settings.add_recent_theme(name)
    assert settings.recent_themes == ["D", "A", "C"]


def test_global_settings_use_default_file(monkeypatch, tmp_path):
    from ghostty_themes import config

    monkeypatch.setattr(config, "DEFAULT_CONFIG_FILE", tmp_path / "config.json")
    monkeypatch.setattr(config, "_manager", None)

    assert config.get_settings() == AppSettings()
    assert config.get_settings_manager().config_path == tmp_path / "config.json"


def test_wrong_types_fall_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "recent_themes": None,
        "themes_dir": 5,
        "skip_reload_when_not_running": "no",
        "max_recent": True,
        "app_name": "Ghostty Nightly",
    }), encoding="utf-8")

    settings = SettingsManager(path).load()
    assert settings.recent_themes == []
    assert settings.themes_dir is None
    assert settings.skip_reload_when_not_running is True
    assert settings.max_recent == 10
    assert settings.app_name == "Ghostty Nightly"


def test_recent_themes_must_be_strings():
    assert AppSettings.from_dict({"recent_themes": ["Nord", 3]}).recent_themes == []


def test_non_object_file_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert SettingsManager(path).load() == AppSettings()
