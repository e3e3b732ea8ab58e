import json

from charades.config import SettingsManager
from charades.templates import CardTemplates


def test_defaults(isolated_settings):
    assert isolated_settings.get("CARD_COUNT") == 12
    assert isolated_settings.get("DEFAULT_LANGUAGES") == ["en"]
    assert isolated_settings.get("DEFAULT_DIFFICULTIES") == ["easy", "medium", "hard"]
    assert isolated_settings.get("SHUFFLE") is True
    assert isolated_settings.get("UNKNOWN", "fallback") == "fallback"


def test_is_singleton(isolated_settings):
    assert SettingsManager() is isolated_settings


def test_loading_does_not_write_file(isolated_settings):
    assert not isolated_settings.settings_file.exists()


def test_set_persists_to_disk(isolated_settings):
    isolated_settings.set("CARD_COUNT", 24)
    saved = json.loads(isolated_settings.settings_file.read_text(encoding="utf-8"))
    assert saved["CARD_COUNT"] == 24

    path = str(isolated_settings.settings_file)
    SettingsManager.reset_instance()
    assert SettingsManager(path).get("CARD_COUNT") == 24


def test_get_returns_copies(isolated_settings):
    languages = isolated_settings.get("DEFAULT_LANGUAGES")
    languages.append("es")
    assert isolated_settings.get("DEFAULT_LANGUAGES") == ["en"]


def test_reset(isolated_settings):
    isolated_settings.set("GRID_COLUMNS", 5)
    isolated_settings.reset("GRID_COLUMNS")
    assert isolated_settings.get("GRID_COLUMNS") == 3


def test_environment_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("CHARADES_CARD_COUNT", "6")
    monkeypatch.setenv("CHARADES_SHUFFLE", "no")
    monkeypatch.setenv("CHARADES_DEFAULT_LANGUAGES", "en, zh")
    monkeypatch.setenv("CHARADES_CARD_STYLE", '{"card_bg": "#eeeeee"}')
    SettingsManager.reset_instance()
    settings = SettingsManager(str(tmp_path / "env.json"))
    assert settings.get("CARD_COUNT") == 6
    assert settings.get("SHUFFLE") is False
    assert settings.get("DEFAULT_LANGUAGES") == ["en", "zh"]
    assert settings.get("CARD_STYLE") == {"card_bg": "#eeeeee"}


def test_invalid_environment_values_fall_back(tmp_path, monkeypatch):
    monkeypatch.setenv("CHARADES_CARD_COUNT", "many")
    monkeypatch.setenv("CHARADES_CARD_STYLE", "[1, 2]")
    SettingsManager.reset_instance()
    settings = SettingsManager(str(tmp_path / "env.json"))
    assert settings.get("CARD_COUNT") == 12
    assert settings.get("CARD_STYLE")["card_bg"] == "#ffffff"


def test_corrupt_settings_file_is_ignored(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{oops", encoding="utf-8")
    SettingsManager.reset_instance()
    settings = SettingsManager(str(path))
    assert settings.get("CARD_COUNT") == 12


def test_reload_picks_up_external_changes(isolated_settings):
    isolated_settings.settings_file.write_text(json.dumps({"GRID_COLUMNS": 2}), encoding="utf-8")
    assert isolated_settings.get("GRID_COLUMNS") == 3
    isolated_settings.reload()
    assert isolated_settings.get("GRID_COLUMNS") == 2
    assert isolated_settings.get_all()["CARD_COUNT"] == 12


def test_card_style_default_matches_template_style(isolated_settings):
    assert isolated_settings.get("CARD_STYLE") == CardTemplates.DEFAULT_STYLE
    assert isolated_settings.get("CARD_STYLE") is not CardTemplates.DEFAULT_STYLE
