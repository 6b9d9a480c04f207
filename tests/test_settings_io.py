from pathlib import Path

import yaml

from retype.domain.enums import PracticeSettings, SettingKey
from retype.services.settings_store import SettingsStore


def test_defaults_when_file_missing(settings_path):
    store = SettingsStore(settings_path=settings_path)
    assert store.load() == {}
    assert store.get_practice_settings() == PracticeSettings()


def test_save_and_load_roundtrip(settings_path):
    store = SettingsStore(settings_path=settings_path)
    payload = {
        "fold_ascii_case": False,
        "show_hint": False,
        "font_point_size": 24,
        "log_level": "debug",
    }
    store.save(payload)

    raw = yaml.safe_load(Path(settings_path).read_text(encoding="utf-8"))
    assert raw["font_point_size"] == 24

    settings = store.get_practice_settings()
    assert settings.fold_ascii_case is False
    assert settings.show_hint is False
    assert settings.font_point_size == 24
    assert settings.log_level == "DEBUG"


def test_invalid_values_fall_back_to_defaults(settings_path):
    store = SettingsStore(settings_path=settings_path)
    store.save({
        "fold_ascii_case": "yes",
        "show_hint": 0,
        "font_point_size": -3,
        "log_level": "verbose",
    })
    assert store.get_practice_settings() == PracticeSettings()


def test_update_preserves_other_keys(settings_path):
    store = SettingsStore(settings_path=settings_path)
    store.save({"theme": "hanji", "font_point_size": 20})

    store.set_show_hint(False)
    store.set_value(SettingKey.LOG_LEVEL, "WARNING")

    loaded = store.load()
    assert loaded["theme"] == "hanji"
    assert loaded["font_point_size"] == 20
    assert loaded["show_hint"] is False
    assert store.get_practice_settings().log_level == "WARNING"


def test_malformed_yaml_is_non_fatal(settings_path):
    Path(settings_path).write_text("show_hint: [unclosed\n", encoding="utf-8")
    store = SettingsStore(settings_path=settings_path)
    assert store.load() == {}
    assert store.get_practice_settings() == PracticeSettings()


def test_non_mapping_yaml_is_ignored(settings_path):
    Path(settings_path).write_text("- a\n- b\n", encoding="utf-8")
    assert SettingsStore(settings_path=settings_path).load() == {}


def test_unicode_survives_save(settings_path):
    store = SettingsStore(settings_path=settings_path)
    store.save({"last_text": "동해물과"})
    assert "동해물과" in Path(settings_path).read_text(encoding="utf-8")
    assert store.load()["last_text"] == "동해물과"
