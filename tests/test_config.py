"""Tests for app.config."""

import json

import pytest

from app.config import Duration, SessionConfig, load_settings, save_settings
from app.corpus import ExerciseCategory
from app.errors import SettingsError
from app.themes import ThemeName


class TestSessionConfig:
    def test_defaults(self):
        cfg = SessionConfig()
        assert cfg.category is ExerciseCategory.QUOTES
        assert cfg.duration is Duration.MEDIUM
        assert cfg.sound_enabled is True
        assert cfg.theme is ThemeName.DARK

    def test_from_dict(self):
        cfg = SessionConfig.from_dict(
            {"category": "code", "duration": 120, "sound_enabled": False, "theme": "light"}
        )
        assert cfg == SessionConfig(ExerciseCategory.CODE, Duration.LONG, False, ThemeName.LIGHT)

    def test_to_dict_round_trip(self):
        cfg = SessionConfig(ExerciseCategory.TECHNICAL, Duration.SHORT, True, ThemeName.LIGHT)
        assert SessionConfig.from_dict(cfg.to_dict()) == cfg

    def test_missing_keys_use_defaults(self):
        assert SessionConfig.from_dict({}) == SessionConfig()

    @pytest.mark.parametrize("payload", [
        {"category": "poetry"},
        {"duration": 45},
        {"duration": "soon"},
        {"theme": "solarized"},
        {"sound_enabled": "yes"},
        ["not", "a", "dict"],
    ])
    def test_invalid_payload_raises(self, payload):
        with pytest.raises(SettingsError):
            SessionConfig.from_dict(payload)

    def test_requires_reset(self):
        cfg = SessionConfig()
        assert cfg.requires_reset(cfg.with_changes(duration=Duration.SHORT))
        assert cfg.requires_reset(cfg.with_changes(category=ExerciseCategory.CODE))
        assert not cfg.requires_reset(cfg.with_changes(sound_enabled=False))
        assert not cfg.requires_reset(cfg.with_changes(theme=ThemeName.LIGHT))


class TestSettingsFile:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_settings(tmp_path / "settings.json") == SessionConfig()

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "settings.json"
        cfg = SessionConfig(ExerciseCategory.COMMON, Duration.LONG, False, ThemeName.LIGHT)
        save_settings(cfg, path)
        assert json.loads(path.read_text(encoding="utf-8"))["duration"] == 120
        assert load_settings(path) == cfg

    def test_corrupt_file_falls_back(self, tmp_path, caplog):
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_settings(path) == SessionConfig()
        assert "Ignoring settings file" in caplog.text

    def test_bad_values_fall_back(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"duration": 15}), encoding="utf-8")
        assert load_settings(path) == SessionConfig()

    def test_save_to_unwritable_location_does_not_raise(self, tmp_path, caplog):
        save_settings(SessionConfig(), tmp_path / "missing" / "settings.json")
        assert "Failed to save settings" in caplog.text
