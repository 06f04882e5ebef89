# app/config.py
from __future__ import annotations
from dataclasses import dataclass, replace
from enum import IntEnum
from pathlib import Path
from typing import Any, Dict, Union
import json
import logging

from app.corpus import ExerciseCategory
from app.errors import SettingsError
from app.themes import DEFAULT_THEME, ThemeName

log = logging.getLogger(__name__)

SETTINGS_FILE = Path("settings.json")


class Duration(IntEnum):
    SHORT = 30
    MEDIUM = 60
    LONG = 120


@dataclass(frozen=True)
class SessionConfig:
    """Parameters supplied by the menus. Only category and duration affect a running session."""
    category: ExerciseCategory = ExerciseCategory.QUOTES
    duration: Duration = Duration.MEDIUM
    sound_enabled: bool = True
    theme: ThemeName = DEFAULT_THEME

    def requires_reset(self, other: "SessionConfig") -> bool:
        return self.category != other.category or self.duration != other.duration

    def with_changes(self, **changes) -> "SessionConfig":
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionConfig":
        if not isinstance(data, dict):
            raise SettingsError("Settings must be a JSON object")
        default = cls()
        try:
            category = ExerciseCategory(data.get("category", default.category.value))
            duration = Duration(int(data.get("duration", default.duration.value)))
            theme = ThemeName(data.get("theme", default.theme.value))
        except (TypeError, ValueError) as e:
            raise SettingsError(f"Invalid settings: {e}") from e
        sound = data.get("sound_enabled", default.sound_enabled)
        if not isinstance(sound, bool):
            raise SettingsError(f"sound_enabled must be a boolean, got {sound!r}")
        return cls(category=category, duration=duration, sound_enabled=sound, theme=theme)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "duration": int(self.duration),
            "sound_enabled": self.sound_enabled,
            "theme": self.theme.value,
        }


def load_settings(path: Union[str, Path] = SETTINGS_FILE) -> SessionConfig:
    """Read the last used configuration; fall back to defaults on any problem."""
    p = Path(path)
    if not p.exists():
        return SessionConfig()
    try:
        return SessionConfig.from_dict(json.loads(p.read_text(encoding="utf-8")))
    except (OSError, json.JSONDecodeError, SettingsError) as e:
        log.warning("Ignoring settings file %s: %s", p, e)
        return SessionConfig()


def save_settings(config: SessionConfig, path: Union[str, Path] = SETTINGS_FILE) -> None:
    try:
        Path(path).write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
    except OSError as e:
        log.warning("Failed to save settings to %s: %s", path, e)
