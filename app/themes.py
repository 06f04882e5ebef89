# app/themes.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict

from app.state import CharClass


class ThemeName(str, Enum):
    DARK = "dark"
    LIGHT = "light"


@dataclass(frozen=True)
class Theme:
    name: str
    background: str
    primary: str
    secondary: str
    accent: str
    correct: str
    correct_bg: str
    error: str
    warning: str
    caret_bg: str


# -------- Built-in themes --------
THEMES: Dict[ThemeName, Theme] = {
    ThemeName.DARK: Theme(
        name="Dark",
        background="#0f1115",
        primary="#e5e7eb",
        secondary="#6b7280",
        accent="#eab308",
        correct="#22c55e",
        correct_bg="#052e16",
        error="#dc2626",
        warning="#eab308",
        caret_bg="rgba(234,179,8,0.25)",
    ),
    ThemeName.LIGHT: Theme(
        name="Light",
        background="#fafafa",
        primary="#111111",
        secondary="#6b6b6b",
        accent="#ca8a04",
        correct="#16a34a",
        correct_bg="#f0fdf4",
        error="#dc2626",
        warning="#ca8a04",
        caret_bg="rgba(202,138,4,0.20)",
    ),
}

DEFAULT_THEME = ThemeName.DARK


def get_theme(name: ThemeName) -> Theme:
    return THEMES[ThemeName(name)]


def accuracy_color(theme: Theme, accuracy: int) -> str:
    if accuracy < 90:
        return theme.error
    if accuracy < 95:
        return theme.warning
    return theme.correct


def char_style(theme: Theme, cls: CharClass) -> str:
    """Inline CSS for one reference character, used by the rich-text renderer."""
    if cls is CharClass.CORRECT:
        return f"color:{theme.correct}; background:{theme.correct_bg}"
    if cls is CharClass.MISTYPED:
        return f"color:#ffffff; background:{theme.error}; font-weight:600"
    if cls is CharClass.CURSOR:
        return f"color:{theme.primary}; background:{theme.caret_bg}"
    return f"color:{theme.primary}"
