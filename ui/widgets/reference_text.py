# ui/widgets/reference_text.py
from __future__ import annotations
from html import escape
from typing import Sequence

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QSizePolicy

from app.state import CharClass
from app.themes import Theme, char_style


def render_html(text: str, classes: Sequence[CharClass], theme: Theme) -> str:
    """One span per run of equally classified characters."""
    parts: list[str] = []
    i, n = 0, len(text)
    while i < n:
        cls = classes[i] if i < len(classes) else CharClass.PENDING
        j = i
        while j < n and (classes[j] if j < len(classes) else CharClass.PENDING) is cls:
            j += 1
        chunk = escape(text[i:j])
        if cls is CharClass.CURSOR:
            # a highlighted space would collapse otherwise
            chunk = chunk.replace(" ", "&nbsp;")
        parts.append(f'<span style="{char_style(theme, cls)}">{chunk}</span>')
        i = j
    return "".join(parts)


class ReferenceText(QLabel):
    """Read-only view of the reference text with per-character coloring."""

    def __init__(self, theme: Theme, parent=None):
        super().__init__(parent)
        self._theme = theme
        self.setObjectName("lblReference")
        self.setTextFormat(Qt.RichText)
        self.setWordWrap(True)
        self.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.setMinimumHeight(120)
        self.setStyleSheet("font-family: 'Courier New', monospace; font-size: 20px;")

    def set_theme(self, theme: Theme):
        self._theme = theme

    def show_state(self, text: str, classes: Sequence[CharClass]):
        self.setText(render_html(text, classes, self._theme))
