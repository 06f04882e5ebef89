# ui/session_summary.py
from __future__ import annotations
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QDialog, QVBoxLayout, QHBoxLayout, QLabel, QPushButton
import pyqtgraph as pg

from app.state import SessionResult
from app.themes import Theme, accuracy_color


class SessionSummary(QDialog):
    """
    Final WPM / accuracy plus a WPM-per-second chart.
    Accepting the dialog means "try again".
    """

    def __init__(self, result: SessionResult, theme: Theme, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Test Complete!")
        self.resize(560, 420)

        root = QVBoxLayout(self)
        headline = "Text completed." if result.completed else "Time is up."
        root.addWidget(QLabel(f"{headline} Here are your results:"))

        stats = QHBoxLayout()
        self.lblWPM = QLabel(f"{result.wpm} WPM", self)
        self.lblWPM.setStyleSheet(f"font-size: 32px; font-weight: 700; color: {theme.accent};")
        self.lblAcc = QLabel(f"{result.accuracy}%", self)
        self.lblAcc.setStyleSheet(
            f"font-size: 32px; font-weight: 700; color: {accuracy_color(theme, result.accuracy)};"
        )
        for lab in (self.lblWPM, self.lblAcc):
            lab.setAlignment(Qt.AlignCenter)
            stats.addWidget(lab)
        root.addLayout(stats)

        root.addWidget(QLabel(
            f"Time: {result.elapsed_seconds}s of {result.duration}s  |  "
            f"Characters: {result.characters}  |  Rejected keystrokes: {result.rejected_keystrokes}"
        ))

        plot = pg.PlotWidget()
        plot.setBackground(None)
        plot.setMenuEnabled(False)
        plot.setMouseEnabled(x=False, y=False)
        plot.hideButtons()
        plot.showGrid(x=False, y=True, alpha=0.08)
        plot.setLabel("left", "WPM")
        plot.setLabel("bottom", "Time (s)")
        seconds = list(range(1, len(result.wpm_history) + 1))
        plot.plot(seconds, [float(v) for v in result.wpm_history], pen=pg.mkPen(theme.accent, width=2))
        root.addWidget(plot, stretch=1)

        btn = QPushButton("Try Again", self)
        btn.clicked.connect(self.accept)
        root.addWidget(btn)
