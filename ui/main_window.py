# ui/main_window.py
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QComboBox, QCheckBox, QLabel, QPlainTextEdit, QPushButton
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QTextCursor
import logging

from app.audio import AudioEngine
from app.config import Duration, SessionConfig, save_settings
from app.corpus import ExerciseCategory
from app.state import SessionState
from app.themes import THEMES, ThemeName, accuracy_color, get_theme
from services.session import SessionController
from ui.session_summary import SessionSummary
from ui.widgets import ReferenceText

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, config: SessionConfig = None, controller: SessionController = None):
        super().__init__()
        self.setWindowTitle("Typing Speed Test")
        self.resize(1000, 640)
        self.config = config or SessionConfig()
        self.theme = get_theme(self.config.theme)

        self.session = controller or SessionController(self.config, parent=self)
        self.audio = AudioEngine(enabled=self.config.sound_enabled)

        root = QWidget(self)
        root_v = QVBoxLayout(root)
        root_v.setContentsMargins(16, 24, 16, 16)
        root_v.setSpacing(20)
        self._build_top_bar(root_v)
        self._build_stats(root_v)

        root_v.addWidget(QLabel("Text to type:", root))
        self.reference = ReferenceText(self.theme, root)
        root_v.addWidget(self.reference, 1)

        self.lblPrompt = QLabel("", root)
        self.lblPrompt.setObjectName("lblPrompt")
        root_v.addWidget(self.lblPrompt)

        self.input = QPlainTextEdit(root)
        self.input.setObjectName("txtInput")
        self.input.setPlaceholderText("Start typing here...")
        self.input.setFixedHeight(96)
        self.input.textChanged.connect(self._on_text_edited)
        root_v.addWidget(self.input)

        controls = QHBoxLayout()
        self.btnStart = QPushButton("Start Test", root)
        self.btnStart.clicked.connect(self._on_start)
        self.btnReset = QPushButton("Reset", root)
        self.btnReset.clicked.connect(self.session.reset)
        controls.addWidget(self.btnStart, 1)
        controls.addWidget(self.btnReset)
        root_v.addLayout(controls)
        self.setCentralWidget(root)

        s = self.session
        s.stateChanged.connect(self._on_state_changed)
        s.textChanged.connect(lambda _: self._render())
        s.inputChanged.connect(self._sync_input)
        s.timeChanged.connect(self._on_time)
        s.metricsChanged.connect(self._on_metrics)
        s.keystroke.connect(lambda _: self._render())
        s.keystroke.connect(self.audio.play_key)
        s.finished.connect(self._on_finished)

        self._apply_theme(self.config.theme)
        self._on_state_changed(s.state)
        self._on_time(s.remaining)
        self._on_metrics(s.metrics.wpm, s.metrics.accuracy)

    # ---------------- Top Bar ----------------
    def _build_top_bar(self, parent_layout):
        bar = QWidget(self)
        bar.setObjectName("TopBar")
        h = QHBoxLayout(bar)
        h.setContentsMargins(14, 10, 14, 10)
        h.setSpacing(10)

        self.cmbCategory = QComboBox(bar)
        for cat in ExerciseCategory:
            self.cmbCategory.addItem(cat.label)
        self.cmbCategory.setCurrentIndex(list(ExerciseCategory).index(self.config.category))

        self.cmbDuration = QComboBox(bar)
        for d in Duration:
            self.cmbDuration.addItem(f"{int(d)}s")
        self.cmbDuration.setCurrentIndex(list(Duration).index(self.config.duration))

        self.chkSound = QCheckBox("Sound", bar)
        self.chkSound.setChecked(self.config.sound_enabled)

        self.cmbTheme = QComboBox(bar)
        for theme in THEMES.values():
            self.cmbTheme.addItem(theme.name)
        self.cmbTheme.setCurrentIndex(list(THEMES).index(self.config.theme))

        for w in (self.cmbCategory, self.cmbDuration, self.chkSound, self.cmbTheme):
            # keep keyboard focus on the text entry
            w.setFocusPolicy(Qt.NoFocus)
            h.addWidget(w)
        h.addStretch(1)

        self.cmbCategory.currentIndexChanged.connect(
            lambda i: self._update_config(category=list(ExerciseCategory)[i]))
        self.cmbDuration.currentIndexChanged.connect(
            lambda i: self._update_config(duration=list(Duration)[i]))
        self.chkSound.toggled.connect(lambda on: self._update_config(sound_enabled=on))
        self.cmbTheme.currentIndexChanged.connect(
            lambda i: self._update_config(theme=list(THEMES)[i]))

        parent_layout.addWidget(bar)

    def _build_stats(self, parent_layout):
        stats = QHBoxLayout()
        stats.setSpacing(40)
        self.lblWPM = QLabel("0", self)
        self.lblWPM.setObjectName("lblWPM")
        self.lblAcc = QLabel("100%", self)
        self.lblAcc.setObjectName("lblAcc")
        self.lblTimer = QLabel("", self)
        self.lblTimer.setObjectName("lblTimer")
        for caption, lab in (("Words Per Minute", self.lblWPM), ("Accuracy", self.lblAcc),
                             ("Time Left", self.lblTimer)):
            col = QVBoxLayout()
            cap = QLabel(caption, self)
            cap.setAlignment(Qt.AlignCenter)
            lab.setAlignment(Qt.AlignCenter)
            col.addWidget(cap)
            col.addWidget(lab)
            stats.addLayout(col)
        parent_layout.addLayout(stats)

    # ---------------- Config ----------------
    def _update_config(self, **changes):
        new = self.config.with_changes(**changes)
        if new == self.config:
            return
        self.config = new
        self.audio.set_enabled(new.sound_enabled)
        self._apply_theme(new.theme)
        self.session.configure(new)
        save_settings(new)

    def _apply_theme(self, name: ThemeName):
        theme = get_theme(name)
        self.theme = theme
        self.reference.set_theme(theme)
        self.setStyleSheet(
            f"""
            QWidget {{ background: {theme.background}; color: {theme.primary}; }}
            QLabel#lblWPM, QLabel#lblTimer {{ color: {theme.accent}; font-size: 30px; font-weight: 700; }}
            QLabel#lblAcc {{ font-size: 30px; font-weight: 700; }}
            QLabel#lblPrompt {{ color: {theme.secondary}; }}
            QPlainTextEdit#txtInput {{ border: 1px solid {theme.secondary}; border-radius: 8px;
                                        font-family: 'Courier New', monospace; }}
            """
        )
        self._on_metrics(self.session.metrics.wpm, self.session.metrics.accuracy)
        self._render()

    # ---------------- Session ----------------
    def _on_start(self):
        self.session.start()
        self.input.setFocus()

    def _on_text_edited(self):
        if self.session.state is not SessionState.ACTIVE:
            return
        candidate = self.input.toPlainText()
        if not self.session.submit_candidate_input(candidate):
            # rejected: the widget goes back to what was recorded
            self._sync_input(self.session.recorded)

    def _sync_input(self, text: str):
        if self.input.toPlainText() == text:
            self._render()
            return
        self.input.blockSignals(True)
        self.input.setPlainText(text)
        self.input.blockSignals(False)
        self.input.moveCursor(QTextCursor.End)
        self._render()

    def _on_state_changed(self, state: SessionState):
        active = state is SessionState.ACTIVE
        self.input.setEnabled(active)
        self.btnStart.setVisible(state is SessionState.IDLE)
        self.lblPrompt.setText({
            SessionState.IDLE: "Click start to begin",
            SessionState.ACTIVE: "Keep typing...",
            SessionState.FINISHED: "Test Complete",
        }[state])
        self._render()

    def _on_time(self, remaining: int):
        self.lblTimer.setText(f"{remaining}s")

    def _on_metrics(self, wpm: int, accuracy: int):
        self.lblWPM.setText(str(wpm))
        self.lblAcc.setText(f"{accuracy}%")
        self.lblAcc.setStyleSheet(f"color: {accuracy_color(self.theme, accuracy)};")

    def _render(self):
        self.reference.show_state(self.session.reference, self.session.classify())

    def _on_finished(self, result):
        log.info("Showing results: %s WPM, %s%%", result.wpm, result.accuracy)
        dlg = SessionSummary(result, self.theme, self)
        if dlg.exec():
            self.session.reset()
