# services/session.py
from __future__ import annotations
import logging
import random
from typing import List, Optional

from PySide6.QtCore import QObject, Signal

from app import calculation, corpus
from app.config import SessionConfig
from app.state import CharClass, Metrics, SessionResult, SessionState
from core.clock import SessionClock
from services.typing_engine import TypingEngine

log = logging.getLogger(__name__)


class SessionController(QObject):
    """
    Idle -> Active -> Finished. Only reset() (or a category/duration change)
    goes back to Idle, with a freshly sampled reference text.
    """

    stateChanged = Signal(object)      # SessionState
    textChanged = Signal(str)          # new reference text
    inputChanged = Signal(str)         # recorded input
    timeChanged = Signal(int)
    metricsChanged = Signal(int, int)  # wpm, accuracy
    keystroke = Signal(bool)           # accepted?
    finished = Signal(object)          # SessionResult

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[SessionClock] = None,
        parent=None,
    ):
        super().__init__(parent)
        self._config = config or SessionConfig()
        self._rng = rng
        self._clock = clock or SessionClock(parent=self)
        self._clock.ticked.connect(self._on_tick)
        self._clock.expired.connect(self._on_expired)

        self._engine = TypingEngine("")
        self._state = SessionState.IDLE
        self._metrics = Metrics()
        self._history: List[int] = []
        self._result: Optional[SessionResult] = None
        self._prepare()

    # ---------------- read-only view ----------------
    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def reference(self) -> str:
        return self._engine.reference

    @property
    def recorded(self) -> str:
        return self._engine.recorded

    @property
    def mistyped(self) -> frozenset:
        return self._engine.mistyped

    @property
    def remaining(self) -> int:
        return self._clock.remaining

    @property
    def metrics(self) -> Metrics:
        return self._metrics

    @property
    def result(self) -> Optional[SessionResult]:
        return self._result

    def classify(self) -> List[CharClass]:
        return self._engine.classify(self._state is SessionState.ACTIVE)

    # ---------------- commands ----------------
    def configure(self, config: SessionConfig):
        old, self._config = self._config, config
        if old.requires_reset(config):
            log.info("Config changed (%s, %ss), resetting", config.category.value, int(config.duration))
            self.reset()

    def start(self):
        if self._state is not SessionState.IDLE:
            return
        self._engine.reset()
        self._history.clear()
        self._result = None
        self._metrics = Metrics()
        self._state = SessionState.ACTIVE
        self._clock.start(int(self._config.duration))
        log.info("Session started: %s, %ss", self._config.category.value, int(self._config.duration))
        self.stateChanged.emit(self._state)
        self.inputChanged.emit(self.recorded)
        self.timeChanged.emit(self.remaining)
        self.metricsChanged.emit(self._metrics.wpm, self._metrics.accuracy)

    def reset(self):
        self._clock.stop()
        self._prepare()
        self.stateChanged.emit(self._state)
        self.textChanged.emit(self.reference)
        self.inputChanged.emit(self.recorded)
        self.timeChanged.emit(self.remaining)
        self.metricsChanged.emit(self._metrics.wpm, self._metrics.accuracy)

    def submit_candidate_input(self, candidate: str) -> bool:
        if self._state is not SessionState.ACTIVE:
            return False
        before = self.recorded
        outcome = self._engine.attempt(candidate)
        self.keystroke.emit(outcome.accepted)
        if outcome.accepted and outcome.recorded != before:
            self.inputChanged.emit(outcome.recorded)
            self._recompute()
            if self._engine.is_complete:
                self._finish(completed=True)
        return outcome.accepted

    # ---------------- internals ----------------
    def _prepare(self):
        self._clock.reset(int(self._config.duration))
        self._engine.set_text(corpus.sample(self._config.category, self._rng))
        self._state = SessionState.IDLE
        self._metrics = Metrics()
        self._history = []
        self._result = None

    def _recompute(self):
        if self._state is not SessionState.ACTIVE or not self.recorded:
            return
        self._metrics = calculation.compute(
            self.recorded, self.reference, int(self._config.duration), self.remaining
        )
        self.metricsChanged.emit(self._metrics.wpm, self._metrics.accuracy)

    def _on_tick(self, remaining: int):
        if self._state is not SessionState.ACTIVE:
            return
        self._recompute()
        self._history.append(self._metrics.wpm)
        self.timeChanged.emit(remaining)

    def _on_expired(self):
        if self._state is SessionState.ACTIVE:
            self._finish(completed=False)

    def _finish(self, completed: bool):
        self._clock.stop()
        self._state = SessionState.FINISHED
        duration = int(self._config.duration)
        self._result = SessionResult(
            wpm=self._metrics.wpm,
            accuracy=self._metrics.accuracy,
            duration=duration,
            elapsed_seconds=duration - self.remaining,
            characters=len(self.recorded),
            rejected_keystrokes=self._engine.rejected_count,
            completed=completed,
            wpm_history=list(self._history),
        )
        log.info(
            "Session finished (%s): %d WPM, %d%% accuracy",
            "completed" if completed else "time up", self._result.wpm, self._result.accuracy,
        )
        self.stateChanged.emit(self._state)
        self.finished.emit(self._result)
