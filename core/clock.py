# core/clock.py
from PySide6.QtCore import QObject, QTimer, Signal


class SessionClock(QObject):
    """Countdown in whole seconds. One QTimer, so at most one tick source at a time."""

    ticked = Signal(int)   # seconds remaining
    expired = Signal()

    def __init__(self, interval_ms: int = 1000, parent=None):
        super().__init__(parent)
        self._remaining = 0
        self._tick = QTimer(self)
        self._tick.setInterval(interval_ms)
        self._tick.timeout.connect(self.tick)

    @property
    def remaining(self) -> int:
        return self._remaining

    @property
    def running(self) -> bool:
        return self._tick.isActive()

    def start(self, duration_seconds: int):
        self.stop()
        self._remaining = int(duration_seconds)
        self._tick.start()

    def stop(self):
        self._tick.stop()

    def reset(self, duration_seconds: int):
        self.stop()
        self._remaining = int(duration_seconds)

    def tick(self):
        if not self.running:
            return
        self._remaining -= 1
        if self._remaining <= 0:
            self._remaining = 0
            self.stop()
            self.ticked.emit(0)
            self.expired.emit()
            return
        self.ticked.emit(self._remaining)
