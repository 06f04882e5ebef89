# app/audio.py
from __future__ import annotations
from array import array
from pathlib import Path
import logging
import math
import tempfile
import wave

from PySide6.QtCore import QUrl

log = logging.getLogger(__name__)

SAMPLE_RATE = 22050
CLICK_FREQ_HZ = 800.0
CLICK_SECONDS = 0.1
CLICK_GAIN = (0.1, 0.01)  # exponential ramp start -> end


def write_click_wav(path: Path) -> Path:
    """Render a short sine blip with an exponential decay to a 16-bit mono WAV file."""
    n = int(SAMPLE_RATE * CLICK_SECONDS)
    g0, g1 = CLICK_GAIN
    samples = array("h")
    for i in range(n):
        t = i / SAMPLE_RATE
        gain = g0 * (g1 / g0) ** (i / max(1, n - 1))
        samples.append(int(32767 * gain * math.sin(2 * math.pi * CLICK_FREQ_HZ * t)))
    with wave.open(str(path), "wb") as w:
        w.setnchannels(1)
        w.setsampwidth(2)
        w.setframerate(SAMPLE_RATE)
        w.writeframes(samples.tobytes())
    return path


class AudioEngine:
    """Keystroke click. Any failure disables sound and never reaches the caller."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.available = False
        self.key = None
        try:
            from PySide6.QtMultimedia import QSoundEffect

            wav = write_click_wav(Path(tempfile.gettempdir()) / "typing-speed-click.wav")
            self.key = QSoundEffect()
            self.key.setSource(QUrl.fromLocalFile(str(wav)))
            self.key.setVolume(1.0)
            self.available = True
        except Exception as e:
            log.warning("Sound unavailable, continuing without it: %s", e)

    def set_enabled(self, enabled: bool):
        self.enabled = bool(enabled)

    def play_key(self, *_):
        if not (self.enabled and self.available):
            return
        try:
            self.key.play()
        except Exception as e:
            log.warning("Sound playback failed, disabling: %s", e)
            self.available = False
