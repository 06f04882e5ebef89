import math

from app.state import Metrics

# ~1 second; keeps the first tick window from blowing up WPM
MIN_ELAPSED_MINUTES = 0.016


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def word_count(text: str) -> int:
    return len(text.split())


def elapsed_minutes(duration: int, remaining: int) -> float:
    return max(MIN_ELAPSED_MINUTES, (duration - remaining) / 60.0)


def correct_chars(recorded: str, reference: str) -> int:
    return sum(1 for i, ch in enumerate(recorded) if i < len(reference) and reference[i] == ch)


def compute(recorded: str, reference: str, duration: int, remaining: int) -> Metrics:
    """
    WPM = whitespace-delimited words / elapsed minutes.
    Accuracy = positional matches against the reference over the recorded length.
    Both are rounded half-up. Empty input reads as Metrics(0, 100).
    """
    if not recorded:
        return Metrics()
    wpm = round_half_up(word_count(recorded) / elapsed_minutes(duration, remaining))
    accuracy = round_half_up(100.0 * correct_chars(recorded, reference) / len(recorded))
    return Metrics(wpm=max(0, wpm), accuracy=max(0, min(100, accuracy)))
