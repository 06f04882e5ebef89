# services/typing_engine.py
from __future__ import annotations
import logging
from typing import List, Set

from app.state import AttemptResult, CharClass

log = logging.getLogger(__name__)


class TypingEngine:
    """
    Strict gate over the text-entry control's full value.
    A wrong character is never recorded, only its index is marked as mistyped.
    Markers survive backspacing; only a correct keystroke at that index (or reset) clears them.
    """

    def __init__(self, reference: str = ""):
        self.set_text(reference)

    def set_text(self, reference: str):
        self.reference = reference or ""
        self.reset()

    def reset(self):
        self.recorded = ""
        self._mistyped: Set[int] = set()
        self.rejected_count = 0

    @property
    def mistyped(self) -> frozenset:
        return frozenset(self._mistyped)

    @property
    def is_complete(self) -> bool:
        return bool(self.reference) and len(self.recorded) == len(self.reference)

    def attempt(self, candidate: str) -> AttemptResult:
        candidate = candidate or ""
        prev = self.recorded

        if candidate == prev:
            return self._result(True)

        # backspace / rollback
        if len(candidate) < len(prev) and prev.startswith(candidate):
            self.recorded = candidate
            return self._result(True)

        if not candidate.startswith(prev):
            log.debug("Ignoring edit away from the end of input")
            return self._result(False)

        for idx in range(len(prev), len(candidate)):
            if idx >= len(self.reference) or candidate[idx] != self.reference[idx]:
                if idx < len(self.reference):
                    self._mistyped.add(idx)
                self.rejected_count += 1
                log.debug("Rejected %r at %d", candidate[idx], idx)
                return self._result(False)

        self._mistyped.difference_update(range(len(prev), len(candidate)))
        self.recorded = candidate
        return self._result(True)

    def classify(self, active: bool) -> List[CharClass]:
        out: List[CharClass] = []
        typed = len(self.recorded)
        for idx in range(len(self.reference)):
            if idx in self._mistyped:
                out.append(CharClass.MISTYPED)
            elif idx < typed:
                out.append(CharClass.CORRECT)
            elif idx == typed and active:
                out.append(CharClass.CURSOR)
            else:
                out.append(CharClass.PENDING)
        return out

    def _result(self, accepted: bool) -> AttemptResult:
        return AttemptResult(accepted=accepted, recorded=self.recorded, mistyped=self.mistyped)
