from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List


class SessionState(Enum):
    IDLE = "idle"
    ACTIVE = "active"
    FINISHED = "finished"


class CharClass(Enum):
    """How one character of the reference text should be drawn."""
    CORRECT = "correct"
    MISTYPED = "mistyped"
    PENDING = "pending"
    CURSOR = "cursor"


@dataclass(frozen=True)
class Metrics:
    wpm: int = 0
    accuracy: int = 100


@dataclass(frozen=True)
class AttemptResult:
    accepted: bool
    recorded: str
    mistyped: FrozenSet[int]


@dataclass(frozen=True)
class SessionResult:
    wpm: int
    accuracy: int
    duration: int
    elapsed_seconds: int
    characters: int
    rejected_keystrokes: int
    completed: bool
    wpm_history: List[int] = field(default_factory=list)
