# app/corpus.py
from __future__ import annotations
from enum import Enum
from typing import Dict, Optional, Tuple
import random


class ExerciseCategory(str, Enum):
    QUOTES = "quotes"
    COMMON = "common"
    CODE = "code"
    TECHNICAL = "technical"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS: Dict[ExerciseCategory, str] = {
    ExerciseCategory.QUOTES: "Quotes",
    ExerciseCategory.COMMON: "Common Phrases",
    ExerciseCategory.CODE: "Code",
    ExerciseCategory.TECHNICAL: "Technical",
}


# -------- Built-in text pools --------
_POOLS: Dict[ExerciseCategory, Tuple[str, ...]] = {
    ExerciseCategory.QUOTES: (
        "The quick brown fox jumps over the lazy dog. This pangram contains every letter "
        "of the English alphabet, making it perfect for testing typing speed and accuracy.",
        "Technology has revolutionized the way we communicate and work. From smartphones to "
        "cloud computing, digital innovation continues to shape our world in unprecedented ways.",
        "Learning to type efficiently is an essential skill in today's digital age. Practice "
        "and consistency are the keys to improving your words per minute and accuracy.",
    ),
    ExerciseCategory.COMMON: (
        "The weather today is quite pleasant. I think we should go outside and enjoy the "
        "beautiful sunshine.",
        "Coffee is one of the most popular beverages in the world. Many people start their "
        "day with a hot cup of coffee.",
        "Reading books helps expand your knowledge and imagination. It is a wonderful way to "
        "spend your free time.",
    ),
    ExerciseCategory.CODE: (
        "const calculateWPM = (words, time) => Math.round(words / time); "
        "function render() { return <div>Hello World</div>; }",
        "import React from 'react'; export function Component() { "
        "const [state, setState] = useState(0); return null; }",
        "const factorial = (n) => n <= 1 ? 1 : n * factorial(n - 1); "
        "const result = factorial(5);",
    ),
    ExerciseCategory.TECHNICAL: (
        "JavaScript is a versatile programming language used for both frontend and backend "
        "development. It powers interactive web applications.",
        "Machine learning algorithms process vast amounts of data to identify patterns and "
        "make predictions. They are transforming industries.",
        "Cloud computing provides scalable infrastructure and services. Organizations can "
        "reduce costs by using pay-as-you-go models.",
    ),
}

# every category needs a non-empty pool
_missing = [c.value for c in ExerciseCategory if len(_POOLS.get(c, ())) < 3]
if _missing:
    raise RuntimeError(f"Text pools missing or too small: {', '.join(_missing)}")
del _missing


def texts_for(category: ExerciseCategory) -> Tuple[str, ...]:
    return _POOLS[ExerciseCategory(category)]


def sample(category: ExerciseCategory, rng: Optional[random.Random] = None) -> str:
    """Pick one reference text from the category's pool, uniformly at random."""
    pool = texts_for(category)
    return (rng or random).choice(pool)
