"""Shared test fixtures for the typing speed test."""

import os
import random

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest  # noqa: E402

from app.config import Duration, SessionConfig  # noqa: E402
from app.corpus import ExerciseCategory  # noqa: E402
from services.session import SessionController  # noqa: E402


@pytest.fixture(autouse=True)
def _qt_app(qapp):
    """QTimer needs a running application object in the test thread."""
    yield qapp


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def config():
    return SessionConfig(category=ExerciseCategory.COMMON, duration=Duration.SHORT)


@pytest.fixture
def controller(config, rng):
    """Controller whose clock is driven by calling tick() by hand."""
    ctl = SessionController(config, rng=rng)
    yield ctl
    ctl.reset()


@pytest.fixture
def fixed_text(monkeypatch):
    """Force every sample to return the given text."""
    def _use(text):
        monkeypatch.setattr("app.corpus.sample", lambda category, rng=None: text)
        return text
    return _use
