"""Tests for core.clock.SessionClock."""

import pytest

from core.clock import SessionClock


@pytest.fixture
def clock():
    c = SessionClock()
    yield c
    c.stop()


class TestSessionClock:
    def test_start_sets_remaining_and_runs(self, clock):
        clock.start(30)
        assert clock.remaining == 30
        assert clock.running

    def test_tick_decrements_by_one(self, clock):
        ticks = []
        clock.ticked.connect(ticks.append)
        clock.start(30)
        clock.tick()
        clock.tick()
        assert clock.remaining == 28
        assert ticks == [29, 28]

    def test_expires_at_zero(self, clock):
        expired = []
        clock.expired.connect(lambda: expired.append(True))
        clock.start(2)
        clock.tick()
        assert not expired
        clock.tick()
        assert clock.remaining == 0
        assert not clock.running
        assert expired == [True]

    def test_tick_while_stopped_is_noop(self, clock):
        clock.start(5)
        clock.stop()
        clock.tick()
        assert clock.remaining == 5

    def test_stop_is_idempotent(self, clock):
        clock.start(10)
        clock.stop()
        state = (clock.remaining, clock.running)
        clock.stop()
        assert (clock.remaining, clock.running) == state

    def test_restart_replaces_previous_schedule(self, clock):
        clock.start(10)
        clock.tick()
        clock.start(60)
        assert clock.remaining == 60
        clock.tick()
        assert clock.remaining == 59

    def test_reset_restores_without_running(self, clock):
        clock.start(10)
        clock.tick()
        clock.reset(30)
        assert clock.remaining == 30
        assert not clock.running


class TestTimerDriven:
    def test_timer_drives_expiry(self, qtbot):
        clock = SessionClock(interval_ms=10)
        with qtbot.waitSignal(clock.expired, timeout=3000):
            clock.start(3)
        assert clock.remaining == 0
        assert not clock.running
