"""Tests for the TickScheduler — two fixed-rate cycles on one clock."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from mazechase.core.enums import Cycle
from mazechase.engine.scheduler import TickScheduler


def _sched(rate: float = 1.0) -> TickScheduler:
    return TickScheduler(0.04, 1.0, rate=rate)


class TestDue:
    def test_nothing_before_start(self):
        s = _sched()
        assert not s.started
        assert s.due(10.0) == []

    def test_player_fires_first(self):
        s = _sched()
        s.start(0.0)
        assert s.due(0.03) == []
        assert s.due(0.05) == [Cycle.PLAYER]
        assert s.due(0.06) == []

    def test_both_due_player_first(self):
        s = _sched()
        s.start(0.0)
        assert s.due(1.01) == [Cycle.PLAYER, Cycle.ADVERSARY]

    def test_lagging_caller_fires_once_and_realigns(self):
        s = _sched()
        s.start(0.0)
        assert s.due(0.5) == [Cycle.PLAYER]
        assert s.next_deadline(Cycle.PLAYER) == pytest.approx(0.54)
        assert s.due(0.51) == []

    def test_rate_scales_intervals(self):
        s = _sched(rate=2.0)
        assert s.interval(Cycle.PLAYER) == pytest.approx(0.02)
        assert s.interval(Cycle.ADVERSARY) == pytest.approx(0.5)
        s.start(0.0)
        assert s.due(0.51) == [Cycle.PLAYER, Cycle.ADVERSARY]


class TestPause:
    def test_paused_scheduler_fires_nothing(self):
        s = _sched()
        s.start(0.0)
        s.pause(0.5)
        assert s.paused
        assert s.due(30.0) == []

    def test_resume_shifts_deadlines_by_gap(self):
        s = _sched()
        s.start(0.0)
        s.pause(0.5)
        s.resume(10.5)
        assert not s.paused
        assert s.next_deadline(Cycle.ADVERSARY) == pytest.approx(11.0)
        assert s.due(10.55) == [Cycle.PLAYER]
        assert s.due(11.0) == [Cycle.PLAYER, Cycle.ADVERSARY]

    def test_game_time_excludes_pauses(self):
        s = _sched()
        s.start(100.0)
        assert s.game_time(101.0) == pytest.approx(1.0)
        s.pause(101.0)
        assert s.game_time(150.0) == pytest.approx(1.0)
        s.resume(150.0)
        assert s.game_time(152.0) == pytest.approx(3.0)

    def test_resume_without_pause_is_noop(self):
        s = _sched()
        s.start(0.0)
        s.resume(5.0)
        assert s.next_deadline(Cycle.PLAYER) == pytest.approx(0.04)

    def test_start_resets_pause(self):
        s = _sched()
        s.start(0.0)
        s.pause(1.0)
        s.start(2.0)
        assert not s.paused
        assert s.game_time(3.0) == pytest.approx(1.0)


class TestRate:
    def test_clamped(self):
        s = _sched()
        assert s.set_rate(9.0) == 5.0
        assert s.set_rate(0.1) == 0.5
        assert s.change_rate(0.5) == 1.0

    def test_initial_rate_clamped(self):
        assert TickScheduler(0.04, 1.0, rate=100.0).rate == 5.0
