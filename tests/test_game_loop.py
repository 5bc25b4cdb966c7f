"""Tests for the GameLoop session state machine.

Covers:
- Level-up on a cleared board (reload, respawn, timers cleared, faster ticks)
- Early level-up through an exit cell above the score checkpoint
- Victory on the final level, and no victory below the score threshold
- Pause / resume freezing ticks and timers
- Restart folding the score into the high score
- Speed changes and direction input
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from mazechase.config import GameConfig
from mazechase.core.enums import AdversaryMode, CellKind, Direction, SessionStatus
from mazechase.core.errors import ConfigurationError
from mazechase.core.models import Vector2
from mazechase.engine.clock import ManualClock
from mazechase.engine.game_loop import GameLoop
from tests.helpers.session_harness import SCORING_BOARD, SessionHarness

LEVEL_ONE = "\n".join([
    "11111",
    "18341",
    "11111",
])

LEVEL_TWO = "\n".join([
    "111111",
    "120081",
    "142201",
    "111111",
])

EXIT_LEVEL = "\n".join([
    "1111111",
    "1829221",
    "1111111",
])


def _two_levels(**overrides) -> SessionHarness:
    return SessionHarness({1: LEVEL_ONE, 2: LEVEL_TWO}, **overrides)


class TestLevelUp:
    def test_clearing_board_loads_next_level(self):
        h = _two_levels()
        h.steer(Direction.RIGHT)
        h.player_ticks(1)
        s = h.session
        assert s.level == 2
        assert s.board.level == 2
        assert s.score == 50
        assert s.remaining_dots == 3
        assert h.categories()[-1] == "level_up"

    def test_positions_reset_to_new_spawns(self):
        h = _two_levels()
        h.steer(Direction.RIGHT)
        h.player_ticks(1)
        assert h.player_pos == Vector2(4, 1)
        assert h.session.player.direction == Direction.NONE
        assert h.adversary("blinky").pos == Vector2(1, 2)
        assert h.adversary("blinky").home == Vector2(1, 2)

    def test_timers_cleared_on_level_up(self):
        h = _two_levels()
        h.steer(Direction.RIGHT)
        h.player_ticks(1)  # the energy dot frightened blinky, then the board cleared
        assert h.session.frightened_until is None
        assert h.adversary("blinky").mode == AdversaryMode.PATROL

    def test_tick_rate_increases(self):
        h = _two_levels()
        before = h.loop.scheduler.rate
        h.steer(Direction.RIGHT)
        h.player_ticks(1)
        assert h.loop.scheduler.rate == before + h.config.speed_step
        assert h.loop.on_tick().speed_rate == h.loop.scheduler.rate

    def test_lives_and_score_carry_over(self):
        h = _two_levels()
        h.session.lives = 2
        h.steer(Direction.RIGHT)
        h.player_ticks(1)
        assert h.session.lives == 2
        assert h.session.score == 50

    def test_exit_above_checkpoint_levels_up(self):
        h = SessionHarness({1: EXIT_LEVEL, 2: LEVEL_TWO}, level_score_thresholds=((1, 5),))
        h.steer(Direction.RIGHT)
        h.player_ticks(2)
        assert h.session.level == 2

    def test_exit_below_checkpoint_does_nothing(self):
        h = SessionHarness({1: EXIT_LEVEL, 2: LEVEL_TWO})
        h.steer(Direction.RIGHT)
        h.player_ticks(2)
        assert h.session.level == 1
        assert h.session.board.is_exit(h.player_pos)

    def test_missing_next_level_raises(self, tmp_path):
        (tmp_path / "board1.txt").write_text(LEVEL_ONE, encoding="utf-8")
        loop = GameLoop(GameConfig(levels_dir=str(tmp_path), level_count=2), clock=ManualClock())
        loop.session.player.direction = Direction.RIGHT
        with pytest.raises(ConfigurationError):
            loop.player_tick(1.0)
        assert loop.session.level == 1


class TestVictory:
    def test_final_level_cleared_with_enough_score(self):
        h = SessionHarness("1111\n1821\n1111", victory_score=5)
        h.steer(Direction.RIGHT)
        h.player_ticks(1)
        assert h.session.status == SessionStatus.VICTORY
        assert h.categories()[-1] == "victory"

    def test_score_equal_to_threshold_does_not_win(self):
        h = SessionHarness("1111\n1821\n1111", victory_score=10)
        h.steer(Direction.RIGHT)
        h.player_ticks(1)
        assert h.session.score == 10
        assert h.session.status == SessionStatus.RUNNING

    def test_final_level_cleared_below_threshold_keeps_running(self):
        h = SessionHarness("1111\n1821\n1111")
        h.steer(Direction.RIGHT)
        h.player_ticks(1)
        assert h.session.status == SessionStatus.RUNNING
        assert h.session.remaining_dots == 0

    def test_exit_on_final_level(self):
        h = SessionHarness("111111\n182921\n111111", victory_score=5)
        h.steer(Direction.RIGHT)
        h.player_ticks(1)
        assert h.session.status == SessionStatus.RUNNING
        h.player_ticks(1)
        assert h.session.status == SessionStatus.VICTORY

    def test_victory_after_level_two(self):
        h = SessionHarness({1: LEVEL_ONE, 2: "1111\n1821\n1111"}, victory_score=55)
        h.steer(Direction.RIGHT)
        h.player_ticks(1)
        assert h.session.level == 2
        h.steer(Direction.RIGHT)
        h.player_ticks(1)
        assert h.session.score == 60
        assert h.session.status == SessionStatus.VICTORY

    def test_no_direction_changes_after_victory(self):
        h = SessionHarness("1111\n1821\n1111", victory_score=5)
        h.steer(Direction.RIGHT)
        h.player_ticks(1)
        assert not h.loop.set_player_direction(Direction.LEFT)


class TestPauseResume:
    def test_pause_stops_ticks(self):
        h = SessionHarness(SCORING_BOARD)
        h.loop.start()
        assert h.run_clock(0.2) > 0
        assert h.loop.pause()
        assert h.session.status == SessionStatus.PAUSED
        ticks = h.session.player_ticks
        assert h.run_clock(3.0) == 0
        assert h.session.player_ticks == ticks

    def test_resume_continues_without_catch_up(self):
        h = SessionHarness(SCORING_BOARD)
        h.loop.start()
        h.run_clock(0.2)
        h.loop.pause()
        h.clock.advance(50.0)
        h.loop.advance()
        assert h.loop.resume()
        ticks = h.session.player_ticks
        h.run_clock(0.1)
        # At most one player tick per 40 ms, nothing replayed for the pause.
        assert 1 <= h.session.player_ticks - ticks <= 3

    def test_pause_freezes_timers(self):
        h = SessionHarness("1111111\n1830041\n1111111")
        h.loop.start()
        h.loop.set_player_direction(Direction.RIGHT)
        h.run_clock(0.05)
        assert h.session.score == 50
        h.loop.set_player_direction(Direction.NONE)
        deadline = h.session.frightened_until
        h.loop.pause()
        h.clock.advance(100.0)
        h.loop.resume()
        h.run_clock(0.5)
        assert h.session.frightened_until == deadline
        assert h.session.game_time < deadline

    def test_second_start_keeps_game_time(self):
        h = SessionHarness(SCORING_BOARD)
        h.loop.start()
        h.run_clock(1.0)
        before = h.loop.scheduler.game_time(h.clock())
        h.loop.start()
        assert h.loop.scheduler.game_time(h.clock()) == pytest.approx(before)
        assert len([e for e in h.all_events() if e.category == "session"]) == 1

    def test_invalid_transitions(self):
        h = SessionHarness(SCORING_BOARD)
        assert not h.loop.resume()
        assert h.loop.pause()
        assert not h.loop.pause()
        assert h.loop.toggle_pause()
        assert h.session.status == SessionStatus.RUNNING


class TestRestart:
    def test_restart_records_high_score(self):
        h = SessionHarness(SCORING_BOARD)
        h.steer(Direction.RIGHT)
        h.player_ticks(4)
        h.loop.restart()
        s = h.session
        assert s.high_score == 260
        assert s.score == 0
        assert s.lives == 3
        assert s.level == 1
        assert s.status == SessionStatus.RUNNING
        assert s.remaining_dots == s.board.total_collectibles()
        assert s.board.cell_at(Vector2(2, 1)) == CellKind.DOT

    def test_lower_score_keeps_high_score(self):
        h = SessionHarness(SCORING_BOARD)
        h.session.score = 500
        h.loop.restart()
        h.session.score = 20
        h.loop.restart()
        assert h.session.high_score == 500

    def test_restart_after_game_over(self):
        h = SessionHarness(SCORING_BOARD)
        h.session.lives = 1
        h.steer(Direction.UP)
        h.player_ticks(1)
        assert h.session.status == SessionStatus.GAME_OVER
        h.loop.restart()
        assert h.session.status == SessionStatus.RUNNING
        assert h.loop.set_player_direction(Direction.RIGHT)

    def test_restart_resets_speed(self):
        h = _two_levels()
        h.steer(Direction.RIGHT)
        h.player_ticks(1)
        h.loop.increase_speed()
        h.loop.restart()
        assert h.loop.scheduler.rate == h.config.initial_speed_rate
        assert h.session.level == 1
        assert h.loop.frame.level == 1


class TestSpeedAndDirection:
    def test_speed_steps_and_clamps(self):
        h = SessionHarness(SCORING_BOARD)
        assert h.loop.increase_speed() == 1.5
        assert h.loop.decrease_speed() == 1.0
        h.loop.decrease_speed()
        assert h.loop.decrease_speed() == 0.5
        for _ in range(20):
            h.loop.increase_speed()
        assert h.loop.scheduler.rate == 5.0

    def test_faster_rate_runs_more_ticks(self):
        slow = SessionHarness(SCORING_BOARD)
        fast = SessionHarness(SCORING_BOARD, initial_speed_rate=2.0)
        for h in (slow, fast):
            h.loop.start()
            h.run_clock(1.0)
        assert fast.session.player_ticks > slow.session.player_ticks

    def test_turn_into_wall_rejected(self):
        h = SessionHarness(SCORING_BOARD)
        assert h.loop.set_player_direction(Direction.RIGHT)
        assert not h.loop.set_player_direction(Direction.UP)
        assert h.session.player.direction == Direction.RIGHT
