"""Tests for collision & scoring — walls, dots, adversary contact.

Covers:
- Dot / energy dot / capture scoring (the 10 + 50 + 200 scenario)
- Capture restores full lives
- Wall hits, invulnerability window, game over
- Out-of-bounds steps are free
- Adversary-initiated contact (patrol hits, frightened is captured)
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from mazechase.core.enums import AdversaryMode, Direction, SessionStatus
from mazechase.core.models import Vector2
from tests.helpers.session_harness import SCORING_BOARD, SessionHarness

# Player at (1,1) directly above blinky at (1,2); blinky starts facing up.
STACKED = "\n".join([
    "111",
    "181",
    "141",
    "111",
])


class TestScoring:
    def test_dot_then_energy_then_capture_scores_260(self):
        h = SessionHarness(SCORING_BOARD)
        h.steer(Direction.RIGHT)

        h.player_ticks(1)
        assert h.session.score == 10
        h.player_ticks(1)
        assert h.session.score == 60
        assert h.adversary("blinky").mode == AdversaryMode.FRIGHTENED

        h.player_ticks(2)
        assert h.player_pos == Vector2(5, 1)
        assert h.adversary("blinky").mode == AdversaryMode.CAPTURED
        assert h.session.score == 260
        assert h.categories() == ["dot", "energy_dot", "capture"]

    def test_capture_event_carries_points(self):
        h = SessionHarness(SCORING_BOARD)
        h.steer(Direction.RIGHT)
        h.player_ticks(4)
        capture = [e for e in h.all_events() if e.category == "capture"][0]
        assert capture.actors == ("blinky",)
        assert capture.metadata == {"points": 200}

    def test_capture_resets_lives_to_full(self):
        h = SessionHarness(SCORING_BOARD)
        h.session.lives = 1
        h.steer(Direction.RIGHT)
        h.player_ticks(4)
        assert h.session.lives == 3

    def test_captured_adversary_ignores_contact(self):
        h = SessionHarness(SCORING_BOARD)
        h.steer(Direction.RIGHT)
        h.player_ticks(4)
        h.steer(Direction.NONE)
        h.player_ticks(3)
        assert h.session.score == 260
        assert h.session.lives == 3
        assert h.session.adversaries_at(h.player_pos) == []

    def test_remaining_count_tracks_eaten(self):
        h = SessionHarness(SCORING_BOARD)
        total = h.session.board.total_collectibles()
        h.steer(Direction.RIGHT)
        h.player_ticks(2)
        assert h.session.remaining_dots == total - 2


class TestWallHits:
    def test_wall_costs_a_life_and_respawns(self):
        h = SessionHarness(SCORING_BOARD)
        h.steer(Direction.RIGHT)
        h.player_ticks(1)
        h.steer(Direction.UP)
        h.player_ticks(1)
        assert h.session.lives == 2
        assert h.player_pos == Vector2(1, 1)
        assert h.session.player.direction == Direction.NONE
        assert "hit" in h.categories()

    def test_invulnerability_window(self):
        h = SessionHarness(SCORING_BOARD)
        h.steer(Direction.UP)
        h.player_ticks(1)  # t=1.0, invulnerable until 2.5
        assert h.session.lives == 2

        h.steer(Direction.UP)
        h.player_ticks(1)  # t=2.0
        assert h.session.lives == 2
        assert h.categories()[-1] == "hit_ignored"

        h.steer(Direction.UP)
        h.player_ticks(1)  # t=3.0
        assert h.session.lives == 1

    def test_game_over_on_last_life(self):
        h = SessionHarness(SCORING_BOARD)
        h.session.lives = 1
        h.steer(Direction.UP)
        h.player_ticks(1)
        assert h.session.lives == 0
        assert h.session.status == SessionStatus.GAME_OVER
        assert h.categories()[-1] == "game_over"

    def test_no_ticks_after_game_over(self):
        h = SessionHarness(SCORING_BOARD)
        h.session.lives = 1
        h.steer(Direction.UP)
        h.player_ticks(1)
        ticks = h.session.player_ticks
        h.player_ticks(3)
        h.adversary_ticks(3)
        assert h.session.player_ticks == ticks
        assert h.session.lives == 0

    def test_out_of_bounds_is_blocked_without_penalty(self):
        h = SessionHarness("82\n11")
        h.steer(Direction.LEFT)
        h.player_ticks(2)
        assert h.player_pos == Vector2(0, 0)
        assert h.session.lives == 3


class TestAdversaryContact:
    def test_player_walks_into_patrol(self):
        h = SessionHarness("11111\n18041\n11111")
        h.steer(Direction.RIGHT)
        h.player_ticks(2)
        assert h.session.lives == 2
        assert h.player_pos == Vector2(1, 1)
        hit = [e for e in h.all_events() if e.category == "hit"][0]
        assert hit.actors == ("blinky",)

    def test_patrol_adversary_walks_into_player(self):
        h = SessionHarness(STACKED)
        h.adversary_ticks(1)
        assert h.adversary("blinky").pos == Vector2(1, 1)
        assert h.session.lives == 2

    def test_frightened_adversary_walks_into_player(self):
        h = SessionHarness(STACKED)
        h.adversary("blinky").mode = AdversaryMode.FRIGHTENED
        h.adversary_ticks(1)
        assert h.adversary("blinky").mode == AdversaryMode.CAPTURED
        assert h.session.score == 200
        assert h.session.lives == 3

    def test_invulnerable_player_survives_adversary(self):
        h = SessionHarness(STACKED)
        h.session.player.invulnerable_until = 10.0
        h.adversary_ticks(1)
        assert h.session.lives == 3
