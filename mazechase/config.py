"""Game configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for a game session."""

    # Session
    player_name: str = "player"
    seed: int = 42

    # Timing (seconds between ticks at speed rate 1.0)
    player_tick_interval: float = 0.040
    adversary_tick_interval: float = 1.0

    # Speed rate: both cycles run at interval / rate
    initial_speed_rate: float = 1.0
    speed_step: float = 0.5
    min_speed_rate: float = 0.5
    max_speed_rate: float = 5.0

    # Timers (seconds of game time)
    invulnerability_duration: float = 1.5
    frightened_duration: float = 20.0
    respawn_duration: float = 15.0

    # Scoring
    dot_points: int = 10
    energy_dot_points: int = 50
    capture_points: int = 200

    # Lives
    starting_lives: int = 3

    # Levels
    first_level: int = 1
    levels_dir: str | None = None          # None = boards bundled with the package
    level_count: int | None = None         # None = every consecutive board found
    # Score a player must exceed to leave level N through an exit cell early
    level_score_thresholds: tuple = ((1, 90),)
    victory_score: int = 1270
    strict_levels: bool = False            # raise on malformed cells instead of coercing
    # Adversaries every board must provide; empty = whatever the board spawns
    adversary_roster: tuple[str, ...] = ()

    # Runtime host
    idle_sleep_seconds: float = 0.005
    event_log_limit: int = 5000

    # Logging
    log_level: str = "INFO"

    def score_threshold(self, level: int) -> int | None:
        """Return the exit-cell score checkpoint for *level*, if any."""
        for lvl, threshold in self.level_score_thresholds:
            if lvl == level:
                return threshold
        return None
