"""GameLoop — the session state machine and tick engine.

Cycle per player tick:
  1. Timers — expire frightened mode and adversary respawns
  2. Movement — propose and commit the player's step
  3. Collision & scoring — walls, dots, adversary contact
  4. Progress — level completion, level-up or victory

Cycle per adversary tick:
  1. Timers
  2. Each active adversary steps, then contact with the player is resolved

Status transitions::

    RUNNING <-> PAUSED
    RUNNING --lives reach 0--> GAME_OVER
    RUNNING --level complete--> (next level) RUNNING
    RUNNING --final level complete and score reached--> VICTORY
    any --restart--> RUNNING (level 1)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mazechase.core.enums import Cycle, Direction, SessionStatus
from mazechase.core.levels import LevelLoader
from mazechase.core.session import SessionState
from mazechase.core.snapshot import FrameState
from mazechase.engine.adversary import AdversaryController
from mazechase.engine.clock import Clock, monotonic
from mazechase.engine.collision import CollisionResolver, Outcome
from mazechase.engine.movement import commit_if_walkable, propose_step, try_set_direction
from mazechase.engine.scheduler import TickScheduler
from mazechase.systems.rng import DeterministicRNG
from mazechase.utils.event_log import SimEvent

if TYPE_CHECKING:
    from mazechase.config import GameConfig
    from mazechase.core.board import Board

logger = logging.getLogger(__name__)


class GameLoop:
    """The heartbeat of a game session.

    All mutation of the session happens inside this object, on whichever
    single thread calls it. Readers get immutable FrameState snapshots.
    """

    __slots__ = (
        "_config",
        "_loader",
        "_rng",
        "_clock",
        "_scheduler",
        "_adversaries",
        "_collisions",
        "_session",
        "_events",
        "_frame",
    )

    def __init__(
        self,
        config: GameConfig,
        loader: LevelLoader | None = None,
        rng: DeterministicRNG | None = None,
        clock: Clock = monotonic,
    ) -> None:
        self._config = config
        self._loader = loader or LevelLoader(
            config.levels_dir,
            strict=config.strict_levels,
            roster=config.adversary_roster,
            level_count=config.level_count,
        )
        self._rng = rng or DeterministicRNG(config.seed)
        self._clock = clock
        self._scheduler = TickScheduler(
            config.player_tick_interval,
            config.adversary_tick_interval,
            rate=config.initial_speed_rate,
            min_rate=config.min_speed_rate,
            max_rate=config.max_speed_rate,
        )
        self._adversaries = AdversaryController(config, self._rng)
        self._collisions = CollisionResolver(config, self._adversaries)
        self._events: list[SimEvent] = []
        self._session = SessionState(
            self.load_level(config.first_level),
            player_name=config.player_name,
            lives=config.starting_lives,
            level=config.first_level,
        )
        self._frame = FrameState.from_session(self._session, self._scheduler.rate)

    # -- properties --

    @property
    def session(self) -> SessionState:
        return self._session

    @property
    def scheduler(self) -> TickScheduler:
        return self._scheduler

    @property
    def status(self) -> SessionStatus:
        return self._session.status

    @property
    def level_count(self) -> int:
        return self._loader.level_count

    @property
    def frame(self) -> FrameState:
        """The most recently published frame."""
        return self._frame

    def drain_events(self) -> list[SimEvent]:
        """Return and forget the events emitted since the last call."""
        events, self._events = self._events, []
        return events

    def _emit(self, category: str, message: str, actors: tuple[str, ...] = (), metadata: dict | None = None) -> None:
        self._events.append(SimEvent(
            tick=self._session.player_ticks,
            category=category,
            message=message,
            actors=actors,
            metadata=metadata,
        ))

    def _emit_outcomes(self, outcomes: list[Outcome]) -> None:
        for o in outcomes:
            self._emit(o.kind, o.message, o.names, {"points": o.points} if o.points else None)

    # -- levels --

    def load_level(self, index: int) -> Board:
        """Load and validate the board for *index*; raises ConfigurationError."""
        return self._loader.load(index)

    # -- clock-driven entry points --

    def start(self) -> None:
        """Start the clock; a session that is already ticking keeps its game time."""
        if self._scheduler.started:
            return
        self._scheduler.start(self._clock())
        self._emit("session", f"Session started for {self._session.player_name}")
        logger.info("Session started (level %d, seed %d)", self._session.level, self._rng.seed)

    def advance(self) -> int:
        """Run every cycle due at the clock's current time. Returns ticks executed."""
        now = self._clock()
        if not self._scheduler.started:
            self._scheduler.start(now)
        ran = 0
        for cycle in self._scheduler.due(now):
            game_now = self._scheduler.game_time(now)
            if cycle == Cycle.PLAYER:
                self.player_tick(game_now)
            else:
                self.adversary_tick(game_now)
            ran += 1
        if ran:
            self.on_tick()
        return ran

    def on_tick(self) -> FrameState:
        """Publish and return a snapshot of the current session."""
        self._frame = FrameState.from_session(self._session, self._scheduler.rate)
        return self._frame

    # -- ticks (game time in seconds) --

    def player_tick(self, now: float) -> None:
        session = self._session
        if not session.running:
            return
        session.game_time = now
        session.player_ticks += 1
        self._expire_timers(now)

        player = session.player
        candidate = propose_step(player.pos, player.direction)
        result = commit_if_walkable(player, candidate, session.board)
        self._emit_outcomes(self._collisions.resolve_player_tick(session, candidate, result, now))

        if session.running:
            self._check_progress()

    def adversary_tick(self, now: float) -> None:
        session = self._session
        if not session.running:
            return
        session.game_time = now
        session.adversary_ticks += 1
        self._expire_timers(now)

        for adv in session.adversaries.values():
            if not adv.active:
                continue
            self._adversaries.step(adv, session.board, session.adversary_ticks)
            self._emit_outcomes(self._collisions.resolve_adversary_contact(session, adv, now))
            if not session.running:
                break

    def _expire_timers(self, now: float) -> None:
        calmed, respawned = self._adversaries.expire_timers(self._session, now)
        if calmed:
            self._emit("frightened_end", "Adversaries back on patrol", tuple(a.name for a in calmed))
        for adv in respawned:
            self._emit("respawn", f"{adv.name} returned home", (adv.name,))

    # -- progress --

    def _check_progress(self) -> None:
        session = self._session
        board = session.board
        on_exit = board.is_exit(session.player.pos)
        cleared = board.remaining_collectibles == 0

        if session.level >= self.level_count:
            if (cleared or on_exit) and session.score > self._config.victory_score:
                self._win()
            return

        threshold = self._config.score_threshold(session.level)
        early_exit = on_exit and threshold is not None and session.score > threshold
        if cleared or early_exit:
            self._level_up()

    def _level_up(self) -> None:
        session = self._session
        next_level = session.level + 1
        board = self.load_level(next_level)
        session.level = next_level
        session.install_board(board)
        rate = self._scheduler.change_rate(self._config.speed_step)
        self._emit("level_up", f"Level {next_level} reached", metadata={"level": next_level, "speed_rate": rate})
        logger.info("Level up: now on level %d at speed %.2f", next_level, rate)

    def _win(self) -> None:
        session = self._session
        session.status = SessionStatus.VICTORY
        self._emit("victory", f"{session.player_name} wins with {session.score} points",
                   metadata={"score": session.score})
        logger.info("Victory for %s with score %d", session.player_name, session.score)

    # -- controls --

    def set_player_direction(self, direction: Direction) -> bool:
        """Steer the player from the next tick on. Turns into walls are ignored."""
        if self._session.finished:
            return False
        return try_set_direction(self._session.player, direction, self._session.board)

    def pause(self) -> bool:
        if self._session.status != SessionStatus.RUNNING:
            return False
        self._session.status = SessionStatus.PAUSED
        self._scheduler.pause(self._clock())
        self._emit("control", "Paused")
        logger.info("Paused at player tick %d", self._session.player_ticks)
        return True

    def resume(self) -> bool:
        if self._session.status != SessionStatus.PAUSED:
            return False
        self._session.status = SessionStatus.RUNNING
        self._scheduler.resume(self._clock())
        self._emit("control", "Resumed")
        logger.info("Resumed at player tick %d", self._session.player_ticks)
        return True

    def toggle_pause(self) -> bool:
        return self.resume() if self._session.status == SessionStatus.PAUSED else self.pause()

    def restart(self) -> None:
        """Fold the score into the high score and start over from the first level."""
        board = self.load_level(self._config.first_level)
        session = self._session
        if session.record_high_score():
            logger.info("New high score: %d", session.high_score)
        session.score = 0
        session.lives = self._config.starting_lives
        session.level = self._config.first_level
        session.status = SessionStatus.RUNNING
        session.game_time = 0.0
        session.install_board(board)
        self._scheduler.set_rate(self._config.initial_speed_rate)
        self._scheduler.start(self._clock())
        self._emit("control", "Restarted", metadata={"high_score": session.high_score})
        self.on_tick()

    def increase_speed(self) -> float:
        return self._scheduler.change_rate(self._config.speed_step)

    def decrease_speed(self) -> float:
        return self._scheduler.change_rate(-self._config.speed_step)
