"""TickScheduler — two fixed-rate cycles on one logical clock."""

from __future__ import annotations

import logging

from mazechase.core.enums import Cycle

logger = logging.getLogger(__name__)


class TickScheduler:
    """Decides which cycles are due at a given wall-clock time.

    Both cycles run at ``base_interval / rate``. Game time is wall time minus
    time spent paused, so deadlines measured in game time freeze with the
    game. A cycle fires at most once per ``due()`` call; if the caller fell
    behind, the next boundary is realigned instead of replaying missed ticks.
    """

    __slots__ = (
        "_intervals",
        "_next",
        "_rate",
        "_min_rate",
        "_max_rate",
        "_origin",
        "_paused_at",
        "_paused_total",
    )

    def __init__(
        self,
        player_interval: float,
        adversary_interval: float,
        rate: float = 1.0,
        min_rate: float = 0.5,
        max_rate: float = 5.0,
    ) -> None:
        self._intervals: dict[Cycle, float] = {
            Cycle.PLAYER: player_interval,
            Cycle.ADVERSARY: adversary_interval,
        }
        self._min_rate = min_rate
        self._max_rate = max_rate
        self._rate = self._clamp(rate)
        self._next: dict[Cycle, float] = {}
        self._origin: float | None = None
        self._paused_at: float | None = None
        self._paused_total = 0.0

    # -- properties --

    @property
    def rate(self) -> float:
        return self._rate

    @property
    def started(self) -> bool:
        return self._origin is not None

    @property
    def paused(self) -> bool:
        return self._paused_at is not None

    def interval(self, cycle: Cycle) -> float:
        return self._intervals[cycle] / self._rate

    def next_deadline(self, cycle: Cycle) -> float | None:
        return self._next.get(cycle)

    # -- lifecycle --

    def start(self, now: float) -> None:
        """(Re)start the clock at *now*; the first ticks fall one interval later."""
        self._origin = now
        self._paused_at = None
        self._paused_total = 0.0
        self._next = {cycle: now + self.interval(cycle) for cycle in self._intervals}

    def pause(self, now: float) -> None:
        if self._paused_at is None:
            self._paused_at = now

    def resume(self, now: float) -> None:
        """Continue from the next boundary; time spent paused is skipped, not replayed."""
        if self._paused_at is None:
            return
        gap = now - self._paused_at
        self._paused_total += gap
        self._next = {cycle: deadline + gap for cycle, deadline in self._next.items()}
        self._paused_at = None

    def game_time(self, now: float) -> float:
        if self._origin is None:
            return 0.0
        effective = self._paused_at if self._paused_at is not None else now
        return effective - self._origin - self._paused_total

    # -- rate --

    def _clamp(self, rate: float) -> float:
        return max(self._min_rate, min(rate, self._max_rate))

    def set_rate(self, rate: float) -> float:
        """Change the speed rate; already scheduled boundaries are kept."""
        self._rate = self._clamp(rate)
        logger.info("Speed rate set to %.2f", self._rate)
        return self._rate

    def change_rate(self, delta: float) -> float:
        return self.set_rate(self._rate + delta)

    # -- ticking --

    def due(self, now: float) -> list[Cycle]:
        """Return the cycles whose boundary has been reached, player first."""
        if self._origin is None or self._paused_at is not None:
            return []
        fired: list[Cycle] = []
        for cycle in (Cycle.PLAYER, Cycle.ADVERSARY):
            deadline = self._next[cycle]
            if now < deadline:
                continue
            fired.append(cycle)
            nxt = deadline + self.interval(cycle)
            if nxt <= now:
                nxt = now + self.interval(cycle)
            self._next[cycle] = nxt
        return fired
