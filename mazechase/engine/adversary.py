"""AdversaryController — behavior state machine and movement policy.

States::

    PATROL --energy dot--> FRIGHTENED --caught--> CAPTURED --respawn timer--> PATROL
                           FRIGHTENED --frightened timer--> PATROL

Frightened entry and expiry are global: every non-captured adversary changes
mode together. Captured adversaries stay where they were caught, take no
part in movement or collisions, and return to their home cell when their
respawn deadline passes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mazechase.core.enums import CARDINAL_DIRECTIONS, AdversaryMode, Domain, MoveResult
from mazechase.engine.movement import commit_if_walkable, propose_step

if TYPE_CHECKING:
    from mazechase.config import GameConfig
    from mazechase.core.board import Board
    from mazechase.core.models import Adversary
    from mazechase.core.session import SessionState
    from mazechase.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)


class AdversaryController:
    """Owns every mode transition and step taken by adversaries."""

    __slots__ = ("_config", "_rng")

    def __init__(self, config: GameConfig, rng: DeterministicRNG) -> None:
        self._config = config
        self._rng = rng

    # -- mode transitions --

    def frighten_all(self, session: SessionState, now: float) -> list[Adversary]:
        """Enter FRIGHTENED for every non-captured adversary and restart the timer."""
        session.frightened_until = now + self._config.frightened_duration
        changed = []
        for adv in session.adversaries.values():
            if adv.mode == AdversaryMode.CAPTURED:
                continue
            adv.mode = AdversaryMode.FRIGHTENED
            changed.append(adv)
        logger.info("Adversaries frightened until t=%.2f", session.frightened_until)
        return changed

    def capture(self, adv: Adversary, now: float) -> bool:
        """Capture a frightened adversary. Returns False if it was not capturable."""
        if adv.mode != AdversaryMode.FRIGHTENED:
            return False
        adv.mode = AdversaryMode.CAPTURED
        adv.respawn_at = now + self._config.respawn_duration
        logger.info("%s captured, respawns at t=%.2f", adv.name, adv.respawn_at)
        return True

    def expire_timers(self, session: SessionState, now: float) -> tuple[list[Adversary], list[Adversary]]:
        """Apply due deadlines. Returns (calmed, respawned) adversaries."""
        calmed: list[Adversary] = []
        respawned: list[Adversary] = []

        if session.frightened_until is not None and now >= session.frightened_until:
            session.frightened_until = None
            for adv in session.adversaries.values():
                if adv.mode == AdversaryMode.FRIGHTENED:
                    adv.mode = AdversaryMode.PATROL
                    calmed.append(adv)
            if calmed:
                logger.info("Frightened mode expired for %d adversaries", len(calmed))

        for adv in session.adversaries.values():
            if adv.mode == AdversaryMode.CAPTURED and adv.respawn_at is not None and now >= adv.respawn_at:
                adv.send_home()
                respawned.append(adv)
                logger.info("%s respawned at %s", adv.name, adv.home)

        return calmed, respawned

    # -- movement --

    def step(self, adv: Adversary, board: Board, tick: int) -> MoveResult:
        """Advance one adversary by one cell.

        1. Keep going if the cell ahead is walkable.
        2. Otherwise try the four directions in a seeded random order and take
           the first walkable one (reversal is allowed).
        3. Boxed in: stay put.
        """
        if not adv.active:
            return MoveResult.BLOCKED

        if commit_if_walkable(adv, propose_step(adv.pos, adv.direction), board) == MoveResult.MOVED:
            return MoveResult.MOVED

        for direction in self._rng.shuffled(CARDINAL_DIRECTIONS, Domain.ADVERSARY_MOVE, adv.index, tick):
            if commit_if_walkable(adv, propose_step(adv.pos, direction), board) == MoveResult.MOVED:
                adv.direction = direction
                return MoveResult.MOVED

        logger.debug("%s boxed in at %s", adv.name, adv.pos)
        return MoveResult.BLOCKED
