"""Collision & scoring resolution for player and adversary ticks."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mazechase.core.enums import CellKind, ConsumedKind, MoveResult, SessionStatus

if TYPE_CHECKING:
    from mazechase.config import GameConfig
    from mazechase.core.models import Adversary, Vector2
    from mazechase.core.session import SessionState
    from mazechase.engine.adversary import AdversaryController

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Outcome:
    """One scoring or damage consequence of a tick, turned into an event by the loop."""

    kind: str  # "dot", "energy_dot", "capture", "hit", "hit_ignored", "game_over"
    message: str
    names: tuple[str, ...] = ()
    points: int = 0


class CollisionResolver:
    """Applies the hit, scoring and capture rules in a fixed order.

    Rules:
    - Walking into a wall costs a life unless the player is invulnerable.
    - A dot scores 10, an energy dot 50 and frightens the adversaries.
    - Sharing a cell with a frightened adversary captures it for 200 points
      and restores full lives; sharing it with a patrolling one is a hit.
    """

    __slots__ = ("_config", "_adversaries")

    def __init__(self, config: GameConfig, adversaries: AdversaryController) -> None:
        self._config = config
        self._adversaries = adversaries

    # -- entry points --

    def resolve_player_tick(
        self,
        session: SessionState,
        candidate: Vector2,
        result: MoveResult,
        now: float,
    ) -> list[Outcome]:
        """Resolve the consequences of the player's committed (or blocked) step."""
        outcomes: list[Outcome] = []
        player = session.player
        board = session.board

        if result == MoveResult.BLOCKED:
            # Out-of-bounds steps are dropped silently; only walls hurt.
            if board.in_bounds(candidate) and board.cell_at(candidate) == CellKind.WALL:
                outcomes.append(self.reduce_life(session, now, cause="wall"))
        else:
            consumed = board.consume(player.pos)
            if consumed is not None:
                outcomes.extend(self._score_collectible(session, consumed, now))

        if session.running:
            outcomes.extend(self._resolve_contacts(session, now))
        return outcomes

    def resolve_adversary_contact(self, session: SessionState, adv: Adversary, now: float) -> list[Outcome]:
        """An adversary stepped onto the player's cell; same rules as the player side."""
        if not session.running or not adv.active or adv.pos != session.player.pos:
            return []
        return self._contact(session, adv, now)

    def reduce_life(self, session: SessionState, now: float, cause: str) -> Outcome:
        """Take one life unless inside the invulnerability window."""
        player = session.player
        if player.is_invulnerable(now):
            logger.debug("Hit by %s ignored (invulnerable until t=%.2f)", cause, player.invulnerable_until)
            return Outcome("hit_ignored", f"Hit by {cause} ignored while invulnerable")

        session.lives = max(0, session.lives - 1)
        player.invulnerable_until = now + self._config.invulnerability_duration
        player.respawn()
        logger.info("Life lost to %s, %d remaining", cause, session.lives)

        if session.lives == 0:
            session.status = SessionStatus.GAME_OVER
            logger.info("Game over for %s with score %d", session.player_name, session.score)
            return Outcome("game_over", f"Hit by {cause}; game over", names=(cause,))
        return Outcome("hit", f"Hit by {cause}; {session.lives} lives left", names=(cause,))

    # -- internals --

    def _score_collectible(self, session: SessionState, consumed: ConsumedKind, now: float) -> list[Outcome]:
        if consumed == ConsumedKind.DOT:
            session.add_score(self._config.dot_points)
            return [Outcome("dot", "Dot eaten", points=self._config.dot_points)]

        session.add_score(self._config.energy_dot_points)
        frightened = self._adversaries.frighten_all(session, now)
        return [Outcome(
            "energy_dot",
            f"Energy dot eaten; {len(frightened)} adversaries frightened",
            names=tuple(a.name for a in frightened),
            points=self._config.energy_dot_points,
        )]

    def _resolve_contacts(self, session: SessionState, now: float) -> list[Outcome]:
        outcomes: list[Outcome] = []
        start = session.player.pos
        for adv in session.adversaries_at(start):
            outcomes.extend(self._contact(session, adv, now))
            # A hit sends the player back to spawn; later overlaps no longer apply.
            if not session.running or session.player.pos != start:
                break
        return outcomes

    def _contact(self, session: SessionState, adv: Adversary, now: float) -> list[Outcome]:
        if adv.frightened:
            self._adversaries.capture(adv, now)
            session.add_score(self._config.capture_points)
            session.lives = self._config.starting_lives
            return [Outcome(
                "capture",
                f"{adv.name} captured; lives restored to {session.lives}",
                names=(adv.name,),
                points=self._config.capture_points,
            )]
        return [self.reduce_life(session, now, cause=adv.name)]
