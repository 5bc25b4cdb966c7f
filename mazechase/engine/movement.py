"""Grid-step movement shared by the player and adversaries."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from mazechase.core.enums import Direction, MoveResult
from mazechase.core.models import DIRECTION_OFFSETS, Vector2

if TYPE_CHECKING:
    from mazechase.core.board import Board

logger = logging.getLogger(__name__)


class Movable(Protocol):
    pos: Vector2
    direction: Direction


def propose_step(pos: Vector2, direction: Direction) -> Vector2:
    """Return the cell one step from *pos* in *direction* (not yet committed)."""
    return pos + DIRECTION_OFFSETS[direction]


def commit_if_walkable(entity: Movable, candidate: Vector2, board: Board) -> MoveResult:
    """Move *entity* to *candidate* only if the board allows it."""
    if not board.is_walkable(candidate):
        logger.debug("Move to %s blocked", candidate)
        return MoveResult.BLOCKED
    entity.pos = candidate
    return MoveResult.MOVED


def try_set_direction(entity: Movable, direction: Direction, board: Board) -> bool:
    """Change heading unless the first step would hit a wall or leave the board.

    A rejected change leaves the previous direction active. NONE always succeeds.
    """
    if direction != Direction.NONE and not board.is_walkable(propose_step(entity.pos, direction)):
        return False
    entity.direction = direction
    return True
