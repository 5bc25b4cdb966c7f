"""Immutable per-tick frame snapshot for the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass

from mazechase.core.enums import COLLECTIBLE_KINDS, AdversaryMode, CellKind, Direction, SessionStatus
from mazechase.core.models import Vector2
from mazechase.core.session import SessionState


@dataclass(frozen=True, slots=True)
class AdversaryView:
    """Read-only view of one adversary."""

    name: str
    pos: Vector2
    direction: Direction
    mode: AdversaryMode
    home: Vector2
    respawn_in: float | None  # seconds of game time until a captured adversary returns


@dataclass(frozen=True, slots=True)
class FrameState:
    """Everything a renderer needs to draw one frame, safe to share across threads.

    Built at the end of a tick from copies of the session state; later ticks
    never mutate an already published frame.
    """

    player_ticks: int
    adversary_ticks: int
    game_time: float
    player_name: str
    player_pos: Vector2
    player_direction: Direction
    invulnerable: bool
    adversaries: tuple[AdversaryView, ...]
    score: int
    high_score: int
    lives: int
    level: int
    status: SessionStatus
    remaining_dots: int
    total_dots: int
    speed_rate: float
    frightened_remaining: float | None
    width: int
    height: int
    cells: tuple[CellKind, ...]

    @classmethod
    def from_session(cls, session: SessionState, speed_rate: float) -> FrameState:
        now = session.game_time
        board = session.board
        adversaries = tuple(
            AdversaryView(
                name=a.name,
                pos=a.pos,
                direction=a.direction,
                mode=a.mode,
                home=a.home,
                respawn_in=max(0.0, a.respawn_at - now) if a.respawn_at is not None else None,
            )
            for a in session.adversaries.values()
        )
        frightened = (
            max(0.0, session.frightened_until - now) if session.frightened_until is not None else None
        )
        return cls(
            player_ticks=session.player_ticks,
            adversary_ticks=session.adversary_ticks,
            game_time=now,
            player_name=session.player_name,
            player_pos=session.player.pos,
            player_direction=session.player.direction,
            invulnerable=session.player.is_invulnerable(now),
            adversaries=adversaries,
            score=session.score,
            high_score=session.high_score,
            lives=session.lives,
            level=session.level,
            status=session.status,
            remaining_dots=board.remaining_collectibles,
            total_dots=board.total_collectibles(),
            speed_rate=speed_rate,
            frightened_remaining=frightened,
            width=board.width,
            height=board.height,
            cells=board.grid.tiles(),
        )

    def adversary(self, name: str) -> AdversaryView | None:
        for view in self.adversaries:
            if view.name == name:
                return view
        return None

    def cell_at(self, pos: Vector2) -> CellKind:
        if not (0 <= pos.x < self.width and 0 <= pos.y < self.height):
            return CellKind.WALL
        return self.cells[pos.y * self.width + pos.x]

    def collectible_positions(self) -> list[Vector2]:
        """Remaining dots and energy dots in row-major order."""
        return [
            Vector2(i % self.width, i // self.width)
            for i, kind in enumerate(self.cells)
            if kind in COLLECTIBLE_KINDS
        ]
