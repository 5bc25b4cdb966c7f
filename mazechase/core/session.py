"""Mutable authoritative session state — only mutated by the GameLoop."""

from __future__ import annotations

from mazechase.core.board import Board
from mazechase.core.enums import SessionStatus
from mazechase.core.models import Adversary, Player, Vector2


class SessionState:
    """The single source of truth for one game session."""

    __slots__ = (
        "player_name",
        "board",
        "player",
        "adversaries",
        "score",
        "high_score",
        "lives",
        "level",
        "status",
        "frightened_until",
        "player_ticks",
        "adversary_ticks",
        "game_time",
    )

    def __init__(self, board: Board, player_name: str = "player", lives: int = 3, level: int = 1) -> None:
        self.player_name = player_name
        self.board = board
        self.player: Player
        self.adversaries: dict[str, Adversary] = {}
        self.score: int = 0
        self.high_score: int = 0
        self.lives: int = lives
        self.level: int = level
        self.status: SessionStatus = SessionStatus.RUNNING
        self.frightened_until: float | None = None
        self.player_ticks: int = 0
        self.adversary_ticks: int = 0
        self.game_time: float = 0.0
        self.install_board(board)

    @property
    def remaining_dots(self) -> int:
        return self.board.remaining_collectibles

    @property
    def running(self) -> bool:
        return self.status == SessionStatus.RUNNING

    @property
    def finished(self) -> bool:
        return self.status in (SessionStatus.GAME_OVER, SessionStatus.VICTORY)

    def install_board(self, board: Board) -> None:
        """Place the player and one adversary per spawn cell on *board*."""
        self.board = board
        spawn = board.player_spawn()
        self.player = Player(pos=spawn, spawn=spawn)
        self.adversaries = {
            name: Adversary(index=i, name=name, pos=pos, home=pos)
            for i, (name, pos) in enumerate(board.adversary_spawns().items())
        }
        self.frightened_until = None

    def add_score(self, points: int) -> None:
        self.score = max(0, self.score + points)

    def record_high_score(self) -> bool:
        """Fold the current score into the high score. Returns True on a new record."""
        if self.score > self.high_score:
            self.high_score = self.score
            return True
        return False

    def adversaries_at(self, pos: Vector2) -> list[Adversary]:
        """Active (non-captured) adversaries standing on *pos*."""
        return [a for a in self.adversaries.values() if a.active and a.pos == pos]
