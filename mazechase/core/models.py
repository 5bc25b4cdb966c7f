"""Core data models: Vector2, Player, Adversary."""

from __future__ import annotations

from dataclasses import dataclass, replace

from mazechase.core.enums import AdversaryMode, Direction


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2D integer grid coordinate (col, row)."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def manhattan(self, other: Vector2) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


DIRECTION_OFFSETS: dict[Direction, Vector2] = {
    Direction.UP: Vector2(0, -1),
    Direction.DOWN: Vector2(0, 1),
    Direction.LEFT: Vector2(-1, 0),
    Direction.RIGHT: Vector2(1, 0),
    Direction.NONE: Vector2(0, 0),
}


def by_distance(origin: Vector2, cells: list[Vector2]) -> list[Vector2]:
    """Order *cells* nearest-first by Manhattan distance; ties keep their input order."""
    return sorted(cells, key=origin.manhattan)


@dataclass(slots=True)
class Player:
    """The player-controlled agent."""

    pos: Vector2
    spawn: Vector2
    direction: Direction = Direction.NONE
    invulnerable_until: float = 0.0  # game time until which hits are ignored

    def is_invulnerable(self, now: float) -> bool:
        return now < self.invulnerable_until

    def respawn(self) -> None:
        """Return to the spawn cell and stop moving."""
        self.pos = self.spawn
        self.direction = Direction.NONE

    def copy(self) -> Player:
        return replace(self)


@dataclass(slots=True)
class Adversary:
    """An autonomous adversary, owned by the session state."""

    index: int
    name: str
    pos: Vector2
    home: Vector2
    direction: Direction = Direction.UP
    mode: AdversaryMode = AdversaryMode.PATROL
    respawn_at: float | None = None  # game time when a captured adversary returns

    @property
    def active(self) -> bool:
        """Captured adversaries neither move nor collide."""
        return self.mode != AdversaryMode.CAPTURED

    @property
    def frightened(self) -> bool:
        return self.mode == AdversaryMode.FRIGHTENED

    def send_home(self) -> None:
        self.pos = self.home
        self.direction = Direction.UP
        self.mode = AdversaryMode.PATROL
        self.respawn_at = None

    def copy(self) -> Adversary:
        return replace(self)
