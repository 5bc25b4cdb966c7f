"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import Enum, IntEnum, unique


@unique
class CellKind(IntEnum):
    """Tile kinds on the board. Values are the digits used in level files."""

    EMPTY = 0
    WALL = 1
    DOT = 2
    ENERGY_DOT = 3
    BLINKY_SPAWN = 4
    INKY_SPAWN = 5
    PINKY_SPAWN = 6
    CLYDE_SPAWN = 7
    PLAYER_SPAWN = 8
    LEVEL_EXIT = 9


COLLECTIBLE_KINDS = frozenset({CellKind.DOT, CellKind.ENERGY_DOT})

# Adversary identity for each spawn cell kind, in roster order
ADVERSARY_SPAWNS: dict[CellKind, str] = {
    CellKind.BLINKY_SPAWN: "blinky",
    CellKind.INKY_SPAWN: "inky",
    CellKind.PINKY_SPAWN: "pinky",
    CellKind.CLYDE_SPAWN: "clyde",
}

ADVERSARY_NAMES: tuple[str, ...] = tuple(ADVERSARY_SPAWNS.values())


@unique
class Direction(str, Enum):
    """Grid step directions. NONE means standing still."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    NONE = "none"


CARDINAL_DIRECTIONS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


@unique
class AdversaryMode(str, Enum):
    """Behavior states of an adversary."""

    PATROL = "patrol"
    FRIGHTENED = "frightened"
    CAPTURED = "captured"


@unique
class SessionStatus(str, Enum):
    """Lifecycle status of a game session."""

    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "gameOver"
    VICTORY = "victory"


@unique
class MoveResult(IntEnum):
    """Outcome of committing a step."""

    MOVED = 0
    BLOCKED = 1


@unique
class ConsumedKind(IntEnum):
    """Collectible removed from the board by the player."""

    DOT = CellKind.DOT
    ENERGY_DOT = CellKind.ENERGY_DOT


@unique
class Cycle(str, Enum):
    """Fixed-rate update cycles driven by the scheduler."""

    PLAYER = "player"
    ADVERSARY = "adversary"


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    ADVERSARY_MOVE = 0
