"""Core data models and world representation."""

from mazechase.core.enums import AdversaryMode, CellKind, ConsumedKind, Direction, MoveResult, SessionStatus
from mazechase.core.errors import ConfigurationError, MalformedLevelError, MazeChaseError
from mazechase.core.models import Adversary, Player, Vector2
from mazechase.core.grid import Grid
from mazechase.core.board import Board
from mazechase.core.levels import LevelLoader, TextLevelLoader
from mazechase.core.session import SessionState
from mazechase.core.snapshot import AdversaryView, FrameState

__all__ = [
    "Adversary",
    "AdversaryMode",
    "AdversaryView",
    "Board",
    "CellKind",
    "ConfigurationError",
    "ConsumedKind",
    "Direction",
    "FrameState",
    "Grid",
    "LevelLoader",
    "MalformedLevelError",
    "MazeChaseError",
    "MoveResult",
    "Player",
    "SessionState",
    "SessionStatus",
    "TextLevelLoader",
    "Vector2",
]
