"""Domain exceptions."""

from __future__ import annotations


class MazeChaseError(Exception):
    """Base class for engine errors."""


class MalformedLevelError(MazeChaseError, ValueError):
    """A level description has an inconsistent row or an unknown cell code.

    Normally recorded on the board as a warning and not raised; the offending
    cell is coerced to EMPTY.
    """

    def __init__(self, message: str, row: int, col: int | None = None) -> None:
        super().__init__(message)
        self.row = row
        self.col = col


class ConfigurationError(MazeChaseError):
    """A level cannot be started with the configured entity set."""
