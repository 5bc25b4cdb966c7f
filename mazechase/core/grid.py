"""Grid / tile storage."""

from __future__ import annotations

from typing import Iterator

from mazechase.core.enums import CellKind
from mazechase.core.models import Vector2


class Grid:
    """2D tile grid backed by a flat list, indexed by (col, row)."""

    __slots__ = ("width", "height", "_tiles")

    def __init__(self, width: int, height: int, default: CellKind = CellKind.EMPTY) -> None:
        self.width = width
        self.height = height
        self._tiles: list[CellKind] = [default] * (width * height)

    @classmethod
    def from_rows(cls, rows: list[list[CellKind]]) -> Grid:
        """Build a grid from equally sized rows."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        grid = cls(width, height)
        for y, row in enumerate(rows):
            for x, kind in enumerate(row):
                grid._tiles[y * width + x] = kind
        return grid

    # -- access --

    def _idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, pos: Vector2) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def get(self, pos: Vector2) -> CellKind:
        """Return the cell kind at *pos*; out-of-bounds reads as WALL."""
        if not self.in_bounds(pos):
            return CellKind.WALL
        return self._tiles[self._idx(pos.x, pos.y)]

    def set(self, pos: Vector2, kind: CellKind) -> None:
        if self.in_bounds(pos):
            self._tiles[self._idx(pos.x, pos.y)] = kind

    def is_walkable(self, pos: Vector2) -> bool:
        return self.in_bounds(pos) and self._tiles[self._idx(pos.x, pos.y)] != CellKind.WALL

    def cells(self) -> Iterator[tuple[Vector2, CellKind]]:
        """Yield every (position, kind) pair in row-major order."""
        for idx, kind in enumerate(self._tiles):
            yield Vector2(idx % self.width, idx // self.width), kind

    def count(self, kinds: frozenset[CellKind]) -> int:
        return sum(1 for k in self._tiles if k in kinds)

    def tiles(self) -> tuple[CellKind, ...]:
        return tuple(self._tiles)

    # -- copy --

    def copy(self) -> Grid:
        new = Grid.__new__(Grid)
        new.width = self.width
        new.height = self.height
        new._tiles = list(self._tiles)
        return new

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.width == other.width and self.height == other.height and self._tiles == other._tiles
