"""Board model: level parsing, cell classification, and collectible bookkeeping."""

from __future__ import annotations

import logging

from mazechase.core.enums import ADVERSARY_SPAWNS, COLLECTIBLE_KINDS, CellKind, ConsumedKind
from mazechase.core.errors import ConfigurationError, MalformedLevelError
from mazechase.core.grid import Grid
from mazechase.core.models import Vector2, by_distance

logger = logging.getLogger(__name__)

_DIGITS = "0123456789"


def parse_level(text: str, strict: bool = False) -> tuple[Grid, list[MalformedLevelError]]:
    """Parse a digit-per-cell level description into a Grid.

    Whitespace inside a row is ignored and blank lines are skipped. The width
    is taken from the first non-blank row. Short rows are padded with EMPTY,
    long rows are truncated and unknown characters become EMPTY; each such
    problem is returned as a MalformedLevelError (or raised when *strict*).
    """
    rows = ["".join(line.split()) for line in text.splitlines()]
    rows = [r for r in rows if r]
    width = len(rows[0]) if rows else 0
    issues: list[MalformedLevelError] = []

    def report(issue: MalformedLevelError) -> None:
        if strict:
            raise issue
        issues.append(issue)

    parsed: list[list[CellKind]] = []
    for y, raw in enumerate(rows):
        if len(raw) != width:
            report(MalformedLevelError(
                f"row {y} has {len(raw)} cells, expected {width}", row=y))
        cells: list[CellKind] = []
        for x in range(width):
            ch = raw[x] if x < len(raw) else None
            if ch is None:
                cells.append(CellKind.EMPTY)
            elif ch in _DIGITS:
                cells.append(CellKind(int(ch)))
            else:
                report(MalformedLevelError(
                    f"unknown cell code {ch!r} at row {y}, col {x}", row=y, col=x))
                cells.append(CellKind.EMPTY)
        parsed.append(cells)

    return Grid.from_rows(parsed), issues


class Board:
    """Mutable grid for one level plus an immutable copy of its original layout."""

    __slots__ = ("level", "grid", "_original", "_total", "_remaining", "issues")

    def __init__(self, grid: Grid, level: int = 1, issues: list[MalformedLevelError] | None = None) -> None:
        self.level = level
        self.grid = grid
        self._original = grid.copy()
        self._total = grid.count(COLLECTIBLE_KINDS)
        self._remaining = self._total
        self.issues: list[MalformedLevelError] = list(issues or [])

    @classmethod
    def parse(cls, text: str, level: int = 1, strict: bool = False) -> Board:
        grid, issues = parse_level(text, strict=strict)
        for issue in issues:
            logger.warning("Level %d: %s (coerced to EMPTY)", level, issue)
        return cls(grid, level=level, issues=issues)

    # -- dimensions --

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    # -- queries --

    def in_bounds(self, pos: Vector2) -> bool:
        return self.grid.in_bounds(pos)

    def cell_at(self, pos: Vector2) -> CellKind:
        return self.grid.get(pos)

    def is_walkable(self, pos: Vector2) -> bool:
        """True for every in-bounds cell except WALL."""
        return self.grid.is_walkable(pos)

    def total_collectibles(self) -> int:
        """Dots and energy dots present when the level was loaded."""
        return self._total

    @property
    def remaining_collectibles(self) -> int:
        return self._remaining

    @property
    def original(self) -> Grid:
        return self._original.copy()

    # -- mutation --

    def consume(self, pos: Vector2) -> ConsumedKind | None:
        """Remove a dot or energy dot at *pos*. Returns what was eaten, or None."""
        kind = self.grid.get(pos)
        if kind not in COLLECTIBLE_KINDS:
            return None
        self.grid.set(pos, CellKind.EMPTY)
        self._remaining -= 1
        return ConsumedKind(kind)

    def reset(self) -> None:
        """Restore the original layout and recount collectibles."""
        self.grid = self._original.copy()
        self._remaining = self.grid.count(COLLECTIBLE_KINDS)

    # -- layout lookups (always from the original layout) --

    def player_spawns(self) -> list[Vector2]:
        return [pos for pos, kind in self._original.cells() if kind == CellKind.PLAYER_SPAWN]

    def player_spawn(self) -> Vector2:
        spawns = self.player_spawns()
        if len(spawns) != 1:
            raise ConfigurationError(
                f"level {self.level} must have exactly one player spawn, found {len(spawns)}")
        return spawns[0]

    def adversary_spawns(self) -> dict[str, Vector2]:
        """Map adversary name to its spawn cell, in roster order."""
        found: dict[str, Vector2] = {}
        for pos, kind in self._original.cells():
            name = ADVERSARY_SPAWNS.get(kind)
            if name is None:
                continue
            if name in found:
                raise ConfigurationError(
                    f"level {self.level} spawns {name} twice ({found[name]} and {pos})")
            found[name] = pos
        order = list(ADVERSARY_SPAWNS.values())
        return dict(sorted(found.items(), key=lambda item: order.index(item[0])))

    def exit_cells(self) -> list[Vector2]:
        return [pos for pos, kind in self._original.cells() if kind == CellKind.LEVEL_EXIT]

    def is_exit(self, pos: Vector2) -> bool:
        return self._original.get(pos) == CellKind.LEVEL_EXIT

    def collectible_positions(self) -> list[Vector2]:
        return [pos for pos, kind in self.grid.cells() if kind in COLLECTIBLE_KINDS]

    def nearest_collectible(self, pos: Vector2) -> Vector2 | None:
        """Closest remaining dot by Manhattan distance; ties go to row-major order."""
        ranked = by_distance(pos, self.collectible_positions())
        return ranked[0] if ranked else None

    def validate(self, roster: tuple[str, ...] = ()) -> None:
        """Raise ConfigurationError if the level cannot host a session."""
        self.player_spawn()
        spawns = self.adversary_spawns()
        missing = [name for name in roster if name not in spawns]
        if missing:
            raise ConfigurationError(
                f"level {self.level} has no spawn cell for adversary(s): {', '.join(missing)}")
