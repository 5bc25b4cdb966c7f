"""Autopilot input source for headless runs.

Steers the player along an A* path toward the nearest remaining collectible
(or a level exit once the board is clear), routing around patrolling
adversaries. It reads only FrameState snapshots and answers with a
Direction, exactly like a keyboard collaborator would.
"""

from __future__ import annotations

import heapq

from mazechase.core.enums import AdversaryMode, CellKind, Direction
from mazechase.core.models import DIRECTION_OFFSETS, Vector2, by_distance
from mazechase.core.snapshot import FrameState

_STEPS: tuple[tuple[Direction, Vector2], ...] = tuple(
    (d, off) for d, off in DIRECTION_OFFSETS.items() if d != Direction.NONE
)


def _walkable(frame: FrameState, pos: Vector2) -> bool:
    return 0 <= pos.x < frame.width and 0 <= pos.y < frame.height and frame.cell_at(pos) != CellKind.WALL


class Pathfinder:
    """A* over a frame's cells with unit step cost and a node budget."""

    __slots__ = ("_frame", "_max_nodes")

    def __init__(self, frame: FrameState, max_nodes: int = 2000) -> None:
        self._frame = frame
        self._max_nodes = max_nodes

    def find_path(self, start: Vector2, goal: Vector2, blocked: set[Vector2] | None = None) -> list[Vector2] | None:
        """Positions from *start* (exclusive) to *goal* (inclusive), or None."""
        if start == goal:
            return []
        if not _walkable(self._frame, goal):
            return None
        blocked = blocked or set()

        counter = 0
        open_heap: list[tuple[int, int, Vector2]] = [(0, counter, start)]
        g_score: dict[Vector2, int] = {start: 0}
        came_from: dict[Vector2, Vector2] = {}
        closed: set[Vector2] = set()

        while open_heap and len(closed) < self._max_nodes:
            _, _, current = heapq.heappop(open_heap)
            if current == goal:
                return self._reconstruct(came_from, current)
            if current in closed:
                continue
            closed.add(current)

            for _, off in _STEPS:
                nxt = current + off
                if nxt in closed or nxt in blocked or not _walkable(self._frame, nxt):
                    continue
                tentative = g_score[current] + 1
                if tentative < g_score.get(nxt, 1 << 30):
                    g_score[nxt] = tentative
                    came_from[nxt] = current
                    counter += 1
                    heapq.heappush(open_heap, (tentative + nxt.manhattan(goal), counter, nxt))
        return None

    @staticmethod
    def _reconstruct(came_from: dict[Vector2, Vector2], current: Vector2) -> list[Vector2]:
        path: list[Vector2] = []
        while current in came_from:
            path.append(current)
            current = came_from[current]
        path.reverse()
        return path


class Autopilot:
    """Chooses a direction for the player from the latest frame."""

    __slots__ = ("_exits",)

    def __init__(self, exits: list[Vector2] | None = None) -> None:
        self._exits = list(exits or [])

    def set_exits(self, exits: list[Vector2]) -> None:
        self._exits = list(exits)

    def _targets(self, frame: FrameState) -> list[Vector2]:
        prey = [a.pos for a in frame.adversaries if a.mode == AdversaryMode.FRIGHTENED]
        targets = prey + frame.collectible_positions() or list(self._exits)
        return by_distance(frame.player_pos, targets)

    def choose(self, frame: FrameState) -> Direction:
        start = frame.player_pos
        danger = {a.pos for a in frame.adversaries if a.mode == AdversaryMode.PATROL}
        pf = Pathfinder(frame)
        for target in self._targets(frame)[:8]:
            path = pf.find_path(start, target, blocked=danger)
            if path:
                step = path[0] - start
                for direction, off in _STEPS:
                    if off == step:
                        return direction
        # Nothing reachable: keep a safe heading or stop.
        for direction, off in _STEPS:
            nxt = start + off
            if _walkable(frame, nxt) and nxt not in danger:
                return direction
        return Direction.NONE
