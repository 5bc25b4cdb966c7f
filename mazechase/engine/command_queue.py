"""Thread-safe command queue connecting input collaborators to the GameLoop."""

from __future__ import annotations

import queue
from dataclasses import dataclass
from enum import Enum, unique

from mazechase.core.enums import Direction


@unique
class CommandType(str, Enum):
    """Session control commands accepted from outside the engine thread."""

    DIRECTION = "direction"
    PAUSE = "pause"
    RESUME = "resume"
    RESTART = "restart"
    SPEED_UP = "speed_up"
    SLOW_DOWN = "slow_down"


@dataclass(frozen=True, slots=True)
class Command:
    kind: CommandType
    direction: Direction | None = None


class CommandQueue:
    """MPSC (multiple-producer, single-consumer) queue for Commands.

    API threads push; the engine thread drains at the next tick boundary.
    """

    __slots__ = ("_queue",)

    def __init__(self) -> None:
        self._queue: queue.Queue[Command] = queue.Queue()

    def push(self, command: Command) -> None:
        """Thread-safe enqueue."""
        self._queue.put_nowait(command)

    def drain(self) -> list[Command]:
        """Drain all pending commands in arrival order."""
        commands: list[Command] = []
        while True:
            try:
                commands.append(self._queue.get_nowait())
            except queue.Empty:
                break
        return commands

    @property
    def empty(self) -> bool:
        return self._queue.empty()
