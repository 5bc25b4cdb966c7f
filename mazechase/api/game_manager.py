"""GameManager — runs the GameLoop on a background thread.

The API reads from an atomically-swapped immutable FrameState; the GameLoop
mutates the session exclusively on the engine thread (single writer). Input
from request threads travels through a CommandQueue and is applied at the
next tick boundary.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import TYPE_CHECKING

from mazechase.core.enums import Direction, SessionStatus
from mazechase.core.errors import MazeChaseError
from mazechase.core.snapshot import FrameState
from mazechase.engine.clock import Clock, monotonic
from mazechase.engine.command_queue import Command, CommandQueue, CommandType
from mazechase.engine.game_loop import GameLoop
from mazechase.utils.event_log import EventLog

if TYPE_CHECKING:
    from mazechase.config import GameConfig
    from mazechase.core.levels import LevelLoader

logger = logging.getLogger(__name__)


class GameManager:
    """Manages the game lifecycle on a background thread.

    Provides thread-safe access to:
      - latest frame (atomic reference swap)
      - event log (lock-guarded ring buffer)
      - control commands (direction / pause / resume / restart / speed)
    """

    def __init__(self, config: GameConfig, loader: LevelLoader | None = None, clock: Clock = monotonic) -> None:
        self._config = config

        self._frame_lock = threading.Lock()
        self._latest_frame: FrameState | None = None
        self._event_log = EventLog(limit=config.event_log_limit)
        self._commands = CommandQueue()
        self._last_error: str | None = None

        self._thread: threading.Thread | None = None
        self._running = threading.Event()
        self._stop_requested = threading.Event()

        self._loop: GameLoop | None = None
        try:
            self._loop = GameLoop(config, loader=loader, clock=clock)
        except MazeChaseError as exc:
            self._last_error = str(exc)
            logger.error("Game could not be initialised: %s", exc)
        else:
            self._publish()

    # -- public properties --

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def running(self) -> bool:
        return self._running.is_set()

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    @property
    def last_error(self) -> str | None:
        return self._last_error

    @property
    def loop(self) -> GameLoop | None:
        return self._loop

    @property
    def status(self) -> SessionStatus:
        frame = self.get_frame()
        return frame.status if frame else SessionStatus.RUNNING

    # -- frame access --

    def get_frame(self) -> FrameState | None:
        with self._frame_lock:
            return self._latest_frame

    # -- input (any thread) --

    def submit(self, command: Command) -> None:
        self._commands.push(command)

    def set_direction(self, direction: Direction) -> None:
        self.submit(Command(CommandType.DIRECTION, direction))

    def pause(self) -> None:
        self.submit(Command(CommandType.PAUSE))

    def resume(self) -> None:
        self.submit(Command(CommandType.RESUME))

    def restart(self) -> None:
        self.submit(Command(CommandType.RESTART))

    def speed_up(self) -> None:
        self.submit(Command(CommandType.SPEED_UP))

    def slow_down(self) -> None:
        self.submit(Command(CommandType.SLOW_DOWN))

    # -- lifecycle --

    def start(self) -> None:
        if self._running.is_set() or self._loop is None:
            return
        self._stop_requested.clear()
        self._last_error = None
        self._loop.start()
        self._running.set()
        self._thread = threading.Thread(target=self._run_loop, name="game-loop", daemon=True)
        self._thread.start()
        logger.info("GameManager started")

    def stop(self) -> None:
        """Halt ticking; does not wait for an in-flight tick to acknowledge."""
        self._stop_requested.set()
        self._running.clear()
        if self._thread and self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join(timeout=1.0)
        logger.info("GameManager stopped.")

    # -- engine thread --

    def pump(self) -> int:
        """Apply queued commands, run due ticks and publish. Returns ticks run."""
        if self._loop is None:
            return 0
        applied = self._apply_commands()
        ran = self._loop.advance()
        if ran or applied:
            self._publish()
        return ran

    def _apply_commands(self) -> int:
        commands = self._commands.drain()
        loop = self._loop
        for cmd in commands:
            match cmd.kind:
                case CommandType.DIRECTION:
                    if cmd.direction is not None and not loop.set_player_direction(cmd.direction):
                        logger.debug("Turn %s rejected", cmd.direction.value)
                case CommandType.PAUSE:
                    loop.pause()
                case CommandType.RESUME:
                    loop.resume()
                case CommandType.RESTART:
                    loop.restart()
                case CommandType.SPEED_UP:
                    loop.increase_speed()
                case CommandType.SLOW_DOWN:
                    loop.decrease_speed()
        return len(commands)

    def _run_loop(self) -> None:
        """Background thread main loop."""
        logger.info("Engine thread started.")
        try:
            while not self._stop_requested.is_set():
                try:
                    self.pump()
                except MazeChaseError as exc:
                    self._last_error = str(exc)
                    logger.error("Level could not be started: %s", exc)
                    break
                time.sleep(self._config.idle_sleep_seconds)
        finally:
            self._running.clear()
        logger.info("Engine thread exited.")

    def _publish(self) -> None:
        """Swap the frame and push events from the last pump."""
        frame = self._loop.on_tick()
        with self._frame_lock:
            self._latest_frame = frame
        events = self._loop.drain_events()
        if events:
            self._event_log.append_many(events)
