"""Level loading from ``board{N}.txt`` files."""

from __future__ import annotations

import logging
from pathlib import Path

from mazechase.core.board import Board
from mazechase.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

BUNDLED_LEVELS_DIR = Path(__file__).resolve().parent.parent / "levels"


class LevelLoader:
    """Reads level descriptions from a directory and builds validated Boards."""

    __slots__ = ("_dir", "_strict", "_roster", "_count")

    def __init__(
        self,
        levels_dir: str | Path | None = None,
        strict: bool = False,
        roster: tuple[str, ...] = (),
        level_count: int | None = None,
    ) -> None:
        self._dir = Path(levels_dir) if levels_dir else BUNDLED_LEVELS_DIR
        self._strict = strict
        self._roster = roster
        self._count = level_count

    @property
    def level_count(self) -> int:
        """Number of consecutive boards starting at level 1 (scanned once)."""
        if self._count is None:
            n = 0
            while self.path_for(n + 1).exists():
                n += 1
            self._count = n
        return self._count

    def path_for(self, level: int) -> Path:
        return self._dir / f"board{level}.txt"

    def read(self, level: int) -> str:
        path = self.path_for(level)
        if not path.exists():
            raise ConfigurationError(f"no board file for level {level} ({path})")
        return path.read_text(encoding="utf-8")

    def load(self, level: int) -> Board:
        """Parse and validate the board for *level*."""
        board = Board.parse(self.read(level), level=level, strict=self._strict)
        board.validate(self._roster)
        logger.info(
            "Loaded level %d: %dx%d, %d collectibles, adversaries=%s",
            level, board.width, board.height, board.total_collectibles(),
            ",".join(board.adversary_spawns()) or "none",
        )
        return board


class TextLevelLoader(LevelLoader):
    """Loader backed by in-memory level texts, keyed by level index."""

    __slots__ = ("_texts",)

    def __init__(self, texts: dict[int, str], strict: bool = False, roster: tuple[str, ...] = ()) -> None:
        super().__init__(levels_dir=None, strict=strict, roster=roster, level_count=len(texts))
        self._texts = dict(texts)

    def read(self, level: int) -> str:
        if level not in self._texts:
            raise ConfigurationError(f"no board text for level {level}")
        return self._texts[level]
