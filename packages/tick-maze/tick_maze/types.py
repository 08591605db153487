"""Shared constants, result codes, errors and protocols for tick-maze."""
from __future__ import annotations

import sys
import threading
from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tick_maze.cell import Cell

IMPASSABLE: int = sys.maxsize
IMPASSABLE_AVERAGE: float = sys.float_info.max


class PassageStatus(Enum):
    """Result of committing passages to a Cell."""

    OK = "ok"
    ALREADY_VALID = "already_valid"
    INVALID_TIME = "invalid_time"
    INPUT_NULL = "input_null"

    @property
    def ok(self) -> bool:
        return self is PassageStatus.OK

    @property
    def message(self) -> str:
        return _STATUS_MESSAGES[self]


_STATUS_MESSAGES: dict[PassageStatus, str] = {
    PassageStatus.OK: "The cell is operating normally",
    PassageStatus.ALREADY_VALID: (
        "The cell is already valid and the passages cannot be updated"
    ),
    PassageStatus.INVALID_TIME: "A non-positive travel time is invalid",
    PassageStatus.INPUT_NULL: "A null mapping is an unacceptable parameter",
}


class MazeError(Exception):
    """Base class for tick-maze errors."""


class UninitializedError(MazeError):
    """Raised when using a Cell, Route or Maze before its one-time commit."""

    def __init__(self, target: str, message: str | None = None) -> None:
        self.target = target
        super().__init__(message or f"{target} is uninitialized")


class IdSequence:
    """Monotonic id source, safe to draw from on several threads."""

    def __init__(self, start: int = 1) -> None:
        self._next = start
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
        return value


@runtime_checkable
class PassageSelector(Protocol):
    """Chooses the next cell of a walk, or None when there is nowhere to go."""

    def next_cell(self, cell: Cell) -> Cell | None: ...
