"""Cell - a maze node with write-once, weighted passages to other cells."""
from __future__ import annotations

import logging
from typing import Mapping

from tick_maze.types import IMPASSABLE, IdSequence, PassageStatus, UninitializedError

logger = logging.getLogger(__name__)

_ids = IdSequence()


class Cell:
    """A maze node.

    A cell starts uninitialized. ``set_passages`` commits its outgoing
    passages exactly once; after that the cell is read-only. A commit that
    fails validation leaves the cell uninitialized for good.

    Committing the same cell from several threads at once is not supported.
    """

    __slots__ = ("_id", "_valid", "_rejected", "_passages")

    def __init__(self) -> None:
        self._id = _ids.next()
        self._valid = False
        self._rejected = False
        self._passages: dict[Cell, int] = {}

    @property
    def id(self) -> int:
        return self._id

    def set_passages(self, passages: Mapping[Cell, int] | None) -> PassageStatus:
        if passages is None:
            return PassageStatus.INPUT_NULL
        if self._valid:
            return PassageStatus.ALREADY_VALID
        if self._rejected:
            return PassageStatus.INVALID_TIME

        staged: dict[Cell, int] = {}
        for cell, time in passages.items():
            if not isinstance(cell, Cell):
                raise TypeError(
                    f"Passage destination must be a Cell, got {type(cell).__name__}"
                )
            if isinstance(time, bool) or not isinstance(time, int) or time <= 0:
                self._rejected = True
                logger.debug("%r rejected passage time %r to %r", self, time, cell)
                return PassageStatus.INVALID_TIME
            staged[cell] = time

        self._passages = staged
        self._valid = True
        return PassageStatus.OK

    def is_valid(self) -> bool:
        return self._valid

    def _check_valid(self) -> None:
        if not self._valid:
            raise UninitializedError("Cell", f"Cell {self._id} has no passages yet")

    def passages(self) -> dict[Cell, int]:
        """Passable passages only, as a fresh dict."""
        self._check_valid()
        return {
            cell: time for cell, time in self._passages.items() if time != IMPASSABLE
        }

    def passage_time_to(self, cell: Cell) -> int:
        """Time to reach ``cell``; IMPASSABLE when there is no passage."""
        self._check_valid()
        return self._passages.get(cell, IMPASSABLE)

    def connected_cells(self) -> frozenset[Cell]:
        self._check_valid()
        return frozenset(
            cell for cell, time in self._passages.items() if time != IMPASSABLE
        )

    def is_dead_end(self) -> bool:
        return not self.connected_cells()

    def describe(self) -> str:
        """One ``A -t-> B`` line per passable passage, in id order."""
        if not self._valid:
            return "Uninitialized Cell"
        passable = self.passages()
        if not passable:
            return f"{self} -> dead end"
        return "\n".join(
            f"{self} -{passable[cell]}-> {cell}"
            for cell in sorted(passable, key=lambda c: c.id)
        )

    def __hash__(self) -> int:
        return self._id

    def __str__(self) -> str:
        if not self._valid:
            return "Uninitialized Cell"
        return f"Cell ID {self._id}"

    def __repr__(self) -> str:
        return f"<Cell id={self._id} valid={self._valid}>"
