"""Route - a committed, ordered walk through cells, with travel times."""
from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Callable, Iterable, Iterator

from tick_maze.types import IMPASSABLE, IdSequence, UninitializedError

if TYPE_CHECKING:
    from tick_maze.cell import Cell

logger = logging.getLogger(__name__)

_ids = IdSequence()


class Route:
    """An ordered sequence of valid cells, committed once.

    Cells may repeat: a walk that returns to a visited cell ends there.
    """

    __slots__ = ("_id", "_valid", "_cells")

    def __init__(self) -> None:
        self._id = _ids.next()
        self._valid = False
        self._cells: list[Cell] = []

    @property
    def id(self) -> int:
        return self._id

    def add_cells(self, cells: Iterable[Cell] | None) -> bool:
        """Commit the route. Returns False if already committed or given None.

        Raises UninitializedError, leaving the route uncommitted, if any
        cell is invalid.
        """
        if self._valid or cells is None:
            return False
        staged = list(cells)
        for cell in staged:
            if not cell.is_valid():
                logger.debug("Route %d refused uninitialized %r", self._id, cell)
                raise UninitializedError(
                    "Route", f"Route {self._id} cannot include uninitialized {cell!r}"
                )
        self._cells = staged
        self._valid = True
        return True

    def is_valid(self) -> bool:
        return self._valid

    def _check_valid(self) -> None:
        if not self._valid:
            raise UninitializedError("Route", f"Route {self._id} has no cells yet")

    def get_cells(self) -> list[Cell]:
        self._check_valid()
        return list(self._cells)

    def travel_time(self) -> int:
        """Sum of passage times; IMPASSABLE if any hop has no passage."""
        self._check_valid()
        return self._total(lambda time: time)

    def travel_time_random(self, rng: random.Random | None = None) -> int:
        """Like ``travel_time`` but each hop takes a random 1..time."""
        self._check_valid()
        source = rng if rng is not None else random.Random()
        return self._total(lambda time: source.randint(1, time))

    def _total(self, hop_time: Callable[[int], int]) -> int:
        total = 0
        for here, there in zip(self._cells, self._cells[1:]):
            time = here.passage_time_to(there)
            if time == IMPASSABLE:
                return IMPASSABLE
            total += hop_time(time)
        return total

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(list(self._cells))

    def __str__(self) -> str:
        try:
            time = self.travel_time()
        except UninitializedError:
            return "Uninitialized Route"
        header = f"<Route ID {self._id}>: "
        if time == IMPASSABLE:
            return header + "no passage"
        if not self._cells:
            return header + "empty"
        return header + " -> ".join(str(cell) for cell in self._cells)

    def __repr__(self) -> str:
        return f"<Route id={self._id} valid={self._valid} cells={len(self._cells)}>"
