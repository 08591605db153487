"""Maze - the set of cells a walk may enter, and the walk itself."""
from __future__ import annotations

import logging
import os
import random
from typing import TYPE_CHECKING, Iterable

from tick_maze.route import Route
from tick_maze.selectors import FirstSelector, GreedySelector, RandomSelector, ordered
from tick_maze.types import (
    IMPASSABLE,
    IMPASSABLE_AVERAGE,
    IdSequence,
    PassageSelector,
    UninitializedError,
)

if TYPE_CHECKING:
    from tick_maze.cell import Cell

logger = logging.getLogger(__name__)

_ids = IdSequence()


class Maze:
    def __init__(self, seed: int | None = None) -> None:
        self._id = _ids.next()
        self._valid = False
        self._cells: frozenset[Cell] = frozenset()

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def id(self) -> int:
        return self._id

    @property
    def seed(self) -> int:
        return self._seed

    def add_cells(self, cells: Iterable[Cell] | None) -> bool:
        """Commit the member cells. Returns False if already committed or given None.

        Raises UninitializedError, leaving the maze uncommitted, if any
        cell is invalid.
        """
        if self._valid or cells is None:
            return False
        staged = frozenset(cells)
        for cell in staged:
            if not cell.is_valid():
                logger.debug("Maze %d refused uninitialized %r", self._id, cell)
                raise UninitializedError(
                    "Maze", f"Maze {self._id} cannot include uninitialized {cell!r}"
                )
        self._cells = staged
        self._valid = True
        return True

    def is_valid(self) -> bool:
        return self._valid

    def _check_valid(self) -> None:
        if not self._valid:
            raise UninitializedError("Maze", f"Maze {self._id} has no cells yet")

    def cells(self) -> frozenset[Cell]:
        self._check_valid()
        return self._cells

    def __contains__(self, cell: object) -> bool:
        return cell in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    # -- Routing --

    def route(self, start: Cell, selector: PassageSelector | None) -> Route:
        """Walk from ``start`` choosing each step with ``selector``.

        The walk stops at a dead end or on revisiting a cell; stepping
        outside the maze discards the whole path. A missing selector gives
        an empty route.
        """
        self._check_valid()
        route = Route()
        if selector is None:
            route.add_cells([])
            return route
        route.add_cells(self._walk(start, selector))
        return route

    def route_first(self, start: Cell) -> Route:
        return self.route(start, FirstSelector())

    def route_random(self, start: Cell) -> Route:
        return self.route(start, RandomSelector(self._rng))

    def route_greedy(self, start: Cell) -> Route:
        return self.route(start, GreedySelector())

    def average_exit_time(self, exit_cell: Cell, selector: PassageSelector) -> float:
        """Mean travel time to ``exit_cell`` from every other member.

        Returns IMPASSABLE_AVERAGE as soon as one member's walk does not
        end at the exit.
        """
        self._check_valid()
        times: list[int] = []
        for cell in ordered(self._cells):
            if cell is exit_cell:
                continue
            route = Route()
            route.add_cells(self._walk(cell, selector, exit_cell))
            path = route.get_cells()
            if not path or path[-1] is not exit_cell:
                logger.debug("Maze %d: %s never reaches %s", self._id, cell, exit_cell)
                return IMPASSABLE_AVERAGE
            time = route.travel_time()
            if time == IMPASSABLE:
                logger.debug("Maze %d: no passage from %s to exit", self._id, cell)
                return IMPASSABLE_AVERAGE
            times.append(time)
        if not times:
            return 0.0
        return sum(times) / len(times)

    def _walk(
        self,
        start: Cell,
        selector: PassageSelector,
        exit_cell: Cell | None = None,
    ) -> list[Cell]:
        path: list[Cell] = []
        current = start
        while True:
            if current not in self._cells:
                logger.debug("Walk from %s left maze %d at %s", start, self._id, current)
                return []
            if current in path or current is exit_cell:
                path.append(current)
                reason = "exit" if current is exit_cell else "revisit"
                logger.debug("Walk from %s stopped (%s) at %s", start, reason, current)
                return path
            path.append(current)
            nxt = selector.next_cell(current)
            if nxt is None:
                logger.debug("Walk from %s stopped (dead end) at %s", start, current)
                return path
            current = nxt

    def __str__(self) -> str:
        if not self._valid:
            return "Uninitialized Maze"
        header = f"<Maze ID {self._id}>:\n"
        if not self._cells:
            return header + "empty"
        return header + "\n".join(cell.describe() for cell in ordered(self._cells))

    def __repr__(self) -> str:
        return f"<Maze id={self._id} valid={self._valid} cells={len(self._cells)}>"
