"""Passage selectors: pick the next cell of a walk.

Every selector sees a cell's passable neighbors in ascending id order, so
"first" and tie-breaking never depend on set iteration order.
"""
from __future__ import annotations

import random
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from tick_maze.cell import Cell


def ordered(cells: Iterable[Cell]) -> list[Cell]:
    return sorted(cells, key=lambda c: c.id)


class FirstSelector:
    """Lowest-id passable neighbor."""

    def next_cell(self, cell: Cell) -> Cell | None:
        candidates = ordered(cell.connected_cells())
        if not candidates:
            return None
        return candidates[0]


class RandomSelector:
    """Uniformly random passable neighbor.

    Args:
        rng: Source of randomness. Pass a seeded ``random.Random`` for
            reproducible walks; defaults to a private unseeded instance.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def next_cell(self, cell: Cell) -> Cell | None:
        candidates = ordered(cell.connected_cells())
        if not candidates:
            return None
        return candidates[self._rng.randrange(len(candidates))]


class GreedySelector:
    """Neighbor behind the shortest passage; lowest id wins ties."""

    def next_cell(self, cell: Cell) -> Cell | None:
        best: Cell | None = None
        best_time = 0
        for candidate in ordered(cell.connected_cells()):
            time = cell.passage_time_to(candidate)
            if best is None or time < best_time:
                best = candidate
                best_time = time
        return best
