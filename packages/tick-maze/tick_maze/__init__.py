"""tick-maze - Weighted maze graphs and selector-driven routes."""
from __future__ import annotations

from tick_maze.types import (
    IMPASSABLE,
    IMPASSABLE_AVERAGE,
    MazeError,
    PassageSelector,
    PassageStatus,
    UninitializedError,
)
from tick_maze.cell import Cell
from tick_maze.selectors import FirstSelector, GreedySelector, RandomSelector
from tick_maze.route import Route
from tick_maze.maze import Maze

__all__ = [
    "IMPASSABLE",
    "IMPASSABLE_AVERAGE",
    "MazeError",
    "UninitializedError",
    "PassageStatus",
    "PassageSelector",
    "Cell",
    "FirstSelector",
    "RandomSelector",
    "GreedySelector",
    "Route",
    "Maze",
]
