"""
Adjacency rules: which cells of a maze may be joined by a passage.

A rule is asked once per cell at the start of generation and installs that
cell's candidate neighbours. Only the square grid is implemented; triangle and
hexagon mazes would plug in their own rule here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from maze_types import MazeType

if TYPE_CHECKING:
    from maze import Maze

__all__ = ["AdjacencyRule", "SquareAdjacency", "adjacency_rule_for"]


class AdjacencyRule(ABC):
    """Neighbour rule for one maze topology."""

    @abstractmethod
    def neighbours(self, maze: Maze, no: int) -> list[int]:
        """Indices of the cells adjacent to cell number no."""

    def install(self, maze: Maze, no: int) -> None:
        """Reset cell number no and make its neighbours candidates."""
        cell = maze.cells[no]
        cell.clear()
        for other in self.neighbours(maze, no):
            cell.candidates.add(maze.cells[other])


class SquareAdjacency(AdjacencyRule):
    """
    Four-way adjacency on a rectangular grid.

    Only the first width*height cells take part. Cells of further layers
    (depth > 1) get no neighbours at all.
    """

    def neighbours(self, maze: Maze, no: int) -> list[int]:
        w, h = maze.width, maze.height
        if no >= w * h:
            return []

        x = no % w
        y = no // w
        result: list[int] = []
        if y > 0:
            result.append(no - w)  # North
        if x < w - 1:
            result.append(no + 1)  # East
        if y < h - 1:
            result.append(no + w)  # South
        if x > 0:
            result.append(no - 1)  # West
        return result


def adjacency_rule_for(maze_type: MazeType) -> AdjacencyRule | None:
    """Return the adjacency rule for a maze type, or None if it has none yet."""
    match maze_type:
        case MazeType.SQUARE:
            return SquareAdjacency()
        case MazeType.TRIANGLE | MazeType.HEXAGON:
            return None
    raise ValueError(f"Unknown maze type: {maze_type}")
