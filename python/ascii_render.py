"""
ASCII rendering for generated mazes.

Each cell is drawn as a 3-line block:

    +-----+
    |  12 |
    +     +

(cell 12, linked south only).

The top and bottom segments are open where the cell links north or south, the
sides of the middle line are open where it links west or east. Neighbouring
blocks repeat the shared boundary, so a passage shows up on both sides.
"""

from __future__ import annotations

import logging
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from maze import Maze
from maze_types import LogFn

logger = logging.getLogger(__name__)

__all__ = ["render_lines", "render", "print_maze"]

WALL_H = "+-----+"
OPEN_H = "+     +"


def _plain(s: str) -> str:
    return s


def render_lines(
    maze: Maze,
    first_row: int = 0,
    last_row: int | None = None,
    colour: bool = False,
    highlight: tuple[int, int] | None = None,
) -> list[str]:
    """
    Render rows first_row..last_row (inclusive) of a maze.

    Args:
        maze: The maze to draw (normally already generated)
        first_row: First row to draw
        last_row: Last row to draw, defaults to the bottom row; clamped to it
        colour: Paint walls and ids with ANSI colours
        highlight: Optional (x, y) whose id is drawn on a white background

    Returns:
        Three lines per row drawn
    """
    w, h = maze.width, maze.height
    if last_row is None or last_row >= h:
        last_row = h - 1

    wall_colour: Callable[[str], str] = chalk.blue if colour else _plain
    id_colour: Callable[[str], str] = chalk.yellow if colour else _plain

    lines: list[str] = []
    for y in range(max(first_row, 0), last_row + 1):
        top: list[str] = []
        mid: list[str] = []
        bottom: list[str] = []
        for x in range(w):
            cell = maze.cell_at(x, y)
            links = cell.linked

            top.append(wall_colour(OPEN_H if y > 0 and maze.cell_at(x, y - 1) in links else WALL_H))

            mid.append(" " if x > 0 and maze.cell_at(x - 1, y) in links else wall_colour("|"))
            label = f" {cell.id:>3} "
            if highlight == (x, y):
                mid.append(chalk.bgWhite.black(label))
            else:
                mid.append(id_colour(label))
            mid.append(" " if x < w - 1 and maze.cell_at(x + 1, y) in links else wall_colour("|"))

            bottom.append(
                wall_colour(OPEN_H if y < h - 1 and maze.cell_at(x, y + 1) in links else WALL_H)
            )

        lines.append("".join(top))
        lines.append("".join(mid))
        lines.append("".join(bottom))

    logger.debug("render_lines: rows %d..%d of %r, %d lines", first_row, last_row, maze, len(lines))
    return lines


def render(
    maze: Maze,
    first_row: int = 0,
    last_row: int | None = None,
    colour: bool = False,
    highlight: tuple[int, int] | None = None,
) -> str:
    """Render a maze to a single string (see render_lines)."""
    return "\n".join(render_lines(maze, first_row, last_row, colour, highlight))


def print_maze(
    maze: Maze,
    log: LogFn | None = None,
    first_row: int = 0,
    last_row: int | None = None,
) -> None:
    """Write the rendering line by line to log, or to the maze's own sink."""
    sink = log if log is not None else maze.log
    if sink is None:
        return
    for line in render_lines(maze, first_row, last_row):
        sink(line)
