"""
Perfect maze generation.

Mazes are built one row at a time (Eller's algorithm): cells of the current
row are kept in disjoint groups of mutually connected cells, neighbouring
groups are randomly merged, and every group sends at least one passage down
into the next row. The last row joins whatever groups remain. The result is a
spanning tree of the grid: every cell reachable, no loops.
"""

from __future__ import annotations

import logging
import random
from typing import Iterator

from maze_types import Cell, EdgeState, Group, LogFn, MazeType, describe_groups
from topology import AdjacencyRule, adjacency_rule_for

logger = logging.getLogger(__name__)

__all__ = ["Maze", "new_maze"]


class Maze:
    """
    A width x height (x depth) array of cells, stored row-major.

    The maze is allocated with no edges at all. generate() installs the
    candidate adjacency from the registered rule, then carves passages in
    place. Afterwards the link sets are final and can be rendered.
    """

    def __init__(
        self,
        width: int,
        height: int,
        depth: int = 1,
        adjacency_rule: AdjacencyRule | None = None,
        log: LogFn | None = None,
        maze_type: MazeType = MazeType.SQUARE,
    ) -> None:
        sizes = {"width": width, "height": height, "depth": depth}
        bad = [(name, value) for name, value in sizes.items() if value < 1]
        if bad:
            error_msg = f"Invalid maze size {width} x {height} x {depth}\n"
            for name, value in bad:
                error_msg += f"  {name} = {value}, must be at least 1\n"
            raise ValueError(error_msg.rstrip("\n"))

        self.width = width
        self.height = height
        self.depth = depth
        self.adjacency_rule = adjacency_rule
        self.log = log
        self.maze_type = maze_type
        self.cells: list[Cell] = [Cell(i) for i in range(width * height * depth)]
        self._group_count = 0

    def __repr__(self) -> str:
        return f"Maze({self.maze_type.value}, {self.width} x {self.height} x {self.depth})"

    def _log(self, message: str) -> None:
        if self.log is not None:
            self.log(message)

    # =========================================================================
    # Queries
    # =========================================================================

    def cell_at(self, x: int, y: int) -> Cell:
        """Cell in column x, row y of the first layer."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Position ({x}, {y}) is outside the {self.width} x {self.height} maze"
            )
        return self.cells[x + y * self.width]

    def position_of(self, cell: Cell) -> tuple[int, int]:
        """(x, y) of a cell, derived from its id."""
        return (cell.id % self.width, cell.id // self.width)

    def links_at(self, x: int, y: int) -> frozenset[Cell]:
        """Read-only view of the passages leaving (x, y)."""
        return frozenset(self.cell_at(x, y).linked)

    def edge_state(self, a: Cell, b: Cell) -> EdgeState | None:
        return a.edge_state(b)

    def edges(self) -> Iterator[tuple[Cell, Cell]]:
        """Each passage once, as (lower id, higher id), in id order."""
        for cell in self.cells:
            for other in sorted(cell.linked, key=lambda c: c.id):
                if other.id > cell.id:
                    yield (cell, other)

    def link_count(self) -> int:
        return sum(len(cell.linked) for cell in self.cells) // 2

    # =========================================================================
    # Generation
    # =========================================================================

    def generate(self, rng: random.Random) -> Maze:
        """
        Carve a perfect maze into the first layer.

        Any earlier classification is cleared first, so a maze can be
        regenerated. Given the same seeded rng the result is identical: the
        sequence of random draws depends only on the dimensions and the draws
        themselves.

        Args:
            rng: Source of coin flips (randrange(2), 1 = heads) and member
                picks (randrange(n))

        Returns:
            self, for chaining

        Raises:
            RuntimeError: If no adjacency rule is registered
        """
        if self.adjacency_rule is None:
            raise RuntimeError(
                f"No adjacency rule registered for {self.maze_type.value} maze\n"
                f"  Only {MazeType.SQUARE.value} mazes have a built-in rule;"
                f" pass adjacency_rule= to Maze() for other topologies"
            )

        for no in range(len(self.cells)):
            self.adjacency_rule.install(self, no)
        self._group_count = 0

        w, h = self.width, self.height
        self._log(f"Maze: size ({w} x {h})")

        groups = [self._new_group(self.cell_at(x, 0)) for x in range(w)]
        for y in range(h - 1):
            self._join_row(groups, y, rng)
            logger.debug("row %d joined: %s", y, describe_groups(groups))
            groups = self._carve_down(groups, y, rng)
            self._fill_row(groups, y + 1)
            logger.debug("row %d seeded: %s", y + 1, describe_groups(groups))

        # Last row: join everything still apart
        self._join_row(groups, h - 1, None)

        logger.info(
            "generate: %s maze %dx%d, %d links, %d groups used",
            self.maze_type.value,
            w,
            h,
            self.link_count(),
            self._group_count,
        )
        return self

    def _new_group(self, cell: Cell | None = None) -> Group:
        group = Group(self._group_count) if cell is None else Group.seed(self._group_count, cell)
        self._group_count += 1
        return group

    def _join_row(self, groups: list[Group], y: int, rng: random.Random | None) -> None:
        """
        Merge horizontally adjacent cells of row y that are in different groups.

        With an rng each merge happens on heads only; without one every pair
        is merged. Cells already in the same group are never linked, as that
        would close a loop.
        """
        by_id = {group.gid: group for group in groups}
        for x in range(1, self.width):
            left = self.cell_at(x - 1, y)
            right = self.cell_at(x, y)
            if left.group == right.group:
                continue
            if rng is not None and rng.randrange(2) == 0:
                continue

            keep = by_id[left.group]
            gone = by_id.pop(right.group)
            keep.absorb(gone)
            groups.remove(gone)

            self._log(f"Joining ({left}) <-> ({right})")
            right.link_to(left, self.log)

    def _carve_down(self, groups: list[Group], y: int, rng: random.Random) -> list[Group]:
        """
        Link each group of row y to row y+1 at one or more random members.

        The cells reached below one group form a single new group, since they
        are all connected through it. Returns the new groups.
        """
        carved: list[Group] = []
        for group in groups:
            remaining = list(group.members)
            picks: list[Cell] = []
            while True:
                picks.append(remaining.pop(rng.randrange(len(remaining))))
                if not remaining or rng.randrange(2) == 0:
                    break

            below_group = self._new_group()
            for cell in picks:
                below = self.cells[cell.id + self.width]
                cell.link_to(below, self.log)
                below_group.add(below)
            carved.append(below_group)

        return carved

    def _fill_row(self, groups: list[Group], y: int) -> None:
        """Give each cell of row y that nothing reached its own group."""
        for x in range(self.width):
            cell = self.cell_at(x, y)
            if cell.group is None:
                groups.append(self._new_group(cell))


def new_maze(
    width: int,
    height: int,
    depth: int = 1,
    maze_type: MazeType | str = MazeType.SQUARE,
    log: LogFn | None = None,
) -> Maze:
    """
    Allocate a maze with the adjacency rule for its type registered.

    Types without a rule (triangle, hexagon) can be allocated, but generating
    them raises RuntimeError.

    Args:
        width: Cells per row
        height: Rows
        depth: Layers (extra layers are allocated but never connected)
        maze_type: MazeType or its string value
        log: Optional sink for trace lines

    Returns:
        An ungenerated Maze
    """
    if isinstance(maze_type, str):
        try:
            maze_type = MazeType(maze_type)
        except ValueError:
            raise ValueError(
                f"Unknown maze type: '{maze_type}'\n"
                f"  Valid types: {', '.join(t.value for t in MazeType)}"
            ) from None

    return Maze(
        width,
        height,
        depth,
        adjacency_rule=adjacency_rule_for(maze_type),
        log=log,
        maze_type=maze_type,
    )
