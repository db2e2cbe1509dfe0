"""
Shared type definitions for the maze system.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Iterable

logger = logging.getLogger(__name__)

# Sink for human-readable trace and rendering lines
LogFn = Callable[[str], None]


class MazeType(Enum):
    """Cell topology of a maze."""

    SQUARE = "square"
    TRIANGLE = "triangle"  # Declared, no adjacency rule yet
    HEXAGON = "hexagon"  # Declared, no adjacency rule yet


class EdgeState(Enum):
    """Classification of the edge between two adjacent cells."""

    CANDIDATE = "candidate"  # Not decided yet
    WALL = "wall"
    LINK = "link"  # Passage


# =============================================================================
# Cells
# =============================================================================


def describe_cells(cells: Iterable[Cell]) -> str:
    """Comma separated ids, sorted."""
    return ", ".join(str(cell.id) for cell in sorted(cells, key=lambda c: c.id))


class Cell:
    """
    A maze cell.

    Neighbours are held in exactly one of three sets: candidates (undecided),
    impassable (walls) and linked (passages). Both endpoints of an edge always
    hold each other in the same set.

    Equality and hashing use the id only.
    """

    def __init__(self, id: int) -> None:
        self.id = id
        self.candidates: set[Cell] = set()
        self.impassable: set[Cell] = set()
        self.linked: set[Cell] = set()
        self.group: int | None = None  # Id of the owning Group

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Cell) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return (
            f"{self.id}: {describe_cells(self.candidates)}"
            f"|{describe_cells(self.impassable)}"
            f"|{describe_cells(self.linked)}"
        )

    def __repr__(self) -> str:
        return f"Cell({self})"

    def clear(self) -> None:
        """Forget all edge classifications and the group."""
        self.candidates.clear()
        self.impassable.clear()
        self.linked.clear()
        self.group = None

    def edge_state(self, other: Cell) -> EdgeState | None:
        """Return how the edge to other is classified, or None if not adjacent."""
        if other in self.linked:
            return EdgeState.LINK
        if other in self.impassable:
            return EdgeState.WALL
        if other in self.candidates:
            return EdgeState.CANDIDATE
        return None

    def link_to(self, other: Cell, log: LogFn | None = None) -> None:
        """
        Turn the candidate edge between self and other into a passage.

        Both cells must hold each other as candidates; anything else means the
        adjacency was built or updated incorrectly.

        Raises:
            AssertionError: If the cells are not mutual candidates
        """
        if other is self or other not in self.candidates or self not in other.candidates:
            raise AssertionError(
                f"Cannot link cells {self.id} and {other.id}: not mutual candidates\n"
                f"  Cell {self}\n"
                f"  Cell {other}"
            )

        if log is not None:
            log(f"BEFORE: ({self.id}<->{other.id}) ({self} -> link to {other})")

        self.candidates.discard(other)
        self.linked.add(other)
        other.candidates.discard(self)
        other.linked.add(self)

        logger.debug("link_to: %d <-> %d", self.id, other.id)
        if log is not None:
            log(f"AFTER : ({self.id}<->{other.id}) ({self} -> link to {other})")


# =============================================================================
# Groups
# =============================================================================


class Group:
    """
    Cells known to be connected by links drawn so far.

    Cells refer back to their group by id (Cell.group), so the group owns its
    members but not the other way round.
    """

    def __init__(self, gid: int) -> None:
        self.gid = gid
        self.members: list[Cell] = []

    @classmethod
    def seed(cls, gid: int, cell: Cell) -> Group:
        """Create a group holding only cell."""
        group = cls(gid)
        group.add(cell)
        return group

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, cell: object) -> bool:
        return cell in self.members

    def __str__(self) -> str:
        return ",".join(f"({cell})" for cell in self.members)

    def __repr__(self) -> str:
        return f"Group({self.gid}: {', '.join(str(c.id) for c in self.members)})"

    def add(self, cell: Cell) -> None:
        if cell in self.members:
            raise AssertionError(f"Cell {cell.id} is already in group {self.gid}")
        self.members.append(cell)
        cell.group = self.gid

    def absorb(self, other: Group) -> None:
        """Move every member of other into this group, leaving other empty."""
        for cell in other.members:
            cell.group = self.gid
        self.members.extend(other.members)
        other.members = []


def describe_groups(groups: list[Group]) -> str:
    """Index-numbered listing of groups and their cells, for traces."""
    return ",".join(f"[{i}: {group}]" for i, group in enumerate(groups))
