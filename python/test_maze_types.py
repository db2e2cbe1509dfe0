"""Tests for maze_types module."""

import pytest

from maze_types import Cell, EdgeState, Group, MazeType, describe_cells, describe_groups


def make_pair() -> tuple[Cell, Cell]:
    """Two cells holding each other as candidates."""
    a = Cell(0)
    b = Cell(1)
    a.candidates.add(b)
    b.candidates.add(a)
    return a, b


# =============================================================================
# Cells
# =============================================================================


class TestCell:
    """Tests for cell identity and edge classification."""

    def test_new_cell_is_empty(self) -> None:
        """A fresh cell has no edges and no group."""
        cell = Cell(7)
        assert cell.id == 7
        assert cell.candidates == set()
        assert cell.impassable == set()
        assert cell.linked == set()
        assert cell.group is None

    def test_equality_by_id(self) -> None:
        """Cells compare and hash by id alone."""
        a = Cell(3)
        b = Cell(3)
        b.candidates.add(Cell(4))
        assert a == b
        assert hash(a) == hash(b)
        assert a != Cell(4)
        assert len({a, b}) == 1

    def test_not_equal_to_other_types(self) -> None:
        assert Cell(1) != 1

    def test_link_to_moves_candidate_to_linked(self) -> None:
        """Linking moves the edge out of candidates on both sides."""
        a, b = make_pair()
        a.link_to(b)

        assert a.linked == {b}
        assert b.linked == {a}
        assert a.candidates == set()
        assert b.candidates == set()

    def test_link_to_leaves_other_candidates(self) -> None:
        """Only the linked neighbour is reclassified."""
        a, b = make_pair()
        c = Cell(2)
        a.candidates.add(c)
        c.candidates.add(a)

        a.link_to(b)

        assert a.candidates == {c}
        assert c.candidates == {a}
        assert a.edge_state(c) == EdgeState.CANDIDATE

    def test_link_to_requires_mutual_candidates(self) -> None:
        """Linking cells that are not mutual candidates is an invariant violation."""
        a = Cell(0)
        b = Cell(1)
        a.candidates.add(b)  # One-sided only

        with pytest.raises(AssertionError, match="not mutual candidates"):
            a.link_to(b)

        # Nothing changed
        assert a.candidates == {b}
        assert a.linked == set()

    def test_link_to_twice_fails(self) -> None:
        """An edge already linked is no longer a candidate."""
        a, b = make_pair()
        a.link_to(b)
        with pytest.raises(AssertionError, match="Cannot link cells 1 and 0"):
            b.link_to(a)

    def test_link_to_self_fails(self) -> None:
        cell = Cell(5)
        cell.candidates.add(cell)
        with pytest.raises(AssertionError):
            cell.link_to(cell)

    def test_link_to_writes_trace(self) -> None:
        """With a log sink the before/after states are reported."""
        a, b = make_pair()
        messages: list[str] = []
        a.link_to(b, messages.append)

        assert messages == [
            "BEFORE: (0<->1) (0: 1|| -> link to 1: 0||)",
            "AFTER : (0<->1) (0: ||1 -> link to 1: ||0)",
        ]

    def test_edge_state(self) -> None:
        """edge_state reports the category holding a neighbour."""
        a = Cell(0)
        link, wall, candidate, stranger = Cell(1), Cell(2), Cell(3), Cell(4)
        a.linked.add(link)
        a.impassable.add(wall)
        a.candidates.add(candidate)

        assert a.edge_state(link) == EdgeState.LINK
        assert a.edge_state(wall) == EdgeState.WALL
        assert a.edge_state(candidate) == EdgeState.CANDIDATE
        assert a.edge_state(stranger) is None

    def test_clear(self) -> None:
        """clear() forgets every edge and the group."""
        a, b = make_pair()
        a.link_to(b)
        a.impassable.add(Cell(9))
        a.group = 4

        a.clear()

        assert a.candidates == set()
        assert a.impassable == set()
        assert a.linked == set()
        assert a.group is None

    def test_str_lists_sorted_ids(self) -> None:
        """str() shows candidates|walls|links with sorted ids."""
        cell = Cell(4)
        cell.candidates.update({Cell(5), Cell(1), Cell(3)})
        cell.linked.add(Cell(7))
        assert str(cell) == "4: 1, 3, 5||7"
        assert repr(cell) == "Cell(4: 1, 3, 5||7)"

    def test_describe_cells(self) -> None:
        assert describe_cells([Cell(2), Cell(0), Cell(11)]) == "0, 2, 11"
        assert describe_cells([]) == ""


# =============================================================================
# Groups
# =============================================================================


class TestGroup:
    """Tests for the disjoint-set bookkeeping."""

    def test_seed_sets_back_reference(self) -> None:
        """A seeded group holds one cell, and the cell points back by id."""
        cell = Cell(3)
        group = Group.seed(8, cell)

        assert group.gid == 8
        assert group.members == [cell]
        assert cell.group == 8
        assert cell in group
        assert len(group) == 1

    def test_add_duplicate_fails(self) -> None:
        cell = Cell(0)
        group = Group.seed(0, cell)
        with pytest.raises(AssertionError, match="already in group 0"):
            group.add(cell)

    def test_absorb(self) -> None:
        """Absorbing moves all members and re-stamps their group id."""
        a, b, c = Cell(0), Cell(1), Cell(2)
        left = Group.seed(0, a)
        right = Group(1)
        right.add(b)
        right.add(c)

        left.absorb(right)

        assert left.members == [a, b, c]
        assert right.members == []
        assert a.group == b.group == c.group == 0

    def test_str_and_describe_groups(self) -> None:
        """Groups are listed with their index and member cells."""
        g0 = Group.seed(0, Cell(0))
        g1 = Group(1)
        g1.add(Cell(1))
        g1.add(Cell(2))

        assert str(g1) == "(1: ||),(2: ||)"
        assert repr(g1) == "Group(1: 1, 2)"
        assert describe_groups([g0, g1]) == "[0: (0: ||)],[1: (1: ||),(2: ||)]"
        assert describe_groups([]) == ""


class TestMazeType:
    """Tests for the maze type enumeration."""

    def test_values(self) -> None:
        assert MazeType("square") is MazeType.SQUARE
        assert MazeType("triangle") is MazeType.TRIANGLE
        assert MazeType("hexagon") is MazeType.HEXAGON
