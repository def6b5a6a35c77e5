import pytest

from lumberjack.errors import InvalidInputError, OutOfBoundsError
from lumberjack.game.grid import TerrainGrid
from lumberjack.game.position import Position
from lumberjack.game.state import ForestState, StateJump

BAD_GRID1 = [[-3, 1, 0], [0, 0, -1], [3, 0, 0]]

GRID1 = [[0, 1, 0], [0, 0, -1], [3, 0, 0]]
GRID2 = [[1, 2], [3, 0], [0, -1]]
GRID3 = [[0, -1, 0], [0, 0, -1], [0, 0, 0]]
GRID4 = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]

MOAT = [
    [0, 0, 0, 0, 0],
    [0, -1, -1, -1, 0],
    [0, -1, 1, -1, 0],
    [0, -1, -1, -1, 0],
    [0, 0, 0, 0, 0],
]


class TestForestStateCreation:
    def test_new_state(self):
        s = ForestState.from_heights(GRID1, Position(0, 0))
        assert s.position == Position(0, 0)
        assert s.depth == 3
        assert s.width == 3
        assert str(s).endswith("pos = (0, 0)")

    def test_accepts_tuple_positions(self):
        s = ForestState.from_heights(GRID2, (1, 1))
        assert s.position == Position(1, 1)

    def test_bad_entries(self):
        with pytest.raises(InvalidInputError):
            ForestState.from_heights(BAD_GRID1, Position(0, 0))

    def test_bad_entries_in_unvalidated_grid(self):
        with pytest.raises(InvalidInputError):
            ForestState(TerrainGrid([[-5, 1]]), Position(0, 1))
        with pytest.raises(InvalidInputError):
            ForestState(TerrainGrid(BAD_GRID1), (1, 1))

    def test_bad_position(self):
        with pytest.raises(InvalidInputError):
            ForestState.from_heights(GRID1, Position(-2, -2))
        with pytest.raises(InvalidInputError):
            ForestState(TerrainGrid(GRID1), Position(3, 0))

    def test_grid_is_copied(self):
        grid = TerrainGrid(GRID1)
        s = ForestState(grid, Position(0, 0))
        grid.set_height(Position(0, 1), 0)
        assert s.height_at(Position(0, 1)) == 1

        exposed = s.grid
        exposed.set_height(Position(2, 0), 0)
        assert s.height_at(Position(2, 0)) == 3


class TestForestStateQueries:
    def test_height_at(self):
        for values in (GRID1, GRID2):
            s = ForestState.from_heights(values, Position(0, 0))
            for x in range(s.depth):
                for y in range(s.width):
                    assert s.height_at(Position(x, y)) == values[x][y]

    def test_height_at_out_of_bounds(self):
        s = ForestState.from_heights(GRID1, Position(0, 0))
        with pytest.raises(OutOfBoundsError):
            s.height_at(Position(0, 3))

    def test_has_standing_trees(self):
        assert ForestState.from_heights(GRID1, (0, 0)).has_standing_trees()
        assert not ForestState.from_heights(GRID3, (0, 0)).has_standing_trees()

    def test_next_choppable_trees(self):
        s = ForestState.from_heights(GRID1, Position(0, 0))
        assert s.next_choppable_trees() == {Position(0, 1)}

        s = ForestState.from_heights(GRID3, Position(0, 0))  # no trees
        assert s.next_choppable_trees() == set()

    def test_next_choppable_trees_ties(self):
        s = ForestState.from_heights(GRID4, Position(0, 1))
        assert s.next_choppable_trees() == {
            Position(0, 0),
            Position(1, 1),
            Position(2, 2),
        }

    def test_contour(self):
        s = ForestState.from_heights(GRID1, Position(0, 0))
        assert s.contour(1) == {Position(0, 1)}

        s = ForestState.from_heights(GRID4, Position(0, 1))
        assert s.contour(1) == {Position(0, 0), Position(1, 1), Position(2, 2)}
        assert s.contour(0) == {
            Position(0, 1),
            Position(0, 2),
            Position(1, 0),
            Position(1, 2),
            Position(2, 0),
            Position(2, 1),
        }

    def test_find_path(self):
        s = ForestState.from_heights(GRID1, Position(0, 0))
        assert s.find_path(Position(0, 1)) == 1
        assert s.find_path(Position(2, 0)) == 2
        assert s.find_path(Position(0, 0)) == 0

    def test_find_path_never_ends_on_trench(self):
        s = ForestState.from_heights(GRID1, Position(0, 0))
        assert s.find_path(Position(1, 2)) is None

    def test_find_path_blocked_by_other_trees(self):
        s = ForestState.from_heights([[0, 1, 1]], Position(0, 0))
        assert s.find_path(Position(0, 2)) is None

    def test_find_path_moat(self):
        s = ForestState.from_heights(MOAT, Position(0, 0))
        assert s.find_path(Position(2, 2)) is None


class TestForestStateTransitions:
    def test_chop(self):
        s = ForestState.from_heights(GRID1, Position(0, 0))
        chopped = s.chop(Position(2, 0))

        assert chopped.height_at(Position(2, 0)) == 0
        assert chopped.position == Position(2, 0)

        # source is unchanged
        assert s.height_at(Position(2, 0)) == 3
        assert s.position == Position(0, 0)

    def test_successors(self):
        s = ForestState.from_heights(GRID1, Position(0, 0))
        jumps = s.successors()
        assert len(jumps) == 1
        assert jumps[0].distance == 1
        assert jumps[0].state == s.chop(Position(0, 1))

    def test_successors_skip_unreachable_trees(self):
        s = ForestState.from_heights([[0, 1, 1]], Position(0, 0))
        jumps = s.successors()
        assert [j.state.position for j in jumps] == [Position(0, 1)]

    def test_successors_try_every_tie(self):
        s = ForestState.from_heights(GRID4, Position(0, 1))
        jumps = s.successors()
        assert [(j.state.position, j.distance) for j in jumps] == [
            (Position(0, 0), 1),
            (Position(1, 1), 1),
            (Position(2, 2), 3),
        ]

    def test_successors_empty_when_stuck(self):
        s = ForestState.from_heights(MOAT, Position(0, 0))
        assert s.successors() == []
        assert s.has_standing_trees()

    def test_successors_empty_when_cleared(self):
        s = ForestState.from_heights(GRID3, Position(2, 2))
        assert s.successors() == []


class TestForestStateIdentity:
    def test_equality(self):
        a = ForestState.from_heights(GRID1, Position(0, 0))
        b = ForestState.from_heights(GRID1, Position(0, 0))
        assert a == b
        assert hash(a) == hash(b)

        assert a != ForestState.from_heights(GRID1, Position(0, 2))
        assert a != ForestState.from_heights(GRID3, Position(0, 0))

    def test_chop_orders_converge(self):
        s = ForestState.from_heights(GRID4, Position(0, 1))
        via_corner = s.chop(Position(0, 0)).chop(Position(2, 2))
        via_center = s.chop(Position(1, 1)).chop(Position(2, 2))
        assert via_corner != via_center

        expected = ForestState.from_heights(
            [[0, 0, 0], [0, 1, 0], [0, 0, 0]], Position(2, 2)
        )
        assert via_corner == expected
        assert len({via_corner, expected}) == 1

    def test_annotate_marks_lumberjack(self):
        s = ForestState.from_heights(GRID1, Position(1, 1))
        assert s.annotate().split("\n")[1] == " 0  X -1"


class TestStateJump:
    def test_negative_distance(self):
        s = ForestState.from_heights(GRID1, Position(0, 0))
        with pytest.raises(ValueError):
            StateJump(s, -1)

    def test_value_semantics(self):
        s = ForestState.from_heights(GRID1, Position(0, 0))
        assert StateJump(s, 2) == StateJump(s.chop(Position(0, 0)), 2)
