from lumberjack.bfs_solver.path import Path
from lumberjack.game.position import Position
from lumberjack.game.state import ForestState, StateJump

GRID1 = [[0, 1, 0], [0, 0, -1], [3, 0, 0]]


def make_path():
    s0 = ForestState.from_heights(GRID1, Position(0, 0))
    s1 = s0.chop(Position(0, 1))
    s2 = s1.chop(Position(2, 0))
    return Path.start(s0), StateJump(s1, 1), StateJump(s2, 3)


class TestPath:
    def test_start(self):
        path, _, _ = make_path()
        assert path.distance == 0
        assert path.num_steps == 1
        assert path.head.distance == 0
        assert path.final_state.position == Position(0, 0)

    def test_extend_returns_new_path(self):
        path, j1, j2 = make_path()
        p1 = path.extend(j1)
        p2 = p1.extend(j2)

        assert len(path) == 1
        assert path.distance == 0
        assert len(p1) == 2
        assert p1.distance == 1
        assert len(p2) == 3
        assert p2.distance == 4
        assert p2.final_state == j2.state

    def test_branches_do_not_share_steps(self):
        path, j1, j2 = make_path()
        p1 = path.extend(j1)
        a = p1.extend(j2)
        b = p1.extend(StateJump(j2.state, 5))
        assert a.distance == 4
        assert b.distance == 6
        assert p1.distance == 1

    def test_distance_matches_sum_of_steps(self):
        path, j1, j2 = make_path()
        p = path.extend(j1).extend(j2)
        assert p.distance == sum(step.distance for step in p)

        copied = Path(p.steps)
        assert copied.distance == p.distance
        assert len(copied) == len(p)

    def test_empty_path(self):
        p = Path()
        assert p.head is None
        assert p.final_state is None
        assert p.distance == 0

    def test_positions_and_legs(self):
        path, j1, j2 = make_path()
        p = path.extend(j1).extend(j2)
        assert p.positions() == [Position(0, 0), Position(0, 1), Position(2, 0)]
        assert p.legs() == [
            (Position(0, 0), 0),
            (Position(0, 1), 1),
            (Position(2, 0), 3),
        ]

    def test_string_representation(self):
        path, j1, j2 = make_path()
        p = path.extend(j1).extend(j2)
        assert str(p) == "(0, 0) -> (0, 1) -> (2, 0)"
