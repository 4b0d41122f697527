"""
Tests for the disc-stacking example puzzle and the engines on its family.

Test Groups:
- T1-T6: Towers state (moves, neighbors, goal, priority)
- H: BFS returns 2^d - 1 moves, best-first at least that many
"""

import pytest

from statesearch.engine import BreadthFirstEngine, BestFirstEngine
from statesearch.puzzles import Towers, optimal_moves, is_valid_path


def slow_above(limit, discs):
    return [
        pytest.param(d, marks=pytest.mark.slow) if d > limit else d
        for d in discs
    ]


# ========== Test Group T: Towers state ==========

def test_T1_new_puts_all_discs_on_first_peg():
    """T1: Start position"""
    t = Towers.new(3, 4)

    assert t.pegs == ((0, 1, 2, 3), (), ())
    assert t.n_discs == 4
    assert not t.is_goal()
    assert t.priority() == 4


def test_T2_invalid_sizes():
    """T2: Fewer than two pegs or negative discs are rejected"""
    with pytest.raises(ValueError):
        Towers.new(1, 3)
    with pytest.raises(ValueError):
        Towers.new(3, -1)


def test_T3_illegal_moves_return_none():
    """T3: Same peg, out of range, empty source, large onto small"""
    t = Towers(((0,), (1,), ()))

    assert t.move_disc(0, 0) is None
    assert t.move_disc(0, 3) is None
    assert t.move_disc(-1, 2) is None
    assert t.move_disc(2, 0) is None
    assert t.move_disc(0, 1) is None  # disc 0 is larger than disc 1


def test_T4_legal_move_is_new_state():
    """T4: move_disc returns a fresh state, original untouched"""
    t = Towers(((0,), (1,), ()))
    moved = t.move_disc(1, 0)

    assert moved.pegs == ((0, 1), (), ())
    assert t.pegs == ((0,), (1,), ())
    assert hash(moved) == hash(Towers(((0, 1), (), ())))


def test_T5_neighbors_order():
    """T5: Neighbors enumerated source-major"""
    t = Towers.new(3, 2)

    assert [n.pegs for n in t.neighbors()] == [
        ((0,), (1,), ()),
        ((0,), (), (1,)),
    ]


def test_T6_goal_and_priority():
    """T6: Goal = everything on the last peg, priority counts the rest"""
    assert Towers(((), (), (0, 1))).is_goal()
    assert Towers(((), (), (0, 1))).priority() == 0
    assert not Towers(((), (0,), (1,))).is_goal()
    assert Towers(((), (0,), (1,))).priority() == 1


def test_T7_is_valid_path():
    """T7: Path checker rejects gaps and non-goal endings"""
    a = Towers.new(3, 1)
    b = Towers(((), (), (0,)))
    c = Towers(((), (0,), ()))

    assert is_valid_path([a, b])
    assert not is_valid_path([a, c])
    assert not is_valid_path([])
    assert not is_valid_path([Towers.new(3, 2), b])


# ========== Test Group H: puzzle family ==========

@pytest.mark.parametrize("discs", slow_above(10, range(1, 14)))
def test_H1_bfs_is_optimal(discs):
    """H1: BFS returns exactly 2^d - 1 moves on three pegs"""
    start = Towers.new(3, discs)
    path = BreadthFirstEngine(start).run()

    assert path[0] == start
    assert len(path) - 1 == optimal_moves(discs)
    assert is_valid_path(path)


@pytest.mark.parametrize("discs", slow_above(9, range(1, 14)))
def test_H2_best_first_is_valid_not_optimal(discs):
    """H2: Best-first returns a valid path of at least 2^d - 1 moves"""
    start = Towers.new(3, discs)
    path = BestFirstEngine(start).run()

    assert path[0] == start
    assert len(path) - 1 >= optimal_moves(discs)
    assert is_valid_path(path)


def test_H3_four_pegs():
    """H3: Four pegs, three discs: 5 moves"""
    path = BreadthFirstEngine(Towers.new(4, 3)).run()

    assert len(path) - 1 == 5
    assert is_valid_path(path)


def test_H4_bfs_never_longer_than_best_first():
    """H4: On the same start, BFS path length <= best-first path length"""
    for discs in range(1, 7):
        bfs = BreadthFirstEngine(Towers.new(3, discs)).run()
        greedy = BestFirstEngine(Towers.new(3, discs)).run()
        assert len(bfs) <= len(greedy)
