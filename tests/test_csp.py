import pytest

from wordkit.errors import ProblemError
from wordkit.solvers import BacktrackingSearch, ConstraintProblem


def _ordered_pairs():
    p = ConstraintProblem()
    p.add_variable("x", [1, 2, 3])
    p.add_variable("y", [1, 2, 3])
    p.add_constraint(("x", "y"), lambda x, y: x < y)
    return p


def _queens(n):
    p = ConstraintProblem()
    for col in range(n):
        p.add_variable(col, range(n))
    for a in range(n):
        for b in range(a + 1, n):
            p.add_constraint((a, b), lambda ra, rb, d=b - a: ra != rb and abs(ra - rb) != d)
    return p


@pytest.mark.parametrize("mrv,fc", [(True, True), (False, False), (True, False), (False, True)])
def test_all_solutions_found_once(mrv, fc):
    sols = list(BacktrackingSearch(_ordered_pairs(), mrv=mrv, forward_check=fc).solutions())
    pairs = sorted((s["x"], s["y"]) for s in sols)
    assert pairs == [(1, 2), (1, 3), (2, 3)]


@pytest.mark.parametrize("n,count", [(4, 2), (5, 10), (6, 4)])
def test_n_queens_counts(n, count):
    search = BacktrackingSearch(_queens(n))
    sols = list(search.solutions())
    assert len(sols) == count
    assert all(_queens(n).is_solution(s) for s in sols)
    assert search.stats["nodes"] > 0 and search.stats["solutions"] == count


def test_limit_and_solve():
    search = BacktrackingSearch(_queens(6))
    assert len(list(search.solutions(limit=1))) == 1
    first = BacktrackingSearch(_queens(6)).solve()
    assert first is not None and _queens(6).is_solution(first)

    p = ConstraintProblem()
    p.add_variable("a", [1])
    p.add_variable("b", [1])
    p.add_all_different(["a", "b"])
    assert BacktrackingSearch(p).solve() is None


def test_all_different_partial_consistency():
    p = ConstraintProblem()
    for v in "abc":
        p.add_variable(v, range(3))
    p.add_all_different("abc")
    assert p.is_consistent({"a": 0, "b": 1}) is True
    assert p.is_consistent({"a": 1, "c": 1}) is False
    assert len(list(BacktrackingSearch(p).solutions())) == 6


def test_partial_assignment_skips_open_constraints():
    p = _ordered_pairs()
    assert p.is_consistent({"x": 3}) is True
    assert p.is_consistent({"x": 3, "y": 1}) is False
    assert p.is_solution({"x": 1}) is False


def test_problem_errors():
    p = ConstraintProblem()
    p.add_variable("x", [1])
    with pytest.raises(ProblemError):
        p.add_variable("x", [2])
    with pytest.raises(ProblemError):
        p.add_variable("y", [])
    with pytest.raises(ProblemError):
        p.add_constraint(("x", "z"), lambda x, z: True)
    with pytest.raises(ProblemError):
        p.add_all_different([])


def test_seeded_value_order_same_solutions():
    import random
    a = list(BacktrackingSearch(_queens(5), rng=random.Random(1)).solutions())
    b = list(BacktrackingSearch(_queens(5)).solutions())
    key = lambda s: tuple(sorted(s.items()))
    assert sorted(map(key, a)) == sorted(map(key, b))


def test_zero_limit_yields_nothing():
    search = BacktrackingSearch(_queens(4))
    assert list(search.solutions(limit=0)) == []
    assert search.stats["nodes"] == 0
    assert len(list(BacktrackingSearch(_queens(4)).solutions(limit=-1))) == 0
