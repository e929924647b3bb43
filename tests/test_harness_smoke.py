import pytest

from wordkit.datasets import WordList
from wordkit.errors import ProblemError
from wordkit.harness import fill_slots, run_batch, run_case, slot_problem
from wordkit.solvers import create_solver


def test_run_case_smoke():
    r = run_case(create_solver("backtracking"), "SEND + MORE = MONEY", seed=42)
    assert r["success"] is True
    assert r["puzzle"] == "SEND + MORE = MONEY"
    assert r["solver_id"] == "backtracking"
    assert r["solutions"][0]["M"] == 1
    assert r["time_ms"] >= 0.0
    assert r["stats"]["nodes"] > 0


def test_run_case_unsolvable():
    r = run_case(create_solver("brute_force"), "A + B = AB")
    assert r["success"] is False and r["solutions"] == []


def test_run_batch_with_progress():
    out = run_batch(create_solver("vectorized"), ["TO + GO = OUT", "A + A = B"], seed=7, progress=True)
    assert [len(r["solutions"]) for r in out] == [1, 4]
    out = run_batch(create_solver("brute_force"), ["A + A = B"], limit=1)
    assert len(out[0]["solutions"]) == 1


GRID = WordList.from_counts(["9 cat", "3 cot", "5 tar", "2 rat", "1 art", "4 car", "1 arc"])


def test_fill_slots_crossing():
    sols = fill_slots(GRID, {"across": "c.t", "down": "..."}, [("across", 2, "down", 0)])
    got = [(s["across"], s["down"]) for _, s in sols]
    assert got == [("cat", "tar"), ("cot", "tar")]  # most probable first


def test_fill_slots_with_anagram_letters():
    sols = fill_slots(GRID, {"across": "c.t", "down": "..."}, [("across", 2, "down", 0)],
                      letters={"across": "tca"})
    assert [s["across"] for _, s in sols] == ["cat"]


def test_distinct_slots():
    sols = fill_slots(GRID, {"a": "c..", "b": "c.."}, [("a", 0, "b", 0)])
    assert sols and all(s["a"] != s["b"] for _, s in sols)
    same = fill_slots(GRID, {"a": "c.t", "b": "c.t"}, [("a", 1, "b", 1)], distinct=False)
    assert {(s["a"], s["b"]) for _, s in same} == {("cat", "cat"), ("cot", "cot")}


def test_slot_problem_errors():
    with pytest.raises(ProblemError):
        slot_problem(GRID, {"a": "zz."})
    with pytest.raises(ProblemError):
        slot_problem(GRID, {"a": "c.."}, [("a", 0, "b", 0)])
    with pytest.raises(ProblemError):
        slot_problem(GRID, {"a": "c..", "b": "..."}, [("a", 3, "b", 0)])


def test_run_case_zero_limit():
    r = run_case(create_solver("backtracking"), "TO + GO = OUT", limit=0)
    assert r["success"] is False and r["solutions"] == []


def test_fill_slots_limit_keeps_most_probable():
    # The search meets (cab, ant) first, but (cob, obi) is far more probable.
    wl = WordList.from_counts(["10 cab", "5 cob", "1 ant", "20 obi"])
    slots = {"across": "c.b", "down": "..."}
    crossings = [("across", 1, "down", 0)]
    everything = fill_slots(wl, slots, crossings)
    assert [(s["across"], s["down"]) for _, s in everything] == [("cob", "obi"), ("cab", "ant")]
    top = fill_slots(wl, slots, crossings, limit=1)
    assert [(s["across"], s["down"]) for _, s in top] == [("cob", "obi")]
    assert fill_slots(wl, slots, crossings, limit=0) == []
