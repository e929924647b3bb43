"""
Solver harness core primitives.

- run_case:  run one cryptarithm with a given solver.
- run_batch: run many puzzles in sequence, optionally with a tqdm bar.

These functions are UI-agnostic so they can be reused from a notebook, a
test, or a future service without changes.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Union

from tqdm import tqdm

from wordkit.solvers import BaseSolver, Cryptarithm

log = logging.getLogger(__name__)

PuzzleLike = Union[Cryptarithm, str]


def run_case(
        solver: BaseSolver,
        puzzle: PuzzleLike,
        *,
        limit: int | None = None,
        seed: int | None = None,
) -> Dict:
    """
    Solve one puzzle.

    Args:
        solver: a registered solver instance
        puzzle: a Cryptarithm or its text ("SEND + MORE = MONEY")
        limit:  stop after this many solutions (None = all)
        seed:   RNG seed for solvers that randomise their order

    Returns:
        dict with keys:
            puzzle (str), solver_id (str), success (bool),
            solutions (list[dict]), time_ms (float), stats (dict)
    """
    if isinstance(puzzle, str):
        puzzle = Cryptarithm.parse(puzzle)

    solver.reset(seed=seed)

    t0 = time.perf_counter_ns()
    solutions: List[Dict[str, int]] = list(solver.solve(puzzle, limit=limit))
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    log.debug("%s solved %s: %d solution(s) in %.1f ms", solver.id, puzzle, len(solutions), dt)
    return {
        "puzzle": str(puzzle),
        "solver_id": solver.id,
        "success": bool(solutions),
        "solutions": solutions,
        "time_ms": dt,
        "stats": dict(solver.stats),
    }


def run_batch(
        solver: BaseSolver,
        puzzles: Iterable[PuzzleLike],
        *,
        limit: int | None = None,
        seed: int | None = None,
        progress: bool = False,
) -> List[Dict]:
    """
    Run many puzzles back-to-back.

    Each case's seed is derived from the base seed (seed + index) so runs
    are reproducible but not identical across cases.
    """
    cases = list(puzzles)
    iterator = tqdm(cases, ncols=80, desc=solver.id, unit="puzzle") if progress else cases

    out: List[Dict] = []
    for idx, puzzle in enumerate(iterator, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(solver, puzzle, limit=limit, seed=case_seed))

    solved = sum(1 for r in out if r["success"])
    log.info("%s: solved %d/%d puzzles", solver.id, solved, len(out))
    return out
