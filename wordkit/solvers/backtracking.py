"""
Backtracking solver.

Strategy:
  - Compile the puzzle to its column model (Cryptarithm.to_problem): one
    variable per letter, one carry per column, a sum constraint per column.
  - Run BacktrackingSearch (MRV + forward checking), so a column that can't
    add up kills the branch before the remaining letters are tried.
  - Carry variables are dropped from the reported solutions.
"""

from __future__ import annotations

from typing import Dict, Iterator, Optional

from .base import BaseSolver, register
from .cryptarithm import Cryptarithm
from .csp import BacktrackingSearch


@register
class BacktrackingSolver(BaseSolver):
    id = "backtracking"
    name = "Backtracking (column carries, MRV, forward checking)"
    version = "1.0.0"

    MRV = True
    FORWARD_CHECK = True
    # Shuffle value order with the seeded RNG (same solutions, different order).
    RANDOM_VALUE_ORDER = False

    def solve(self, puzzle: Cryptarithm, limit: Optional[int] = None) -> Iterator[Dict[str, int]]:
        search = BacktrackingSearch(
            puzzle.to_problem(),
            mrv=self.MRV,
            forward_check=self.FORWARD_CHECK,
            rng=self.rng if self.RANDOM_VALUE_ORDER else None,
        )
        self.stats = search.stats
        letters = puzzle.letters
        for sol in search.solutions(limit=limit):
            yield {ch: sol[ch] for ch in letters}
