"""
Brute-force solver.

Strategy:
  - Try every injective letter -> digit map (itertools.permutations).
  - Keep the ones with no leading zero whose weighted sum is 0
    (see Cryptarithm.coefficients).

Notes:
  - At most 10P10 = 3,628,800 candidates; slow but obviously correct, so it
    is the reference the other solvers are tested against.
"""

from __future__ import annotations

from itertools import permutations
from typing import Dict, Iterator, Optional

from .base import BaseSolver, register
from .cryptarithm import DIGITS, Cryptarithm


@register
class BruteForceSolver(BaseSolver):
    id = "brute_force"
    name = "Brute Force (permutations)"
    version = "1.0.0"

    def solve(self, puzzle: Cryptarithm, limit: Optional[int] = None) -> Iterator[Dict[str, int]]:
        if limit is not None and limit <= 0:
            return
        letters = puzzle.letters
        weights = [puzzle.coefficients()[ch] for ch in letters]
        lead_idx = [i for i, ch in enumerate(letters) if ch in puzzle.leading]

        tried = found = 0
        for perm in permutations(DIGITS, len(letters)):
            tried += 1
            if any(perm[i] == 0 for i in lead_idx):
                continue
            if sum(w * d for w, d in zip(weights, perm)) != 0:
                continue
            found += 1
            self.stats = {"candidates": tried, "solutions": found}
            yield dict(zip(letters, perm))
            if limit is not None and found >= limit:
                return
        self.stats = {"candidates": tried, "solutions": found}
