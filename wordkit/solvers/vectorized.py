"""
Vectorized brute-force solver (numpy).

Same search space as brute_force, but candidates are evaluated a batch at a
time: a (batch, letters) digit matrix times the coefficient vector gives
every candidate's weighted sum in one matrix product, and the leading-zero
rule is a column mask.

Cost is dominated by generating permutations; scoring is ~free.
"""

from __future__ import annotations

from itertools import islice, permutations
from typing import Dict, Iterator, Optional

import numpy as np

from .base import BaseSolver, register
from .cryptarithm import DIGITS, Cryptarithm


@register
class VectorizedSolver(BaseSolver):
    id = "vectorized"
    name = "Vectorized (numpy batches)"
    version = "1.0.0"

    # Rows per batch; 10 letters * 8 bytes * 65536 rows ~ 5 MB.
    BATCH_SIZE = 65536

    def solve(self, puzzle: Cryptarithm, limit: Optional[int] = None) -> Iterator[Dict[str, int]]:
        if limit is not None and limit <= 0:
            return
        letters = puzzle.letters
        coeffs = puzzle.coefficients()
        w = np.array([coeffs[ch] for ch in letters], dtype=np.int64)
        lead_idx = [i for i, ch in enumerate(letters) if ch in puzzle.leading]

        perms = permutations(DIGITS, len(letters))
        tried = found = batches = 0
        while True:
            chunk = list(islice(perms, self.BATCH_SIZE))
            if not chunk:
                break
            batches += 1
            tried += len(chunk)
            block = np.array(chunk, dtype=np.int64).reshape(len(chunk), len(letters))

            ok = block @ w == 0
            if lead_idx:
                ok &= np.all(block[:, lead_idx] != 0, axis=1)

            for row in block[ok]:
                found += 1
                self.stats = {"candidates": tried, "batches": batches, "solutions": found}
                yield {ch: int(d) for ch, d in zip(letters, row)}
                if limit is not None and found >= limit:
                    return
        self.stats = {"candidates": tried, "batches": batches, "solutions": found}
