"""
Cryptarithms (alphametics): SEND + MORE = MONEY.

Each letter stands for a different decimal digit, multi-letter words don't
start with 0, and the addition must hold.

Two views of the same puzzle:
  - coefficients(): the whole equation collapses to one linear form,
        sum(weight[letter] * digit[letter]) == 0
    with weight = +10**place for addend letters and -10**place for result
    letters. Brute-force and vectorized solvers test this directly.
  - to_problem(): a column-by-column ConstraintProblem with carry variables,
        sum(column letters) + carry_in == result letter + 10 * carry_out
    which lets a backtracking search reject partial assignments early.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Mapping, Tuple

from wordkit.errors import PuzzleError
from .csp import ConstraintProblem

BASE = 10
DIGITS = tuple(range(BASE))

_WORD_RE = re.compile(r"^[A-Z]+$")


@dataclass(frozen=True)
class Cryptarithm:
    addends: Tuple[str, ...]
    result: str

    def __post_init__(self):
        if not self.addends:
            raise PuzzleError("a cryptarithm needs at least one addend")
        for w in self.addends + (self.result,):
            if not _WORD_RE.match(w):
                raise PuzzleError(f"invalid word {w!r}: use letters A-Z only")
        if len(self.letters) > BASE:
            raise PuzzleError(f"{len(self.letters)} distinct letters but only {BASE} digits")

    @classmethod
    def parse(cls, text: str) -> "Cryptarithm":
        """Parse "SEND + MORE = MONEY" (case-insensitive, whitespace ignored, "==" accepted)."""
        lhs, sep, rhs = "".join(text.upper().split()).replace("==", "=").partition("=")
        if not sep:
            raise PuzzleError(f"missing '=' in {text!r}")
        if "=" in rhs:
            raise PuzzleError(f"more than one '=' in {text!r}")
        addends = tuple(w.strip() for w in lhs.split("+"))
        result = rhs.strip()
        if not result or any(not w for w in addends):
            raise PuzzleError(f"empty word in {text!r}")
        return cls(addends, result)

    @property
    def words(self) -> Tuple[str, ...]:
        return self.addends + (self.result,)

    @property
    def letters(self) -> Tuple[str, ...]:
        """Distinct letters in order of first appearance."""
        seen: Dict[str, None] = {}
        for w in self.words:
            for ch in w:
                seen.setdefault(ch, None)
        return tuple(seen)

    @property
    def leading(self) -> frozenset:
        """Letters that may not be 0 (first letter of any multi-letter word)."""
        return frozenset(w[0] for w in self.words if len(w) > 1)

    def coefficients(self) -> Dict[str, int]:
        weights = {ch: 0 for ch in self.letters}
        for w in self.addends:
            for place, ch in enumerate(reversed(w)):
                weights[ch] += BASE ** place
        for place, ch in enumerate(reversed(self.result)):
            weights[ch] -= BASE ** place
        return weights

    def check(self, assignment: Mapping[str, int]) -> bool:
        """Full validity: every letter has a distinct digit, no leading 0, sum holds."""
        try:
            digits = [assignment[ch] for ch in self.letters]
        except KeyError:
            return False
        if any(d not in DIGITS for d in digits) or len(set(digits)) != len(digits):
            return False
        if any(assignment[ch] == 0 for ch in self.leading):
            return False
        weights = self.coefficients()
        return sum(weights[ch] * assignment[ch] for ch in self.letters) == 0

    def to_problem(self) -> ConstraintProblem:
        """
        Column model. Carry Ci is the carry out of column i (0 = units).
        With k addends a carry never exceeds k - 1, and the last carry must
        be 0 because nothing is left to absorb it.
        """
        problem = ConstraintProblem()
        leading = self.leading
        for ch in self.letters:
            problem.add_variable(ch, range(1, BASE) if ch in leading else DIGITS)

        width = max(len(w) for w in self.words)
        max_carry = len(self.addends) - 1
        carries = [f"C{i}" for i in range(width)]
        for i, c in enumerate(carries):
            problem.add_variable(c, [0] if i == width - 1 else range(max_carry + 1))

        rev_addends = [w[::-1] for w in self.addends]
        rev_result = self.result[::-1]
        for col in range(width):
            column = [w[col] for w in rev_addends if col < len(w)]
            res = rev_result[col] if col < len(rev_result) else None
            carry_in = carries[col - 1] if col > 0 else None
            problem.add_constraint(
                _column_scope(column, res, carry_in, carries[col]),
                _ColumnSum(column, res, carry_in, carries[col]),
                name=f"column{col}",
            )

        problem.add_all_different(self.letters)
        return problem

    def format_solution(self, assignment: Mapping[str, int]) -> str:
        def num(w: str) -> str:
            return "".join(str(assignment[ch]) for ch in w)
        return " + ".join(num(w) for w in self.addends) + " = " + num(self.result)

    def __str__(self) -> str:
        return " + ".join(self.addends) + " = " + self.result


def _column_scope(column: List[str], res, carry_in, carry_out) -> Tuple[str, ...]:
    seen: Dict[str, None] = {}
    for v in column + [res, carry_in, carry_out]:
        if v is not None:
            seen.setdefault(v, None)
    return tuple(seen)


class _ColumnSum:
    """Predicate for one column; repeated letters are counted as often as they appear."""

    def __init__(self, column: List[str], res, carry_in, carry_out):
        self.column = column
        self.res = res
        self.carry_in = carry_in
        self.carry_out = carry_out
        self.scope = _column_scope(column, res, carry_in, carry_out)
        self.__name__ = "column_sum"

    def __call__(self, *values: int) -> bool:
        v = dict(zip(self.scope, values))
        total = sum(v[ch] for ch in self.column)
        if self.carry_in is not None:
            total += v[self.carry_in]
        right = (v[self.res] if self.res is not None else 0) + BASE * v[self.carry_out]
        return total == right
