"""
Word-slot problems: the pattern matcher feeding the constraint solver.

A slot is a named word position with a pattern ("c..", "[^aeiou]....").
Its domain is every word the matcher accepts; crossings say that letter i
of one slot is letter j of another. BacktrackingSearch then picks one word
per slot so every crossing agrees.

Example (a 2-word crossing at the first letters):
    fill_slots(wl, {"across": "...", "down": "c.."}, [("across", 0, "down", 0)])
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from wordkit.engine import Prob, anagrams, find_matches
from wordkit.engine.matcher import PatternLike, as_pattern
from wordkit.errors import ProblemError
from wordkit.solvers import BacktrackingSearch, ConstraintProblem

log = logging.getLogger(__name__)

Crossing = Tuple[str, int, str, int]  # (slot_a, index_a, slot_b, index_b)


class _SameLetter:
    def __init__(self, i: int, j: int):
        self.i = i
        self.j = j
        self.__name__ = f"same_letter_{i}_{j}"

    def __call__(self, a: str, b: str) -> bool:
        return a[self.i] == b[self.j]


def slot_problem(
        wordlist,
        slots: Mapping[str, PatternLike],
        crossings: Iterable[Crossing] = (),
        *,
        distinct: bool = True,
        letters: Optional[Mapping[str, str]] = None,
) -> ConstraintProblem:
    """
    Build the ConstraintProblem for `slots`.

    `letters` optionally restricts a slot to anagrams of a letter bag
    ("." is a blank tile), so a jumbled answer can be placed in a grid.

    Raises ProblemError for a slot no word fits, or a crossing that names an
    unknown slot or an index past a slot's length.
    """
    problem = ConstraintProblem()
    patterns = {name: as_pattern(p) for name, p in slots.items()}

    for name, pat in patterns.items():
        # Most probable words first so the first solution found is a likely one.
        domain = find_matches(wordlist, pat).values()
        if letters and name in letters:
            spelled = set(anagrams(wordlist, letters[name], pattern=pat))
            domain = [w for w in domain if w in spelled]
        if not domain:
            raise ProblemError(f"no word matches slot {name!r} ({pat})")
        log.debug("slot %s: %d candidate(s)", name, len(domain))
        problem.add_variable(name, domain)

    for a, i, b, j in crossings:
        for slot, idx in ((a, i), (b, j)):
            if slot not in patterns:
                raise ProblemError(f"crossing names unknown slot {slot!r}")
            if not 0 <= idx < len(patterns[slot]):
                raise ProblemError(f"index {idx} is outside slot {slot!r}")
        problem.add_constraint((a, b), _SameLetter(i, j), name=f"{a}[{i}]={b}[{j}]")

    if distinct and len(patterns) > 1:
        problem.add_all_different(patterns)
    return problem


def fill_slots(
        wordlist,
        slots: Mapping[str, PatternLike],
        crossings: Iterable[Crossing] = (),
        *,
        distinct: bool = True,
        letters: Optional[Mapping[str, str]] = None,
        limit: Optional[int] = None,
) -> List[Tuple[Prob, Dict[str, str]]]:
    """
    Solve a word-slot problem; solutions come back most probable first,
    scored as the product of the chosen words' probabilities.

    `limit` keeps the `limit` most probable solutions; every solution is
    enumerated and ranked before truncating.
    """
    problem = slot_problem(wordlist, slots, crossings, distinct=distinct, letters=letters)
    search = BacktrackingSearch(problem)

    prob_of = getattr(wordlist, "prob", None)
    scored: List[Tuple[Prob, Dict[str, str]]] = []
    for sol in search.solutions():
        p = Prob.always()
        if prob_of is not None:
            for w in sol.values():
                p = p * prob_of(w)
        scored.append((p, sol))

    scored.sort(key=lambda ps: ps[0].nll)
    if limit is not None:
        scored = scored[:max(limit, 0)]
    return scored
