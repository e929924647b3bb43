"""
Pattern matching over a word list.

Given:
  - a pool of words (a WordList, or any iterable of strings)
  - a Pattern (or pattern text, see wordkit.engine.pattern)

Return:
  - the words that satisfy the pattern, in pool order (match_pattern), or
  - the same words as a Dist sorted by frequency (find_matches).

`search` is the escape hatch for anything a Pattern can't say: a regular
expression, implicitly anchored at both ends.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Union

from wordkit.errors import PatternError
from .pattern import Pattern
from .probability import Dist, Prob

PatternLike = Union[Pattern, str]


def as_pattern(pattern: PatternLike) -> Pattern:
    return pattern if isinstance(pattern, Pattern) else Pattern.parse(pattern)


def pool_for_length(words: Iterable[str], n: int) -> Iterable[str]:
    # WordList keeps a length index; plain iterables are scanned in full.
    by_length = getattr(words, "by_length", None)
    return by_length(n) if by_length is not None else words


def word_prob(words, w: str) -> Prob:
    prob = getattr(words, "prob", None)
    return prob(w) if prob is not None else Prob.always()


def match_pattern(words: Iterable[str], pattern: PatternLike) -> List[str]:
    """
    Keep only words that satisfy `pattern` exactly (order preserved).

    Plain iterables are normalised (strip + lowercase) before matching;
    WordList entries are already normalised.
    """
    pat = as_pattern(pattern)
    out: List[str] = []
    for w in pool_for_length(words, len(pat)):
        w = w.strip().lower()
        if pat.matches(w):
            out.append(w)
    return out


def find_matches(words: Iterable[str], pattern: PatternLike) -> Dist[str]:
    """Words satisfying `pattern`, most probable first."""
    dist: Dist[str] = Dist((word_prob(words, w), w) for w in match_pattern(words, pattern))
    dist.sort_by_probability()
    return dist


def search(words: Iterable[str], regex: str) -> Dist[str]:
    """Words that fully match `regex`, most probable first."""
    try:
        rx = re.compile(regex)
    except re.error as e:
        raise PatternError(f"invalid regex {regex!r}: {e}") from e

    dist: Dist[str] = Dist()
    for w in words:
        w = w.strip().lower()
        if rx.fullmatch(w):
            dist.append(word_prob(words, w), w)
    dist.sort_by_probability()
    return dist
