"""
WordList: the dictionary every other component searches.

A WordList is an ordered sequence of distinct lowercase words, each with a
probability (negative log frequency). Plain lists give every word
Prob.always(); counted lists ("count word" per line, e.g. `sort | uniq -c`
output) get count / total.

Typical use:
    wl = WordList.from_counts(["  12 the", "3 cat", "1 act"])
    wl.prob("cat")      -> Prob(nll=1.79...)
    wl.by_length(3)     -> ["act", "cat", "the"]
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

import numpy as np

from wordkit.engine.probability import Prob
from wordkit.errors import WordListError

# Leading whitespace is allowed for compatibility with `uniq -c`.
COUNT_RE = re.compile(r"^\s*([0-9]+)\s+(.+?)\s*$")


class WordList:
    def __init__(self, words: Iterable[str], probs: Optional[Sequence[Prob]] = None):
        self._words: List[str] = []
        self._index: Dict[str, int] = {}
        for raw in words:
            w = raw.strip().lower()
            if not w:
                continue
            if w in self._index:
                raise WordListError(f"duplicate word {raw!r}")
            self._index[w] = len(self._words)
            self._words.append(w)

        if probs is None:
            self._nll = np.zeros(len(self._words), dtype=np.float64)
        else:
            if len(probs) != len(self._words):
                raise WordListError(
                    f"got {len(probs)} probabilities for {len(self._words)} words")
            self._nll = np.array([float(p) for p in probs], dtype=np.float64)

        self._by_length: Dict[int, List[str]] | None = None

    @classmethod
    def from_counts(cls, lines: Iterable[str]) -> "WordList":
        """
        Parse "count word" lines into a WordList sorted by word.

        Raises WordListError (with the 1-based line number) for malformed
        lines, zero counts, and duplicate words.
        """
        counts: Dict[str, int] = {}
        for lineno, line in enumerate(lines, start=1):
            line = line.rstrip("\r\n")
            if not line.strip():
                continue
            m = COUNT_RE.match(line)
            if not m:
                raise WordListError(f"line {lineno}: expected \"count word\", found {line!r}")
            count = int(m.group(1))
            if count == 0:
                raise WordListError(f"line {lineno}: count must be positive for {m.group(2)!r}")
            word = m.group(2).lower()
            if word in counts:
                raise WordListError(f"line {lineno}: duplicate word {m.group(2)!r}")
            counts[word] = count

        words = sorted(counts)
        if not words:
            return cls([])
        arr = np.array([counts[w] for w in words], dtype=np.float64)
        nll = -np.log(arr / arr.sum())
        return cls(words, [Prob(float(x)) for x in nll])

    # ---- queries ----

    def prob(self, word: str) -> Prob:
        """Probability of `word`; KeyError if it is not in the list."""
        return Prob(float(self._nll[self._index[word.lower()]]))

    def probs(self) -> List[Prob]:
        return [Prob(float(x)) for x in self._nll]

    def by_length(self, n: int) -> List[str]:
        """Words of exactly `n` letters, in list order (index built lazily)."""
        if self._by_length is None:
            index: Dict[int, List[str]] = {}
            for w in self._words:
                index.setdefault(len(w), []).append(w)
            self._by_length = index
        return self._by_length.get(n, [])

    def lengths(self) -> List[int]:
        self.by_length(0)
        return sorted(self._by_length)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"WordList({len(self._words)} words)"
