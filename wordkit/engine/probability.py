"""
Probabilities and probability distributions.

A probability is stored as its negative natural log. That keeps products of
many small word frequencies (multi-word phrases) far away from float
underflow: multiplying two probabilities is just adding two floats.

A probability of 0 cannot be represented, which is fine here: a word that
never occurs is simply not in the word list.

A distribution (Dist) is an ordered list of (Prob, value) events. An empty
Dist means "no possible world" and callers treat it as a dead end.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import total_ordering
from typing import Generic, Iterable, Iterator, List, Tuple, TypeVar

T = TypeVar("T")


@total_ordering
@dataclass(frozen=True)
class Prob:
    """Probability as negative log probability (`nll` >= 0)."""

    nll: float = 0.0

    @classmethod
    def always(cls) -> "Prob":
        """The probability of an event that always happens."""
        return cls(0.0)

    @classmethod
    def from_fraction(cls, num: int, denom: int) -> "Prob":
        """Build `num / denom`; requires 0 < num <= denom."""
        if num <= 0 or denom <= 0 or num > denom:
            raise ValueError(f"invalid probability fraction {num}/{denom}")
        return cls(-math.log(num / denom))

    @property
    def value(self) -> float:
        """Plain probability in (0, 1]."""
        return math.exp(-self.nll)

    def __mul__(self, other: "Prob") -> "Prob":
        if not isinstance(other, Prob):
            return NotImplemented
        return Prob(self.nll + other.nll)

    def __lt__(self, other: "Prob") -> bool:
        # Flipped: a larger nll is a less probable event.
        if not isinstance(other, Prob):
            return NotImplemented
        return self.nll > other.nll

    def __float__(self) -> float:
        return self.nll

    def __str__(self) -> str:
        return f"{self.nll:.2f}"


class Dist(Generic[T]):
    """
    Ordered collection of (Prob, value) events.

    Probabilities are not required to sum to 1 (a word list filtered by a
    pattern keeps the original frequencies); normalise if you need to.
    """

    def __init__(self, events: Iterable[Tuple[Prob, T]] = ()):
        self._events: List[Tuple[Prob, T]] = list(events)

    @classmethod
    def from_events(cls, events: Iterable[Tuple[Prob, T]]) -> "Dist[T]":
        return cls(events)

    def append(self, prob: Prob, value: T) -> None:
        self._events.append((prob, value))

    def sort_by_probability(self) -> None:
        """Sort in place, most probable first (stable for ties)."""
        self._events.sort(key=lambda ev: ev[0].nll)

    def values(self) -> List[T]:
        return [v for _, v in self._events]

    def format(self) -> str:
        """One event per line: `{nll:6.2f} {value}`."""
        return "".join(f"{p.nll:6.2f} {v}\n" for p, v in self._events)

    def __iter__(self) -> Iterator[Tuple[Prob, T]]:
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __bool__(self) -> bool:
        return bool(self._events)

    def __getitem__(self, i: int) -> Tuple[Prob, T]:
        return self._events[i]

    def __repr__(self) -> str:
        return f"Dist({self._events!r})"
