"""
Positional word patterns.

A Pattern is an ordered sequence of Slots, one per letter position:
  - exact letter       : "c"
  - wildcard           : "." or "?"
  - one of a set       : "[aeiou]"
  - anything but a set : "[^aeiou]" or "[!aeiou]"

Two word-level constraints ride along:
  - required : letters (a multiset) that must appear somewhere in the word
  - excluded : letters that must not appear anywhere in the word

Examples:
  Pattern.parse("c.t").matches("cat")                       -> True
  Pattern.parse("[^c]at").matches("cat")                    -> False
  Pattern.parse("....e", required="a").matches("crane")     -> True
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from string import ascii_lowercase
from typing import FrozenSet, Optional, Tuple

from wordkit.errors import PatternError

ALPHABET: FrozenSet[str] = frozenset(ascii_lowercase)
WILDCARDS = ".?"


@dataclass(frozen=True)
class Slot:
    """
    One position of a pattern.

    `letters` is the set of letters allowed at this position; None means
    any letter. `negated` only records how the slot was written, so that
    str() can round-trip "[^...]".
    """
    letters: Optional[FrozenSet[str]] = None
    negated: bool = False

    def allows(self, ch: str) -> bool:
        return self.letters is None or ch in self.letters

    @property
    def is_wildcard(self) -> bool:
        return self.letters is None

    @property
    def exact(self) -> Optional[str]:
        if self.letters is not None and len(self.letters) == 1:
            return next(iter(self.letters))
        return None

    def __str__(self) -> str:
        if self.letters is None:
            return "."
        if self.exact is not None and not self.negated:
            return self.exact
        if self.negated:
            return "[^" + "".join(sorted(ALPHABET - self.letters)) + "]"
        return "[" + "".join(sorted(self.letters)) + "]"


def _letters(text: str, what: str) -> str:
    out = text.lower()
    for ch in out:
        if ch not in ALPHABET:
            raise PatternError(f"{what}: invalid character {ch!r}")
    return out


@dataclass(frozen=True)
class Pattern:
    slots: Tuple[Slot, ...]
    required: Tuple[Tuple[str, int], ...] = ()   # sorted (letter, count) pairs
    excluded: FrozenSet[str] = frozenset()

    @classmethod
    def parse(cls, text: str, *, required: str = "", excluded: str = "") -> "Pattern":
        """Parse pattern text; raises PatternError on malformed input."""
        text = text.strip()
        if not text:
            raise PatternError("empty pattern")

        req = Counter(_letters(required, "required letters"))
        exc = frozenset(_letters(excluded, "excluded letters"))

        slots = []
        i = 0
        while i < len(text):
            ch = text[i]
            if ch in WILDCARDS:
                slots.append(Slot())
                i += 1
            elif ch == "[":
                end = text.find("]", i + 1)
                if end < 0:
                    raise PatternError(f"unterminated '[' at position {i} in {text!r}")
                body = text[i + 1:end]
                negated = body[:1] in ("^", "!")
                if negated:
                    body = body[1:]
                if not body:
                    raise PatternError(f"empty set at position {i} in {text!r}")
                members = frozenset(_letters(body, text))
                letters = ALPHABET - members if negated else members
                if not letters:
                    raise PatternError(f"set at position {i} in {text!r} allows no letter")
                slots.append(Slot(letters, negated))
                i = end + 1
            elif ch.lower() in ALPHABET:
                slots.append(Slot(frozenset(ch.lower())))
                i += 1
            else:
                raise PatternError(f"invalid character {ch!r} at position {i} in {text!r}")

        # Fold the global exclusions into every slot so matching stays positional.
        if exc:
            folded = []
            for s in slots:
                letters = (ALPHABET if s.letters is None else s.letters) - exc
                if not letters:
                    raise PatternError(f"no letter can satisfy position {len(folded)} of {text!r}")
                folded.append(Slot(letters, s.negated or s.letters is None))
            slots = folded

        return cls(tuple(slots), tuple(sorted(req.items())), exc)

    def __len__(self) -> int:
        return len(self.slots)

    def __str__(self) -> str:
        return "".join(str(s) for s in self.slots)

    def matches(self, word: str) -> bool:
        """True iff `word` satisfies every slot and the required letters."""
        if len(word) != len(self.slots):
            return False
        for slot, ch in zip(self.slots, word):
            if not slot.allows(ch):
                return False
        if self.required:
            have = Counter(word)
            for ch, n in self.required:
                if have[ch] < n:
                    return False
        return True

    def to_regex(self) -> str:
        """Equivalent anchored regex; required letters become lookaheads."""
        parts = ["^"]
        for ch, n in self.required:
            parts.append("(?=" + f"(?:.*{ch})" * n + ")")
        for s in self.slots:
            if s.letters is None:
                parts.append(".")
            elif s.exact is not None:
                parts.append(re.escape(s.exact))
            else:
                parts.append("[" + "".join(sorted(s.letters)) + "]")
        parts.append("$")
        return "".join(parts)
