"""
Lightweight word validation.

Answers "is this a real, well-formed word right now?":
  - it is a string
  - it is alphabetic a–z only
  - it has exact length `length` (when given)
  - it exists in `allowed` (a WordList, set, or any iterable of words)
"""

from typing import Iterable, Optional


def validate_word(word: str, allowed: Iterable[str], *, length: Optional[int] = None) -> bool:
    """
    Return True if `word` is valid per the rules above.

    Notes:
      - WordList and set already support fast `in`; any other iterable is
        copied into a local set first, so precompute one if calling this in
        a tight loop.
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()

    if not w or not w.isalpha() or not w.isascii():
        return False
    if length is not None and len(w) != length:
        return False

    if isinstance(allowed, (set, frozenset)) or hasattr(allowed, "by_length"):
        return w in allowed
    return w in {a.strip().lower() for a in allowed}
