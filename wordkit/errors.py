"""
Exception types raised by wordkit.

All of them derive from ValueError so callers that only care about
"bad input" can catch the built-in type, the same way the solver registry
reports unknown ids.
"""


class WordListError(ValueError):
    """A word list (plain or counted) could not be built."""


class PatternError(ValueError):
    """A pattern or regex is malformed."""


class PuzzleError(ValueError):
    """A cryptarithm equation is malformed or unsolvable by construction."""


class ProblemError(ValueError):
    """A constraint problem is ill-formed (bad variable, empty domain, ...)."""
