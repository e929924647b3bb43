from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from .wordlist import COUNT_RE, WordList

log = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def looks_counted(lines: List[str]) -> bool:
    """True if the first non-blank line is a "count word" pair."""
    for ln in lines:
        if ln.strip():
            return COUNT_RE.match(ln) is not None
    return False


def load_wordlist(p: Path | str, counts: Optional[bool] = None) -> WordList:
    """
    Load a WordList from a plain (one word per line) or counted file.

    counts=None sniffs the format from the first non-blank line.
    """
    lines = read_lines(p)
    if counts is None:
        counts = looks_counted(lines)
    wl = WordList.from_counts(lines) if counts else WordList(lines)
    log.debug("loaded %d words from %s (counted=%s)", len(wl), p, counts)
    return wl
