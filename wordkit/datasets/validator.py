"""
Word list validator.

What this module does:
- Check a single word list file, plain ("word" per line) or counted
  ("count word" per line).
- Enforce formatting rules (lowercase, a–z only, optional exact length).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from wordkit.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("words.txt", counted=True)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib

from .wordlist import COUNT_RE


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    counted: bool        # "count word" format?
    length: Optional[int]  # required word length, if any
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words
    invalid_lines: int   # number of invalid lines encountered
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, counted: bool, length: Optional[int]) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line (after the count, for counted files)
      - must be lowercase a–z
      - must have exact `length` when given
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if counted:
                m = COUNT_RE.match(raw.rstrip("\r\n"))
                if not m or int(m.group(1)) == 0:
                    invalid += 1
                    continue
                w = m.group(2)
            if not w:
                invalid += 1
                continue
            if w == w.lower() and w.isalpha() and w.isascii() and (length is None or len(w) == length):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(path: str, *, length: Optional[int] = None, counted: bool = False) -> Dict:
    """
    Validate one word list.

    Returns a JSON-serializable dict (see FileReport) whose `passed` is
    strict: file exists, non-empty, no invalid lines, no duplicates.
    """
    p = Path(path)
    if not p.exists():
        rep = FileReport(path, False, counted, length, 0, "", 0, 0,
                         passed=False, issues=[f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p, counted, length)
    unique = len(set(words))

    issues: List[str] = []
    if not words:
        issues.append("file contains 0 valid words")
    if invalid:
        issues.append(f"file has {invalid} invalid line(s)")
    if unique != len(words):
        issues.append("file contains duplicate words")

    rep = FileReport(
        path=str(p),
        exists=True,
        counted=counted,
        length=length,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=unique,
        invalid_lines=invalid,
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner, e.g.
        words.txt | counted=True | words=120 (uniq=120, sha=abc123...) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{report['path']} | counted={report['counted']} "
        f"| words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | {status}"
    )
