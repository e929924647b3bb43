"""
Permutations, anagrams, and fragment rearrangement.

- distinct_permutations: every distinct ordering of a multiset, once each.
- anagrams:              words spelled by a bag of letters ("." = blank tile).
- segment:               split a letter string into dictionary words.
- permute_fragments:     rearrange fragments, then segment each arrangement.

Phrases are scored by multiplying their words' probabilities, so the most
natural reading of "thecat" ("the cat") ranks above rarer splits.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar, Union

from .matcher import PatternLike, as_pattern, pool_for_length, word_prob
from .pattern import WILDCARDS
from .probability import Dist, Prob

log = logging.getLogger(__name__)

T = TypeVar("T")


def distinct_permutations(items: Union[str, Iterable[T]]) -> Iterator:
    """
    Yield each distinct ordering of `items` exactly once, in lexicographic
    order. Strings yield strings; anything else yields tuples.

    Uses the classic next-permutation step on a sorted copy, so repeated
    items never produce duplicate orderings (no generate-then-dedupe).
    """
    as_str = isinstance(items, str)
    seq = sorted(items)
    n = len(seq)

    while True:
        yield "".join(seq) if as_str else tuple(seq)

        # Rightmost i with seq[i] < seq[i + 1]; none means we're at the last ordering.
        i = n - 2
        while i >= 0 and not seq[i] < seq[i + 1]:
            i -= 1
        if i < 0:
            return
        j = n - 1
        while not seq[i] < seq[j]:
            j -= 1
        seq[i], seq[j] = seq[j], seq[i]
        seq[i + 1:] = reversed(seq[i + 1:])


def count_permutations(items: Iterable) -> int:
    """Number of distinct orderings: n! / prod(k_i!)."""
    counts = Counter(items)
    total = math.factorial(sum(counts.values()))
    for k in counts.values():
        total //= math.factorial(k)
    return total


def _fits(word: str, have: Counter, blanks: int) -> bool:
    """Can `word` be spelled from `have` plus `blanks` wildcard tiles?"""
    short = 0
    for ch, k in Counter(word).items():
        missing = k - have[ch]
        if missing > 0:
            short += missing
            if short > blanks:
                return False
    return True


def anagrams(
        words: Iterable[str],
        letters: str,
        *,
        partial: bool = False,
        min_length: int = 1,
        pattern: Optional[PatternLike] = None,
) -> List[str]:
    """
    Words spelled by `letters`.

    Args:
      words      : WordList or iterable of words
      letters    : the bag of letters; "." or "?" is a blank tile
      partial    : allow words that use only some of the letters
      min_length : shortest word returned when `partial`
      pattern    : optional positional pattern every result must satisfy

    Returns:
      Full anagrams in pool order, or (partial) longest first then A–Z.
    """
    letters = letters.strip().lower()
    blanks = sum(letters.count(w) for w in WILDCARDS)
    have = Counter(ch for ch in letters if ch not in WILDCARDS)
    n = len(letters)
    pat = as_pattern(pattern) if pattern is not None else None

    if partial:
        pool: Iterable[str] = words
    else:
        pool = pool_for_length(words, n)

    out: List[str] = []
    seen = set()
    for w in pool:
        w = w.strip().lower()
        if w in seen:
            continue
        if partial:
            if not (min_length <= len(w) <= n):
                continue
        elif len(w) != n:
            continue
        if pat is not None and not pat.matches(w):
            continue
        if _fits(w, have, blanks):
            seen.add(w)
            out.append(w)

    if partial:
        out.sort(key=lambda w: (-len(w), w))
    return out


def _literal_matches(wordlist, prefix: str) -> Dist[str]:
    """Words equal to `prefix` character for character; "." and "?" match anything."""
    dist: Dist[str] = Dist()
    for w in pool_for_length(wordlist, len(prefix)):
        w = w.strip().lower()
        if len(w) == len(prefix) and all(p in WILDCARDS or p == c for p, c in zip(prefix, w)):
            dist.append(word_prob(wordlist, w), w)
    dist.sort_by_probability()
    return dist


def segment(wordlist, text: str, *, max_words: Optional[int] = None) -> Dist[str]:
    """
    Every way to split `text` into words from `wordlist`, most probable first.

    "." in `text` stands for an unknown letter; every other character
    (apostrophes, hyphens) must match literally. Spaces are ignored. Each
    phrase's probability is the product of its words' probabilities.
    """
    text = "".join(text.split()).lower()
    matches_cache: Dict[str, Dist[str]] = {}
    memo: Dict[Tuple[int, Optional[int]], List[Tuple[Prob, Tuple[str, ...]]]] = {}

    def words_for(prefix: str) -> Dist[str]:
        if prefix not in matches_cache:
            matches_cache[prefix] = _literal_matches(wordlist, prefix)
        return matches_cache[prefix]

    def split(start: int, budget: Optional[int]) -> List[Tuple[Prob, Tuple[str, ...]]]:
        if start == len(text):
            return [(Prob.always(), ())]
        if budget == 0:
            return []
        key = (start, budget)
        if key in memo:
            return memo[key]

        found: List[Tuple[Prob, Tuple[str, ...]]] = []
        nxt = None if budget is None else budget - 1
        # Longest prefix first.
        for end in range(len(text), start, -1):
            for p, w in words_for(text[start:end]):
                for rest_p, rest in split(end, nxt):
                    found.append((p * rest_p, (w,) + rest))
        memo[key] = found
        return found

    if not text:
        return Dist()

    dist: Dist[str] = Dist()
    for p, phrase in split(0, max_words):
        joined = " ".join(phrase)
        log.debug("found %s %s", p, joined)
        dist.append(p, joined)
    dist.sort_by_probability()
    return dist


def permute_fragments(
        wordlist,
        fragments: Sequence[str],
        *,
        max_words: Optional[int] = None,
) -> Dist[str]:
    """
    Try every order of `fragments` and split each into words.

    Fragments are letters or word pieces; "." is an unknown letter. Orders
    that concatenate to an already-tried string are skipped, and a phrase
    reachable from several orders is reported once.
    """
    frags = [f.strip().lower() for f in fragments if f.strip()]
    seen_candidates = set()
    seen_phrases = set()
    dist: Dist[str] = Dist()

    for order in distinct_permutations(frags):
        candidate = "".join(order)
        if candidate in seen_candidates:
            continue
        seen_candidates.add(candidate)
        log.debug("candidate: %s", candidate)
        for p, phrase in segment(wordlist, candidate, max_words=max_words):
            if phrase not in seen_phrases:
                seen_phrases.add(phrase)
                dist.append(p, phrase)

    dist.sort_by_probability()
    return dist
