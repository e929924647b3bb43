import pytest

from wordkit.datasets import WordList
from wordkit.engine import anagrams, count_permutations, distinct_permutations, permute_fragments, segment


def test_distinct_permutations_small():
    assert list(distinct_permutations("aab")) == ["aab", "aba", "baa"]
    assert list(distinct_permutations([2, 1])) == [(1, 2), (2, 1)]
    assert list(distinct_permutations("")) == [""]


@pytest.mark.parametrize("letters", ["abcd", "aabb", "letter", "mississippi"])
def test_each_distinct_ordering_exactly_once(letters):
    perms = list(distinct_permutations(letters))
    assert len(perms) == len(set(perms)) == count_permutations(letters)
    assert perms == sorted(perms)
    assert all(sorted(p) == sorted(letters) for p in perms)


def test_count_permutations():
    assert count_permutations("mississippi") == 34650
    assert count_permutations("") == 1


ANAGRAM_WORDS = WordList(["listen", "silent", "enlist", "tinsel", "inlets",
                          "list", "lens", "tin", "google"])


def test_full_anagrams_keep_pool_order():
    assert anagrams(ANAGRAM_WORDS, "Silent") == ["listen", "silent", "enlist", "tinsel", "inlets"]


def test_blank_tile():
    assert anagrams(ANAGRAM_WORDS, "sile.t") == ["listen", "silent", "enlist", "tinsel", "inlets"]
    assert anagrams(ANAGRAM_WORDS, "g.o..e") == ["google"]


def test_partial_anagrams_longest_first():
    got = anagrams(ANAGRAM_WORDS, "silent", partial=True, min_length=3)
    assert got == ["enlist", "inlets", "listen", "silent", "tinsel", "lens", "list", "tin"]


def test_anagrams_with_pattern():
    assert anagrams(ANAGRAM_WORDS, "silent", pattern="s.....") == ["silent"]


SEG_WORDS = WordList.from_counts(["50 a", "20 at", "5 ate", "10 tea", "1 ta"])


def test_segment_ranks_by_phrase_probability():
    d = segment(SEG_WORDS, "atea")
    assert d.values() == ["a tea", "ate a"]
    p, _ = d[0]
    assert p.nll == pytest.approx(SEG_WORDS.prob("a").nll + SEG_WORDS.prob("tea").nll)


def test_segment_wildcards_and_word_limit():
    assert set(segment(SEG_WORDS, "a.ea").values()) == {"a tea", "ate a"}
    assert segment(SEG_WORDS, "atea", max_words=1).values() == []
    assert segment(SEG_WORDS, "zzz").values() == []


def test_permute_fragments():
    d = permute_fragments(SEG_WORDS, ["tea", "a"])
    assert d.values() == ["a tea", "tea a", "ate a"]


def test_permute_fragments_skips_repeated_orders():
    d = permute_fragments(SEG_WORDS, ["a", "a"])
    assert d.values() == ["a a"]
    d = permute_fragments(WordList(["aa"]), ["a", "a"])
    assert d.values() == ["aa"]


def test_segment_matches_punctuation_literally():
    wl = WordList(["don't", "go", "do", "nt"])
    assert segment(wl, "don'tgo").values() == ["don't go"]
    assert segment(wl, "do.'tgo").values() == ["don't go"]
    assert permute_fragments(wl, ["go", "don't"]).values() == ["don't go", "go don't"]
