import re

import pytest

from wordkit.datasets import WordList
from wordkit.engine import Pattern, find_matches, match_pattern, search, validate_word
from wordkit.errors import PatternError

WORDS = WordList(["cat", "cot", "cut", "act", "coat", "dog", "tac", "cast"])


@pytest.mark.parametrize("pattern,expected", [
    ("c.t", ["cat", "cot", "cut"]),
    ("C?T", ["cat", "cot", "cut"]),
    ("c[^o]t", ["cat", "cut"]),
    ("c[!ou]t", ["cat"]),
    ("[ac]..", ["cat", "cot", "cut", "act"]),
    ("....", ["coat", "cast"]),
    ("x..", []),
])
def test_match_pattern_golden(pattern, expected):
    assert match_pattern(WORDS, pattern) == expected


def test_required_and_excluded_letters():
    assert match_pattern(WORDS, Pattern.parse("...", required="a")) == ["cat", "act", "tac"]
    assert match_pattern(WORDS, Pattern.parse("c.t", excluded="u")) == ["cat", "cot"]
    assert match_pattern(WORDS, Pattern.parse("....", required="aa")) == []


def test_match_pattern_plain_iterable_normalises():
    assert match_pattern(["CAT", " cot ", "dog"], "c.t") == ["cat", "cot"]


@pytest.mark.parametrize("text", ["c.t", "c[^o]t", "[ac]..", "..a.", "?o?"])
@pytest.mark.parametrize("required", ["", "a", "t"])
def test_matches_agrees_with_regex(text, required):
    pat = Pattern.parse(text, required=required)
    rx = re.compile(pat.to_regex())
    for w in WORDS:
        assert pat.matches(w) == bool(rx.fullmatch(w)), (text, required, w)


def test_every_match_satisfies_pattern_and_none_missed():
    pat = Pattern.parse("[abc].[^x]")
    got = match_pattern(WORDS, pat)
    assert all(pat.matches(w) for w in got)
    assert set(got) == {w for w in WORDS if pat.matches(w)}


def test_pattern_str_is_canonical():
    assert str(Pattern.parse("C[^aeiou]?")) == "c[^aeiou]."
    assert str(Pattern.parse("[ba]x")) == "[ab]x"
    assert len(Pattern.parse("[abc]d.")) == 3


@pytest.mark.parametrize("text,kw", [
    ("", {}),
    ("c[at", {}),
    ("c[]t", {}),
    ("c1t", {}),
    ("[^abcdefghijklmnopqrstuvwxyz]", {}),
    ("a[!abcdefghijklmnopqrstuvwxyz]", {}),
    ("[a]", {"excluded": "a"}),
    ("..", {"required": "a1"}),
])
def test_pattern_errors(text, kw):
    with pytest.raises(PatternError):
        Pattern.parse(text, **kw)


def test_find_matches_orders_by_frequency():
    wl = WordList.from_counts(["5 cot", "10 cat", "1 cut", "7 dog"])
    d = find_matches(wl, "c.t")
    assert d.values() == ["cat", "cot", "cut"]


def test_search_is_anchored_regex():
    assert search(WORDS, "c(a|o)t").values() == ["cat", "cot"]
    assert search(WORDS, "a").values() == []
    assert search(WORDS, "c.*t").values() == ["cat", "cot", "cut", "coat", "cast"]
    with pytest.raises(PatternError):
        search(WORDS, "c[")


def test_validate_word():
    assert validate_word("CAT", WORDS, length=3) is True
    assert validate_word("cat", ["cat", "dog"]) is True
    assert validate_word("cats", ["cat"]) is False
    assert validate_word("cat", WORDS, length=4) is False
    assert validate_word("c4t", WORDS) is False
    assert validate_word(123, WORDS) is False
