from .probability import Prob, Dist
from .pattern import Pattern, Slot
from .matcher import match_pattern, find_matches, search
from .permute import distinct_permutations, count_permutations, anagrams, segment, permute_fragments
from .validation import validate_word

__all__ = [
    "Prob", "Dist", "Pattern", "Slot",
    "match_pattern", "find_matches", "search",
    "distinct_permutations", "count_permutations", "anagrams", "segment", "permute_fragments",
    "validate_word",
]
