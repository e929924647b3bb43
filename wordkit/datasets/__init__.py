from .wordlist import WordList
from .io import read_lines, load_wordlist
from .validator import validate_wordlist, pretty_summary

__all__ = ["WordList", "read_lines", "load_wordlist", "validate_wordlist", "pretty_summary"]
