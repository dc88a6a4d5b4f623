from .validator import validate_wordlists, pretty_summary
from .io import read_lines, write_lines
from .wordlist import WordlistError, parse_strings, split_words, load_wordlists

__all__ = [
    "validate_wordlists",
    "pretty_summary",
    "read_lines",
    "write_lines",
    "WordlistError",
    "parse_strings",
    "split_words",
    "load_wordlists",
]
