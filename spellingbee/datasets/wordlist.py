"""
Raw word-list parsing.

A word list is plain text:
  - tokens separated by whitespace and/or commas
  - case-insensitive (everything is lowercased)
  - lines whose first non-blank character is '#' are comments

The game is built from two lists: the main dictionary and a list of words
that must never be answers (profanity and the like). `parse_strings`
combines them into a single sequence of candidate words.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Union

from .io import read_bytes

RawText = Union[str, bytes]

_TOKEN_SEP = re.compile(r"[\s,]+")


class WordlistError(ValueError):
    """Raised when raw word-list text can't be turned into words."""


def _decode(raw: RawText) -> str:
    if isinstance(raw, bytes):
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise WordlistError(f"word list is not valid UTF-8: {e}") from e
    if not isinstance(raw, str):
        raise WordlistError(f"word list must be str or bytes; got {type(raw).__name__}")
    return raw


def split_words(raw: RawText) -> List[str]:
    """
    Tokenize raw word-list text into lowercase words, in file order.
    Duplicates are kept; see `parse_strings` for the deduplicated form.
    """
    out: List[str] = []
    for line in _decode(raw).splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        out.extend(t.lower() for t in _TOKEN_SEP.split(line) if t)
    return out


def parse_strings(main_words: RawText, excluded_words: RawText = "") -> List[str]:
    """
    Main words minus excluded words, first-appearance order, no duplicates.

    Raises WordlistError if either input can't be decoded.
    """
    excluded = set(split_words(excluded_words))

    seen = set()
    out: List[str] = []
    for w in split_words(main_words):
        if w in excluded or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return out


def load_wordlists(main_path: Path | str, excluded_path: Path | str | None = None) -> List[str]:
    """Read and parse the main (and optional excluded) word-list files."""
    main_raw = read_bytes(main_path)
    excluded_raw = read_bytes(excluded_path) if excluded_path else b""
    return parse_strings(main_raw, excluded_raw)
