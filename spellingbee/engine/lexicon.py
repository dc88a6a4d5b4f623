"""
Answer-set construction for a single puzzle.

Given:
  - a pool of raw candidate words (the main word list)
  - a pool of excluded words (e.g. a profanity list)
  - the puzzle's LetterSet

Return:
  - the sorted, duplicate-free list of words that are valid answers.

Filters are applied in a fixed sequence:
  1) letters:         drop words with any letter outside the puzzle
  2) required letter: drop words that never use the required letter
  3) length:          drop words shorter than MIN_LENGTH

Malformed tokens are never an error; they simply fail a filter.
"""

from typing import Iterable, Iterator, List, Set

from .letters import LetterSet
from .scoring import MIN_LENGTH


def _normalize(words: Iterable[str]) -> Set[str]:
    # Lexicon sources are expected lowercase already; tolerate stray case/space
    return {w.strip().lower() for w in words if w and w.strip()}


def only_using_letters(words: Iterable[str], letters: LetterSet) -> Iterator[str]:
    return (w for w in words if letters.only_uses(w))


def with_letter(words: Iterable[str], letter: str) -> Iterator[str]:
    return (w for w in words if letter in w)


def with_min_length(words: Iterable[str], n: int = MIN_LENGTH) -> Iterator[str]:
    return (w for w in words if len(w) >= n)


def filter_lexicon(words: Iterable[str], excluded: Iterable[str], letters: LetterSet) -> List[str]:
    """
    Reduce raw candidate words to the puzzle's answer set.

    Args:
      words    : iterable of candidate words
      excluded : iterable of words that must never be answers
      letters  : the puzzle's LetterSet

    Returns:
      List[str] of unique answers in lexicographic order.
    """
    pool = _normalize(words) - _normalize(excluded)

    out = only_using_letters(pool, letters)
    out = with_letter(out, letters.required)
    out = with_min_length(out, MIN_LENGTH)

    return sorted(out)
