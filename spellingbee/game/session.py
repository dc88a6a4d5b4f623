"""
A single Spelling Bee game.

The session owns:
  - the LetterSet (immutable)
  - the answer set, filtered once at construction (immutable)
  - the words played so far and the running score (mutable, changed together
    by `play` only)

Score is computed as follows: a four-letter word is worth one point, any
longer word is worth a point per letter, and a word that uses every letter
of the puzzle earns a further PANGRAM_BONUS points.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional, Set, Tuple, Union

from spellingbee.datasets.wordlist import RawText, load_wordlists, parse_strings
from spellingbee.engine import scoring
from spellingbee.engine.letters import LetterSet
from spellingbee.engine.lexicon import filter_lexicon
from spellingbee.engine.validation import PlayResult, is_valid_partial_input, validate_play

logger = logging.getLogger(__name__)

WordSource = Union[RawText, Iterable[str]]


def _as_words(source: WordSource) -> Iterable[str]:
    # Raw text goes through the word-list parser; anything else is already split
    if isinstance(source, (str, bytes)):
        return parse_strings(source)
    return source


class SpellingBeeGame:
    """
    A game with one required letter and a handful of optional ones. Lets
    users play words and check them for validity, keeping track of the score.
    """

    def __init__(self, optional_letters: Iterable[str], required_letter: str,
                 main_words: WordSource, excluded_words: WordSource = ()):
        self._letters = LetterSet.build(optional_letters, required_letter)

        words = filter_lexicon(_as_words(main_words), _as_words(excluded_words), self._letters)
        self._answers: Tuple[str, ...] = tuple(words)
        self._answer_set: FrozenSet[str] = frozenset(words)
        logger.debug("puzzle %s: %d answers", self._letters.display(), len(self._answers))

        self._lock = threading.Lock()
        self._played: Set[str] = set()
        self._score = 0
        self._max_score: Optional[int] = None

    @classmethod
    def from_files(cls, optional_letters: Iterable[str], required_letter: str,
                   main_path: Path | str, excluded_path: Path | str | None = None) -> "SpellingBeeGame":
        """Build a game from word-list files on disk."""
        return cls(optional_letters, required_letter, load_wordlists(main_path, excluded_path))

    def __repr__(self) -> str:
        return (f"SpellingBeeGame(letters={self._letters.display()!r}, "
                f"answers={len(self._answers)}, score={self._score})")

    # ---- mutation ----

    def play(self, word: str) -> PlayResult:
        """
        Accept a word, updating the played words and score if it is a new
        valid answer. Rejected plays leave the game untouched.

        The word is checked as given: "WILL" and "oil " use letters outside
        the puzzle and are INVALID_LETTERS. Trimming is the caller's job.
        """
        with self._lock:
            result = validate_play(word, self._letters, self._answer_set, self._played)
            if result.accepted:
                self._played.add(word)
                self._score += self.score_word(word)
            return result

    # ---- queries ----

    @property
    def letters(self) -> LetterSet:
        return self._letters

    def score(self) -> int:
        return self._score

    def required_letter(self) -> str:
        return self._letters.required

    def optional_letters(self) -> str:
        """The optional letters in sorted order."""
        return "".join(self._letters.optional)

    def is_valid_partial_input(self, prefix: str) -> bool:
        return is_valid_partial_input(prefix, self._letters)

    def is_pangram(self, word: str) -> bool:
        """True if `word` is an answer and contains every puzzle letter."""
        return word in self._answer_set and scoring.is_pangram(word, self._letters)

    def score_word(self, word: str) -> int:
        """Points `word` is worth in this puzzle; 0 if it isn't an answer."""
        if word not in self._answer_set:
            return 0
        return scoring.score_word(word, self._letters)

    def max_score(self) -> int:
        """Score for finding every answer."""
        if self._max_score is None:
            self._max_score = sum(self.score_word(w) for w in self._answers)
        return self._max_score

    def played_words(self) -> List[str]:
        with self._lock:
            return sorted(self._played)

    def answers(self) -> Tuple[str, ...]:
        return self._answers

    def answer_count(self) -> int:
        return len(self._answers)
