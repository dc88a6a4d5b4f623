"""
Play validation.

This module answers the question: "What happens if this word is played now?"
The checks run in a fixed priority order and the first failure wins:

  1) too short                         -> INVALID_LENGTH
  2) foreign letter / no required one  -> INVALID_LETTERS
  3) not an answer                     -> INVALID_WORD
  4) already found                     -> ALREADY_PLAYED
  5) otherwise                         -> VALID

The order matters: "oil" is INVALID_LENGTH, never INVALID_LETTERS, and a
made-up word with foreign letters is INVALID_LETTERS, never INVALID_WORD.
"""

from enum import Enum
from typing import AbstractSet

from .letters import LetterSet
from .scoring import MIN_LENGTH


class PlayResult(Enum):
    VALID = "valid"
    ALREADY_PLAYED = "already_played"
    INVALID_WORD = "invalid_word"
    INVALID_LENGTH = "invalid_length"
    INVALID_LETTERS = "invalid_letters"

    @property
    def accepted(self) -> bool:
        return self is PlayResult.VALID


def is_valid_partial_input(prefix: str, letters: LetterSet) -> bool:
    """
    True if every character typed so far is a puzzle letter. Length and
    dictionary membership are ignored; this is for filtering live input.
    """
    return letters.only_uses(prefix)


def validate_play(
        word: str,
        letters: LetterSet,
        answers: AbstractSet[str],
        played: AbstractSet[str],
) -> PlayResult:
    """
    Classify `word` without touching any state.

    Args:
      word    : the word exactly as played (no case folding or trimming)
      letters : the puzzle's LetterSet
      answers : the puzzle's answer set
      played  : words accepted so far
    """
    if len(word) < MIN_LENGTH:
        return PlayResult.INVALID_LENGTH
    if not letters.accepts(word):
        return PlayResult.INVALID_LETTERS
    if word not in answers:
        return PlayResult.INVALID_WORD
    if word in played:
        return PlayResult.ALREADY_PLAYED
    return PlayResult.VALID
