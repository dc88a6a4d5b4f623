"""
Spelling Bee scoring for a single word.

Rules:
  - words shorter than MIN_LENGTH are worth nothing (and are never accepted)
  - a MIN_LENGTH (four-letter) word is worth 1 point
  - a longer word is worth one point per letter
  - a pangram (uses every optional letter, plus the required one) earns an
    extra PANGRAM_BONUS points

Scoring depends only on the word and the letter set, never on what has
already been played, so the same word always scores the same.

Examples (required 'i', optional "clwgro"):
  score_word("will", letters)    -> 1
  score_word("cowgirl", letters) -> 14   (7 letters + 7 bonus)
  score_word("rail", letters)    -> 0    ('a' is not a puzzle letter)
"""

from .letters import LetterSet

# Shortest word the game accepts.
MIN_LENGTH = 4

# Extra points for using every letter of the puzzle.
PANGRAM_BONUS = 7


def base_points(word: str) -> int:
    n = len(word)
    if n < MIN_LENGTH:
        return 0
    if n == MIN_LENGTH:
        return 1
    return n


def is_pangram(word: str, letters: LetterSet) -> bool:
    """Letter coverage only; dictionary membership is checked by the caller."""
    return letters.covers(word)


def score_word(word: str, letters: LetterSet) -> int:
    """
    Points for `word` under `letters`. Returns 0 for words that could never
    be accepted (too short, or using letters outside the puzzle).
    """
    if len(word) < MIN_LENGTH or not letters.accepts(word):
        return 0

    points = base_points(word)
    if is_pangram(word, letters):
        points += PANGRAM_BONUS
    return points
