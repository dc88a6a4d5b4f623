from .letters import LetterSet
from .scoring import MIN_LENGTH, PANGRAM_BONUS, score_word, is_pangram
from .lexicon import filter_lexicon
from .validation import PlayResult, validate_play, is_valid_partial_input

__all__ = [
    "LetterSet",
    "MIN_LENGTH",
    "PANGRAM_BONUS",
    "score_word",
    "is_pangram",
    "filter_lexicon",
    "PlayResult",
    "validate_play",
    "is_valid_partial_input",
]
