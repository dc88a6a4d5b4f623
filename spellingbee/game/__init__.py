from .session import SpellingBeeGame
from spellingbee.engine.validation import PlayResult

__all__ = ["SpellingBeeGame", "PlayResult"]
