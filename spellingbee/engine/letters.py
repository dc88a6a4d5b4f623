"""
The puzzle's letter set: one required letter plus the optional ones.

Conventions:
  - all letters are stored lowercase
  - the required letter never appears among the optional letters
  - optional letters are kept sorted, so nothing about the order the puzzle
    was authored in leaks to the player

A LetterSet is immutable; it is built once per game and shared freely.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Tuple


@dataclass(frozen=True)
class LetterSet:
    required: str
    optional: Tuple[str, ...]
    allowed: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "allowed", frozenset(self.optional) | {self.required})

    @classmethod
    def build(cls, optional_letters: Iterable[str], required_letter: str) -> "LetterSet":
        """
        Normalize raw puzzle letters into a LetterSet.

        Raises ValueError if `required_letter` is not a single alphabetic
        character or any optional letter is not alphabetic. A required letter
        repeated among the optional ones is simply dropped from them.
        """
        req = str(required_letter).strip().lower()
        if len(req) != 1 or not req.isalpha():
            raise ValueError(f"required letter must be a single alphabetic character; got {required_letter!r}")

        opt = set()
        for c in optional_letters:
            c = c.lower()
            if len(c) != 1 or not c.isalpha():
                raise ValueError(f"optional letters must be alphabetic; got {c!r}")
            opt.add(c)
        opt.discard(req)

        return cls(required=req, optional=tuple(sorted(opt)))

    def only_uses(self, word: str) -> bool:
        """True if every character of `word` is an allowed letter."""
        return all(c in self.allowed for c in word)

    def accepts(self, word: str) -> bool:
        """True if `word` uses only allowed letters and includes the required one."""
        return self.required in word and self.only_uses(word)

    def covers(self, word: str) -> bool:
        """True if `word` contains the required letter and every optional one."""
        return self.required in word and all(c in word for c in self.optional)

    def display(self) -> str:
        # e.g. "[i] cglorw"
        return f"[{self.required}] {''.join(self.optional)}"
