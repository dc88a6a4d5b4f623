"""
Replay and survey primitives.

- run_plays:     feed a sequence of words into one game and record every play.
- survey_puzzle: size up one puzzle (answers, pangrams, max score).
- run_survey:    survey many puzzles against a shared, pre-parsed word list.

These functions are UI-agnostic so they can be reused by the CLI apps,
a notebook, or tests without changes.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from spellingbee.game import SpellingBeeGame

logger = logging.getLogger(__name__)

# A puzzle is (required letter, optional letters)
Puzzle = Tuple[str, str]


def run_plays(game: SpellingBeeGame, words: Iterable[str], on_play: Callable | None = None) -> Dict:
    """
    Play `words` in order against `game`. If given, `on_play(word, result,
    points, score)` is called after each play (e.g. to echo it live).

    Returns:
        dict with keys:
            letters (str), required (str),
            plays (list[(word, result, points, score_after)]),
            score (int), max_score (int), found (int), answers (int),
            time_ms (float)
    """
    plays: List[Tuple[str, str, int, int]] = []

    t0 = time.perf_counter()
    for word in words:
        before = game.score()
        result = game.play(word)
        after = game.score()
        plays.append((word, result.value, after - before, after))
        if on_play is not None:
            on_play(word, result, after - before, after)
    dt = (time.perf_counter() - t0) * 1000.0

    out = {
        "letters": game.letters.display(),
        "required": game.required_letter(),
        "plays": plays,
        "score": game.score(),
        "max_score": game.max_score(),
        "found": len(game.played_words()),
        "answers": game.answer_count(),
        "time_ms": dt,
    }
    logger.info("replayed %d plays on %s: score %d/%d",
                len(plays), out["letters"], out["score"], out["max_score"])
    return out


def survey_puzzle(required: str, optional: str, words: Sequence[str]) -> Dict:
    """
    Build a game for one puzzle and summarize its answer set.

    Raises ValueError (via LetterSet) if the letters are malformed.
    """
    game = SpellingBeeGame(optional, required, words)
    pangrams = [w for w in game.answers() if game.is_pangram(w)]
    return {
        "letters": game.letters.display(),
        "required": game.required_letter(),
        "optional": game.optional_letters(),
        "answers": game.answer_count(),
        "pangrams": len(pangrams),
        "max_score": game.max_score(),
        "pangram_words": pangrams,
    }


def parse_puzzle(line: str) -> Puzzle:
    """
    Parse a puzzle line of the form "<required> <optional>", e.g. "i clwgro".
    """
    parts = line.split()
    if len(parts) != 2 or len(parts[0]) != 1:
        raise ValueError(f"puzzle line must be '<required> <optional>'; got {line!r}")
    return parts[0].lower(), parts[1].lower()


def run_survey(
        puzzles: Sequence[Puzzle],
        words: Sequence[str],
        *,
        sample: int | None = None,
        progress: Callable[[List[Puzzle]], Iterable[Puzzle]] | None = None,
) -> List[Dict]:
    """
    Survey many puzzles back-to-back. If `sample` is provided only the first
    K puzzles are used, to speed up quick checks. `progress` wraps the puzzle
    list for iteration (e.g. a tqdm bar) and must yield the same puzzles.
    """
    pool = list(puzzles)
    if sample is not None:
        pool = pool[:sample]
    iterator = progress(pool) if progress is not None else pool
    return [survey_puzzle(req, opt, words) for req, opt in iterator]
