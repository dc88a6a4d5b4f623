# apps/cli/play.py
"""
CLI entry point for playing a Spelling Bee puzzle.

This script:
  1) Validates the word lists (prints counts + SHA, excluded∩main overlap).
  2) Builds the game for the given letters.
  3) Plays words either interactively (one per line on stdin, blank line or
     EOF to stop) or from a --plays file, printing the result of each play.
  4) Optionally writes:
       - CSV:  one row per play (word, result, points, running score)
       - JSON: manifest with config, word-list hashes, git commit, etc.

Usage:
    python -m apps.cli.play --required i --optional clwgro \
        --words data/words.txt --excluded data/excluded.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterator

from spellingbee.datasets import validate_wordlists, pretty_summary, read_lines
from spellingbee.game import PlayResult, SpellingBeeGame
from spellingbee.harness import run_plays
from spellingbee.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

logger = logging.getLogger(__name__)


def _stdin_words(game: SpellingBeeGame) -> Iterator[str]:
    """
    Yield words typed by the user until a blank line or EOF. Lines are only
    trimmed; every word reaches the game so the transcript matches --plays.
    """
    while True:
        sys.stdout.write(f"{game.letters.display()} score={game.score()}> ")
        sys.stdout.flush()
        line = sys.stdin.readline()
        word = line.strip()
        if not word:
            return
        yield word


def _echo_for(game: SpellingBeeGame):
    def _echo(word: str, result: PlayResult, points: int, score: int) -> None:
        print(f"  {word:<20} {result.value:<16} +{points:<3} score={score}")
        if result is PlayResult.INVALID_LETTERS and not game.is_valid_partial_input(word):
            print(f"  only these letters: {game.letters.display()}")
    return _echo


def main():
    """
    Parse CLI args, validate word lists, play, and write outputs.
    """
    ap = argparse.ArgumentParser(description="spellingbee — play a puzzle")
    ap.add_argument("--required", required=True, help="the required (center) letter")
    ap.add_argument("--optional", required=True, help="the optional letters, e.g. clwgro")
    ap.add_argument("--words", default="data/words.txt", help="path to the main word list")
    ap.add_argument("--excluded", help="path to the excluded-words list (optional)")
    ap.add_argument("--plays", help="file of words to play, one per line (default: interactive)")
    ap.add_argument("--outdir", help="write CSV + manifest here (default: don't write)")
    ap.add_argument("--reveal", action="store_true", help="print every answer at the end")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 1) Validate word lists and print a one-liner summary
    rep = validate_wordlists(args.words, args.excluded)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        logger.warning("word list: %s", issue)

    # 2) Build the game
    game = SpellingBeeGame.from_files(args.optional, args.required, args.words, args.excluded)
    print(f"Letters: {game.letters.display()} | answers={game.answer_count()} "
          f"| max score={game.max_score()}")

    # 3) Play
    words = read_lines(args.plays) if args.plays else _stdin_words(game)
    run = run_plays(game, words, on_play=_echo_for(game))
    print(f"Final: {run['score']}/{run['max_score']} "
          f"({run['found']}/{run['answers']} words)")

    if args.reveal:
        found = set(game.played_words())
        for w in game.answers():
            mark = "*" if game.is_pangram(w) else " "
            seen = "x" if w in found else " "
            print(f"  [{seen}]{mark} {w}")

    # 4) Write outputs (CSV + manifest)
    if args.outdir:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        csv_path = outdir / f"play_{run_id}.csv"
        manifest_path = outdir / f"play_{run_id}_manifest.json"

        write_csv(run, str(csv_path))
        write_manifest({
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "wordlists": rep,
            "letters": run["letters"],
            "score": run["score"],
            "max_score": run["max_score"],
            "num_plays": len(run["plays"]),
        }, str(manifest_path))

        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
