# apps/cli/survey.py
"""
Size up many puzzles in one shot with progress.

Reads a puzzles file ("<required> <optional>" per line, e.g. "i clwgro"),
builds each puzzle against the same word lists and writes
<outdir>/survey_<timestamp>.csv + _manifest.json.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Iterator, List

from tqdm import tqdm

from spellingbee.datasets import validate_wordlists, pretty_summary, read_lines, load_wordlists
from spellingbee.harness import parse_puzzle, run_survey
from spellingbee.harness.core import Puzzle
from spellingbee.harness.io import write_survey_csv, write_manifest, timestamp_id, git_commit_or_unknown


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _plain_progress(items: List[Puzzle]) -> Iterator[Puzzle]:
    """Yield `items`, writing a one-line counter to stderr at most once a second."""
    total = len(items)
    start = time.time()
    last_print = 0.0
    for idx, item in enumerate(items, 1):
        yield item
        now = time.time()
        if (now - last_print >= 1.0) or (idx == total):
            elapsed = now - start
            pct = 100.0 * idx / max(1, total)
            sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
            sys.stderr.flush()
            last_print = now
    sys.stderr.write("\n"); sys.stderr.flush()


def _progress_wrapper(mode: str):
    if mode == "bar":
        return lambda items: tqdm(items, ncols=80, desc="Surveying", unit="puzzle")
    if mode == "plain":
        return _plain_progress
    return None


def main():
    ap = argparse.ArgumentParser(description="spellingbee — survey puzzles")
    ap.add_argument("--puzzles", required=True, help="file of '<required> <optional>' lines")
    ap.add_argument("--words", default="data/words.txt", help="path to the main word list")
    ap.add_argument("--excluded", help="path to the excluded-words list (optional)")
    ap.add_argument("--sample", type=int, help="survey only the first K puzzles")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="Show progress (auto=bar on a terminal, else plain text).")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level))

    rep = validate_wordlists(args.words, args.excluded)
    print(pretty_summary(rep))

    # Parse the word lists once; every puzzle filters the same pool
    words = load_wordlists(args.words, args.excluded)
    puzzles = [parse_puzzle(ln) for ln in read_lines(args.puzzles) if not ln.startswith("#")]

    mode = _progress_mode(args.progress)
    rows = run_survey(puzzles, words, sample=args.sample, progress=_progress_wrapper(mode))

    for r in rows:
        print(f"  {r['letters']:<12} answers={r['answers']:<4} pangrams={r['pangrams']:<2} "
              f"max={r['max_score']}")

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"survey_{run_id}.csv"
    manifest_path = outdir / f"survey_{run_id}_manifest.json"

    write_survey_csv(rows, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_puzzles": len(rows),
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
