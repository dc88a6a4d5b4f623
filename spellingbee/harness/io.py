"""
I/O utilities for game transcripts and surveys.

Responsibilities:
- write_csv:          flatten a replay into a tidy CSV (one row per play).
- write_survey_csv:   one row per surveyed puzzle.
- write_manifest:     dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:       stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def write_csv(run: Dict, path: str) -> str:
    """
    Serialize a replay (as returned by harness.run_plays) to CSV.

    Schema (columns):
      turn, letters, word, result, points, score, max_score

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["turn", "letters", "word", "result", "points", "score", "max_score"]
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        for turn, (word, result, points, score) in enumerate(run["plays"], start=1):
            w.writerow({
                "turn": turn,
                "letters": run["letters"],
                "word": word,
                "result": result,
                "points": points,
                "score": score,
                "max_score": run["max_score"],
            })

    return str(p)


def write_survey_csv(rows: List[Dict], path: str) -> str:
    """
    Serialize survey rows (as returned by harness.run_survey) to CSV.
    Pangram words are joined with spaces in a single column.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["required", "optional", "answers", "pangrams", "max_score", "pangram_words"]
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        for r in rows:
            w.writerow({
                "required": r["required"],
                "optional": r["optional"],
                "answers": r["answers"],
                "pangrams": r["pangrams"],
                "max_score": r["max_score"],
                "pangram_words": " ".join(r["pangram_words"]),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Dump the sidecar JSON that sits next to a play or survey CSV, so a
    transcript can be traced back to the puzzle letters, word-list hashes
    and score it came from.

    play.py writes: run_id, git_commit, config, wordlists, letters, score,
    max_score, num_plays. survey.py writes num_puzzles instead of the
    per-game fields.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """Run id shared by a CSV and its manifest, e.g. play_20261018T094500Z.csv."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Short hash of the checkout that produced a transcript; 'unknown'
    outside a git checkout or without git installed.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
