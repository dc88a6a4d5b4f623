"""
Word-list validator for spellingbee.

What this module does:
- Inspect the main dictionary and (optionally) the excluded-words list.
- Count tokens, unique tokens and tokens that can never be answers
  (anything that isn't purely alphabetic); compute SHA-256 of the raw files.
- Count how many excluded words actually appear in the main list.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Bad content is never an exception here: problems are collected as `issues`.

Typical use:
    from spellingbee.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("data/words.txt", "data/excluded.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional
import hashlib

from .wordlist import WordlistError, split_words


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of tokens after parsing
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique tokens
    non_alpha: int       # tokens with non-alphabetic characters
    decodable: bool      # was the file valid UTF-8?


@dataclass
class ValidationReport:
    """Top-level validation result for the (main, excluded) pair."""
    main: FileReport
    excluded: Optional[FileReport]
    excluded_in_main: int
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _inspect(path_str: str, issues: List[str], label: str) -> tuple[FileReport, List[str]]:
    p = Path(path_str)
    if not p.exists():
        issues.append(f"{label} file not found: {path_str}")
        return FileReport(path_str, False, 0, "", 0, 0, False), []

    try:
        tokens = split_words(p.read_bytes())
        decodable = True
    except WordlistError as e:
        issues.append(f"{label}: {e}")
        tokens, decodable = [], False

    non_alpha = sum(1 for t in tokens if not t.isalpha())
    if non_alpha:
        issues.append(f"{label} has {non_alpha} non-alphabetic token(s)")

    rep = FileReport(
        path=str(p),
        exists=True,
        count=len(tokens),
        sha256=_sha256_file(p),
        unique_count=len(set(tokens)),
        non_alpha=non_alpha,
        decodable=decodable,
    )
    if rep.count != rep.unique_count:
        issues.append(f"{label} contains duplicate words")
    return rep, tokens


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(main_path: str, excluded_path: Optional[str] = None) -> Dict:
    """
    Validate the main and excluded word lists.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema).
        `passed` requires both files present and decodable and a non-empty
        main list. Duplicates and non-alphabetic tokens are reported as
        issues but don't fail validation: the lexicon filter drops them.
    """
    issues: List[str] = []

    main_rep, main_tokens = _inspect(str(main_path), issues, "main")
    exc_rep, exc_tokens = (None, [])
    if excluded_path:
        exc_rep, exc_tokens = _inspect(str(excluded_path), issues, "excluded")

    if main_rep.exists and main_rep.decodable and main_rep.count == 0:
        issues.append("main file contains 0 words")

    overlap = len(set(main_tokens) & set(exc_tokens))

    passed = (
            main_rep.exists
            and main_rep.decodable
            and main_rep.count > 0
            and (exc_rep is None or (exc_rep.exists and exc_rep.decodable))
    )

    rep = ValidationReport(
        main=main_rep,
        excluded=exc_rep,
        excluded_in_main=overlap,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for the console.

    Example:
        main=172820 (uniq=172820, sha=abc123...) | excluded=412 (sha=def456...) | excluded∩main=388 | OK
    """
    a = report["main"]
    status = "OK" if report["passed"] else "FAIL"
    parts = [f"main={a['count']} (uniq={a['unique_count']}, sha={(a.get('sha256') or '')[:12]})"]
    b = report.get("excluded")
    if b:
        parts.append(f"excluded={b['count']} (sha={(b.get('sha256') or '')[:12]})")
        parts.append(f"excluded∩main={report['excluded_in_main']}")
    parts.append(status)
    return " | ".join(parts)
