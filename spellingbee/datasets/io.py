from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_bytes(p: Path | str) -> bytes:
    """
    Read a word-list file as raw bytes (decoding is the parser's job).
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return p.read_bytes()


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of stripped, non-blank lines.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.strip() for ln in p.read_text(encoding="utf-8").splitlines() if ln.strip()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file with a trailing newline, creating parent
    directories. Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
