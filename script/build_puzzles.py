"""
Build a puzzles file from a word list.

What it does:
- Reads the main (and optional excluded) word list.
- Keeps words with exactly seven distinct letters: each one is a pangram
  for some puzzle.
- For every such letter set, emits one puzzle per choice of required letter
  ("<required> <optional>"), de-duplicated, in a stable order.

Usage:
    python -m script.build_puzzles --words data/words.txt --out data/puzzles.txt
    # only puzzles whose required letter is a vowel:
    python -m script.build_puzzles --words data/words.txt --required aeiou --out data/puzzles.txt
"""

import argparse

from spellingbee.datasets import load_wordlists, write_lines

PUZZLE_LETTERS = 7


def pangram_letter_sets(words: list[str]) -> list[str]:
    """Distinct sorted letter sets of size PUZZLE_LETTERS, first-seen order."""
    seen, out = set(), []
    for w in words:
        if not w.isalpha():
            continue
        key = "".join(sorted(set(w)))
        if len(key) == PUZZLE_LETTERS and key not in seen:
            seen.add(key)
            out.append(key)
    return out


def puzzles_for(letter_set: str, required: str | None = None) -> list[str]:
    return [
        f"{c} {letter_set.replace(c, '')}"
        for c in letter_set
        if required is None or c in required
    ]


def main():
    ap = argparse.ArgumentParser(description="Build Spelling Bee puzzles from a word list.")
    ap.add_argument("--words", required=True, help="main word list")
    ap.add_argument("--excluded", help="excluded-words list")
    ap.add_argument("--required", help="allowed required letters (default: any)")
    ap.add_argument("--limit", type=int, help="stop after this many letter sets")
    ap.add_argument("--out", required=True, help="output puzzles file")
    args = ap.parse_args()

    words = load_wordlists(args.words, args.excluded)
    sets = pangram_letter_sets(words)
    if args.limit is not None:
        sets = sets[: args.limit]

    lines = [p for s in sets for p in puzzles_for(s, args.required)]
    write_lines(lines, args.out)
    print(f"Input: {args.words} ({len(words)} words) → {len(sets)} letter sets, {len(lines)} puzzles → {args.out}")


if __name__ == "__main__":
    main()
