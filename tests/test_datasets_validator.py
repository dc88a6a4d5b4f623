from pathlib import Path
from spellingbee.datasets import validate_wordlists, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    main = tmp_path / "words.txt"
    excl = tmp_path / "excluded.txt"
    _write(main, ["will", "cowgirl", "grill", "girl"])
    _write(excl, ["girl", "frak"])

    rep = validate_wordlists(str(main), str(excl))
    assert rep["passed"] is True
    assert rep["main"]["count"] == 4
    assert rep["excluded"]["count"] == 2
    assert rep["excluded_in_main"] == 1
    assert rep["issues"] == []
    s = pretty_summary(rep)
    assert "main=4" in s and "excluded∩main=1" in s and s.endswith("OK")


def test_validate_wordlists_main_only(tmp_path: Path):
    main = tmp_path / "words.txt"
    _write(main, ["will"])
    rep = validate_wordlists(str(main))
    assert rep["passed"] is True
    assert rep["excluded"] is None
    assert "excluded" not in pretty_summary(rep)


def test_validate_wordlists_flags_content_issues(tmp_path: Path):
    main = tmp_path / "words.txt"
    # duplicate (case-insensitive) and a non-alphabetic token
    _write(main, ["will", "WILL", "o'clock"])

    rep = validate_wordlists(str(main))
    # the lexicon filter tolerates these, so validation still passes
    assert rep["passed"] is True
    assert rep["main"]["non_alpha"] == 1
    assert any("duplicate" in msg for msg in rep["issues"])
    assert any("non-alphabetic" in msg for msg in rep["issues"])


def test_validate_wordlists_missing_and_undecodable(tmp_path: Path):
    main = tmp_path / "words.txt"
    main.write_bytes(b"\xff\xfe\xfa\n")

    rep = validate_wordlists(str(main), str(tmp_path / "nope.txt"))
    assert rep["passed"] is False
    assert rep["main"]["decodable"] is False
    assert rep["excluded"]["exists"] is False
    assert any("not found" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_validate_wordlists_empty_main(tmp_path: Path):
    main = tmp_path / "words.txt"
    main.write_text("# nothing here\n", encoding="utf-8")
    rep = validate_wordlists(str(main))
    assert rep["passed"] is False
    assert any("0 words" in msg for msg in rep["issues"])
