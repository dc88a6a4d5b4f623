import threading
from pathlib import Path

import pytest
from spellingbee.datasets import WordlistError
from spellingbee.game import PlayResult, SpellingBeeGame

# Answers for [i] cglorw: will girl coil (1 each), grill igloo logic (5 each),
# willow (6), cowgirl (7 + 7 pangram bonus) -> max 38
WORDS = "will cowgirl roll rail oil grill girl igloo logic willow coil cogwheel\n"


def _game(**kw) -> SpellingBeeGame:
    return SpellingBeeGame("clwgro", "i", kw.get("main", WORDS), kw.get("excluded", ""))


def test_score_scenario():
    game = _game()
    assert game.score() == 0
    steps = [
        ("will", PlayResult.VALID, 1),
        ("cowgirl", PlayResult.VALID, 15),
        ("rail", PlayResult.INVALID_LETTERS, 15),
        ("roll", PlayResult.INVALID_LETTERS, 15),
        ("clwgi", PlayResult.INVALID_WORD, 15),
        ("oil", PlayResult.INVALID_LENGTH, 15),
        ("cowgirl", PlayResult.ALREADY_PLAYED, 15),
    ]
    for word, result, score in steps:
        assert game.play(word) is result, word
        assert game.score() == score, word


def test_queries():
    game = _game()
    assert game.required_letter() == "i"
    assert game.optional_letters() == "cglorw"
    assert game.answers() == ("coil", "cowgirl", "girl", "grill", "igloo", "logic", "will", "willow")
    assert game.answer_count() == 8
    assert game.max_score() == 38


def test_play_twice_is_idempotent_reject():
    game = _game()
    assert game.play("grill") is PlayResult.VALID
    s = game.score()
    assert game.play("grill") is PlayResult.ALREADY_PLAYED
    assert game.score() == s
    assert game.played_words() == ["grill"]


def test_score_monotone_and_bounded():
    game = _game()
    last = 0
    for w in ["oil", "willow", "rail", "willow", "igloo", "zzzz", "coil", "logic", "girl",
              "will", "grill", "cowgirl"]:
        game.play(w)
        assert last <= game.score() <= game.max_score()
        last = game.score()
    # every answer found
    assert game.score() == game.max_score()
    assert game.played_words() == list(game.answers())


@pytest.mark.parametrize("word", ["a", "ab", "abc", "zzz", "oil", "iii"])
def test_short_words_are_invalid_length(word):
    assert _game().play(word) is PlayResult.INVALID_LENGTH


@pytest.mark.parametrize("word", ["rail", "zebra", "willows", "quiz"])
def test_foreign_letters_are_invalid_letters(word):
    assert _game().play(word) is PlayResult.INVALID_LETTERS


@pytest.mark.parametrize("word", ["oil ", " oil", "WILL", "Will", "will "])
def test_play_checks_word_as_given(word):
    # uppercase and whitespace are foreign letters; "oil " is long enough to reach that check
    game = _game()
    assert game.play(word) is PlayResult.INVALID_LETTERS
    assert game.score() == 0
    assert game.played_words() == []


def test_uppercase_is_not_a_pangram_or_scored():
    game = _game()
    assert game.is_pangram("COWGIRL") is False
    assert game.score_word("COWGIRL") == 0
    assert game.is_valid_partial_input("COW") is False


def test_score_word_independent_of_history():
    game = _game()
    before = game.score_word("cowgirl")
    game.play("cowgirl")
    assert game.score_word("cowgirl") == before == 14
    # not an answer -> 0, even with valid letters
    assert game.score_word("clwgi") == 0


def test_is_pangram_requires_answer_membership():
    game = _game()
    assert game.is_pangram("cowgirl") is True
    assert game.is_pangram("willow") is False
    # covers every letter but isn't in the dictionary
    assert game.is_pangram("cowgirlz") is False
    assert game.is_pangram("clowgir") is False


def test_is_valid_partial_input():
    game = _game()
    assert game.is_valid_partial_input("") is True
    assert game.is_valid_partial_input("cowg") is True
    assert game.is_valid_partial_input("cowa") is False


def test_excluded_words_are_never_answers():
    game = _game(excluded="girl\n# comment\nwillow")
    assert "girl" not in game.answers()
    assert "willow" not in game.answers()
    assert game.play("girl") is PlayResult.INVALID_WORD
    assert game.max_score() == 38 - 1 - 6


def test_empty_answer_set():
    game = _game(main="")
    assert game.answer_count() == 0
    assert game.max_score() == 0
    assert game.play("will") is PlayResult.INVALID_WORD
    assert game.score() == 0


def test_accepts_word_iterables_and_bytes():
    game = SpellingBeeGame(["c", "l", "w", "g", "r", "o"], "i", ["Will", "cowgirl"], ["cowgirl"])
    assert game.answers() == ("will",)
    game = SpellingBeeGame("clwgro", "i", WORDS.encode("utf-8"))
    assert game.answer_count() == 8


def test_required_letter_duplicated_in_optional_is_harmless():
    game = SpellingBeeGame("clwgroi", "i", WORDS)
    assert game.optional_letters() == "cglorw"
    assert game.max_score() == 38


def test_bad_construction_inputs():
    with pytest.raises(WordlistError):
        SpellingBeeGame("clwgro", "i", b"\xff\xfe\xfa")
    with pytest.raises(ValueError):
        SpellingBeeGame("clwgro", "ii", WORDS)


def test_from_files(tmp_path: Path):
    main = tmp_path / "words.txt"
    excl = tmp_path / "excluded.txt"
    main.write_text(WORDS.replace(" ", "\n"), encoding="utf-8")
    excl.write_text("cowgirl\n", encoding="utf-8")

    game = SpellingBeeGame.from_files("clwgro", "i", main, excl)
    assert "cowgirl" not in game.answers()
    assert game.max_score() == 38 - 14

    with pytest.raises(FileNotFoundError):
        SpellingBeeGame.from_files("clwgro", "i", tmp_path / "missing.txt")


def test_concurrent_plays_accept_each_word_once():
    game = _game()
    results = []
    lock = threading.Lock()

    def worker():
        for w in game.answers():
            r = game.play(w)
            with lock:
                results.append(r)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results.count(PlayResult.VALID) == game.answer_count()
    assert game.score() == game.max_score()
