import csv
from pathlib import Path

import pytest
from packages.engine import NotAlphabetic, ValidatedWord, WrongLength
from packages.harness import NotInDictionary, play_game, run_batch, write_csv


def _feed(*guesses):
    it = iter(guesses)
    return lambda: next(it)


def test_play_game_win():
    answer = ValidatedWord.build("crane")
    seen = []
    r = play_game(answer, _feed("raise", "stare", "crane"), N=5,
                  on_result=lambda turn, g, v: seen.append((turn, g.text, str(v))))
    assert r["success"] is True
    assert r["guesses"] == 3
    assert r["history"] == [("raise", "YY--G"), ("stare", "--GYG"), ("crane", "GGGGG")]
    assert seen[-1] == (3, "crane", "GGGGG")


def test_play_game_invalid_guess_costs_no_turn():
    answer = ValidatedWord.build("crane")
    errors = []
    r = play_game(answer, _feed("rad", "cr4ne", " CRANE "), N=5,
                  on_invalid=lambda raw, e: errors.append(type(e)))
    assert r["success"] is True and r["guesses"] == 1
    assert errors == [WrongLength, NotAlphabetic]


def test_play_game_loss():
    answer = ValidatedWord.build("crane")
    r = play_game(answer, _feed("stare", "raise", "trace"), N=5, max_turns=3)
    assert r["success"] is False
    assert r["guesses"] == 3 and len(r["history"]) == 3


def test_play_game_dictionary():
    answer = ValidatedWord.build("crane")
    errors = []
    r = play_game(answer, _feed("zzzzz", "crane"), N=5, dictionary={"crane"},
                  on_invalid=lambda raw, e: errors.append(e))
    assert r["success"] is True
    assert len(errors) == 1 and isinstance(errors[0], NotInDictionary)


def test_play_game_source_exhausted_propagates():
    with pytest.raises(StopIteration):
        play_game(ValidatedWord.build("crane"), _feed("stare"), N=5)


def test_play_game_rejects_bad_budget():
    with pytest.raises(ValueError):
        play_game(ValidatedWord.build("crane"), _feed(), N=5, max_turns=0)


def test_run_batch_and_csv(tmp_path: Path):
    rows = run_batch("speed", ["abide", "speed", "bad"], N=5)
    # "speed" is the answer here: only the "d" and one "e" of "abide" occur in it
    assert [r["pattern"] for r in rows] == ["---YY", "GGGGG", ""]
    assert rows[1]["victory"] is True
    assert rows[2]["error"]

    out = write_csv(rows, str(tmp_path / "out" / "run.csv"))
    with open(out, newline="", encoding="utf-8") as f:
        got = list(csv.DictReader(f))
    assert got[0]["pattern"] == "'---YY"
    assert got[2]["pattern"] == ""
    assert got[1]["victory"] == "True"


def test_run_batch_accepts_built_answer():
    rows = run_batch(ValidatedWord.build("speed"), iter(["steal"]), N=5)
    assert rows[0]["answer"] == "speed"
    assert rows[0]["pattern"] == "G-G--"
