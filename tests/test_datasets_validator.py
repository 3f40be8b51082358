from pathlib import Path

import pytest
from packages.datasets import (
    DEFAULT_WORDS, load_dictionary, pretty_summary, validate_wordlist, write_lines,
)
from packages.engine import NotAlphabetic, ValidatedWord, WrongLength


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    _write(words, ["crane", "raise", "stare"])

    rep = validate_wordlist(5, str(words))
    assert rep["passed"] is True
    assert rep["dictionary"]["count"] == 3
    assert len(rep["dictionary"]["sha256"]) == 64
    s = pretty_summary(rep)
    assert "N=5" in s and "words=3" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    # 'crane' (len 5) invalid for N=6, '??????' invalid chars, 'Planet' not lowercase
    words = tmp_path / "words_6.txt"
    words.write_text("raiser\ncrane\n??????\nPlanet\n\n", encoding="utf-8")

    rep = validate_wordlist(6, str(words))
    assert rep["passed"] is False
    assert rep["dictionary"]["invalid_lines"] == 4
    assert any("invalid" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_validate_wordlist_duplicates_do_not_fail(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    _write(words, ["crane", "crane", "stare"])

    rep = validate_wordlist(5, str(words))
    assert rep["passed"] is True
    assert rep["dictionary"]["unique_count"] == 2
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(5, str(tmp_path / "nope.txt"))
    assert rep["passed"] is False
    assert rep["dictionary"]["exists"] is False
    assert any("not found" in msg for msg in rep["issues"])


def test_validate_wordlist_empty(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    words.write_text("", encoding="utf-8")
    rep = validate_wordlist(5, str(words))
    assert rep["passed"] is False
    assert any("0 valid words" in msg for msg in rep["issues"])


def test_bundled_dictionary_passes():
    rep = validate_wordlist(5, str(DEFAULT_WORDS))
    assert rep["passed"] is True, rep["issues"]


def test_load_dictionary_validates_by_default(tmp_path: Path):
    p = write_lines(["crane", "  stare  ", "", "raise"], tmp_path / "w.txt")
    words = load_dictionary(p)
    assert words == [ValidatedWord.build(w) for w in ("crane", "stare", "raise")]

    write_lines(["crane", "cranes"], tmp_path / "bad.txt")
    with pytest.raises(WrongLength):
        load_dictionary(tmp_path / "bad.txt")
    write_lines(["cr4ne"], tmp_path / "bad2.txt")
    with pytest.raises(NotAlphabetic):
        load_dictionary(tmp_path / "bad2.txt")


def test_load_dictionary_trusted_skips_checks(tmp_path: Path):
    write_lines(["crane", "cranes"], tmp_path / "w.txt")
    words = load_dictionary(tmp_path / "w.txt", trusted=True)
    assert [w.text for w in words] == ["crane", "cranes"]


def test_load_dictionary_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_dictionary(tmp_path / "nope.txt")
