from pathlib import Path
from packages.datasets import validate_start_words, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_start_words_happy_path(tmp_path: Path):
    start = tmp_path / "start.txt"
    _write(start, ["silkworm", "elephant", "notebook"])

    rep = validate_start_words(str(start))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert rep["issues"] == []
    s = pretty_summary(rep)
    assert "start.txt" in s and "words=3" in s and s.endswith("OK")


def test_validate_start_words_flags_errors(tmp_path: Path):
    start = tmp_path / "start.txt"
    # 'Silkworm' not lowercase, 'bad-word' not alpha, 'owl' too short
    start.write_text("silkworm\nSilkworm\nbad-word\nowl\n", encoding="utf-8")

    rep = validate_start_words(str(start))
    assert rep["passed"] is False
    assert rep["count"] == 1
    assert rep["invalid_lines"] == 2
    assert rep["short_words"] == 1
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_start_words_blanks_and_duplicates_do_not_fail(tmp_path: Path):
    start = tmp_path / "start.txt"
    start.write_text("silkworm\n\nsilkworm\n", encoding="utf-8")

    rep = validate_start_words(str(start))
    assert rep["passed"] is True
    assert rep["blank_lines"] == 1
    assert rep["unique_count"] == 1
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_start_words_missing_file(tmp_path: Path):
    rep = validate_start_words(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False
    assert rep["passed"] is False
    assert "FAIL" in pretty_summary(rep)


def test_packaged_start_list_is_valid():
    from packages.datasets import DEFAULT_WORDLIST
    rep = validate_start_words(DEFAULT_WORDLIST)
    assert rep["passed"] is True, rep["issues"]
    assert rep["count"] > 100


def test_root_of_minimum_length_is_valid(tmp_path: Path):
    # a 4-letter root still has its anagrams to play
    from packages.engine import derivable_words
    start = tmp_path / "start.txt"
    _write(start, ["stop"])

    rep = validate_start_words(str(start))
    assert rep["passed"] is True
    assert rep["short_words"] == 0 and rep["count"] == 1
    assert derivable_words(["pots", "spot", "tops"], "stop") == ["pots", "spot", "tops"]
