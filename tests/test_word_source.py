import random
from pathlib import Path

import pytest
from packages.datasets import WordListError, WordSource, load_root_words, pick_root_word


def test_load_root_words_cleans_lines(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("Silkworm\n\n  elephant \r\nnotebook", encoding="utf-8")
    assert load_root_words(p) == ["silkworm", "elephant", "notebook"]


def test_pick_root_word_comes_from_list(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("silkworm\nelephant\n", encoding="utf-8")
    for seed in range(10):
        assert pick_root_word(p, random.Random(seed)) in {"silkworm", "elephant"}


def test_seeded_source_is_reproducible():
    words = ["silkworm", "elephant", "notebook", "umbrella"]
    a = WordSource(words, random.Random(42))
    b = WordSource(words, random.Random(42))
    assert [a.pick() for _ in range(8)] == [b.pick() for _ in range(8)]


def test_missing_list_is_a_startup_error(tmp_path: Path):
    with pytest.raises(WordListError):
        load_root_words(tmp_path / "nope.txt")


def test_blank_list_is_a_startup_error(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("\n  \n\n", encoding="utf-8")
    with pytest.raises(WordListError):
        WordSource.from_path(p)


def test_non_utf8_list_is_a_startup_error(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_bytes(b"silkworm\n\xff\xfe\n")
    with pytest.raises(WordListError):
        load_root_words(p)


def test_empty_source_rejected():
    with pytest.raises(WordListError):
        WordSource([])
