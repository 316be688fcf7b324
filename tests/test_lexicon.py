from pathlib import Path

import pytest
from packages.lexicon import create_checker, get_checker_ids
from packages.lexicon.wordlist_checker import WordListChecker


def test_registry_lists_checkers():
    assert {"wordfreq", "wordlist"} <= set(get_checker_ids())


def test_unknown_checker_id():
    with pytest.raises(ValueError):
        create_checker("hunspell")


def test_wordlist_checker_from_words():
    c = create_checker("wordlist", words=["Worms", "silk"])
    assert c.is_real("worms") and c.is_real("silk")
    assert c.is_misspelled("lirk")


def test_wordlist_checker_from_file(tmp_path: Path):
    p = tmp_path / "dict.txt"
    p.write_text("worms\nmilk\n\n", encoding="utf-8")
    c = WordListChecker(path=p)
    assert c.words == {"worms", "milk"}
    assert c.is_real("milk", "fr")  # language is ignored


def test_wordlist_checker_needs_one_source():
    with pytest.raises(ValueError):
        WordListChecker()
    with pytest.raises(ValueError):
        WordListChecker(words=["a"], path="dict.txt")


def test_wordfreq_checker_english():
    c = create_checker("wordfreq")
    assert c.is_real("worms", "en")
    assert c.is_misspelled("qzxwvkj", "en")


def test_wordfreq_checker_threshold():
    c = create_checker("wordfreq", min_zipf=8.0)  # nothing is that common
    assert c.is_misspelled("the", "en")


def test_wordfreq_checker_unknown_language():
    c = create_checker("wordfreq")
    with pytest.raises(ValueError):
        c.is_real("worms", "xx-not-a-language")
