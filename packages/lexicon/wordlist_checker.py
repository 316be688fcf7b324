"""
Dictionary-file spell checker.

Strategy:
  - A word is real iff it appears in a fixed set of words, loaded from a
    newline-delimited file or passed in directly.
  - The language tag is accepted and ignored; one instance holds one
    language's dictionary.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from packages.datasets.io import read_words
from .base import DEFAULT_LANGUAGE, BaseChecker, register


@register
class WordListChecker(BaseChecker):
    id = "wordlist"
    name = "Word list"

    def __init__(self, words: Optional[Iterable[str]] = None, path: Path | str | None = None):
        if (words is None) == (path is None):
            raise ValueError("WordListChecker needs exactly one of `words` or `path`")
        source = read_words(path) if path is not None else words
        self.words = {w.strip().lower() for w in source if w.strip()}

    def is_misspelled(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        return word.strip().lower() not in self.words
