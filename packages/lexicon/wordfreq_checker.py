"""
wordfreq-backed spell checker.

A word counts as real when its Zipf frequency in the requested language is
above `min_zipf`. With the default of 0.0 that simply means "wordfreq has
seen it"; raise it (e.g. 2.5) to refuse rare or junk tokens.

Notes:
  - wordfreq ships its frequency lists, so lookups are offline and fast.
  - Languages are checked against wordfreq's list of available languages:
    the controller does it before a game starts, lookups do it again for
    any other language they are asked about.
"""

from __future__ import annotations

from typing import Set

from wordfreq import available_languages, zipf_frequency

from .base import DEFAULT_LANGUAGE, BaseChecker, register


@register
class WordfreqChecker(BaseChecker):
    id = "wordfreq"
    name = "wordfreq (Zipf frequency)"

    def __init__(self, min_zipf: float = 0.0, wordlist: str = "best"):
        self.min_zipf = float(min_zipf)
        self.wordlist = wordlist
        self._checked: Set[str] = set()

    def require_language(self, language: str) -> None:
        if language in self._checked:
            return
        if language not in available_languages(self.wordlist):
            raise ValueError(f"wordfreq has no '{self.wordlist}' list for language {language!r}")
        self._checked.add(language)

    def is_misspelled(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        self.require_language(language)
        return zipf_frequency(word, language, wordlist=self.wordlist) <= self.min_zipf
