"""
Root-word source.

Loads the list of candidate root words and picks one uniformly at random.
The list is a build-time asset: if it is missing, unreadable or holds no
words, there is no way to start a game, so loading raises WordListError and
leaves the retry/abort decision to the caller.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List

from .io import read_words

logger = logging.getLogger(__name__)

# Packaged default list of root words (one per line).
DEFAULT_WORDLIST = Path(__file__).parent / "data" / "start.txt"


class WordListError(RuntimeError):
    """The root-word list could not be loaded; no game can start."""


def load_root_words(path: Path | str = DEFAULT_WORDLIST) -> List[str]:
    """
    Read the root-word list at `path`.

    Raises:
      WordListError if the file is missing, unreadable, not UTF-8, or empty
      once blank lines are dropped.
    """
    try:
        words = read_words(path)
    except (OSError, UnicodeDecodeError) as e:
        raise WordListError(f"Could not load word list {path}: {e}") from e
    if not words:
        raise WordListError(f"Word list {path} contains no words")
    logger.debug("loaded %d root words from %s", len(words), path)
    return words


class WordSource:
    """Holds a loaded root-word list and draws from it."""

    def __init__(self, words: List[str], rng: random.Random | None = None):
        if not words:
            raise WordListError("WordSource needs at least one word")
        self.words = list(words)
        self.rng = rng or random.Random()

    @classmethod
    def from_path(cls, path: Path | str = DEFAULT_WORDLIST, *, seed: int | None = None) -> "WordSource":
        return cls(load_root_words(path), random.Random(seed))

    def pick(self) -> str:
        """Uniformly random root word."""
        return self.rng.choice(self.words)


def pick_root_word(path: Path | str = DEFAULT_WORDLIST, rng: random.Random | None = None) -> str:
    """One-shot helper: read the list at `path` and return a random entry."""
    return WordSource(load_root_words(path), rng).pick()
