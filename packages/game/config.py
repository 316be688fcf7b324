"""
Per-game settings.

Constants here are the single source of truth for defaults; the CLI maps its
flags onto GameConfig and everything below the CLI only sees GameConfig.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

from packages.datasets.source import DEFAULT_WORDLIST
from packages.engine import MIN_WORD_LENGTH, SCORE_MODES
from packages.lexicon import DEFAULT_LANGUAGE

DEFAULT_CHECKER = "wordfreq"
DEFAULT_SCORE_MODE = "raw"


@dataclass
class GameConfig:
    wordlist: Path | str = DEFAULT_WORDLIST
    language: str = DEFAULT_LANGUAGE
    min_length: int = MIN_WORD_LENGTH
    score_mode: str = DEFAULT_SCORE_MODE
    checker: str = DEFAULT_CHECKER
    checker_options: Dict[str, Any] = field(default_factory=dict)
    seed: int | None = None

    def __post_init__(self):
        if self.score_mode not in SCORE_MODES:
            raise ValueError(f"score_mode must be one of {SCORE_MODES}; got {self.score_mode!r}")
        if self.min_length < 1:
            raise ValueError(f"min_length must be at least 1; got {self.min_length}")

    def as_dict(self) -> Dict[str, Any]:
        """JSON-friendly view for manifests."""
        return {
            "wordlist": str(self.wordlist),
            "language": self.language,
            "min_length": self.min_length,
            "score_mode": self.score_mode,
            "checker": self.checker,
            "checker_options": {k: str(v) for k, v in self.checker_options.items()},
            "seed": self.seed,
        }
