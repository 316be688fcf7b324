"""
Game controller.

- Owns the current GameState, the root-word source and the spell checker.
- restart(): fresh root word, empty history, zero score.
- submit():  run one candidate through the engine and keep the new state.
- Keeps an attempt log (accepted and rejected) for session reports.

Nothing here knows about terminals or widgets, so a CLI, a notebook or a test
can drive a game the same way.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from packages.datasets.source import WordSource
from packages.engine import GameState, Submission, new_game, submit
from packages.lexicon import BaseChecker, create_checker
from .config import GameConfig

logger = logging.getLogger(__name__)


class GameController:
    def __init__(
            self,
            config: GameConfig | None = None,
            *,
            source: WordSource | None = None,
            checker: BaseChecker | None = None,
    ):
        """
        Args:
          config  : game settings; defaults to GameConfig()
          source  : root-word source; loaded from config.wordlist if omitted
                    (raises WordListError if that list is unusable)
          checker : spell checker; built from config.checker if omitted

        Raises ValueError if the checker cannot handle config.language.
        """
        self.config = config or GameConfig()
        self.source = source or WordSource.from_path(self.config.wordlist, seed=self.config.seed)
        self.checker = checker or create_checker(self.config.checker, **self.config.checker_options)
        self.checker.require_language(self.config.language)
        self.games_played = 0
        self.attempts: List[Dict] = []
        self.state: GameState = self.restart()

    # ---- read-only views for the interaction surface ----

    @property
    def root(self) -> str:
        return self.state.root

    @property
    def history(self) -> Tuple[str, ...]:
        return self.state.history

    @property
    def score(self) -> int:
        return self.state.score

    # ---- transitions ----

    def restart(self) -> GameState:
        """Start a new game on a freshly drawn root word."""
        self.state = new_game(self.source.pick())
        self.games_played += 1
        logger.info("game %d started: root=%s", self.games_played, self.state.root)
        return self.state

    def _is_real(self, word: str) -> bool:
        return self.checker.is_real(word, self.config.language)

    def submit(self, text: str) -> Submission:
        """Validate `text` against the current game and keep the resulting state."""
        result = submit(
            text,
            self.state,
            is_real=self._is_real,
            min_length=self.config.min_length,
            score_mode=self.config.score_mode,
        )
        self.state = result.state
        self.attempts.append({
            "game": self.games_played,
            "root": self.state.root,
            "raw": text,
            "word": result.word,
            "accepted": result.accepted,
            "reason": result.rejection.reason.value if result.rejection else "",
            "points": result.points,
            "score": self.state.score,
        })
        return result
