"""
Game state for one round of play.

A GameState is never mutated: every transition (accepting a word, restarting)
builds a new one, so old states can be kept around for undo, logging or tests.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple


@dataclass(frozen=True)
class GameState:
    root: str
    history: Tuple[str, ...] = ()   # most recent first
    score: int = 0

    def with_word(self, word: str, points: int) -> "GameState":
        """Return the state after accepting `word` worth `points`."""
        return replace(self, history=(word,) + self.history, score=self.score + points)


def new_game(root: str) -> GameState:
    """Fresh state for `root`: empty history, zero score."""
    return GameState(root=root.strip().lower())
