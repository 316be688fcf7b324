"""
Submitting a candidate word against the current game state.

`submit` is a pure transition: it never touches the state it is given, it
returns a Submission holding either the next state (accepted) or the same
state plus a Rejection (refused).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .scoring import ScoreMode, points_for
from .state import GameState
from .validation import MIN_WORD_LENGTH, Rejection, check_candidate, normalize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Submission:
    raw: str                              # text as typed
    word: str                             # normalized candidate
    state: GameState                      # next state (unchanged if rejected)
    points: int = 0
    rejection: Optional[Rejection] = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None


def submit(
        candidate: str,
        state: GameState,
        *,
        is_real: Callable[[str], bool],
        min_length: int = MIN_WORD_LENGTH,
        score_mode: ScoreMode = "raw",
) -> Submission:
    """
    Validate `candidate` against `state` and compute the resulting state.

    Args:
      candidate  : text as submitted by the player
      state      : current GameState
      is_real    : spell-check callable(word) -> bool
      min_length : minimum accepted length
      score_mode : "raw" (submitted text length) or "normalized"

    Returns:
      Submission; `accepted` tells which way it went.
    """
    word = normalize(candidate)
    rejection = check_candidate(
        word, root=state.root, history=state.history, is_real=is_real, min_length=min_length
    )
    if rejection is not None:
        logger.debug("rejected %r on root %r: %s", word, state.root, rejection.reason.value)
        return Submission(raw=candidate, word=word, state=state, rejection=rejection)

    points = points_for(candidate, word, score_mode)
    logger.debug("accepted %r on root %r for %d point(s)", word, state.root, points)
    return Submission(raw=candidate, word=word, state=state.with_word(word, points), points=points)
