from .state import GameState, new_game
from .scoring import points_for, SCORE_MODES
from .constraints import derivable_words
from .validation import (
    MIN_WORD_LENGTH, Rejection, RejectionReason, normalize, is_possible, check_candidate,
)
from .submission import Submission, submit

__all__ = [
    "GameState", "new_game", "points_for", "SCORE_MODES", "derivable_words",
    "MIN_WORD_LENGTH", "Rejection", "RejectionReason", "normalize", "is_possible",
    "check_candidate", "Submission", "submit",
]
