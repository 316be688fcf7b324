"""
Candidate validation rules.

This module answers the question: "Can this word be added to the game right now?"
A candidate (already normalized) is valid iff, in this order:
  - it is longer than 3 letters          (MinLength)
  - it is not the root word itself       (NotRoot)
  - it has not been accepted before      (NotRepeated)
  - it can be spelled from the root      (Composable, multiset semantics)
  - the spell checker recognizes it      (RealWord)

The first failing rule decides the rejection. Each rule is also exposed as a
plain predicate so callers (and the audit script) can reuse them on their own.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

# Words must have at least this many letters.
MIN_WORD_LENGTH = 4


class RejectionReason(str, Enum):
    TOO_SHORT = "too_short"
    SAME_AS_ROOT = "same_as_root"
    ALREADY_USED = "already_used"
    NOT_POSSIBLE = "not_possible"
    NOT_RECOGNIZED = "not_recognized"


@dataclass(frozen=True)
class Rejection:
    """Why a candidate was refused, with display text for the player."""
    reason: RejectionReason
    title: str
    message: str


def normalize(text: str) -> str:
    """Lowercase and trim surrounding whitespace (spaces, tabs, newlines)."""
    return text.strip().lower()


def is_long_enough(word: str, min_length: int = MIN_WORD_LENGTH) -> bool:
    return len(word) >= min_length


def is_not_root(word: str, root: str) -> bool:
    return word != root


def is_original(word: str, history: Iterable[str]) -> bool:
    return word not in history


def is_possible(word: str, root: str) -> bool:
    """
    True if every letter of `word` can be taken from `root`, where each
    occurrence in `word` consumes one occurrence in `root`.

    Examples:
      is_possible("worms", "silkworm")  -> True
      is_possible("wormss", "silkworm") -> False   (only one 's' available)
    """
    remaining = Counter(root)
    for ch in word:
        if remaining[ch] <= 0:
            return False
        remaining[ch] -= 1  # consume one instance
    return True


def reject(reason: RejectionReason, root: str = "", min_length: int = MIN_WORD_LENGTH) -> Rejection:
    """Build the player-facing rejection for `reason`."""
    if reason is RejectionReason.TOO_SHORT:
        return Rejection(reason, "Word too short",
                         f"Words must be at least {min_length} letters long")
    if reason is RejectionReason.SAME_AS_ROOT:
        return Rejection(reason, "Word invalid", "Your word is the same as the given word")
    if reason is RejectionReason.ALREADY_USED:
        return Rejection(reason, "Word used already", "Be more original")
    if reason is RejectionReason.NOT_POSSIBLE:
        return Rejection(reason, "Word not possible",
                         f"You can't spell that word from '{root}'")
    return Rejection(reason, "Word not recognized", "You can't just make them up, you know!")


def check_candidate(
        word: str,
        *,
        root: str,
        history: Iterable[str],
        is_real,
        min_length: int = MIN_WORD_LENGTH,
) -> Optional[Rejection]:
    """
    Run the rules against an already-normalized `word`.

    Args:
      word       : normalized candidate
      root       : current root word
      history    : words accepted so far in this game
      is_real    : callable(word) -> bool; only consulted once every other
                   rule has passed
      min_length : minimum accepted length

    Returns:
      None if the word passes every rule, otherwise the first Rejection.
    """
    if not is_long_enough(word, min_length):
        return reject(RejectionReason.TOO_SHORT, root, min_length)
    if not is_not_root(word, root):
        return reject(RejectionReason.SAME_AS_ROOT, root, min_length)
    if not is_original(word, history):
        return reject(RejectionReason.ALREADY_USED, root, min_length)
    if not is_possible(word, root):
        return reject(RejectionReason.NOT_POSSIBLE, root, min_length)
    if not is_real(word):
        return reject(RejectionReason.NOT_RECOGNIZED, root, min_length)
    return None
