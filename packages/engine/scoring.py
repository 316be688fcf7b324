"""
Points awarded for an accepted word.

Conventions:
  - "raw"        : length of the text exactly as the player typed it, including
                   any surrounding whitespace that normalization removed.
                   This matches how the game has always scored.
  - "normalized" : length of the validated (trimmed, lowercased) word.

The two only differ when the submitted text carries leading/trailing
whitespace, e.g. " worms " scores 7 raw and 5 normalized.
"""

from typing import Literal

ScoreMode = Literal["raw", "normalized"]
SCORE_MODES = ("raw", "normalized")


def points_for(raw: str, word: str, mode: ScoreMode = "raw") -> int:
    """
    Points for accepting `word`, which was submitted as `raw`.

    Examples:
      points_for("worms", "worms")               -> 5
      points_for(" Worms ", "worms")             -> 7
      points_for(" Worms ", "worms", "normalized") -> 5
    """
    if mode == "raw":
        return len(raw)
    if mode == "normalized":
        return len(word)
    raise ValueError(f"score mode must be one of {SCORE_MODES}; got {mode!r}")
