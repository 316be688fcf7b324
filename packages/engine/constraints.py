"""
Dictionary filtering for a given root word.

Given:
  - a pool of words (e.g., a dictionary file)
  - a root word
  - the minimum accepted length

Return:
  - words the player could legally submit in a fresh game on that root,
    ignoring the spell checker (the pool is assumed to be real words).

Used for root-word audits and hints; the live game goes through `submit`.
"""

from typing import Iterable, List

from .validation import MIN_WORD_LENGTH, is_possible


def derivable_words(words: Iterable[str], root: str, min_length: int = MIN_WORD_LENGTH) -> List[str]:
    """
    Keep only words (length >= min_length, != root) spellable from `root`.

    Args:
      words      : iterable of candidate words
      root       : the root word
      min_length : minimum accepted length

    Returns:
      List[str] of derivable words, deduplicated, in first-seen order.
    """
    root = root.strip().lower()
    out: List[str] = []
    seen = set()

    for w in words:
        w = w.strip().lower()

        # Cheap rejects first: shape, length, identity
        if not w.isalpha() or len(w) < min_length or len(w) > len(root) or w == root:
            continue
        if w in seen:
            continue

        if is_possible(w, root):
            seen.add(w)
            out.append(w)

    return out
