"""
Root-word audit.

For every root word, count how many dictionary words a player could derive
from it. Roots with very few derivations make for a dull game and are worth
pruning from start.txt.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from tqdm import tqdm

from packages.engine import MIN_WORD_LENGTH, derivable_words


def audit_roots(
        roots: Iterable[str],
        dictionary: Iterable[str],
        *,
        min_length: int = MIN_WORD_LENGTH,
        min_derivable: int = 10,
        progress: bool = False,
) -> List[Dict]:
    """
    Score each root by the number of dictionary words derivable from it.

    Returns:
      One dict per root, in input order:
        root, derivable (int), flagged (bool: derivable < min_derivable),
        longest (a longest derivable word, or "")
    """
    # Pre-filter once; the per-root pass is a multiset check over this pool.
    pool = sorted({w.strip().lower() for w in dictionary
                   if w.strip().isalpha() and len(w.strip()) >= min_length})
    roots = list(roots)

    rows: List[Dict] = []
    iterator = tqdm(roots, ncols=80, desc="Auditing", unit="root") if progress else roots
    for root in iterator:
        found = derivable_words(pool, root, min_length)
        rows.append({
            "root": root,
            "derivable": len(found),
            "flagged": len(found) < min_derivable,
            "longest": max(found, key=len) if found else "",
        })
    return rows
