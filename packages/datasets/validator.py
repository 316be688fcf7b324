"""
Root-word list validator.

What this module does:
- Validate a start word list (start.txt): one root word per line.
- Enforce formatting rules (lowercase, a–z only, at least the minimum
  candidate length so at least one word can be derived).
- Detect duplicates, too-short and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_start_words, pretty_summary
    rep = validate_start_words("packages/datasets/data/start.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.engine import MIN_WORD_LENGTH


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class StartWordsReport:
    """Diagnostics and metadata for one root-word file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    min_length: int      # minimum candidate length the list was checked against
    count: int           # number of VALID root words
    unique_count: int    # unique valid root words (after dedupe)
    invalid_lines: int   # non-blank lines that are not lowercase a–z
    short_words: int     # alphabetic lines too short to derive anything from
    blank_lines: int     # empty/whitespace-only lines (ignored when playing)
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int, int, int]:
    """
    Load root words from a text file and classify every line.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have at least `min_length` letters (shorter roots cannot
        yield any accepted word; a root of exactly min_length letters
        still has its anagrams)

    Returns:
      (valid_words, invalid_count, short_count, blank_count)
    """
    valid: List[str] = []
    invalid = short = blank = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                blank += 1
            elif w != w.lower() or not w.isalpha():
                invalid += 1
            elif len(w) < min_length:
                short += 1
            else:
                valid.append(w)

    return valid, invalid, short, blank


# -----------------------------
# Public API
# -----------------------------

def validate_start_words(path: str | Path, min_length: int = MIN_WORD_LENGTH) -> Dict:
    """
    Validate the root-word list at `path`.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see StartWordsReport schema).
        `passed` is strict: the file exists, has at least one valid word,
        and has no invalid or too-short lines. Blank lines and duplicates are
        reported as issues but do not fail the check, since loading skips
        blanks and duplicates only skew the pick odds.
    """
    p = Path(path)
    issues: List[str] = []

    if not p.exists():
        issues.append(f"word list not found: {path}")
        rep = StartWordsReport(str(path), False, min_length, 0, 0, 0, 0, 0, "", False, issues)
        return asdict(rep)

    try:
        words, invalid, short, blank = _load_and_check(p, min_length)
    except UnicodeDecodeError as e:
        issues.append(f"word list is not valid UTF-8: {e}")
        rep = StartWordsReport(str(p), True, min_length, 0, 0, 0, 0, 0, _sha256_file(p), False, issues)
        return asdict(rep)

    unique = set(words)

    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if short:
        issues.append(f"word list has {short} word(s) shorter than {min_length} letters")
    if blank:
        issues.append(f"word list has {blank} blank line(s)")
    if len(words) != len(unique):
        issues.append("word list contains duplicate lines")

    passed = bool(words) and invalid == 0 and short == 0

    rep = StartWordsReport(
        path=str(p),
        exists=True,
        min_length=min_length,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        short_words=short,
        blank_lines=blank,
        sha256=_sha256_file(p),
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        start.txt | words=84 (uniq=84, sha=abc123...) | invalid=0 short=0 blank=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    name = Path(report["path"]).name
    return (
        f"{name} | words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} short={report['short_words']} "
        f"blank={report['blank_lines']} | {status}"
    )
