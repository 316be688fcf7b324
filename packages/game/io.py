"""
I/O utilities for play sessions.

Responsibilities:
- write_attempts_csv: one row per submission (accepted or not).
- write_manifest:     JSON manifest with config, word list report and totals.
- timestamp_id:       stable UTC session ID string.
- git_commit_or_unknown: best-effort short commit hash.

Notes:
- Raw submissions are written verbatim, so leading/trailing whitespace that
  affected raw scoring stays visible in the CSV.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

ATTEMPT_FIELDS = ["game", "root", "raw", "word", "accepted", "reason", "points", "score"]


def write_attempts_csv(attempts: List[Dict], path: str) -> str:
    """
    Serialize a session's attempt log to CSV.

    Schema (columns):
      game, root, raw, word, accepted, reason, points, score

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=ATTEMPT_FIELDS, extrasaction="ignore")
        w.writeheader()
        for a in attempts:
            w.writerow(a)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest describing a play session.

    Typical keys:
      - session_id, git_commit
      - config: GameConfig.as_dict()
      - wordlist: output of datasets.validate_start_words(...)
      - games, attempts, accepted, final_score
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
