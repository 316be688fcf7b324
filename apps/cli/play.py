# apps/cli/play.py
"""
Terminal front end for the word-scramble game.

This script:
  1) Validates the root-word list (prints counts + SHA) and stops if no game
     can be started from it.
  2) Builds a GameController with the requested spell checker.
  3) Reads submissions from stdin, one per line, printing the root word,
     accepted words and score after each one.
       :restart  start a new game on a new root word
       :quit     stop (end of input works too)
  4) Optionally writes a session report (attempts CSV + JSON manifest).

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --checker wordlist --dictionary words.txt --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from packages.datasets import DEFAULT_WORDLIST, WordListError, validate_start_words, pretty_summary
from packages.engine import SCORE_MODES, Submission
from packages.game import GameConfig, GameController, write_attempts_csv, write_manifest
from packages.game.config import DEFAULT_CHECKER, DEFAULT_SCORE_MODE
from packages.game.io import timestamp_id, git_commit_or_unknown
from packages.lexicon import DEFAULT_LANGUAGE, get_checker_ids

RESTART = ":restart"
QUIT = ":quit"


def setup_logging(verbose: bool = False) -> None:
    """Console logging for the game packages."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root = logging.getLogger("packages")
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.addHandler(handler)


def _board(game: GameController) -> str:
    lines = [f"== {game.root} ==   Score: {game.score}"]
    for w in game.history:
        lines.append(f"  ({len(w)}) {w}")
    return "\n".join(lines)


def _feedback(result: Submission) -> str:
    if result.accepted:
        return f"+{result.points} {result.word}"
    return f"{result.rejection.title}: {result.rejection.message}"


def play(game: GameController, inp: TextIO, out: TextIO) -> None:
    """Run the read-submit-print loop until :quit or end of input."""
    out.write(_board(game) + "\n")
    for line in inp:
        text = line.rstrip("\r\n")
        cmd = text.strip().lower()
        if cmd == QUIT:
            break
        if cmd == RESTART:
            game.restart()
        elif cmd:
            out.write(_feedback(game.submit(text)) + "\n")
        else:
            continue
        out.write(_board(game) + "\n")


def _write_report(game: GameController, rep: dict, outdir: str) -> List[str]:
    session_id = timestamp_id()
    out = Path(outdir)
    csv_path = out / f"session_{session_id}.csv"
    manifest_path = out / f"session_{session_id}_manifest.json"

    write_attempts_csv(game.attempts, str(csv_path))
    write_manifest({
        "session_id": session_id,
        "git_commit": git_commit_or_unknown(),
        "config": game.config.as_dict(),
        "wordlist": rep,
        "games": game.games_played,
        "attempts": len(game.attempts),
        "accepted": sum(1 for a in game.attempts if a["accepted"]),
        "final_score": game.score,
    }, str(manifest_path))
    return [str(csv_path), str(manifest_path)]


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, validate the word list, and play until input ends.
    Returns a process exit code (2 if no game can be started: unusable word
    list or dictionary, or an unsupported language).
    """
    checker_choices = ", ".join(get_checker_ids())

    ap = argparse.ArgumentParser(description="Word scramble: make words from the root word")
    ap.add_argument("--wordlist", default=str(DEFAULT_WORDLIST), help="root-word list, one per line")
    ap.add_argument("--checker", default=DEFAULT_CHECKER,
                    help=f"spell checker id (one of: {checker_choices})")
    ap.add_argument("--dictionary", help="dictionary file for the 'wordlist' checker")
    ap.add_argument("--min-zipf", type=float, default=0.0,
                    help="minimum Zipf frequency for the 'wordfreq' checker")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="language tag for spell checking")
    ap.add_argument("--score-mode", choices=SCORE_MODES, default=DEFAULT_SCORE_MODE,
                    help="score by submitted text length (raw) or validated word length")
    ap.add_argument("--seed", type=int, help="RNG seed for root-word picks")
    ap.add_argument("--outdir", help="write a session report (CSV + manifest) here")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    setup_logging(args.verbose)

    # 1) Validate the root-word list and print a one-liner summary
    rep = validate_start_words(args.wordlist)
    print(pretty_summary(rep), file=sys.stderr)

    # 2) Build the game
    if args.checker == "wordlist":
        if not args.dictionary:
            ap.error("--dictionary is required with --checker wordlist")
        options = {"path": args.dictionary}
    elif args.checker == "wordfreq":
        options = {"min_zipf": args.min_zipf}
    else:
        options = {}
    config = GameConfig(
        wordlist=args.wordlist,
        language=args.language,
        score_mode=args.score_mode,
        checker=args.checker,
        checker_options=options,
        seed=args.seed,
    )
    try:
        game = GameController(config)
    except (WordListError, OSError, ValueError) as e:
        print(f"Cannot start a game: {e}", file=sys.stderr)
        return 2

    # 3) Play
    play(game, sys.stdin, sys.stdout)

    # 4) Report
    if args.outdir:
        for path in _write_report(game, rep, args.outdir):
            print(f"Wrote: {path}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
