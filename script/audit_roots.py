"""
Audit the root-word list: how many words can be made from each root?

What it does:
- Loads start.txt (or --wordlist) and a dictionary, either a file
  (--dictionary) or the top-N English words from wordfreq.
- Counts derivable words per root with a progress bar.
- Writes a CSV (root, derivable, flagged, longest) and prints the flagged roots.

Usage:
    python -m script.audit_roots --out reports/roots_audit.csv
    python -m script.audit_roots --dictionary words.txt --min-derivable 20
"""

import argparse
import csv
from pathlib import Path

from wordfreq import top_n_list

from packages.datasets import DEFAULT_WORDLIST, load_root_words, read_words
from packages.datasets.audit import audit_roots
from packages.lexicon import DEFAULT_LANGUAGE


def main():
    ap = argparse.ArgumentParser(description="Count derivable words for each root word")
    ap.add_argument("--wordlist", default=str(DEFAULT_WORDLIST))
    ap.add_argument("--dictionary", help="dictionary file (default: wordfreq top-N list)")
    ap.add_argument("--top-n", type=int, default=50000, help="wordfreq list size when no --dictionary")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE)
    ap.add_argument("--min-derivable", type=int, default=10)
    ap.add_argument("--out", default="reports/roots_audit.csv")
    args = ap.parse_args()

    roots = load_root_words(args.wordlist)
    if args.dictionary:
        dictionary = read_words(args.dictionary)
    else:
        dictionary = top_n_list(args.language, args.top_n)

    rows = audit_roots(roots, dictionary, min_derivable=args.min_derivable, progress=True)

    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=["root", "derivable", "flagged", "longest"])
        w.writeheader()
        w.writerows(rows)

    flagged = [r["root"] for r in rows if r["flagged"]]
    print(f"Audited {len(rows)} roots -> {out}")
    if flagged:
        print(f"{len(flagged)} root(s) with fewer than {args.min_derivable} words: {', '.join(flagged)}")


if __name__ == "__main__":
    main()
