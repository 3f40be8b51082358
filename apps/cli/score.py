# apps/cli/score.py
"""
Batch-score guesses against a known answer.

Guesses come from positional arguments and/or a file (one per line).
Prints one line per guess and optionally writes a CSV report.

Usage:
    python -m apps.cli.score --answer speed abide erase steal
    python -m apps.cli.score --answer crane --guesses guesses.txt --csv reports/
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Iterator, List, Optional

from tqdm import tqdm

from packages.datasets import read_lines
from packages.engine import ValidatedWord, ValidationError
from packages.harness import run_batch, timestamp_id, write_csv


def _plain_progress(guesses: List[str]) -> Iterator[str]:
    """Yield guesses while writing a counter to stderr every 100 words."""
    start = time.time()
    total = len(guesses)
    for idx, g in enumerate(guesses, 1):
        yield g
        if idx % 100 == 0 or idx == total:
            sys.stderr.write(f"\r[{idx}/{total}] elapsed {time.time() - start:6.1f}s")
            sys.stderr.flush()
    sys.stderr.write("\n")
    sys.stderr.flush()


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Score guesses against an answer")
    ap.add_argument("guess", nargs="*", help="guesses to score")
    ap.add_argument("--answer", required=True, help="the hidden word")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--guesses", help="file with one guess per line")
    ap.add_argument("--csv", dest="csv_out",
                    help="CSV output path; a directory gets run_<timestamp>.csv")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show progress (auto=bar when stderr is a terminal, else off)."
    )
    args = ap.parse_args(argv)
    if args.N < 1:
        ap.error("--N must be at least 1")

    guesses = list(args.guess)
    if args.guesses:
        guesses += [g for g in read_lines(args.guesses) if g.strip()]
    if not guesses:
        ap.error("no guesses given")

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "off"

    # Validate the answer once, before any progress output
    try:
        answer = ValidatedWord.build(args.answer.strip(), args.N)
    except ValidationError as e:
        print(f"invalid answer {args.answer!r}: {e}", file=sys.stderr)
        return 2

    if mode == "bar":
        iterator = tqdm(guesses, ncols=80, desc="Scoring", unit="word")
    elif mode == "plain":
        iterator = _plain_progress(guesses)
    else:
        iterator = guesses

    results = run_batch(answer, iterator, N=args.N)

    for r in results:
        if r["error"]:
            print(f"{r['guess']}  !  {r['error']}")
        else:
            print(f"{r['guess']}  {r['pattern']}  {r['decorated']}")

    if args.csv_out:
        out = Path(args.csv_out)
        if out.is_dir() or args.csv_out.endswith(("/", "\\")):
            out = out / f"run_{timestamp_id()}.csv"
        print(f"Wrote: {write_csv(results, str(out))}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
