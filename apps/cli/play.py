# apps/cli/play.py
"""
Terminal Wordle built on the engine.

This script:
  1) Validates the dictionary (prints counts + SHA) and refuses to start on failure.
  2) Loads the dictionary (trusted, since it just passed validation) and picks an answer.
  3) Reads guesses from stdin until the player wins or runs out of attempts,
     printing the compact and decorated verdict after each guess.

Usage:
    python -m apps.cli.play --seed 7
"""

from __future__ import annotations

import argparse
import random
import sys
from typing import Callable, List, Optional

from packages.datasets import DEFAULT_WORDS, load_dictionary, pretty_summary, validate_wordlist
from packages.engine import ValidatedWord, ValidationError, VerdictSequence
from packages.harness import MAX_TURNS, play_game


def _make_reporters(max_turns: int, out: Callable[[str], None]):
    def on_invalid(raw: str, err: ValidationError) -> None:
        out(f"Couldn't parse your guess: {err}")

    def on_result(turn: int, guess: ValidatedWord, verdict: VerdictSequence) -> None:
        out(f"{guess}  {verdict.to_compact_string()}  {verdict.to_decorated_string()}")
        out(f"{max_turns - turn} guesses left!")

    return on_invalid, on_result


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Play Wordle in the terminal")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--words", default=str(DEFAULT_WORDS),
                    help="path to the dictionary (one word per line)")
    ap.add_argument("--seed", type=int, help="RNG seed for the answer pick (default: random)")
    ap.add_argument("--max-turns", type=int, default=MAX_TURNS, help="attempt budget")
    ap.add_argument("--strict", action="store_true",
                    help="only accept guesses that are in the dictionary")
    ap.add_argument("--reveal", action="store_true",
                    help="print the answer up front (for development)")
    args = ap.parse_args(argv)
    if args.N < 1:
        ap.error("--N must be at least 1")

    # 1) Validate the dictionary; a bad list would let unchecked words through
    rep = validate_wordlist(args.N, args.words)
    print(pretty_summary(rep))
    if not rep["passed"]:
        for issue in rep["issues"]:
            print(f"  - {issue}", file=sys.stderr)
        return 2

    # 2) Load and pick
    words = load_dictionary(args.words, args.N, trusted=True)
    answer = random.Random(args.seed).choice(words)
    dictionary = {w.text.lower() for w in words} if args.strict else None

    if args.reveal:
        print(f"answer: {answer}")

    print(f"Guess the {args.N}-letter word in {args.max_turns} tries.")
    on_invalid, on_result = _make_reporters(args.max_turns, print)

    # 3) Play; EOF on stdin ends the game as a loss
    try:
        result = play_game(
            answer, input, N=args.N, max_turns=args.max_turns,
            on_invalid=on_invalid, on_result=on_result, dictionary=dictionary,
        )
        won = result["success"]
    except EOFError:
        print()
        won = False

    if won:
        print("You won!")
    else:
        print(f"answer was {answer}")
        print("You lost :c")
    return 0


if __name__ == "__main__":
    sys.exit(main())
