"""
Wordle-style verification for a single (guess, answer) pair.

This implementation is:
  - N-aware (any word length, as long as guess and answer agree)
  - duplicate-safe (a letter never earns more G+Y than it has copies in the answer)
  - deterministic (same inputs -> same outputs)
  - case-insensitive (letters are compared lower-cased)

Algorithm (two-pass, consume-and-match):
  1) Pass 1 marks every exact match green and consumes that answer position.
  2) Pass 2 walks the remaining guess positions left to right; each one takes
     the leftmost unconsumed answer position holding the same letter (yellow),
     or stays gray if there is none.

A single-pass "does the answer contain this letter" check is wrong here:
for guess "speed" against answer "abide" it marks both e's yellow ("--YYY")
although "abide" has a single e ("--Y-Y").
"""

from __future__ import annotations

from typing import List, Optional

from .errors import LengthMismatch
from .verdict import LetterVerdict, VerdictSequence
from .word import ValidatedWord


def verify(guess: ValidatedWord, answer: ValidatedWord) -> VerdictSequence:
    """
    Compare `guess` against `answer`.

    Returns:
      VerdictSequence index-aligned with the guess.

    Raises:
      LengthMismatch if the two words differ in length.

    Examples (guess "speed"):
      verify(speed, crepe).to_compact_string() -> "-YGY-"
      verify(speed, erase).to_compact_string() -> "Y-YY-"
    """
    g = guess.key
    a = answer.key
    if len(g) != len(a):
        raise LengthMismatch(len(g), len(a))

    n = len(g)
    verdicts: List[LetterVerdict] = [LetterVerdict.ABSENT] * n
    consumed = [False] * n

    # Pass 1: greens
    for i in range(n):
        if g[i] == a[i]:
            verdicts[i] = LetterVerdict.CORRECT
            consumed[i] = True

    # Pass 2: yellows, leftmost free answer position wins
    for i in range(n):
        if verdicts[i] is LetterVerdict.CORRECT:
            continue
        for j in range(n):
            if not consumed[j] and a[j] == g[i]:
                verdicts[i] = LetterVerdict.PRESENT
                consumed[j] = True
                break

    return VerdictSequence(tuple(verdicts))


def score(guess: str, answer: str, N: Optional[int] = None) -> str:
    """
    String-in, string-out wrapper around verify() for batch tooling.

    Both words are validated with length N (default: the guess's length),
    so bad input raises a ValidationError rather than a LengthMismatch.
    """
    if N is None:
        N = len(guess)
    g = ValidatedWord.build(guess, N)
    a = ValidatedWord.build(answer, N)
    return verify(g, a).to_compact_string()
