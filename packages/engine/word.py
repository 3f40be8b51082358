"""
Validated words: the only values the verifier accepts as guess or answer.

A word is valid iff:
  - it is a string
  - it has exact length N >= 1 (characters, not bytes)
  - every character is alphabetic (str.isalpha)

Length is checked before content, so "ab1" with N=5 is a WrongLength,
not a NotAlphabetic.

Case is preserved as given. Comparison in the verifier is
case-insensitive, one character at a time (see `key`).

Calling ValidatedWord(text) directly validates against WORD_LENGTH; use
build() for other lengths and unchecked() only for trusted input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Tuple

from .errors import NotAlphabetic, WrongLength

# Reference Wordle word length; everything takes N as a parameter.
WORD_LENGTH = 5

# Marks instances created by build()/unchecked(), which do their own checking.
_VETTED = object()


def _validate(raw: str, N: int) -> None:
    if not isinstance(raw, str):
        raise TypeError(f"expected str, got {type(raw).__name__}")
    if N < 1:
        raise ValueError(f"word length must be at least 1; got {N}")
    if len(raw) != N:
        raise WrongLength(N, len(raw))
    for i, ch in enumerate(raw):
        if not ch.isalpha():
            raise NotAlphabetic(i, ch)


@dataclass(frozen=True)
class ValidatedWord:
    text: str
    _origin: object = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        if self._origin is not _VETTED:
            _validate(self.text, WORD_LENGTH)

    @classmethod
    def build(cls, raw: str, N: int = WORD_LENGTH) -> "ValidatedWord":
        """
        Validate `raw` and wrap it.

        Does not strip whitespace; trimming user input is the caller's job.

        Raises:
          TypeError     : raw is not a str
          ValueError    : N < 1
          WrongLength   : len(raw) != N
          NotAlphabetic : some character is not a letter (first offender reported)
        """
        _validate(raw, N)
        return cls(raw, _VETTED)

    @classmethod
    def unchecked(cls, raw: str) -> "ValidatedWord":
        """
        Wrap `raw` WITHOUT any length or alphabet checks.

        Only for trusted call sites, e.g. bulk-loading a dictionary that
        already passed datasets.validate_wordlist. Use build() otherwise.
        """
        return cls(raw, _VETTED)

    @property
    def key(self) -> Tuple[str, ...]:
        """
        Per-letter lower-cased form used for comparisons.

        Each letter is lowered on its own: some letters lower to more than
        one character ("İ" -> "i̇"), which must not shift positions.
        """
        return tuple(ch.lower() for ch in self.text)

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)

    def __iter__(self) -> Iterator[str]:
        return iter(self.text)
