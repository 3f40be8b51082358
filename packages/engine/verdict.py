"""
Per-letter verdicts and the sequence returned by verify().

Conventions (compact symbol / decorative glyph):
  - 'G' / 🟩 : correct = right letter, right position
  - 'Y' / 🟨 : present = letter occurs elsewhere and is not yet consumed
  - '-' / ⬜ : absent  = letter missing, or all occurrences already consumed
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple

from .errors import InvalidVerdictSymbol, WrongLength


class LetterVerdict(Enum):
    CORRECT = "G"
    PRESENT = "Y"
    ABSENT = "-"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]


_GLYPHS = {
    LetterVerdict.CORRECT: "\U0001F7E9",  # green square
    LetterVerdict.PRESENT: "\U0001F7E8",  # yellow square
    LetterVerdict.ABSENT: "\u2B1C",  # white square
}


@dataclass(frozen=True)
class VerdictSequence:
    verdicts: Tuple[LetterVerdict, ...]

    @classmethod
    def parse(cls, text: str, N: Optional[int] = None) -> "VerdictSequence":
        """
        Inverse of to_compact_string().

        Raises InvalidVerdictSymbol on the first character outside 'G', 'Y', '-',
        and WrongLength if N is given and does not match len(text).
        """
        if N is not None and len(text) != N:
            raise WrongLength(N, len(text))
        out = []
        for i, ch in enumerate(text):
            try:
                out.append(LetterVerdict(ch))
            except ValueError as e:
                raise InvalidVerdictSymbol(i, ch) from e
        return cls(tuple(out))

    def to_compact_string(self) -> str:
        return "".join(v.symbol for v in self.verdicts)

    def to_decorated_string(self) -> str:
        return "".join(v.glyph for v in self.verdicts)

    def is_victory(self) -> bool:
        # An empty sequence never wins
        return bool(self.verdicts) and all(v is LetterVerdict.CORRECT for v in self.verdicts)

    def counts(self) -> Dict[LetterVerdict, int]:
        c = Counter(self.verdicts)
        return {v: c[v] for v in LetterVerdict}

    def __str__(self) -> str:
        return self.to_compact_string()

    def __len__(self) -> int:
        return len(self.verdicts)

    def __iter__(self) -> Iterator[LetterVerdict]:
        return iter(self.verdicts)

    def __getitem__(self, i: int) -> LetterVerdict:
        return self.verdicts[i]
