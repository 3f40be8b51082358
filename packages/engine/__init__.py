from .errors import (
    EngineError,
    InvalidVerdictSymbol,
    LengthMismatch,
    NotAlphabetic,
    ValidationError,
    WrongLength,
)
from .scoring import score, verify
from .verdict import LetterVerdict, VerdictSequence
from .word import WORD_LENGTH, ValidatedWord

__all__ = [
    "ValidatedWord", "WORD_LENGTH", "verify", "score",
    "LetterVerdict", "VerdictSequence",
    "EngineError", "ValidationError", "WrongLength", "NotAlphabetic",
    "InvalidVerdictSymbol", "LengthMismatch",
]
