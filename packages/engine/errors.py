"""
Error taxonomy for the engine.

Everything derives from ValueError so callers that only care about
"bad input" can catch that, while a game loop can tell a bad guess
(ValidationError -> reprompt) from a programming error (LengthMismatch).
"""

from __future__ import annotations


class EngineError(ValueError):
    """Base class for all engine errors."""


class ValidationError(EngineError):
    """Raised when raw text cannot become a ValidatedWord."""


class WrongLength(ValidationError):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} letters exactly, got {actual}")


class NotAlphabetic(ValidationError):
    def __init__(self, position: int, char: str):
        self.position = position
        self.char = char
        super().__init__(f"non-alphabetic character {char!r} at position {position}")


class InvalidVerdictSymbol(EngineError):
    def __init__(self, position: int, char: str):
        self.position = position
        self.char = char
        super().__init__(f"unknown verdict symbol {char!r} at position {position}")


class LengthMismatch(EngineError):
    def __init__(self, guess_len: int, answer_len: int):
        self.guess_len = guess_len
        self.answer_len = answer_len
        super().__init__(
            f"guess and answer must be the same length ({guess_len} != {answer_len})"
        )
