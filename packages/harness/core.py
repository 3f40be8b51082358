"""
Game-loop primitives built on the engine.

- play_game: drive one game (one hidden answer) from any guess source.
- run_batch: score a list of raw guesses against one answer.
- Enforces the attempt budget at the harness layer; the engine itself
  knows nothing about turns.

These functions are UI-agnostic: guesses come from a callable and results
go out through callbacks, so the terminal app and the tests share them.
"""

from __future__ import annotations

from typing import Callable, Collection, Dict, Iterable, List, Optional, Tuple, Union

from packages.engine import ValidatedWord, ValidationError, VerdictSequence, verify

# Single source of truth for the Wordle attempt budget.
MAX_TURNS = 6


class NotInDictionary(ValidationError):
    def __init__(self, word: str):
        self.word = word
        super().__init__(f"{word!r} is not in the word list")


def _check_turns(max_turns: int) -> None:
    if max_turns < 1:
        raise ValueError(f"max_turns must be at least 1; got {max_turns}")


def play_game(
        answer: ValidatedWord,
        next_guess: Callable[[], str],
        *,
        N: int,
        max_turns: int = MAX_TURNS,
        on_invalid: Optional[Callable[[str, ValidationError], None]] = None,
        on_result: Optional[Callable[[int, ValidatedWord, VerdictSequence], None]] = None,
        dictionary: Optional[Collection[str]] = None,
) -> Dict:
    """
    Play until the guess matches or the turn budget is exhausted.

    Args:
        answer:     the hidden word
        next_guess: returns the next raw guess (trimmed here); exceptions such
                    as EOFError propagate to the caller
        N:          word length
        max_turns:  number of valid guesses allowed
        on_invalid: called with (raw, error) when a guess is rejected; the
                    rejected guess does not cost a turn
        on_result:  called with (turn, guess, verdict) after each valid guess
        dictionary: if given, lower-cased words a guess must belong to

    Returns:
        dict with keys:
            success (bool), guesses (int), answer (str),
            history (list[(guess, pattern)])
    """
    _check_turns(max_turns)

    history: List[Tuple[str, str]] = []

    for turn in range(1, max_turns + 1):
        # Loop until a valid guess arrives
        while True:
            raw = next_guess().strip()
            try:
                guess = ValidatedWord.build(raw, N)
                if dictionary is not None and guess.text.lower() not in dictionary:
                    raise NotInDictionary(raw)
            except ValidationError as e:
                if on_invalid is not None:
                    on_invalid(raw, e)
                continue
            break

        verdict = verify(guess, answer)
        history.append((guess.text, verdict.to_compact_string()))
        if on_result is not None:
            on_result(turn, guess, verdict)

        if verdict.is_victory():
            return {
                "success": True, "guesses": turn,
                "history": history, "answer": answer.text,
            }

    return {
        "success": False, "guesses": max_turns,
        "history": history, "answer": answer.text,
    }


def run_batch(answer: Union[str, ValidatedWord], guesses: Iterable[str], *, N: int) -> List[Dict]:
    """
    Score each raw guess against `answer`, one result row per guess.

    A str answer is validated first (ValidationError propagates). Invalid
    guesses produce a row with an empty pattern and the error message in `error`.
    """
    ans = answer if isinstance(answer, ValidatedWord) else ValidatedWord.build(answer.strip(), N)

    out: List[Dict] = []
    for raw in guesses:
        raw = raw.strip()
        row = {"answer": ans.text, "guess": raw, "pattern": "", "decorated": "",
               "victory": False, "error": ""}
        try:
            verdict = verify(ValidatedWord.build(raw, N), ans)
        except ValidationError as e:
            row["error"] = str(e)
        else:
            row["pattern"] = verdict.to_compact_string()
            row["decorated"] = verdict.to_decorated_string()
            row["victory"] = verdict.is_victory()
        out.append(row)
    return out
