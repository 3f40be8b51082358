from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from packages.engine import WORD_LENGTH, ValidatedWord

# Bundled default dictionary (5-letter words)
DEFAULT_WORDS = Path(__file__).parent / "data" / "words_5.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_dictionary(p: Path | str, N: int = WORD_LENGTH, *, trusted: bool = False) -> List[ValidatedWord]:
    """
    Load a word list as ValidatedWord values (stripped, blanks dropped, order kept).

    trusted=False: every word goes through ValidatedWord.build; the first bad
                   line raises its ValidationError.
    trusted=True : words are wrapped with ValidatedWord.unchecked. Only do this
                   after validate_wordlist(N, p) reported passed=True.
    """
    words = [ln.strip() for ln in read_lines(p) if ln.strip()]
    if trusted:
        return [ValidatedWord.unchecked(w) for w in words]
    return [ValidatedWord.build(w, N) for w in words]
