"""
Dictionary validator.

What this module does:
- Validate a word list (one word per line) for a given length N.
- Enforce formatting rules (lowercase, alphabetic, exact length N, one per line).
  Each token goes through ValidatedWord.build so the file obeys the same rules
  as a typed guess.
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

A dictionary that passes can be loaded with load_dictionary(..., trusted=True),
which skips per-word validation.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "packages/datasets/data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.engine import ValidatedWord, ValidationError


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    N: int
    dictionary: FileReport
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], List[str]]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line (surrounding whitespace ignored)
      - must already be lowercase
      - must pass ValidatedWord.build(token, N)
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, problems) where problems holds one message per invalid line
    """
    valid: List[str] = []
    problems: List[str] = []

    with path.open("r", encoding="utf-8") as f:
        for lineno, raw in enumerate(f, start=1):
            w = raw.strip()
            if not w:
                problems.append(f"line {lineno}: blank")
                continue
            if w != w.lower():
                problems.append(f"line {lineno}: {w!r} is not lowercase")
                continue
            try:
                ValidatedWord.build(w, N)
            except ValidationError as e:
                problems.append(f"line {lineno}: {w!r} {e}")
                continue
            valid.append(w)

    return valid, problems


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate a dictionary file for word length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid diagnostics
          - `passed` boolean (strict: file exists, non-empty, no invalid lines)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"dictionary file not found: {path}")
        rep = ValidationReport(
            N=N,
            dictionary=FileReport(path, False, 0, "", 0, 0),
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    words, problems = _load_and_check(p, N)
    unique = set(words)

    report = FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=len(problems),
    )

    if report.count == 0:
        issues.append("dictionary contains 0 valid words")
    if problems:
        # Surface a few examples to debug quickly
        issues.append(f"dictionary has {len(problems)} invalid line(s) (e.g., {problems[:3]})")
    # Duplicates are harmless for play, so they are reported but do not fail
    if report.count != report.unique_count:
        issues.append("dictionary contains duplicate lines")

    passed = report.count > 0 and not problems

    rep = ValidationReport(N=N, dictionary=report, passed=passed, issues=issues)
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for the console.

    Example:
        N=5 | words=120 (uniq=120, invalid=0, sha=abc123def456) | OK
    """
    d = report["dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    sha = (d.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={d['count']} (uniq={d['unique_count']}, "
        f"invalid={d['invalid_lines']}, sha={sha}) | {status}"
    )
