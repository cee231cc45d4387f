"""
Word-list validation report.

load_dictionaries() stops at the first bad line. This module is the
diagnostic counterpart: it reads a guess/solution pair, collects EVERY
problem (bad lines with their numbers, duplicates, solutions missing from the
guess list), hashes the raw files and returns a JSON-friendly dict that the
CLI prints and stores in run manifests.

Typical use:
    from wordle_entropy.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists(5, "data/guesses_5.txt", "data/solutions_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

from wordle_entropy.engine.validation import is_wordle_word, normalize_word

from .io import raw_lines, shown_line

# how many offending lines to keep per file in the report
MAX_REPORTED_LINES = 5


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str
    exists: bool
    count: int            # valid (non-blank) lines
    unique_count: int     # distinct valid words
    invalid_lines: int
    sha256: str           # of the raw bytes; empty if missing
    examples: List[str] = field(default_factory=list)  # "lineno: text" of bad lines


@dataclass
class ValidationReport:
    N: int
    guesses: FileReport
    solutions: FileReport
    solutions_subset_guesses: bool
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _scan(path: Path, N: int) -> Tuple[List[str], FileReport]:
    valid: List[str] = []
    invalid = 0
    examples: List[str] = []

    for lineno, raw in raw_lines(path):
        try:
            w = normalize_word(raw.decode("utf-8"))
        except UnicodeDecodeError:
            w = None  # undecodable; the loader rejects it too
        if w == "":
            continue  # blank lines are ignored by the loader too
        if w is not None and is_wordle_word(w, N):
            valid.append(w)
        else:
            invalid += 1
            if len(examples) < MAX_REPORTED_LINES:
                examples.append(f"{lineno}: {shown_line(raw).rstrip()}")

    rep = FileReport(
        path=str(path),
        exists=True,
        count=len(valid),
        unique_count=len(set(valid)),
        invalid_lines=invalid,
        sha256=_sha256_file(path),
        examples=examples,
    )
    return valid, rep


def _missing(path: str) -> FileReport:
    return FileReport(path=path, exists=False, count=0, unique_count=0, invalid_lines=0, sha256="")


def validate_wordlists(N: int, guesses_path: str, solutions_path: str) -> Dict:
    """
    Validate the guess/solution word lists for length N.

    Returns a dict (ValidationReport schema) whose `passed` flag is strict:
    both files exist and are non-empty, no invalid lines, solutions are a
    subset of guesses. Duplicates are reported but do not fail the check,
    since the loader drops them.
    """
    issues: List[str] = []
    g_p, s_p = Path(guesses_path), Path(solutions_path)

    if not g_p.exists() or not s_p.exists():
        if not g_p.exists():
            issues.append(f"guesses file not found: {guesses_path}")
        if not s_p.exists():
            issues.append(f"solutions file not found: {solutions_path}")
        rep = ValidationReport(
            N=N,
            guesses=_scan(g_p, N)[1] if g_p.exists() else _missing(guesses_path),
            solutions=_scan(s_p, N)[1] if s_p.exists() else _missing(solutions_path),
            solutions_subset_guesses=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    guesses, g_rep = _scan(g_p, N)
    solutions, s_rep = _scan(s_p, N)

    subset_ok = set(solutions).issubset(guesses)
    if not subset_ok:
        missing = sorted(set(solutions) - set(guesses))[:MAX_REPORTED_LINES]
        issues.append(f"solutions not subset of guesses (e.g., {missing})")

    for name, rep in (("guesses", g_rep), ("solutions", s_rep)):
        if rep.count == 0:
            issues.append(f"{name} file contains 0 valid words")
        if rep.invalid_lines:
            issues.append(f"{name} has {rep.invalid_lines} invalid line(s), first: {rep.examples[0]}")
        if rep.count != rep.unique_count:
            issues.append(f"{name} contains {rep.count - rep.unique_count} duplicate line(s)")

    passed = (
            subset_ok
            and g_rep.invalid_lines == 0
            and s_rep.invalid_lines == 0
            and g_rep.count > 0
            and s_rep.count > 0
    )

    return asdict(ValidationReport(
        N=N,
        guesses=g_rep,
        solutions=s_rep,
        solutions_subset_guesses=subset_ok,
        passed=passed,
        issues=issues,
    ))


def pretty_summary(report: Dict) -> str:
    """
    One-liner for the console, e.g.
        N=5 | guesses=12972 (uniq=12972, sha=abc123...) | solutions=2315 (...) | solutions⊆guesses=True | OK
    """
    g, s = report["guesses"], report["solutions"]
    status = "OK" if report["passed"] else "FAIL"
    return (
        f"N={report['N']} | guesses={g['count']} (uniq={g['unique_count']}, sha={(g.get('sha256') or '')[:12]}) "
        f"| solutions={s['count']} (uniq={s['unique_count']}, sha={(s.get('sha256') or '')[:12]}) "
        f"| solutions⊆guesses={report['solutions_subset_guesses']} | {status}"
    )
