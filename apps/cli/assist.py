# apps/cli/assist.py
"""
Interactive solving assistant.

Play Wordle somewhere else and type what happened here:

    > crane -y--g        record guess 'crane' with its colours
    > s                  show suggestions (also: empty line)
    > c                  list remaining candidates
    > k                  show the known letter constraints
    > r                  start over
    > q                  quit

Colours: G/g = green, Y/y = yellow, -/x/. = gray.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from wordle_entropy.datasets import load_dictionaries_from_files
from wordle_entropy.engine.scoring import format_pattern
from wordle_entropy.errors import WordleError
from wordle_entropy.ranking import RankedSuggestion
from wordle_entropy.session import DEFAULT_TOP_N, Session, SessionState

MAX_LISTED_CANDIDATES = 40


def format_suggestions(suggestions: List[RankedSuggestion]) -> str:
    lines = []
    for i, s in enumerate(suggestions, 1):
        mark = "*" if s.is_possible_solution else " "
        lines.append(f"{i:>3}. {s.word} {mark} {s.expected_information_bits:6.3f} bits")
    return "\n".join(lines) if lines else "(no suggestions)"


def format_status(session: Session) -> str:
    snap = session.snapshot()
    rows = [f"{format_pattern(r.pattern)} {r.guess}  "
            f"(expected {r.expected_bits:.2f} bits, got {r.actual_bits:.2f})" for r in snap.history]
    rows.append(f"{snap.state.value}: {snap.remaining} candidate(s), {snap.uncertainty_bits:.2f} bits left")
    if snap.state is SessionState.SOLVED:
        rows.append(f"solved: {snap.candidates[0]}")
    return "\n".join(rows)


def handle_line(session: Session, line: str, top_n: int = DEFAULT_TOP_N) -> str:
    """Run one command against the session and return what to print."""
    parts = line.split()
    cmd = parts[0].lower() if parts else "s"
    if cmd in ("s", "suggest"):
        return format_suggestions(session.suggest(top_n))
    if cmd in ("c", "candidates"):
        words = sorted(session.candidates)
        more = len(words) - MAX_LISTED_CANDIDATES
        shown = " ".join(words[:MAX_LISTED_CANDIDATES])
        return shown + (f" ... (+{more} more)" if more > 0 else "")
    if cmd in ("k", "constraints"):
        return session.constraints().describe()
    if cmd in ("r", "reset"):
        session.reset()
        return "reset"
    if len(parts) != 2:
        return "expected: <guess> <colours>, or one of s, c, k, r, q"
    session.record_guess(parts[0], parts[1])
    return format_status(session)


def _read_commands():
    if not sys.stdin.isatty():
        yield from sys.stdin
        return
    while True:
        try:
            yield input("> ")
        except EOFError:
            return


def main(argv=None):
    ap = argparse.ArgumentParser(description="wordle-entropy: interactive solving assistant")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--guesses", default="data/guesses_5.txt")
    ap.add_argument("--solutions", default="data/solutions_5.txt")
    ap.add_argument("--top", type=int, default=10, help="suggestions to show")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(name)s %(levelname)s: %(message)s")

    try:
        dictionaries = load_dictionaries_from_files(args.guesses, args.solutions, word_length=args.N)
    except (WordleError, OSError) as e:
        raise SystemExit(f"error: {e}")

    session = Session(dictionaries)
    print(f"{len(dictionaries.solutions)} possible answers, {len(dictionaries.guesses)} allowed guesses")
    for line in _read_commands():
        if line.strip().lower() in ("q", "quit", "exit"):
            break
        try:
            print(handle_line(session, line, args.top))
        except WordleError as e:
            # bad input or finished game; the session itself is unchanged
            print(f"error: {e}")


if __name__ == "__main__":
    main()
