"""
Dictionary loading.

A dictionary pair is the guess list (every word the game accepts) and the
solution list (words that can be the hidden answer). Both are newline
separated, one N-letter word per line.

Rules:
  - lines are stripped and lowercased; blank lines are skipped
  - any other line that is not N letters a-z fails the WHOLE load with
    InvalidDictionaryEntry (source, line number, offending text)
  - duplicates are dropped, keeping the first occurrence
  - solutions missing from the guess list are appended to it, so the guess
    dictionary is always a superset of the solution dictionary

The resulting Dictionaries object is read-only and meant to be shared by
every Session. It also owns the expensive shared caches: the guess x solution
pattern matrix and the ranking of the opening position.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional, Tuple

from wordle_entropy.engine.patterns import PatternMatrix
from wordle_entropy.engine.validation import is_wordle_word, normalize_word
from wordle_entropy.errors import InvalidDictionaryEntry
from wordle_entropy.ranking.entropy import RankedSuggestion, rank

from .io import read_lines

logger = logging.getLogger(__name__)

DEFAULT_WORD_LENGTH = 5


def parse_word_list(lines: Iterable[str], N: int, *, source: Optional[str] = None) -> Tuple[str, ...]:
    """
    Validate and normalise a word list.

    Raises:
      InvalidDictionaryEntry on the first malformed line.
    """
    words: List[str] = []
    seen = set()
    for lineno, raw in enumerate(lines, start=1):
        w = normalize_word(raw)
        if not w:
            continue
        if not is_wordle_word(w, N):
            reason = f"expected {N} letters a-z" if w.isalpha() else "non-alphabetic characters"
            raise InvalidDictionaryEntry(raw.rstrip("\r\n"), lineno=lineno, source=source, reason=reason)
        if w not in seen:
            seen.add(w)
            words.append(w)
    return tuple(words)


class Dictionaries:
    """Shared, read-only guess + solution dictionaries for one word length."""

    def __init__(self, guesses: Iterable[str], solutions: Iterable[str],
                 word_length: int = DEFAULT_WORD_LENGTH):
        self.word_length = int(word_length)
        self.solutions: Tuple[str, ...] = tuple(solutions)
        guesses = tuple(guesses)

        known = set(guesses)
        missing = [w for w in self.solutions if w not in known]
        if missing:
            logger.warning("%d solution word(s) missing from the guess list were added (e.g. %s)",
                           len(missing), missing[:5])
        self.guesses: Tuple[str, ...] = guesses + tuple(missing)

        self.guess_set: FrozenSet[str] = frozenset(self.guesses)
        self.solution_set: FrozenSet[str] = frozenset(self.solutions)
        self._matrix_lock = threading.Lock()
        self._matrix: Optional[PatternMatrix] = None
        self._lock = threading.Lock()
        self._opening: Optional[List[RankedSuggestion]] = None

        logger.debug("dictionaries loaded: %d guesses, %d solutions (N=%d)",
                     len(self.guesses), len(self.solutions), self.word_length)

    def __repr__(self) -> str:
        return (f"Dictionaries(guesses={len(self.guesses)}, solutions={len(self.solutions)}, "
                f"word_length={self.word_length})")

    @property
    def pattern_matrix(self) -> PatternMatrix:
        """Guess x solution pattern codes; built once, on first use."""
        with self._matrix_lock:
            if self._matrix is None:
                self._matrix = PatternMatrix(self.guesses, self.solutions, self.word_length)
            return self._matrix

    def opening_ranking(self, *, workers: Optional[int] = None,
                        cancel: Optional[threading.Event] = None) -> List[RankedSuggestion]:
        """
        Full ranking for the position before any guess.

        This is the most expensive ranking of a game and identical for every
        session, so it is computed once and shared. A cancelled computation
        leaves nothing cached.
        """
        with self._lock:
            if self._opening is None:
                self._opening = rank(self.guesses, self.solutions, matrix=self.pattern_matrix,
                                     workers=workers, cancel=cancel)
            return self._opening


def load_dictionaries(guess_lines: Iterable[str], solution_lines: Iterable[str], *,
                      word_length: int = DEFAULT_WORD_LENGTH) -> Dictionaries:
    """Build Dictionaries from two word lists (iterables of lines)."""
    guesses = parse_word_list(guess_lines, word_length, source="guesses")
    solutions = parse_word_list(solution_lines, word_length, source="solutions")
    return Dictionaries(guesses, solutions, word_length)


def load_dictionaries_from_files(guess_path: Path | str, solution_path: Path | str, *,
                                 word_length: int = DEFAULT_WORD_LENGTH) -> Dictionaries:
    """Read both word lists from disk and build Dictionaries."""
    guesses = parse_word_list(read_lines(guess_path), word_length, source=str(guess_path))
    solutions = parse_word_list(read_lines(solution_path), word_length, source=str(solution_path))
    return Dictionaries(guesses, solutions, word_length)
