"""
Candidate filtering given game history.

Given:
  - a pool of words (e.g., the solution dictionary)
  - a history of (guess, pattern) pairs
  - target word length N

Return:
  - words that are consistent with ALL feedback seen so far.

A word is consistent with (guess, pattern) exactly when scoring the guess
against it reproduces the pattern. narrow() applies one pair to a set and is
what the session calls every turn; filter_candidates() applies a whole
history to an ordered pool.

Constraints is a read-only summary of the same information (greens, letters
banned from a slot, min/max letter counts) for display. It never drives the
filtering itself.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Set, Tuple

from .scoring import Mark, score

# History is a sequence of (guess, pattern) tuples produced by the engine.
History = Iterable[Tuple[str, str]]  # (guess, pattern)


def narrow(candidates: Iterable[str], guess: str, pattern: str) -> Set[str]:
    """
    Return the subset of `candidates` for which score(guess, w) == pattern.

    An empty result is not an error here; the caller decides what an
    inconsistent pattern means.
    """
    _score = score
    return {w for w in candidates if _score(guess, w) == pattern}


def filter_candidates(words: Iterable[str], history: History, N: int) -> List[str]:
    """
    Keep only words (length == N) that would produce exactly the recorded
    patterns for every (guess, pattern) in `history`.

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    history = list(history)
    out: List[str] = []

    for w in words:
        w = w.strip().lower()

        # Basic hygiene: skip anything that isn't a clean N-letter alpha token
        if len(w) != N or not w.isalpha():
            continue

        if all(score(g, w) == patt for g, patt in history):
            out.append(w)

    return out


@dataclass(frozen=True)
class Constraints:
    """
    Letter constraints implied by a history.

    exact      : position -> letter known to be there (green)
    forbidden  : position -> letters known NOT to be there
    min_count  : letter -> minimum occurrences in the answer
    max_count  : letter -> maximum occurrences (only for letters with a gray)
    """
    N: int
    exact: Dict[int, str] = field(default_factory=dict)
    forbidden: Dict[int, FrozenSet[str]] = field(default_factory=dict)
    min_count: Dict[str, int] = field(default_factory=dict)
    max_count: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_history(cls, history: History, N: int) -> "Constraints":
        exact: Dict[int, str] = {}
        forbidden: Dict[int, Set[str]] = {}
        min_count: Dict[str, int] = {}
        max_count: Dict[str, int] = {}

        for guess, patt in history:
            # letters confirmed by this guess (green + yellow), and letters
            # that drew at least one gray
            confirmed = Counter()
            grayed = set()
            for i, (ch, mark) in enumerate(zip(guess, patt)):
                if mark == Mark.CORRECT.value:
                    exact[i] = ch
                    confirmed[ch] += 1
                else:
                    # a yellow or gray letter can't sit in this slot
                    forbidden.setdefault(i, set()).add(ch)
                    if mark == Mark.MISPLACED.value:
                        confirmed[ch] += 1
                    else:
                        grayed.add(ch)

            for ch, k in confirmed.items():
                if k > min_count.get(ch, 0):
                    min_count[ch] = k
            for ch in grayed:
                k = confirmed.get(ch, 0)
                if ch not in max_count or k < max_count[ch]:
                    max_count[ch] = k

        return cls(
            N=N,
            exact=exact,
            forbidden={i: frozenset(s) for i, s in forbidden.items()},
            min_count=min_count,
            max_count=max_count,
        )

    @property
    def excluded_letters(self) -> FrozenSet[str]:
        """Letters known not to occur at all."""
        return frozenset(ch for ch, k in self.max_count.items() if k == 0)

    def allows(self, word: str) -> bool:
        if len(word) != self.N:
            return False
        for i, ch in self.exact.items():
            if word[i] != ch:
                return False
        for i, banned in self.forbidden.items():
            if word[i] in banned:
                return False
        counts = Counter(word)
        for ch, k in self.min_count.items():
            if counts[ch] < k:
                return False
        for ch, k in self.max_count.items():
            if counts[ch] > k:
                return False
        return True

    def describe(self) -> str:
        """Compact one-liner, e.g. 'c r _ _ e | +a | -stlo'."""
        slots = " ".join(self.exact.get(i, "_") for i in range(self.N))
        present = "".join(sorted(ch for ch in self.min_count if ch not in self.exact.values()))
        absent = "".join(sorted(self.excluded_letters))
        return f"{slots} | +{present or '.'} | -{absent or '.'}"
