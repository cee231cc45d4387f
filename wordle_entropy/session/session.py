"""
Solve session: one puzzle being worked on.

The session owns the guess history and the set of solutions still consistent
with it. Dictionaries are shared and never modified here.

State is never stored; it is derived from the history and the candidate set
every time it is asked for:

  Fresh       no guesses yet
  InProgress  at least one guess, candidates left, not solved
  Solved      last feedback all green and it left exactly that guess
  Exhausted   no candidate survives the feedback
  Abandoned   max_turns given by the caller and used up without solving

record_guess() and suggest() are only valid in Fresh / InProgress; in any
other state they raise InvalidState (NoCandidatesRemain when Exhausted) and
the caller is expected to reset().
"""

from __future__ import annotations

import json
import logging
import threading
from typing import FrozenSet, List, Mapping, Optional, Tuple

from wordle_entropy.datasets.loader import Dictionaries
from wordle_entropy.engine.constraints import Constraints, narrow
from wordle_entropy.engine.patterns import build_pattern_table
from wordle_entropy.engine.scoring import Feedback, is_solved_pattern, parse_pattern
from wordle_entropy.engine.validation import check_word, validate_guess
from wordle_entropy.errors import InvalidState, NoCandidatesRemain
from wordle_entropy.ranking.entropy import RankedSuggestion, expected_information, rank, uncertainty_bits

from .state import GuessRecord, SessionSnapshot, SessionState

logger = logging.getLogger(__name__)

# number of suggestions returned when the caller doesn't say
DEFAULT_TOP_N = 32


class Session:
    """
    Stateful solver for one puzzle.

    Args:
      dictionaries : shared guess/solution dictionaries
      max_turns    : optional turn budget; reaching it unsolved means Abandoned
      weights      : optional prior weight per solution word for ranking
    """

    def __init__(self, dictionaries: Dictionaries, *, max_turns: Optional[int] = None,
                 weights: Optional[Mapping[str, float]] = None):
        self.dictionaries = dictionaries
        self.max_turns = max_turns
        self.weights = weights
        self._history: List[GuessRecord] = []
        self._candidates: FrozenSet[str] = dictionaries.solution_set
        self._ranked: Optional[List[RankedSuggestion]] = None

    # ---- read-only views ----

    @property
    def N(self) -> int:
        return self.dictionaries.word_length

    @property
    def history(self) -> Tuple[GuessRecord, ...]:
        return tuple(self._history)

    @property
    def candidates(self) -> FrozenSet[str]:
        return self._candidates

    @property
    def remaining(self) -> int:
        return len(self._candidates)

    @property
    def uncertainty_bits(self) -> float:
        return uncertainty_bits(len(self._candidates))

    @property
    def state(self) -> SessionState:
        if self._history:
            last = self._history[-1]
            if is_solved_pattern(last.pattern) and self._candidates == {last.guess}:
                return SessionState.SOLVED
        if not self._candidates:
            return SessionState.EXHAUSTED
        if self.max_turns is not None and len(self._history) >= self.max_turns:
            return SessionState.ABANDONED
        if self._history:
            return SessionState.IN_PROGRESS
        return SessionState.FRESH

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            state=self.state,
            history=self.history,
            candidates=tuple(sorted(self._candidates)),
            uncertainty_bits=self.uncertainty_bits,
        )

    def constraints(self) -> Constraints:
        return Constraints.from_history(((r.guess, r.pattern) for r in self._history), self.N)

    def is_consistent(self, word: str) -> bool:
        """Could `word` still be the answer (it is among the remaining candidates)?"""
        return word.strip().lower() in self._candidates

    def is_guess_permitted(self, word: str) -> bool:
        return validate_guess(word, self.dictionaries.guess_set, self.N)

    def partition(self, guess: str):
        """How `guess` would split the current candidates, pattern -> words."""
        return build_pattern_table(check_word(guess, self.N), self._candidates)

    # ---- transitions ----

    def _require_playable(self, action: str) -> None:
        state = self.state
        if state is SessionState.EXHAUSTED:
            raise NoCandidatesRemain(f"cannot {action}: no candidates remain, reset the session")
        if not state.can_guess:
            raise InvalidState(f"cannot {action}: session is {state.value}")

    def record_guess(self, word: str, feedback: Feedback) -> SessionSnapshot:
        """
        Add a guess and its feedback, narrowing the candidates.

        Raises:
          LengthMismatch / InvalidGuess / InvalidFeedback for bad input
          InvalidState when the session is Solved or Abandoned
          NoCandidatesRemain when it is already Exhausted
        """
        self._require_playable("record a guess")
        guess = check_word(word, self.N)
        pattern = parse_pattern(feedback, self.N)
        if not self.is_guess_permitted(guess):
            logger.debug("guess %r is not in the guess dictionary", guess)

        before = self._candidates
        expected = expected_information(guess, before, self.weights)
        after = frozenset(narrow(before, guess, pattern))
        actual = uncertainty_bits(len(before)) - uncertainty_bits(len(after)) if after else 0.0

        self._history.append(GuessRecord(guess, pattern, expected_bits=expected, actual_bits=actual))
        self._candidates = after
        self._ranked = None

        if not after:
            logger.warning("feedback %s for %r leaves no candidates (%d guesses recorded)",
                           pattern, guess, len(self._history))
        else:
            logger.debug("%s %s -> %d candidates (%.2f bits)", guess, pattern, len(after), actual)
        return self.snapshot()

    def suggest(self, top_n: Optional[int] = DEFAULT_TOP_N, *, workers: Optional[int] = None,
                cancel: Optional[threading.Event] = None) -> List[RankedSuggestion]:
        """
        Best next guesses from the guess dictionary, by expected information.

        The full ranking is cached until the next record_guess()/reset().
        """
        self._require_playable("suggest")
        if self._ranked is None:
            if not self._history and self.weights is None:
                self._ranked = self.dictionaries.opening_ranking(workers=workers, cancel=cancel)
            else:
                self._ranked = rank(
                    self.dictionaries.guesses, self._candidates,
                    matrix=self.dictionaries.pattern_matrix, weights=self.weights,
                    workers=workers, cancel=cancel,
                )
        if top_n is None:
            return list(self._ranked)
        return self._ranked[:max(top_n, 0)]

    def reset(self) -> None:
        self._history.clear()
        self._candidates = self.dictionaries.solution_set
        self._ranked = None

    # ---- persistence (history replay) ----

    def to_json(self) -> str:
        pack = {
            "word_length": self.N,
            "max_turns": self.max_turns,
            "weights": dict(self.weights) if self.weights is not None else None,
            "history": [{"guess": r.guess, "pattern": r.pattern} for r in self._history],
        }
        return json.dumps(pack)

    @staticmethod
    def from_json(dictionaries: Dictionaries, s: str) -> "Session":
        obj = json.loads(s)
        N = obj.get("word_length", dictionaries.word_length)
        if N != dictionaries.word_length:
            raise InvalidState(f"saved session is for {N}-letter words; dictionaries have "
                               f"{dictionaries.word_length}")
        session = Session(dictionaries, max_turns=obj.get("max_turns"), weights=obj.get("weights"))
        for item in obj.get("history", []):
            session.record_guess(item["guess"], item["pattern"])
        return session
