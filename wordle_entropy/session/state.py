from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict, Tuple


class SessionState(str, Enum):
    FRESH = "fresh"
    IN_PROGRESS = "in_progress"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    ABANDONED = "abandoned"

    @property
    def can_guess(self) -> bool:
        return self in (SessionState.FRESH, SessionState.IN_PROGRESS)


@dataclass(frozen=True)
class GuessRecord:
    """One row of play history: the guess, its feedback, and what it was worth."""
    guess: str
    pattern: str
    expected_bits: float = 0.0  # expected information against the candidates before the guess
    actual_bits: float = 0.0    # uncertainty actually removed by the feedback

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class SessionSnapshot:
    state: SessionState
    history: Tuple[GuessRecord, ...]
    candidates: Tuple[str, ...]   # sorted
    uncertainty_bits: float

    @property
    def remaining(self) -> int:
        return len(self.candidates)

    @property
    def solved(self) -> bool:
        return self.state is SessionState.SOLVED
