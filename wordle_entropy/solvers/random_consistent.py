"""
Random Consistent strategy.

Baseline for comparing against entropy: choose uniformly at random from the
words still consistent with all feedback so far. Deterministic across runs
with the same seed (via BaseSolver.rng).
"""

from __future__ import annotations

from .base import BaseSolver, register
from wordle_entropy.session import Session


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "2.0.0"

    def next_guess(self, session: Session) -> str:
        # sorted so the seed alone fixes the choice (set order varies per process)
        pool = sorted(session.candidates)
        return pool[self.rng.randrange(len(pool))]
