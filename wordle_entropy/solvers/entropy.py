"""
Entropy strategy (expected information gain).

Plays the session's top suggestion: the guess whose feedback is expected to
reveal the most bits about the answer, preferring possible answers on ties.
With one candidate left every guess scores 0 bits, so the tie-break makes it
play the answer itself.
"""

from __future__ import annotations

from .base import BaseSolver, register
from wordle_entropy.session import Session


@register
class EntropySolver(BaseSolver):
    id = "entropy"
    name = "Entropy (Expected Information Gain)"
    version = "2.0.0"

    # parallel ranking; None keeps it on the calling thread
    WORKERS = None

    def next_guess(self, session: Session) -> str:
        best = session.suggest(top_n=1, workers=self.WORKERS)
        if not best:
            # empty guess dictionary; nothing sensible to rank
            return sorted(session.candidates)[0]
        return best[0].word
