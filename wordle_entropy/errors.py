"""
Error kinds raised by the solver core.

Every error is local to the call that raised it; a Session stays usable
after any of them (InvalidState is recovered by calling reset()).
"""

from __future__ import annotations


class WordleError(Exception):
    """Base class for all solver errors."""


class LengthMismatch(WordleError, ValueError):
    """A guess, solution or feedback pattern does not have the configured length."""

    def __init__(self, what: str, expected: int, got: int):
        self.what = what
        self.expected = expected
        self.got = got
        super().__init__(f"{what} must have length {expected}; got {got}")


class InvalidGuess(WordleError, ValueError):
    """A guess contains characters outside a-z."""


class InvalidFeedback(WordleError, ValueError):
    """A feedback mark could not be understood."""


class InvalidDictionaryEntry(WordleError, ValueError):
    """A dictionary line is not a valid word; the whole load fails."""

    def __init__(self, line: str, *, lineno: int | None = None, source: str | None = None,
                 reason: str = "not a valid word"):
        self.line = line
        self.lineno = lineno
        self.source = source
        where = source or "<word list>"
        if lineno is not None:
            where = f"{where}:{lineno}"
        super().__init__(f"{where}: {reason}: {line!r}")


class InvalidState(WordleError, RuntimeError):
    """Operation is not allowed in the session's current state."""


class NoCandidatesRemain(InvalidState):
    """Feedback so far is inconsistent with every word in the solution dictionary."""


class RankingCancelled(WordleError):
    """A ranking call was cancelled before it finished; no partial results."""
