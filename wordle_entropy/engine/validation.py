"""
Lightweight word validation.

Words are plain lowercase ASCII strings of exact length N. Anything typed by
a user goes through normalize_word() first (strip + lowercase), then
check_word() which raises the specific error for the first problem found.
validate_guess() is the boolean variant used where a yes/no answer is enough
(e.g. warning about a guess missing from the dictionary).
"""

import re
from typing import Iterable, Set

from wordle_entropy.errors import InvalidGuess, LengthMismatch

_LETTERS = re.compile(r"[a-z]+")


def normalize_word(word: str) -> str:
    return word.strip().lower()


def is_wordle_word(word: str, N: int) -> bool:
    """True if `word` (already normalised) is exactly N letters a-z."""
    return len(word) == N and _LETTERS.fullmatch(word) is not None


def check_word(word: str, N: int, *, what: str = "guess") -> str:
    """
    Normalise `word` and raise if it cannot be played.

    Raises:
      LengthMismatch if the word is not N characters long.
      InvalidGuess   if it contains anything but a-z.
    """
    if not isinstance(word, str):
        raise InvalidGuess(f"{what} must be a string; got {type(word).__name__}")
    w = normalize_word(word)
    if len(w) != N:
        raise LengthMismatch(what, N, len(w))
    if _LETTERS.fullmatch(w) is None:
        raise InvalidGuess(f"{what} must contain only letters a-z; got {word!r}")
    return w


def validate_guess(word: str, allowed: Iterable[str], N: int) -> bool:
    """
    Return True if `word` is N letters a-z and appears in `allowed`.

    `allowed` may be a set already (the Dictionaries object keeps one); any
    other iterable is turned into a set here.
    """
    if not isinstance(word, str):
        return False

    w = normalize_word(word)
    if not is_wordle_word(w, N):
        return False

    if isinstance(allowed, (set, frozenset)):
        return w in allowed
    allowed_set: Set[str] = {normalize_word(a) for a in allowed}
    return w in allowed_set
