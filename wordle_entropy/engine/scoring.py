"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

Conventions:
  - 'G'  : green  = correct letter in the correct position
  - 'Y'  : yellow = correct letter in the wrong position
  - '-'  : gray   = letter not present (or present fewer times than guessed)

A pattern is a plain string of those characters, one per guess position.
Each pattern also has an integer code in [0, 3**N): a little-endian base-3
number over the mark ordinals (gray=0, yellow=1, green=2). The codes are what
the vectorised pattern matrix stores.

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all greens and counts the remaining (unmatched) letters
     from the answer.
  2) Second pass marks yellows left to right, only while the letter still has
     remaining count.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Iterable, Sequence, Union

from wordle_entropy.errors import InvalidFeedback, LengthMismatch


class Mark(str, Enum):
    """Per-position feedback for one guess letter."""

    EXCLUDED = "-"
    MISPLACED = "Y"
    CORRECT = "G"

    @property
    def ordinal(self) -> int:
        return _ORDINALS[self]

    @classmethod
    def from_ordinal(cls, value: int) -> "Mark":
        if value not in (0, 1, 2):
            raise InvalidFeedback(f"mark ordinal must be 0, 1 or 2; got {value}")
        return _BY_ORDINAL[value]

    @property
    def emoji(self) -> str:
        return _EMOJI[self]


_ORDINALS = {Mark.EXCLUDED: 0, Mark.MISPLACED: 1, Mark.CORRECT: 2}
_BY_ORDINAL = (Mark.EXCLUDED, Mark.MISPLACED, Mark.CORRECT)
_EMOJI = {Mark.EXCLUDED: "⬛", Mark.MISPLACED: "\U0001f7e8", Mark.CORRECT: "\U0001f7e9"}

# Characters accepted for each mark at the input boundary.
_ALIASES = {
    "G": Mark.CORRECT, "g": Mark.CORRECT, "2": Mark.CORRECT,
    "Y": Mark.MISPLACED, "y": Mark.MISPLACED, "1": Mark.MISPLACED,
    "-": Mark.EXCLUDED, "x": Mark.EXCLUDED, "X": Mark.EXCLUDED, ".": Mark.EXCLUDED,
    "b": Mark.EXCLUDED, "B": Mark.EXCLUDED, "_": Mark.EXCLUDED, "0": Mark.EXCLUDED,
}

Feedback = Union[str, Sequence[Union[Mark, str, int]]]


def score(guess: str, answer: str) -> str:
    """
    Compute Wordle feedback pattern for `guess` against `answer`.

    Raises:
      LengthMismatch if the two words differ in length.

    Examples:
      score("belle", "level") -> "-GYYY"
      score("sassy", "sissy") -> "G-GGG"
    """
    # Normalize; Wordle is case-insensitive but canonicalizes to lowercase
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise LengthMismatch("guess", len(answer), len(guess))

    n = len(guess)
    pattern = ["-"] * n

    # Pass 1: greens, and the answer letters left over for yellows
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "G"
        else:
            remaining[a] += 1

    # Pass 2: yellows capped by the answer's multiplicity, leftmost first
    for i, g in enumerate(guess):
        if pattern[i] == "G":
            continue
        if remaining[g] > 0:
            pattern[i] = "Y"
            remaining[g] -= 1

    return "".join(pattern)


def solved_pattern(N: int) -> str:
    return Mark.CORRECT.value * N


def is_solved_pattern(pattern: str) -> bool:
    return bool(pattern) and all(ch == Mark.CORRECT.value for ch in pattern)


def parse_pattern(feedback: Feedback, N: int) -> str:
    """
    Turn boundary feedback into a canonical pattern string.

    `feedback` may be a string ("GY--G", "gy..g", "21002") or a sequence of
    Mark members, one-character strings or ordinals 0/1/2.
    """
    marks = []
    for item in feedback:
        if isinstance(item, Mark):
            marks.append(item)
        elif isinstance(item, bool):
            raise InvalidFeedback(f"unrecognised feedback mark: {item!r}")
        elif isinstance(item, int):
            marks.append(Mark.from_ordinal(item))
        elif isinstance(item, str) and item in _ALIASES:
            marks.append(_ALIASES[item])
        else:
            raise InvalidFeedback(f"unrecognised feedback mark: {item!r}")
    if len(marks) != N:
        raise LengthMismatch("feedback", N, len(marks))
    return "".join(m.value for m in marks)


def pattern_code(pattern: str) -> int:
    """Base-3 code of a pattern; position 0 is the least significant digit."""
    code = 0
    multiplier = 1
    for ch in pattern:
        code += _ALIASES[ch].ordinal * multiplier
        multiplier *= 3
    return code


def decode_pattern(code: int, N: int) -> str:
    """Inverse of pattern_code for a word length N."""
    if not 0 <= code < 3 ** N:
        raise ValueError(f"pattern code {code} out of range for N={N}")
    out = []
    for _ in range(N):
        out.append(_BY_ORDINAL[code % 3].value)
        code //= 3
    return "".join(out)


def format_pattern(pattern: Iterable[str]) -> str:
    """Emoji squares for a pattern, as the game shows it."""
    return "".join(_ALIASES[ch].emoji for ch in pattern)
