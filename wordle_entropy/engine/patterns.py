"""
Pattern tables: how a guess partitions a set of candidate answers.

Two flavours:
  - build_pattern_table / pattern_histogram: plain Python over score(), one
    guess at a time. Cheap enough for a single guess (session previews,
    the expected info stored with each recorded guess).
  - score_matrix / PatternMatrix: numpy, whole guess x answer cross product
    as base-3 pattern codes. This is what the ranker uses; building the
    matrix for a full dictionary pair is tens of millions of comparisons, so
    it is done once per Dictionaries and reused by every ranking call.

score_matrix reproduces score() exactly, including duplicate letters:
a yellow at guess position i needs the answer to hold more unmatched copies
of that letter than the yellows already handed out to earlier positions.
"""

from __future__ import annotations

import logging
import time
from collections import defaultdict
from typing import Dict, Iterable, Sequence, Set

import numpy as np

from .scoring import score

logger = logging.getLogger(__name__)


def build_pattern_table(guess: str, candidates: Iterable[str]) -> Dict[str, Set[str]]:
    """Group every candidate by the pattern score(guess, candidate) yields."""
    table: Dict[str, Set[str]] = defaultdict(set)
    _score = score
    for ans in candidates:
        table[_score(guess, ans)].add(ans)
    return dict(table)


def pattern_histogram(guess: str, candidates: Iterable[str]) -> Dict[str, int]:
    """Pattern -> number of candidates producing it."""
    return {patt: len(words) for patt, words in build_pattern_table(guess, candidates).items()}


def num_patterns(N: int) -> int:
    return 3 ** N


def code_dtype(N: int) -> np.dtype:
    """Smallest unsigned dtype that holds every pattern code for length N."""
    return np.min_scalar_type(num_patterns(N) - 1)


def encode_words(words: Sequence[str], N: int) -> np.ndarray:
    """Words -> (len(words), N) uint8 array of ASCII codes."""
    if not words:
        return np.zeros((0, N), dtype=np.uint8)
    arr = np.array([list(w.encode("ascii")) for w in words], dtype=np.uint8)
    return arr.reshape(len(words), N)


def score_matrix(guesses: np.ndarray, answers: np.ndarray) -> np.ndarray:
    """
    Pattern codes for every (guess, answer) pair.

    Args:
      guesses : (G, N) uint8 array from encode_words
      answers : (A, N) uint8 array from encode_words

    Returns:
      (G, A) array; entry [g, a] == pattern_code(score(guess_g, answer_a)).
    """
    n_g, N = guesses.shape
    n_a = answers.shape[0]
    out_dtype = code_dtype(N)
    if n_g == 0 or n_a == 0:
        return np.zeros((n_g, n_a), dtype=out_dtype)

    g = guesses[:, None, :]  # (G, 1, N)
    a = answers[None, :, :]  # (1, A, N)
    green = g == a           # (G, A, N)
    yellow = np.zeros_like(green)

    for i in range(N):
        letter = guesses[:, i][:, None, None]
        # unmatched copies of this letter in each answer
        avail = ((a == letter) & ~green).sum(axis=2)
        # yellows already given to earlier guess positions with the same letter
        used = np.zeros(avail.shape, dtype=avail.dtype)
        for k in range(i):
            same = (guesses[:, k] == guesses[:, i])[:, None]
            used += yellow[:, :, k] & same
        yellow[:, :, i] = ~green[:, :, i] & (avail > used)

    marks = green.astype(np.int64) * 2 + yellow.astype(np.int64)
    weights = 3 ** np.arange(N, dtype=np.int64)
    return (marks @ weights).astype(out_dtype)


def score_matrix_chunked(guesses: np.ndarray, answers: np.ndarray, chunk_rows: int) -> np.ndarray:
    """score_matrix over row blocks so the (rows, A, N) temporaries stay small."""
    n_g, N = guesses.shape
    out = np.empty((n_g, answers.shape[0]), dtype=code_dtype(N))
    for start in range(0, n_g, chunk_rows):
        stop = min(start + chunk_rows, n_g)
        out[start:stop] = score_matrix(guesses[start:stop], answers)
    return out


class PatternMatrix:
    """
    Precomputed pattern codes for a guess list x answer list.

    Read-only after construction; safe to share across sessions and threads.
    """

    # rows per block while building; bounds temporaries to ~CHUNK_ROWS*A*N bytes
    CHUNK_ROWS = 256

    def __init__(self, guesses: Sequence[str], answers: Sequence[str], N: int):
        self.N = N
        self.guesses = tuple(guesses)
        self.answers = tuple(answers)
        self._guess_index = {w: i for i, w in enumerate(self.guesses)}
        self._answer_index = {w: i for i, w in enumerate(self.answers)}

        t0 = time.perf_counter()
        self.codes = score_matrix_chunked(
            encode_words(self.guesses, N), encode_words(self.answers, N), self.CHUNK_ROWS
        )
        self.codes.setflags(write=False)
        logger.debug(
            "pattern matrix %dx%d built in %.2fs (%.1f MiB)",
            len(self.guesses), len(self.answers), time.perf_counter() - t0,
            self.codes.nbytes / (1024 * 1024),
        )

    @property
    def shape(self):
        return self.codes.shape

    def covers(self, guesses: Iterable[str], answers: Iterable[str]) -> bool:
        gi, ai = self._guess_index, self._answer_index
        return all(w in gi for w in guesses) and all(w in ai for w in answers)

    def guess_rows(self, guesses: Sequence[str]) -> np.ndarray:
        return np.fromiter((self._guess_index[w] for w in guesses), dtype=np.intp, count=len(guesses))

    def answer_columns(self, answers: Sequence[str]) -> np.ndarray:
        return np.fromiter((self._answer_index[w] for w in answers), dtype=np.intp, count=len(answers))

    def submatrix(self, guesses: Sequence[str], answers: Sequence[str]) -> np.ndarray:
        """Codes for the given guesses (rows) against the given answers (columns)."""
        rows = self.guess_rows(guesses)
        cols = self.answer_columns(answers)
        return self.codes[np.ix_(rows, cols)]
