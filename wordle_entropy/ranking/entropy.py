"""
Entropy ranking (expected information gain).

Main idea:
  - For each guess g, partition the CURRENT candidates by feedback pattern.
  - p_k = |bucket_k| / |candidates|; H(g) = -sum_k p_k * log2(p_k).
  - H is the expected number of bits the guess reveals when the answer is
    uniform over the candidates (or distributed by `weights` when given).
Ordering:
  - higher H first, then words that could still be the answer, then
    alphabetical. Fully deterministic.

Acceleration:
  - Pattern codes come from a PatternMatrix built once per dictionary pair,
    or from score_matrix on the fly when the inputs aren't covered by it.
  - Bucket counts for a whole block of guesses come from one np.bincount.
  - Every row of bucket sizes is sorted before summing, so two guesses with
    the same multiset of bucket sizes get bit-identical scores and the
    alphabetical tie-break is what separates them.
"""

from __future__ import annotations

import heapq
import logging
import math
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Sequence

import numpy as np

from wordle_entropy.engine.patterns import (
    PatternMatrix, build_pattern_table, encode_words, num_patterns, score_matrix,
)
from wordle_entropy.engine.validation import check_word, normalize_word
from wordle_entropy.errors import RankingCancelled

logger = logging.getLogger(__name__)

# guesses per block; bounds the (block, |candidates|) temporaries
DEFAULT_CHUNK_SIZE = 512


@dataclass(frozen=True)
class RankedSuggestion:
    word: str
    expected_information_bits: float
    is_possible_solution: bool

    def sort_key(self):
        return (-self.expected_information_bits, not self.is_possible_solution, self.word)


def uncertainty_bits(n: int) -> float:
    """Entropy of a uniform choice among n words."""
    return math.log2(n) if n > 1 else 0.0


def expected_information(guess: str, candidates: Iterable[str],
                         weights: Optional[Mapping[str, float]] = None) -> float:
    """
    Expected information (bits) of a single guess, via the pattern table.

    Same definition as rank(); used when only one guess matters (e.g. the
    value stored with a recorded guess).
    """
    candidates = list(candidates)
    if len(candidates) <= 1:
        return 0.0
    table = build_pattern_table(guess, candidates)
    if weights is None:
        n = len(candidates)
        masses = sorted(len(words) / n for words in table.values())
    else:
        total = sum(weights.get(w, 0.0) for w in candidates)
        if total <= 0:
            return 0.0
        masses = sorted(sum(weights.get(w, 0.0) for w in words) / total for words in table.values())
    return sum(p * math.log2(1 / p) for p in masses if p > 0)


def _bucket_masses(codes: np.ndarray, n_patterns: int,
                   candidate_weights: Optional[np.ndarray]) -> np.ndarray:
    """(rows, n) pattern codes -> (rows, n_patterns) bucket counts or weights."""
    rows = codes.shape[0]
    offsets = (np.arange(rows, dtype=np.int64) * n_patterns)[:, None]
    flat = (codes.astype(np.int64) + offsets).ravel()
    if candidate_weights is None:
        counts = np.bincount(flat, minlength=rows * n_patterns)
    else:
        counts = np.bincount(flat, weights=np.tile(candidate_weights, rows),
                             minlength=rows * n_patterns)
    return counts.reshape(rows, n_patterns)


def _entropy_rows(masses: np.ndarray, total: float) -> np.ndarray:
    """Shannon entropy (bits) of each row of bucket masses summing to `total`."""
    masses = np.sort(masses, axis=1)
    p = masses / total
    with np.errstate(divide="ignore", invalid="ignore"):
        terms = np.where(p > 0, p * np.log2(1.0 / p), 0.0)
    return terms.sum(axis=1)


def _score_block(pool: Sequence[str], candidates: Sequence[str], N: int,
                 matrix: Optional[PatternMatrix], candidate_weights: Optional[np.ndarray],
                 total: float, encoded_candidates: Optional[np.ndarray]) -> np.ndarray:
    if matrix is not None:
        codes = matrix.submatrix(pool, candidates)
    else:
        codes = score_matrix(encode_words(pool, N), encoded_candidates)
    masses = _bucket_masses(codes, num_patterns(N), candidate_weights)
    return _entropy_rows(masses, total)


def rank(
        guess_pool: Iterable[str],
        candidates: Iterable[str],
        *,
        matrix: Optional[PatternMatrix] = None,
        weights: Optional[Mapping[str, float]] = None,
        top_n: Optional[int] = None,
        workers: Optional[int] = None,
        cancel: Optional[threading.Event] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> List[RankedSuggestion]:
    """
    Rank every word in `guess_pool` by expected information against `candidates`.

    Args:
      guess_pool : words that may be guessed
      candidates : words that may still be the answer
      matrix     : precomputed pattern codes; used when it covers both inputs
      weights    : optional prior weight per candidate (default uniform)
      top_n      : keep only the best `top_n` suggestions
      workers    : >1 scores guess blocks on a thread pool (same output)
      cancel     : checked between blocks; when set, RankingCancelled is raised
      chunk_size : guesses per block

    Returns:
      List[RankedSuggestion], best first. Empty if either input is empty.

    Raises:
      LengthMismatch / InvalidGuess when a word is not N letters a-z
      RankingCancelled when `cancel` is set
    """
    pool = sorted({normalize_word(w) for w in guess_pool})
    cands = sorted({normalize_word(w) for w in candidates})
    if not pool or not cands:
        return []

    N = len(cands[0])
    for w in cands:
        check_word(w, N, what="candidate")
    for w in pool:
        check_word(w, N)
    if matrix is not None and (matrix.N != N or not matrix.covers(pool, cands)):
        logger.debug("pattern matrix does not cover this ranking; scoring on the fly")
        matrix = None

    cand_weights = None
    total = float(len(cands))
    if weights is not None:
        cand_weights = np.array([float(weights.get(w, 0.0)) for w in cands])
        total = float(cand_weights.sum())

    encoded = None if matrix is not None else encode_words(cands, N)
    blocks = [pool[i:i + chunk_size] for i in range(0, len(pool), chunk_size)]

    def work(block: Sequence[str]) -> np.ndarray:
        if cancel is not None and cancel.is_set():
            raise RankingCancelled("ranking cancelled")
        if len(cands) <= 1 or total <= 0:
            return np.zeros(len(block))
        return _score_block(block, cands, N, matrix, cand_weights, total, encoded)

    t0 = time.perf_counter()
    if workers is not None and workers > 1 and len(blocks) > 1:
        with ThreadPoolExecutor(max_workers=workers) as ex:
            futures = [ex.submit(work, b) for b in blocks]
            try:
                results = [f.result() for f in futures]
            except RankingCancelled:
                for f in futures:
                    f.cancel()
                raise
    else:
        results = [work(b) for b in blocks]
    bits = np.concatenate(results) if results else np.zeros(0)

    cand_set = set(cands)
    suggestions = [
        RankedSuggestion(word=w, expected_information_bits=float(h), is_possible_solution=w in cand_set)
        for w, h in zip(pool, bits)
    ]
    logger.debug("ranked %d guesses against %d candidates in %.3fs",
                 len(pool), len(cands), time.perf_counter() - t0)

    key = RankedSuggestion.sort_key
    if top_n is not None:
        return heapq.nsmallest(max(top_n, 0), suggestions, key=key)
    return sorted(suggestions, key=key)
