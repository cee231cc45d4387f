import math
import threading

import pytest

from wordle_entropy.engine import PatternMatrix, build_pattern_table
from wordle_entropy.errors import InvalidGuess, LengthMismatch, RankingCancelled
from wordle_entropy.ranking import expected_information, rank, uncertainty_bits

POOL = ["crane", "slate", "trace", "crate", "fuzzy"]
CANDS = ["crane", "slate", "trace"]
WORDS = ["crane", "raise", "stare", "trace", "cared", "adieu", "alone", "slate", "salet", "roate",
         "speed", "abide", "allee", "label", "fuzzy", "mamma"]


def test_three_way_split_and_tie_break():
    out = rank(POOL, CANDS)
    assert [s.word for s in out] == ["crane", "slate", "trace", "crate", "fuzzy"]
    for s in out[:4]:
        assert s.expected_information_bits == pytest.approx(math.log2(3))
    assert out[3].is_possible_solution is False
    assert out[4].expected_information_bits == 0.0
    # equal scores are bit-identical, so the tie-break alone decides
    assert len({s.expected_information_bits for s in out[:4]}) == 1


@pytest.mark.parametrize("guess", WORDS)
def test_entropy_bounds(guess):
    cands = WORDS[:10]
    h = expected_information(guess, cands)
    table = build_pattern_table(guess, cands)
    assert -1e-12 <= h <= math.log2(len(cands)) + 1e-9
    if len(table) == 1:
        assert h == 0.0
    if len(table) == len(cands):
        assert h == pytest.approx(math.log2(len(cands)))


def test_rank_agrees_with_expected_information():
    cands = WORDS[:10]
    for s in rank(WORDS, cands):
        assert s.expected_information_bits == pytest.approx(expected_information(s.word, cands))


def test_rank_is_deterministic_and_order_independent():
    a = rank(WORDS, WORDS[:10])
    b = rank(list(reversed(WORDS)), set(WORDS[:10]))
    assert a == b


def test_rank_with_matrix_matches_without():
    m = PatternMatrix(WORDS, WORDS[:10], 5)
    assert rank(WORDS, WORDS[:10], matrix=m) == rank(WORDS, WORDS[:10])
    # a matrix that does not cover the pool is ignored
    small = PatternMatrix(WORDS[:3], WORDS[:10], 5)
    assert rank(WORDS, WORDS[:10], matrix=small) == rank(WORDS, WORDS[:10])


def test_workers_give_identical_output():
    seq = rank(WORDS, WORDS[:10], chunk_size=3)
    par = rank(WORDS, WORDS[:10], chunk_size=3, workers=4)
    assert par == seq


def test_top_n():
    full = rank(WORDS, WORDS[:10])
    assert rank(WORDS, WORDS[:10], top_n=3) == full[:3]
    assert rank(WORDS, WORDS[:10], top_n=0) == []


def test_empty_inputs():
    assert rank([], CANDS) == []
    assert rank(POOL, []) == []


def test_single_candidate_prefers_it():
    out = rank(POOL, ["slate"])
    assert all(s.expected_information_bits == 0.0 for s in out)
    assert out[0].word == "slate"


def test_cancel_raises():
    ev = threading.Event()
    ev.set()
    with pytest.raises(RankingCancelled):
        rank(WORDS, WORDS[:10], cancel=ev)
    with pytest.raises(RankingCancelled):
        rank(WORDS, WORDS[:10], cancel=ev, workers=2, chunk_size=2)


def test_weights():
    weights = {"crane": 1.0, "slate": 1.0, "trace": 2.0}
    out = rank(POOL, CANDS, weights=weights)
    assert out[0].expected_information_bits == pytest.approx(1.5)
    assert expected_information("crane", CANDS, weights) == pytest.approx(1.5)
    assert out[-1].word == "fuzzy"


def test_uncertainty_bits():
    assert uncertainty_bits(0) == 0.0
    assert uncertainty_bits(1) == 0.0
    assert uncertainty_bits(8) == 3.0


def test_rank_normalizes_words():
    out = rank(["CRANE", " slate "], ["Crane", "SLATE", "trace"])
    assert [s.word for s in out] == ["crane", "slate"]
    assert out[0].is_possible_solution is True
    assert out[0].expected_information_bits == pytest.approx(expected_information("CRANE", CANDS))


@pytest.mark.parametrize("pool,cands", [(["cranes"], ["crane", "slate"]), (["crane"], ["crane", "slates"])])
def test_rank_length_mismatch(pool, cands):
    with pytest.raises(LengthMismatch):
        rank(pool, cands)


def test_rank_rejects_non_letters():
    with pytest.raises(InvalidGuess):
        rank(["cr4ne"], CANDS)
