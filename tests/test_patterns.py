import itertools

import numpy as np
import pytest

from wordle_entropy.engine import PatternMatrix, build_pattern_table, pattern_histogram, score
from wordle_entropy.engine.patterns import code_dtype, encode_words, score_matrix, score_matrix_chunked
from wordle_entropy.engine.scoring import decode_pattern

WORDS = ["crane", "slate", "trace", "belle", "level", "lemon", "cools", "scoop",
         "sassy", "sissy", "allee", "label", "speed", "abide", "eerie", "geese"]


def test_score_matrix_agrees_with_score():
    codes = score_matrix(encode_words(WORDS, 5), encode_words(WORDS, 5))
    assert codes.shape == (len(WORDS), len(WORDS))
    for (i, g), (j, s) in itertools.product(enumerate(WORDS), enumerate(WORDS)):
        assert decode_pattern(int(codes[i, j]), 5) == score(g, s)


def test_score_matrix_n6():
    guesses = ["settle", "little", "planet", "kitten"]
    answers = ["letter", "letter", "palate", "tinket"]
    codes = score_matrix(encode_words(guesses, 6), encode_words(answers, 6))
    for i, (g, s) in enumerate(zip(guesses, answers)):
        assert decode_pattern(int(codes[i, i]), 6) == score(g, s)


def test_chunked_matches_unchunked():
    g = encode_words(WORDS, 5)
    assert np.array_equal(score_matrix_chunked(g, g, 3), score_matrix(g, g))


def test_code_dtype_fits_all_codes():
    assert code_dtype(5) == np.uint8
    assert code_dtype(6) == np.uint16


def test_encode_words_empty():
    assert encode_words([], 5).shape == (0, 5)


def test_pattern_matrix_submatrix():
    m = PatternMatrix(WORDS, WORDS[:6], 5)
    assert m.shape == (len(WORDS), 6)
    assert m.covers(["speed"], ["crane"])
    assert not m.covers(["speed"], ["speed"])
    sub = m.submatrix(["speed", "crane"], ["level", "crane"])
    assert decode_pattern(int(sub[0, 0]), 5) == score("speed", "level")
    assert decode_pattern(int(sub[1, 1]), 5) == "GGGGG"
    with pytest.raises(ValueError):
        m.codes[0, 0] = 1


def test_build_pattern_table_partitions_candidates():
    cands = {"crane", "slate", "trace", "crate"}
    before = set(cands)
    table = build_pattern_table("crane", cands)
    assert cands == before
    assert set().union(*table.values()) == cands
    assert sum(len(ws) for ws in table.values()) == len(cands)
    for patt, ws in table.items():
        assert all(score("crane", w) == patt for w in ws)
    assert pattern_histogram("crane", cands) == {p: len(ws) for p, ws in table.items()}
