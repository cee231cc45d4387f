import itertools
from collections import Counter

import pytest

from wordle_entropy.engine import (
    Constraints, Mark, decode_pattern, filter_candidates, narrow, parse_pattern, pattern_code, score,
    validate_guess,
)
from wordle_entropy.engine.validation import check_word
from wordle_entropy.errors import InvalidFeedback, InvalidGuess, LengthMismatch

WORDS = [
    "crane", "slate", "trace", "belle", "level", "lemon", "cools", "scoop", "sassy", "sissy",
    "allee", "label", "speed", "abide", "eerie", "geese", "llama", "mamma", "apron", "roman",
]


# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle", "level", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("lemon", "level", "GG---"),
    ("cools", "scoop", "YYG-Y"),
    ("raise", "crane", "YY--G"),
    ("stare", "crane", "--GYG"),
    ("sassy", "sissy", "G-GGG"),
    ("allee", "label", "YYYG-"),
    ("speed", "abide", "--Y-Y"),
    ("zitis", "zizel", "GG---"),
    ("tares", "scare", "-YYYY"),
    ("spare", "scare", "G-GGG"),
    ("tales", "apron", "-Y---"),
    ("drain", "apron", "-YY-G"),
    ("roman", "apron", "YY-YG"),
    ("lanes", "legal", "GY-Y-"),
    ("leary", "legal", "GGY--"),
    ("lemma", "legal", "GG--Y"),
    ("arles", "ledge", "--YY-"),
    ("elite", "ledge", "YY--G"),
])
def test_score_n5_golden(guess, answer, expected):
    assert score(guess, answer) == expected


# --- N=6 sample tests ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("settle", "letter", "-GGGYY"),
    ("little", "letter", "G-GG-Y"),
    ("planet", "palate", "GYY-YY"),
    ("kitten", "tinket", "YGYYGY"),
])
def test_score_n6_samples(guess, answer, expected):
    assert score(guess, answer) == expected


def test_score_normalizes_case():
    assert score(" CRANE ", "crane") == "GGGGG"


def test_score_length_mismatch():
    with pytest.raises(LengthMismatch):
        score("cranes", "crane")


@pytest.mark.parametrize("g,s", list(itertools.product(WORDS, WORDS)))
def test_score_letter_accounting(g, s):
    patt = score(g, s)
    assert patt.count("G") == sum(a == b for a, b in zip(g, s))
    marked = Counter(ch for ch, m in zip(g, patt) if m != "-")
    for ch, k in marked.items():
        assert k <= s.count(ch)


@pytest.mark.parametrize("w", WORDS)
def test_score_self_is_all_green(w):
    assert score(w, w) == "GGGGG"


# --- feedback parsing ---
@pytest.mark.parametrize("raw", [
    "GY-.G", "gyxbg", "21002",
    [Mark.CORRECT, Mark.MISPLACED, Mark.EXCLUDED, Mark.EXCLUDED, Mark.CORRECT],
    [2, 1, 0, 0, 2],
])
def test_parse_pattern_aliases(raw):
    assert parse_pattern(raw, 5) == "GY--G"


def test_parse_pattern_errors():
    with pytest.raises(LengthMismatch):
        parse_pattern("GYG", 5)
    with pytest.raises(InvalidFeedback):
        parse_pattern("GYZ--", 5)
    with pytest.raises(InvalidFeedback):
        parse_pattern([2, 1, 0, 0, 3], 5)


def test_pattern_codes_are_unique_and_reversible():
    patterns = {decode_pattern(code, 5) for code in range(3 ** 5)}
    assert len(patterns) == 243
    assert all(decode_pattern(pattern_code(p), 5) == p for p in patterns)
    assert pattern_code("-----") == 0
    assert pattern_code("GGGGG") == 242
    assert pattern_code("Y----") == 1


# --- filtering ---
def test_narrow_keeps_exact_matches_only():
    cands = {"crane", "raise", "stare", "trace", "cared", "racer", "scoop"}
    before = set(cands)
    out = narrow(cands, "raise", "YY--G")
    assert cands == before
    assert out <= cands
    assert out == {w for w in cands if score("raise", w) == "YY--G"}
    assert "crane" in out and "stare" not in out and "scoop" not in out


def test_narrow_inconsistent_pattern_is_empty():
    assert narrow({"crane", "slate", "trace"}, "crane", "-----") == set()


@pytest.mark.parametrize("g", ["allee", "speed", "sassy", "crane"])
def test_narrow_every_bucket_reproduces_pattern(g):
    for s in WORDS:
        patt = score(g, s)
        out = narrow(WORDS, g, patt)
        assert s in out
        assert all(score(g, w) == patt for w in out)


def test_filter_candidates_n5_history():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
    history = [("raise", "YY--G")]
    cand = filter_candidates(words, history, N=5)
    assert "crane" in cand and "stare" not in cand and "scoop" not in cand


def test_filter_candidates_n6_basic():
    words = ["letter", "settle", "little", "tattle", "better"]
    history = [("settle", "-GGGYY")]
    cand = filter_candidates(words, history, N=6)
    assert "letter" in cand and "better" not in cand


# --- constraints view ---
@pytest.mark.parametrize("g,s", [("allee", "label"), ("speed", "abide"), ("sassy", "sissy"),
                                 ("belle", "level"), ("eerie", "geese")])
def test_constraints_agree_with_narrow(g, s):
    history = [(g, score(g, s))]
    c = Constraints.from_history(history, 5)
    assert {w for w in WORDS if c.allows(w)} == set(filter_candidates(WORDS, history, 5))


def test_constraints_duplicate_letters():
    # one 'l' is yellow and the other gray: exactly one 'l' in the answer
    c = Constraints.from_history([("hello", "-Y-Y-")], 5)
    assert c.min_count["l"] == 1 and c.max_count["l"] == 1
    assert "h" in c.excluded_letters and "l" not in c.excluded_letters
    assert c.describe().startswith("_ _ _ _ _")


# --- validation ---
def test_validate_guess_n5():
    allowed = ["crane", "raise", "stare"]
    assert validate_guess("CRANE", allowed, N=5) is True
    assert validate_guess("cranes", allowed, N=5) is False
    assert validate_guess("???", allowed, N=5) is False


def test_check_word_errors():
    assert check_word(" Crane ", 5) == "crane"
    with pytest.raises(LengthMismatch):
        check_word("cranes", 5)
    with pytest.raises(InvalidGuess):
        check_word("cr4ne", 5)
