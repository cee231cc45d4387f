from wordle_entropy.session import Session
from wordle_entropy.solvers import create_solver


def test_entropy_prefers_splitting_candidate(tiny_dicts):
    solver = create_solver("entropy")
    assert solver.next_guess(Session(tiny_dicts)) == "crane"


def test_entropy_plays_last_candidate(tiny_dicts):
    s = Session(tiny_dicts)
    s.record_guess("crane", "--G-G")
    assert create_solver("entropy").next_guess(s) == "slate"


def test_random_consistent_picks_candidate(small_dicts):
    solver = create_solver("random_consistent", seed=3)
    s = Session(small_dicts)
    for _ in range(5):
        assert solver.next_guess(s) in s.candidates
