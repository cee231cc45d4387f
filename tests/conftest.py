import pytest

from wordle_entropy.datasets import load_dictionaries


@pytest.fixture
def tiny_dicts():
    """Three answers, each of which splits the others apart, plus two non-answer probes."""
    return load_dictionaries(["crane", "slate", "trace", "crate", "fuzzy"], ["crane", "slate", "trace"])


@pytest.fixture
def small_dicts():
    answers = ["crane", "raise", "stare", "trace", "cared", "adieu", "alone"]
    allowed = answers + ["slate", "salet", "roate"]
    return load_dictionaries(allowed, answers)
