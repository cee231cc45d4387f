"""
wordle-entropy: information-theoretic Wordle solver.

    from wordle_entropy import load_dictionaries_from_files, Session

    dicts = load_dictionaries_from_files("data/guesses_5.txt", "data/solutions_5.txt")
    session = Session(dicts)
    session.suggest(5)
    session.record_guess("crane", "-Y--G")
"""

from .errors import (
    WordleError, LengthMismatch, InvalidGuess, InvalidFeedback, InvalidDictionaryEntry,
    InvalidState, NoCandidatesRemain, RankingCancelled,
)
from .engine import Mark, score, parse_pattern, narrow, filter_candidates, build_pattern_table, Constraints
from .ranking import RankedSuggestion, rank, expected_information
from .datasets import Dictionaries, load_dictionaries, load_dictionaries_from_files
from .session import Session, SessionState, SessionSnapshot, GuessRecord

__version__ = "0.2.0"

__all__ = [
    "WordleError", "LengthMismatch", "InvalidGuess", "InvalidFeedback", "InvalidDictionaryEntry",
    "InvalidState", "NoCandidatesRemain", "RankingCancelled",
    "Mark", "score", "parse_pattern", "narrow", "filter_candidates", "build_pattern_table", "Constraints",
    "RankedSuggestion", "rank", "expected_information",
    "Dictionaries", "load_dictionaries", "load_dictionaries_from_files",
    "Session", "SessionState", "SessionSnapshot", "GuessRecord",
]
