from .scoring import Mark, score, parse_pattern, pattern_code, decode_pattern, is_solved_pattern, solved_pattern
from .constraints import Constraints, narrow, filter_candidates
from .validation import check_word, validate_guess
from .patterns import PatternMatrix, build_pattern_table, pattern_histogram

__all__ = [
    "Mark", "score", "parse_pattern", "pattern_code", "decode_pattern", "is_solved_pattern",
    "solved_pattern", "Constraints", "narrow", "filter_candidates", "check_word", "validate_guess",
    "PatternMatrix", "build_pattern_table", "pattern_histogram",
]
