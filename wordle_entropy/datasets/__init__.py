from .validator import validate_wordlists, pretty_summary
from .io import read_lines, write_lines
from .loader import (
    DEFAULT_WORD_LENGTH, Dictionaries, load_dictionaries, load_dictionaries_from_files, parse_word_list,
)

__all__ = [
    "validate_wordlists", "pretty_summary", "read_lines", "write_lines",
    "DEFAULT_WORD_LENGTH", "Dictionaries", "load_dictionaries", "load_dictionaries_from_files",
    "parse_word_list",
]
