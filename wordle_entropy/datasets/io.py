from __future__ import annotations
import codecs
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

from wordle_entropy.errors import InvalidDictionaryEntry


def raw_lines(p: Path | str) -> Iterator[Tuple[int, bytes]]:
    """(lineno, bytes) for every line of the file, BOM dropped, CR/LF stripped."""
    data = Path(p).read_bytes()
    if data.startswith(codecs.BOM_UTF8):
        data = data[len(codecs.BOM_UTF8):]
    return enumerate(data.splitlines(), start=1)


def shown_line(raw: bytes) -> str:
    """Printable text of a line that may not be valid UTF-8."""
    return raw.decode("utf-8", errors="backslashreplace")


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 word list into a list of lines (CR/LF stripped, BOM dropped).

    Raises:
      FileNotFoundError if the path doesn't exist.
      InvalidDictionaryEntry for a line that is not valid UTF-8.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    lines: List[str] = []
    for lineno, raw in raw_lines(p):
        try:
            lines.append(raw.decode("utf-8"))
        except UnicodeDecodeError:
            raise InvalidDictionaryEntry(shown_line(raw), lineno=lineno, source=str(p),
                                         reason="not valid UTF-8") from None
    return lines


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write one word per line with a trailing newline, creating parent dirs.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
