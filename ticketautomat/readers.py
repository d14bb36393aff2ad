"""Reading the machine's initialisation files and the tram line files."""

from __future__ import annotations

import sys
from pathlib import Path

DEFAULT_BANKNOTE_FILE = Path("Init_Geldscheine.txt")
DEFAULT_LINE_DIRECTORY = Path("Linien")


def _line_path(number: str, directory: str | Path) -> Path:
    return Path(directory) / f"Linie{number}.txt"


def _read_text(path: Path, caller: str) -> str | None:
    """Return the file's text, or None after reporting on stderr if it cannot be read."""
    try:
        return path.read_text(encoding="utf-8")
    except OSError:
        print(f"Error ({caller}): could not open {path}.", file=sys.stderr)
        return None


def read_banknotes(path: str | Path = DEFAULT_BANKNOTE_FILE) -> list[str]:
    """Read the comma separated banknote file.

    Consecutive entries belong together: a denomination name followed by its
    count, written as ``name, count,``.  Empty entries are skipped and
    surrounding whitespace is removed.  A file that cannot be opened yields an
    empty list.
    """
    text = _read_text(Path(path), "read_banknotes")
    if text is None:
        return []
    return [piece.strip() for piece in text.split(",") if piece.strip()]


def read_line_info(number: str, directory: str | Path = DEFAULT_LINE_DIRECTORY) -> list[str]:
    """Return the first two lines of the file of tram line ``number``.

    The first line is the line's name, the second the price per stop.  Missing
    lines come back as empty strings; an unreadable file yields an empty list.
    """
    text = _read_text(_line_path(number, directory), "read_line_info")
    if text is None:
        return []
    return (text.splitlines() + ["", ""])[:2]


def read_stops(number: str, directory: str | Path = DEFAULT_LINE_DIRECTORY) -> list[str]:
    """Return the stops of tram line ``number``: every non-empty line after the second."""
    text = _read_text(_line_path(number, directory), "read_stops")
    if text is None:
        return []
    return [line for line in text.splitlines()[2:] if line]