"""Redirecting error output into a log file."""

from __future__ import annotations

import sys
from pathlib import Path
from types import TracebackType
from typing import TextIO


class ErrorLog:
    """Context manager that appends everything written to stderr to a file.

    On exit the file is closed and the previous stderr is restored.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._file: TextIO | None = None
        self._previous: TextIO | None = None

    def __enter__(self) -> ErrorLog:
        self._file = open(self.path, "a", encoding="utf-8")
        self._previous = sys.stderr
        sys.stderr = self._file
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if self._previous is not None:
            sys.stderr = self._previous
            self._previous = None
        if self._file is not None:
            self._file.close()
            self._file = None
        return False