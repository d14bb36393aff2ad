"""Banknotes held by the machine and the cash box that manages them."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

DENOMINATIONS: tuple[int, ...] = (17, 11, 7, 5, 3, 2, 1)
"""Accepted note values, largest first; their order is the cash box order."""

_INDEX = {value: index for index, value in enumerate(DENOMINATIONS)}


@dataclass
class Banknote:
    """One kind of banknote and how many of it the machine holds."""

    name: str
    count: int = 0

    def increment(self) -> None:
        """Add one note."""
        self.count += 1

    def decrement(self) -> bool:
        """Remove one note; return False if there was none left."""
        if self.count > 0:
            self.count -= 1
            return True
        return False

    def __str__(self) -> str:
        return f"{self.name} {self.count}"


def denomination_index(value: int) -> int:
    """Return the cash box position of the note worth ``value``.

    Raises ValueError for a value the machine does not know.
    """
    try:
        return _INDEX[value]
    except KeyError:
        raise ValueError(f"denomination not found: {value}") from None


class CashBox:
    """The notes in the machine, ordered as in DENOMINATIONS."""

    def __init__(self, notes: Iterable[Banknote] = ()) -> None:
        self._notes = list(notes)

    def add(self, note: Banknote) -> None:
        """Append a kind of note to the box."""
        self._notes.append(note)

    def _note_for(self, value: int) -> Banknote | None:
        try:
            return self._notes[denomination_index(value)]
        except (ValueError, IndexError) as error:
            print(f"Error: {error}", file=sys.stderr)
            return None

    def deposit(self, value: int) -> None:
        """Put one note worth ``value`` into the box.

        An unknown or unstocked denomination is reported on stderr and ignored.
        """
        note = self._note_for(value)
        if note is not None:
            note.increment()

    def withdraw(self, value: int) -> bool:
        """Take one note worth ``value`` out of the box.

        Returns False if none is left or the denomination is unknown; the
        latter is also reported on stderr.
        """
        note = self._note_for(value)
        return note is not None and note.decrement()

    def lines(self) -> list[str]:
        """One ``name count`` line per kind of note."""
        return [str(note) for note in self._notes]

    def __iter__(self) -> Iterator[Banknote]:
        return iter(self._notes)

    def __len__(self) -> int:
        return len(self._notes)