"""Console dialogue of the ticket machine: prompts, payment and change."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from enum import Enum
from pathlib import Path
from typing import TextIO

from .money import DENOMINATIONS, Banknote, CashBox
from .readers import DEFAULT_BANKNOTE_FILE, read_banknotes
from .ticket import DEFAULT_TICKET_LOG, Ticket

_NUMBER = re.compile(r"[+-]?\d+")
_COUNT = re.compile(r"\s*\+?(\d+)")

_INVALID_NOTE = "Ungültige Eingabe, Bitte nur 17, 11, 7, 5, 3, 2, 1 GE-Scheine eingeben"


class ChangeOutcome(Enum):
    """Result of trying to hand out change after an overpayment."""

    ABORT = 0
    DONE = 1
    RETRY = 2


def _parse_count(text: str) -> int:
    match = _COUNT.match(text)
    if match is None:
        raise ValueError(f"invalid banknote count: {text!r}")
    return int(match.group(1))


def init_cashbox(path: str | Path = DEFAULT_BANKNOTE_FILE) -> CashBox:
    """Build the cash box from the banknote file: pairs of name and count.

    Raises ValueError if the file holds no banknote or a count is not a number.
    """
    entries = read_banknotes(path)
    if not entries:
        raise ValueError(f"no banknotes found in {path}")
    return CashBox(
        Banknote(name, _parse_count(count)) for name, count in zip(entries[::2], entries[1::2])
    )


class Menu:
    """Prompts of the ticket machine, reading from and writing to the given streams."""

    def __init__(
        self,
        cashbox: CashBox,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
    ) -> None:
        self.cashbox = cashbox
        self.input = input_stream if input_stream is not None else sys.stdin
        self.output = output_stream if output_stream is not None else sys.stdout
        # Unread rest of the current input line; None once its newline is consumed.
        self._pending: str | None = None

    # -- input handling -------------------------------------------------

    def _write(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()

    def _next_line(self) -> str:
        line = self.input.readline()
        if line == "":
            raise EOFError("input ended")
        return line.rstrip("\r\n")

    def _skip_blank(self) -> str:
        while True:
            if self._pending is None:
                self._pending = self._next_line()
            stripped = self._pending.lstrip()
            if stripped:
                return stripped
            self._pending = None

    def _read_number(self) -> int | None:
        """Read a leading integer from the input; None if none is there."""
        text = self._skip_blank()
        match = _NUMBER.match(text)
        if match is None:
            self._pending = text
            return None
        self._pending = text[match.end():]
        return int(match.group())

    def _read_word(self) -> str:
        text = self._skip_blank()
        word = text.split(maxsplit=1)[0]
        self._pending = text[len(word):]
        return word

    def _discard_line(self) -> None:
        """Drop the rest of the current input line."""
        if self._pending is not None:
            self._pending = None
            return
        try:
            self._next_line()
        except EOFError:
            pass

    # -- menus ----------------------------------------------------------

    def show_start(self) -> None:
        """Print the start menu."""
        self._write(
            "\n"
            "---------- Willkommen ----------\n"
            "[1] Ticket kaufen\n"
            "[2] Beenden\n"
            "\n"
        )

    def start_query(self) -> int:
        """Ask until the user enters 1 (buy a ticket) or 2 (quit) and return it."""
        while True:
            self._write("Eingabe: ")
            choice = self._read_number()
            self._discard_line()
            if choice in (1, 2):
                return choice
            self._write("Bitte 1 für Ticketerwerb, 2 für Beenden eingeben\n")

    def end_menu(self) -> bool:
        """Ask whether to quit; True only if the user enters 1."""
        self._write(
            "\n"
            "---------- Beenden -------------\n"
            "Möchtest du das Programm wirklich beenden?\n"
            "[1] Ja\n"
            "[ ] Ansonsten Nein, zurück ins Startmenü\n"
            "\n"
            "Eingabe: "
        )
        if self._read_number() == 1:
            self._write("Beendet\n")
            return True
        self._discard_line()
        return False

    def tram_menu(self) -> str:
        """Ask for the number of a tram line and return it unchecked."""
        self._write(
            "\n"
            "----- Straßenbahnauswahl -------\n"
            "Gib die Nummer der gewünschten Straßenbahn ein (bspw. 11): "
        )
        line = self._read_word()
        self._discard_line()
        return line

    def enter_banknote(self) -> int | None:
        """Read one banknote.

        An accepted note is put into the cash box and its value returned.
        Invalid input is reported and yields 0; entering 0 cancels and
        yields None.
        """
        self._write("Eingabe: ")
        value = self._read_number()
        if value == 0:
            return None
        self._discard_line()
        if value in DENOMINATIONS:
            self.cashbox.deposit(value)
            return value
        self._write(_INVALID_NOTE + "\n")
        return 0

    def handle_change(self, price: int, paid: int) -> ChangeOutcome:
        """Hand out the change for an overpayment, largest notes first.

        If the exact change cannot be paid, the notes taken are put back and
        the user chooses to pay differently (RETRY) or to stop (ABORT).
        """
        change = paid - price
        handed: list[int] = []
        for value in DENOMINATIONS:
            while change >= value and self.cashbox.withdraw(value):
                handed.append(value)
                change -= value
        if change == 0:
            self.pay_out(handed, restock=False)
            return ChangeOutcome.DONE
        for value in handed:
            self.cashbox.deposit(value)
        self._write(
            "\n- Es ist nicht möglich das Rückgeld auszugeben -\n"
            "[1] Anders bezahlen\n"
            "[ ] ansonsten Kauf beenden\n"
            "\n"
            "Eingabe: "
        )
        if self._read_number() == 1:
            return ChangeOutcome.RETRY
        self._discard_line()
        return ChangeOutcome.ABORT

    def pay_out(self, notes: Iterable[int], restock: bool) -> None:
        """Print each non-zero note as change.

        With ``restock`` the notes are also withdrawn from the cash box, as
        when notes paid in are handed back; without it they were already
        taken out.
        """
        for value in notes:
            if value == 0:
                continue
            self._write(f"\nRückgeld: Schein{value}\n")
            if restock:
                self.cashbox.withdraw(value)
        self._write("\n")

    def issue_ticket(
        self,
        line: str,
        start: str,
        end: str,
        price: int,
        notes: Iterable[int],
        log_path: str | Path = DEFAULT_TICKET_LOG,
    ) -> Ticket | None:
        """Create, log and print a ticket and return it.

        If the ticket cannot be created the error is reported, the paid notes
        are handed back and None is returned.
        """
        try:
            ticket = Ticket()
            ticket.save(line, start, end, price, log_path)
            self._write(ticket.render(line, start, end, price))
        except (OSError, OverflowError, ValueError) as error:
            self._write("Fehler beim erstellen des Tickets\n")
            print(f"Fehler beim Erstellen des Tickets: {error}", file=sys.stderr)
            self.pay_out(notes, restock=True)
            return None
        return ticket