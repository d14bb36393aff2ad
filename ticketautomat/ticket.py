"""Tickets issued by the machine."""

from __future__ import annotations

import itertools
import sys
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

DEFAULT_TICKET_LOG = Path("Logs/verkaufte_Tickets.txt")

_ticket_numbers = itertools.count(1)


@dataclass
class Ticket:
    """A ticket with a running number, the machine's number and its issue time."""

    number: int = field(default_factory=lambda: next(_ticket_numbers))
    machine_number: int = 1
    issued: datetime = field(default_factory=datetime.now)

    def render(self, line: str, start: str, end: str, price: int) -> str:
        """Return the printed ticket."""
        t = self.issued
        stamp = f"{t.year}{t.month}{t.day}{t.hour}{t.minute}-{t.second}"
        return (
            "\n"
            "Entnehmen Sie ihr Ticket\n"
            "___________________________________________________\n"
            "| Ticket der LV\n"
            f"| Für: {line}\n"
            f"| Starthaltestelle: {start}\n"
            f"| Endhaltestelle: {end}\n"
            f"| Preis: {price}GE\n"
            "| \n"
            f"| {self.number}            {self.machine_number}           {stamp}\n"
            "---------------------------------------------------\n"
        )

    def save(
        self,
        line: str,
        start: str,
        end: str,
        price: int,
        path: str | Path = DEFAULT_TICKET_LOG,
    ) -> None:
        """Append the ticket as one record to the sales log.

        If the log cannot be opened the failure is reported on stderr and
        nothing is written.
        """
        t = self.issued
        stamp = f"{t.year}-{t.month}-{t.day}-{t.hour}-{t.minute}-{t.second}"
        record = f"{self.number}, {self.machine_number}, {stamp}, {line}, {start}, {end}, {price}\n"
        try:
            with open(path, "a", encoding="utf-8") as log:
                log.write(record)
        except OSError:
            print(f"Error (Ticket.save): could not open the log file {path}.", file=sys.stderr)