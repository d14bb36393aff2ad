# ticketautomat

Building blocks of a tram ticket vending machine for the console: a cash
box of banknotes, prompts for paying note by note, change handling from
what is in the box, printed tickets and a log of sold tickets. The prompts
and messages shown to the customer are in German.

## Money (`ticketautomat.money`)

The machine knows seven denominations, `DENOMINATIONS = (17, 11, 7, 5, 3, 2, 1)`.
`denomination_index(value)` gives a denomination's slot in the cash box and
raises `ValueError` for any other value.

A `Banknote` is a dataclass with a `name` and a `count`; `increment()` adds
one note, `decrement()` removes one and returns `False` if none was left.
`str(note)` is `"name count"`.

A `CashBox` holds one `Banknote` per denomination, in the order above.
`deposit(value)` adds one note of that value, `withdraw(value)` takes one
out and returns whether it could. An unknown denomination, or one whose
slot the box does not have, is reported on stderr and ignored (`withdraw`
then returns `False`). `lines()` returns one `"name count"` line per kind
of note; the box can also be iterated and has a length.

## Reading files (`ticketautomat.readers`)

- `read_banknotes(path="Init_Geldscheine.txt")` reads a comma separated
  file of name/count pairs, such as
  `schein17,2,schein11,2,schein7,2,schein5,2,schein3,2,schein2,2,schein1,2,`,
  and returns the non-empty entries with whitespace stripped.
- `read_line_info(number, directory="Linien")` returns the first two lines
  of `<directory>/Linie<number>.txt`: the line's name and its price per stop.
- `read_stops(number, directory="Linien")` returns every non-empty line of
  that file after the second: the stops, in order.

A file that cannot be opened is reported on stderr and gives an empty list.

`ticketautomat.menu.init_cashbox(path="Init_Geldscheine.txt")` builds a
`CashBox` from the banknote file. It raises `ValueError` if the file holds
no entries or a count is not a number.

```python
from ticketautomat.menu import init_cashbox

cashbox = init_cashbox("Init_Geldscheine.txt")
for line in cashbox.lines():
    print(line)
```

## The menu (`ticketautomat.menu`)

`Menu(cashbox, input_stream=None, output_stream=None)` reads answers from
any text stream and writes prompts to any text stream; by default stdin and
stdout. Reading past the end of the input raises `EOFError`.

- `show_start()` prints the start menu.
- `start_query()` asks until the answer is 1 (buy a ticket) or 2 (quit) and
  returns it.
- `end_menu()` asks whether to quit and returns `True` only for 1.
- `tram_menu()` asks for a tram line number and returns it as text,
  unchecked.
- `enter_banknote()` reads one note. An accepted denomination is deposited
  in the cash box and its value returned; 0 cancels and returns `None`; any
  other input is reported and returns 0.
- `handle_change(price, paid)` pays out the change greedily from the
  largest note down. If the exact change is in the box the notes are printed
  and `ChangeOutcome.DONE` is returned. Otherwise the notes taken are put
  back and the customer chooses between `ChangeOutcome.RETRY` (answer 1,
  pay differently) and `ChangeOutcome.ABORT`.
- `pay_out(notes, restock)` prints each non-zero note as change; with
  `restock=True` each one is also withdrawn from the cash box, as when the
  notes paid in are handed back.
- `issue_ticket(line, start, end, price, notes, log_path="Logs/verkaufte_Tickets.txt")`
  creates a `Ticket`, appends it to the log, prints it and returns it. If
  that fails, the error is reported, `notes` are handed back and `None` is
  returned.

A payment of 21 GE with a 17 and a 5:

```python
import io

from ticketautomat.menu import ChangeOutcome, Menu
from ticketautomat.money import DENOMINATIONS, Banknote, CashBox

cashbox = CashBox(Banknote(f"schein{value}", 2) for value in DENOMINATIONS)
out = io.StringIO()
menu = Menu(cashbox, io.StringIO("17\n5\n"), out)

price, paid, notes = 21, 0, []
while paid < price:
    value = menu.enter_banknote()
    if value is None:
        menu.pay_out(notes, restock=True)
        break
    paid += value
    notes.append(value)

if paid > price and menu.handle_change(price, paid) is ChangeOutcome.DONE:
    print(out.getvalue())   # ends with "Rückgeld: Schein1"
```

## Tickets and logs

`ticketautomat.ticket.Ticket` carries a running ticket number (counting
from 1 within the process), the machine number (1) and the time of issue.
`render(line, start, end, price)` returns the printed ticket;
`save(line, start, end, price, path="Logs/verkaufte_Tickets.txt")` appends
one comma separated record to the log, or reports on stderr if the file
cannot be opened.

`ticketautomat.errorlog.ErrorLog(path)` is a context manager that appends
everything written to stderr to a file while it is open, then restores
stderr:

```python
from ticketautomat.errorlog import ErrorLog

with ErrorLog("Logs/fehler_log.txt"):
    ...
```

## What the package does not do

There is no command and no ready-made main loop. The package does not
choose a tram line and hold it, show a timetable, ask for and check start
and end stops, or work out a fare from the number of stops; a caller
combines `read_line_info`, `read_stops` and the `Menu` prompts to build
that dialogue.