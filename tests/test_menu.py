import io

import pytest

from ticketautomat.menu import ChangeOutcome, Menu, init_cashbox
from ticketautomat.money import DENOMINATIONS, Banknote, CashBox


def make_box(**counts):
    return CashBox(Banknote(f"schein{v}", counts.get(f"n{v}", 0)) for v in DENOMINATIONS)


def count_of(box, value):
    return next(note.count for note in box if note.name == f"schein{value}")


def make_menu(text, box=None):
    out = io.StringIO()
    menu = Menu(box if box is not None else make_box(), io.StringIO(text), out)
    return menu, out


def test_init_cashbox_reads_pairs(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("schein17, 2,\nschein11, 3,\n", encoding="utf-8")
    box = init_cashbox(path)
    assert box.lines() == ["schein17 2", "schein11 3"]


def test_init_cashbox_empty_file_raises(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        init_cashbox(path)


def test_init_cashbox_bad_count_raises(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("schein17, many,", encoding="utf-8")
    with pytest.raises(ValueError):
        init_cashbox(path)


def test_show_start():
    menu, out = make_menu("")
    menu.show_start()
    assert "[1] Ticket kaufen" in out.getvalue()
    assert "[2] Beenden" in out.getvalue()


def test_start_query_retries_until_valid():
    menu, out = make_menu("3\nabc\n0\n2\n")
    assert menu.start_query() == 2
    assert out.getvalue().count("Bitte 1 für Ticketerwerb, 2 für Beenden eingeben") == 3


@pytest.mark.parametrize("text, expected", [("1\n", 1), ("2\n", 2), ("1bajaf\n", 1), ("2njda\n", 2)])
def test_start_query_accepts_leading_number(text, expected):
    menu, _ = make_menu(text)
    assert menu.start_query() == expected


def test_start_query_rejects_trailing_number():
    menu, out = make_menu("cavh1\n1\n")
    assert menu.start_query() == 1
    assert out.getvalue().count("Bitte 1") == 1


def test_start_query_end_of_input():
    menu, _ = make_menu("a\n")
    with pytest.raises(EOFError):
        menu.start_query()


def test_end_menu_yes():
    menu, out = make_menu("1\n")
    assert menu.end_menu() is True
    assert "Beendet" in out.getvalue()


@pytest.mark.parametrize("text", ["5\n", "x\n", "0\n"])
def test_end_menu_no(text):
    menu, out = make_menu(text)
    assert menu.end_menu() is False
    assert "Beendet" not in out.getvalue()


def test_tram_menu_reads_words_line_by_line():
    menu, _ = make_menu("11 extra\n4\n")
    assert menu.tram_menu() == "11"
    assert menu.tram_menu() == "4"


def test_enter_banknote_accepts_and_deposits():
    box = make_box()
    menu, _ = make_menu("17\n", box)
    assert menu.enter_banknote() == 17
    assert count_of(box, 17) == 1


def test_enter_banknote_cancel():
    box = make_box()
    menu, _ = make_menu("0\n", box)
    assert menu.enter_banknote() is None
    assert all(note.count == 0 for note in box)


@pytest.mark.parametrize("text", ["9\n", "abc\n"])
def test_enter_banknote_invalid(text):
    box = make_box()
    menu, out = make_menu(text, box)
    assert menu.enter_banknote() == 0
    assert "Ungültige Eingabe" in out.getvalue()
    assert all(note.count == 0 for note in box)


def test_enter_banknote_number_followed_by_letters():
    menu, _ = make_menu("5abc\n3\n")
    assert menu.enter_banknote() == 5
    assert menu.enter_banknote() == 3


def test_handle_change_paid_out():
    box = make_box(n1=1)
    menu, out = make_menu("", box)
    assert menu.handle_change(21, 22) is ChangeOutcome.DONE
    assert count_of(box, 1) == 0
    assert "Rückgeld: Schein1" in out.getvalue()


def test_handle_change_impossible_retry_keeps_box():
    box = make_box(n1=1)
    menu, out = make_menu("1\n", box)
    assert menu.handle_change(21, 24) is ChangeOutcome.RETRY
    assert count_of(box, 1) == 1
    assert "nicht möglich das Rückgeld" in out.getvalue()


def test_handle_change_impossible_abort():
    box = make_box(n1=1)
    menu, _ = make_menu("2\n", box)
    assert menu.handle_change(21, 24) is ChangeOutcome.ABORT
    assert count_of(box, 1) == 1


def test_handle_change_uses_largest_notes():
    box = make_box(n5=1, n2=2, n1=3)
    menu, out = make_menu("", box)
    assert menu.handle_change(10, 17) is ChangeOutcome.DONE
    assert count_of(box, 5) == 0
    assert count_of(box, 2) == 1
    assert count_of(box, 1) == 3


def test_pay_out_without_restock_keeps_counts():
    box = make_box(n5=2)
    menu, out = make_menu("", box)
    menu.pay_out([5, 0, 5], restock=False)
    assert count_of(box, 5) == 2
    assert out.getvalue().count("Rückgeld: Schein5") == 2
    assert "Schein0" not in out.getvalue()


def test_pay_out_with_restock_withdraws():
    box = make_box(n5=2, n11=1)
    menu, _ = make_menu("", box)
    menu.pay_out([11, 5], restock=True)
    assert count_of(box, 5) == 1
    assert count_of(box, 11) == 0


def test_issue_ticket_logs_and_prints(tmp_path):
    log = tmp_path / "tickets.txt"
    menu, out = make_menu("")
    ticket = menu.issue_ticket("11", "Leinestraße", "HTWK", 21, [17, 5], log)
    assert "| Für: 11" in out.getvalue()
    assert "| Starthaltestelle: Leinestraße" in out.getvalue()
    record = log.read_text(encoding="utf-8").strip()
    assert record.startswith(f"{ticket.number}, {ticket.machine_number}, ")
    assert record.endswith("11, Leinestraße, HTWK, 21")


def test_issue_ticket_numbers_increase(tmp_path):
    log = tmp_path / "tickets.txt"
    menu, _ = make_menu("")
    first = menu.issue_ticket("4", "A", "B", 3, [3], log)
    second = menu.issue_ticket("4", "B", "A", 3, [3], log)
    assert second.number == first.number + 1
    assert len(log.read_text(encoding="utf-8").splitlines()) == 2