"""Mini README: Tests covering the in-memory ledger.

Structure:
    * identifier tests - per-kind counters start at 1, are independent and never reuse ids.
    * totals tests - sums, balance and the zero-income expense ratio.
    * removal tests - unknown ids leave the ledger unchanged.
"""

from __future__ import annotations

import pytest

from budgetboard.finance import Entry, EntryKind, Ledger


def test_ids_increase_per_kind_independently() -> None:
    """Income and expense identifiers form separate sequences starting at 1."""

    ledger = Ledger()
    first_income = ledger.add_income("Salary", 1000)
    first_expense = ledger.add_expense("Rent", 400)
    second_expense = ledger.add_expense("Food", 150)
    second_income = ledger.add_income("Bonus", 200)

    assert [first_income.entry_id, second_income.entry_id] == [1, 2]
    assert [first_expense.entry_id, second_expense.entry_id] == [1, 2]
    assert first_income.kind is EntryKind.INCOME
    assert first_expense.kind is EntryKind.EXPENSE


def test_totals_track_interleaved_additions() -> None:
    """Totals equal the sum of amounts added so far regardless of ordering."""

    ledger = Ledger()
    assert ledger.total_income() == 0
    assert ledger.total_expense() == 0

    ledger.add_income("Salary", 1000)
    assert ledger.total_income() == pytest.approx(1000)
    assert ledger.balance() == pytest.approx(1000)

    ledger.add_expense("Rent", 400)
    ledger.add_income("Freelance", 250.5)
    ledger.add_expense("Internet", 49.5)

    assert ledger.total_income() == pytest.approx(1250.5)
    assert ledger.total_expense() == pytest.approx(449.5)
    assert ledger.balance() == pytest.approx(801.0)


def test_expense_ratio_is_zero_without_income() -> None:
    """With no income the ratio is 0 rather than a division error."""

    ledger = Ledger()
    ledger.add_expense("Snack", 5)

    assert ledger.expense_ratio() == 0
    assert ledger.share_of_income(5) == 0


def test_expense_ratio_relative_to_income() -> None:
    ledger = Ledger()
    ledger.add_income("Salary", 1000)
    ledger.add_expense("Rent", 400)

    assert ledger.expense_ratio() == pytest.approx(0.4)
    assert ledger.share_of_income(400) == pytest.approx(0.4)


def test_remove_income_keeps_counter_moving_forward() -> None:
    """Removed ids are never handed out again."""

    ledger = Ledger()
    ledger.add_income("Salary", 1000)
    ledger.add_income("Bonus", 300)

    removed = ledger.remove_income(1)

    assert removed is not None and removed.description == "Salary"
    assert [entry.entry_id for entry in ledger.income_entries()] == [2]
    assert ledger.total_income() == pytest.approx(300)
    assert ledger.add_income("Gift", 50).entry_id == 3


def test_remove_unknown_id_is_a_no_op() -> None:
    ledger = Ledger()
    ledger.add_income("Salary", 1000)
    ledger.add_expense("Rent", 400)
    before = ledger.export_snapshot()

    assert ledger.remove_income(99) is None
    assert ledger.remove_expense(7) is None

    assert ledger.export_snapshot() == before
    assert ledger.total_income() == pytest.approx(1000)
    assert ledger.total_expense() == pytest.approx(400)


def test_remove_expense_only_touches_expenses() -> None:
    ledger = Ledger()
    ledger.add_income("Salary", 1000)
    ledger.add_expense("Rent", 400)

    ledger.remove_expense(1)

    assert ledger.expense_entries() == []
    assert len(ledger.income_entries()) == 1


def test_entry_fields_are_mutable_and_serialisable() -> None:
    entry = Entry(entry_id=4, kind=EntryKind.EXPENSE, description="Gym", amount=30.0)
    entry.description = "Gym membership"
    entry.amount = 35.0

    assert entry.as_dict() == {
        "entry_id": 4,
        "kind": "expense",
        "description": "Gym membership",
        "amount": 35.0,
    }


def test_entry_kind_from_str_accepts_casing_and_rejects_unknown() -> None:
    assert EntryKind.from_str("  Income ") is EntryKind.INCOME
    assert EntryKind.from_str("EXPENSE") is EntryKind.EXPENSE
    with pytest.raises(ValueError):
        EntryKind.from_str("transfer")


def test_entries_keep_insertion_order() -> None:
    ledger = Ledger()
    for description in ("Rent", "Food", "Bus"):
        ledger.add_expense(description, 10)

    assert [entry.description for entry in ledger.expense_entries()] == ["Rent", "Food", "Bus"]
