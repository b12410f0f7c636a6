"""Mini README: In-memory ledger of income and expense entries.

Structure:
    * EntryKind - enum separating income from expense entries.
    * Entry - dataclass holding one movement (id, kind, description, amount).
    * Ledger - owns both insertion-ordered sequences, their id counters and
      the aggregate totals shown in the summary header.

The ledger performs no validation and never triggers rendering: callers (the
presenter) validate input before adding and decide what to redraw after a
mutation. Identifiers come from per-kind counters held on the ledger
instance, start at 1 and are never reused, even after removals.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class EntryKind(str, Enum):
    """Enumerate the two entry categories."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "EntryKind":
        """Coerce arbitrary casing into a valid entry kind."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported entry kind: {value}") from error


@dataclass(slots=True)
class Entry:
    """A single income or expense movement."""

    entry_id: int
    kind: EntryKind
    description: str
    amount: float

    def as_dict(self) -> Dict[str, object]:
        """Export the entry with serialisable values."""

        return {
            "entry_id": self.entry_id,
            "kind": self.kind.value,
            "description": self.description,
            "amount": self.amount,
        }


class Ledger:
    """Hold income and expense entries and compute running totals."""

    def __init__(self) -> None:
        self._income: List[Entry] = []
        self._expenses: List[Entry] = []
        self._income_sequence = 0
        self._expense_sequence = 0
        LOGGER.debug("Ledger initialised empty")

    def add_income(self, description: str, amount: float) -> Entry:
        """Append an income entry using the next income identifier."""

        self._income_sequence += 1
        entry = Entry(self._income_sequence, EntryKind.INCOME, description, amount)
        self._income.append(entry)
        LOGGER.info("Added income %s (%s, %.2f)", entry.entry_id, description, amount)
        return entry

    def add_expense(self, description: str, amount: float) -> Entry:
        """Append an expense entry using the next expense identifier."""

        self._expense_sequence += 1
        entry = Entry(self._expense_sequence, EntryKind.EXPENSE, description, amount)
        self._expenses.append(entry)
        LOGGER.info("Added expense %s (%s, %.2f)", entry.entry_id, description, amount)
        return entry

    def add(self, kind: EntryKind, description: str, amount: float) -> Entry:
        """Append an entry of ``kind``, dispatching to the matching sequence."""

        if kind is EntryKind.INCOME:
            return self.add_income(description, amount)
        return self.add_expense(description, amount)

    def remove_income(self, entry_id: int) -> Optional[Entry]:
        """Remove the first income with ``entry_id``; unknown ids are ignored."""

        return self._remove(self._income, entry_id)

    def remove_expense(self, entry_id: int) -> Optional[Entry]:
        """Remove the first expense with ``entry_id``; unknown ids are ignored."""

        return self._remove(self._expenses, entry_id)

    @staticmethod
    def _remove(entries: List[Entry], entry_id: int) -> Optional[Entry]:
        for index, entry in enumerate(entries):
            if entry.entry_id == entry_id:
                del entries[index]
                LOGGER.info("Removed %s %s", entry.kind.value, entry_id)
                return entry
        LOGGER.debug("No entry with id %s to remove; ignoring", entry_id)
        return None

    def income_entries(self) -> List[Entry]:
        """Return income entries in insertion order."""

        return list(self._income)

    def expense_entries(self) -> List[Entry]:
        """Return expense entries in insertion order."""

        return list(self._expenses)

    def total_income(self) -> float:
        """Sum of all income amounts."""

        return sum(entry.amount for entry in self._income)

    def total_expense(self) -> float:
        """Sum of all expense amounts."""

        return sum(entry.amount for entry in self._expenses)

    def balance(self) -> float:
        """Available budget: income minus expenses."""

        return self.total_income() - self.total_expense()

    def expense_ratio(self) -> float:
        """Share of income spent, or 0 when there is no income yet."""

        return self.share_of_income(self.total_expense())

    def share_of_income(self, amount: float) -> float:
        """Return ``amount`` relative to total income, 0 when income is 0."""

        income = self.total_income()
        if income > 0:
            return amount / income
        return 0

    def export_snapshot(self) -> Dict[str, List[Dict[str, object]]]:
        """Export entries grouped by kind for JSON responses."""

        return {
            "income": [entry.as_dict() for entry in self._income],
            "expenses": [entry.as_dict() for entry in self._expenses],
        }
