"""Mini README: Presenter bridging user actions, the ledger and the page.

Structure:
    * ValidationError - raised when a submitted entry is rejected.
    * SummaryView / IncomeView / ExpenseView - formatted display records.
    * DisplaySurface - protocol for whatever renders the records.
    * Presenter - validates submissions, mutates the ledger and decides which
      regions of the display surface to refresh.

The presenter is the only place that knows which regions depend on which
ledger figures: every expense row shows its share of total income, so any
change to income also redraws the expense list.
"""

from __future__ import annotations

import math
import re
from dataclasses import asdict, dataclass
from typing import Dict, List, Protocol, Union

from ..finance import Entry, EntryKind, Ledger, format_currency, format_percentage, signed_currency
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

DESCRIPTION_REQUIRED = "Escribe una descripción."
AMOUNT_REQUIRED = "Ingresa un valor numérico mayor a 0."
AMOUNT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class ValidationError(ValueError):
    """Raised when a submitted entry fails validation; nothing is recorded."""


@dataclass(frozen=True, slots=True)
class SummaryView:
    """Formatted values for the summary header."""

    balance: str
    total_income: str
    total_expense: str
    expense_ratio: str

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class IncomeView:
    entry_id: int
    description: str
    formatted_amount: str

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class ExpenseView:
    entry_id: int
    description: str
    formatted_amount: str
    formatted_percentage: str

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)


class DisplaySurface(Protocol):
    """Rendering target the presenter pushes formatted records into."""

    def show_summary(self, summary: SummaryView) -> None:
        ...

    def show_income_list(self, rows: List[IncomeView]) -> None:
        ...

    def show_expense_list(self, rows: List[ExpenseView]) -> None:
        ...

    def show_notice(self, message: str) -> None:
        """Present a blocking notice to the user."""

    def reset_form(self) -> None:
        """Clear the entry inputs and focus the description field."""


def _parse_amount(raw: Union[str, float, int]) -> float:
    """Parse the raw amount input, rejecting anything but a finite number > 0."""

    if isinstance(raw, bool):
        raise ValidationError(AMOUNT_REQUIRED)
    if isinstance(raw, str):
        raw = raw.strip()
        # Plain ASCII decimal notation only.
        if not AMOUNT_PATTERN.fullmatch(raw):
            raise ValidationError(AMOUNT_REQUIRED)
    try:
        amount = float(raw)
    except (TypeError, ValueError) as error:
        raise ValidationError(AMOUNT_REQUIRED) from error
    if not math.isfinite(amount) or amount <= 0:
        raise ValidationError(AMOUNT_REQUIRED)
    return amount


class Presenter:
    """Translate user actions into ledger operations and ledger state into views."""

    def __init__(self, ledger: Ledger, surface: DisplaySurface) -> None:
        self.ledger = ledger
        self.surface = surface

    def bootstrap(self) -> None:
        """Render every region once, producing the all-zero initial page."""

        self.render_summary()
        self.render_income_list()
        self.render_expense_list()
        LOGGER.debug("Initial render complete")

    def submit_entry(
        self,
        kind: Union[str, EntryKind],
        description: str,
        amount: Union[str, float, int],
    ) -> Entry:
        """Validate and record a new entry, then refresh the affected regions.

        Raises:
            ValidationError: when the kind is unknown, the description is
                blank or the amount is not a positive number. The ledger and
                the form inputs are left untouched.
        """

        try:
            entry_kind = kind if isinstance(kind, EntryKind) else EntryKind.from_str(kind)
        except ValueError as error:
            raise ValidationError(str(error)) from error
        cleaned = (description or "").strip()
        if not cleaned:
            raise ValidationError(DESCRIPTION_REQUIRED)
        value = _parse_amount(amount)

        entry = self.ledger.add(entry_kind, cleaned, value)
        if entry_kind is EntryKind.INCOME:
            self.render_income_list()
            # Expense percentages are relative to total income.
            self.render_expense_list()
        else:
            self.render_expense_list()
        self.render_summary()
        self.surface.reset_form()
        return entry

    def report_error(self, error: ValidationError) -> None:
        """Show a rejected submission to the user as a blocking notice."""

        LOGGER.info("Rejected entry: %s", error)
        self.surface.show_notice(str(error))

    def delete_income(self, entry_id: int) -> None:
        """Remove an income and refresh the summary and both lists."""

        self.ledger.remove_income(entry_id)
        self.render_summary()
        self.render_income_list()
        self.render_expense_list()

    def delete_expense(self, entry_id: int) -> None:
        """Remove an expense and refresh the summary and the expense list."""

        self.ledger.remove_expense(entry_id)
        self.render_summary()
        self.render_expense_list()

    def render_summary(self) -> SummaryView:
        """Push balance, totals and the expense ratio to the surface."""

        summary = SummaryView(
            balance=format_currency(self.ledger.balance()),
            total_income=format_currency(self.ledger.total_income()),
            total_expense=format_currency(self.ledger.total_expense()),
            expense_ratio=format_percentage(self.ledger.expense_ratio()),
        )
        self.surface.show_summary(summary)
        return summary

    def render_income_list(self) -> List[IncomeView]:
        rows = [
            IncomeView(
                entry_id=entry.entry_id,
                description=entry.description,
                formatted_amount=signed_currency(entry.amount, "+"),
            )
            for entry in self.ledger.income_entries()
        ]
        self.surface.show_income_list(rows)
        return rows

    def render_expense_list(self) -> List[ExpenseView]:
        rows = [
            ExpenseView(
                entry_id=entry.entry_id,
                description=entry.description,
                formatted_amount=signed_currency(entry.amount, "-"),
                formatted_percentage=format_percentage(
                    self.ledger.share_of_income(entry.amount)
                ),
            )
            for entry in self.ledger.expense_entries()
        ]
        self.surface.show_expense_list(rows)
        return rows
