"""Mini README: In-memory display surface backing the HTML page.

``PageSurface`` keeps the latest records the presenter pushed for each named
region (summary header, income list, expense list), a pending notice and the
state of the entry form. The web layer hands ``context()`` to the template on
every page render.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .presenter import ExpenseView, IncomeView, SummaryView


class PageSurface:
    """Display surface that remembers region contents for template rendering."""

    def __init__(self) -> None:
        self.summary: Optional[SummaryView] = None
        self.income_rows: List[IncomeView] = []
        self.expense_rows: List[ExpenseView] = []
        self.notice: Optional[str] = None
        self.form_values: Dict[str, str] = {}
        self.focus_field: Optional[str] = None

    def show_summary(self, summary: SummaryView) -> None:
        self.summary = summary

    def show_income_list(self, rows: List[IncomeView]) -> None:
        self.income_rows = list(rows)

    def show_expense_list(self, rows: List[ExpenseView]) -> None:
        self.expense_rows = list(rows)

    def show_notice(self, message: str) -> None:
        self.notice = message

    def reset_form(self) -> None:
        self.form_values = {}
        self.focus_field = "description"

    def remember_form(self, kind: str, description: str, amount: str) -> None:
        """Keep rejected inputs so the user can correct them."""

        self.form_values = {"kind": kind, "description": description, "amount": amount}

    def consume_notice(self) -> Optional[str]:
        """Return the pending notice once, clearing it."""

        notice, self.notice = self.notice, None
        return notice

    def _consume_form_values(self) -> Dict[str, str]:
        values, self.form_values = self.form_values, {}
        return values

    def context(self) -> Dict[str, object]:
        """Template variables for the current page state."""

        return {
            "summary": self.summary,
            "income_rows": self.income_rows,
            "expense_rows": self.expense_rows,
            "notice": self.consume_notice(),
            "form_values": self._consume_form_values(),
            "focus_field": self.focus_field,
        }
