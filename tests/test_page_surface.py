"""Mini README: Tests for the page surface that feeds the HTML template.

Covers the one-shot notice, preserved form inputs after a rejection and the
description focus requested after a successful entry.
"""

from __future__ import annotations

import logging

from budgetboard.interface import PageSurface, SummaryView
from budgetboard.logging_utils import configure_root_logger


def test_notice_and_rejected_inputs_are_shown_once() -> None:
    surface = PageSurface()
    surface.show_notice("Escribe una descripción.")
    surface.remember_form("expense", "  ", "12")

    context = surface.context()
    assert context["notice"] == "Escribe una descripción."
    assert context["form_values"] == {"kind": "expense", "description": "  ", "amount": "12"}

    again = surface.context()
    assert again["notice"] is None
    assert again["form_values"] == {}


def test_reset_form_clears_inputs_and_focuses_description() -> None:
    surface = PageSurface()
    surface.remember_form("income", "Salary", "abc")

    surface.reset_form()

    assert surface.form_values == {}
    assert surface.focus_field == "description"


def test_regions_hold_latest_records() -> None:
    surface = PageSurface()
    summary = SummaryView("$0.00", "$0.00", "$0.00", "0.00%")

    surface.show_summary(summary)
    surface.show_income_list([])
    surface.show_expense_list([])

    context = surface.context()
    assert context["summary"] is summary
    assert context["income_rows"] == []
    assert context["expense_rows"] == []


def test_configure_root_logger_adjusts_level_after_initialisation() -> None:
    root = logging.getLogger()
    previous = root.level
    try:
        configure_root_logger("debug")
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)
