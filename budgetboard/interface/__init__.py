"""Mini README: Interactive interface for Budget Board.

Exposes the presenter that mediates between the ledger and a display surface,
the page surface used by the browser view, and the FastAPI application
factory that serves it.
"""

from .page_surface import PageSurface
from .presenter import (
    DisplaySurface,
    ExpenseView,
    IncomeView,
    Presenter,
    SummaryView,
    ValidationError,
)
from .web_app import create_application

__all__ = [
    "DisplaySurface",
    "ExpenseView",
    "IncomeView",
    "PageSurface",
    "Presenter",
    "SummaryView",
    "ValidationError",
    "create_application",
]
