"""Mini README: FastAPI-powered page for the Budget Board widget.

Structure:
    * create_application - application factory wiring routes and templates.
    * Page state - one Ledger, PageSurface and Presenter per application, only
      touched from async handlers on the event loop.

The page shows the summary header, the income and expense lists and the entry
form. Form posts go through the presenter; successful actions redirect back
to the page while rejected entries re-render it with a notice and the
submitted inputs preserved.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from ..finance import EntryKind, Ledger
from ..logging_utils import get_logger
from .page_surface import PageSurface
from .presenter import Presenter, ValidationError

LOGGER = get_logger(__name__)


def create_application(ledger: Optional[Ledger] = None) -> FastAPI:
    """Create the FastAPI application with routes and its in-memory state."""

    app = FastAPI(title="Budget Board", version="1.0.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

    surface = PageSurface()
    presenter = Presenter(ledger if ledger is not None else Ledger(), surface)
    presenter.bootstrap()
    app.state.presenter = presenter

    def render_page(request: Request, status_code: int = 200) -> HTMLResponse:
        return templates.TemplateResponse(
            request,
            "budget.html",
            surface.context(),
            status_code=status_code,
        )

    @app.get("/", response_class=HTMLResponse)
    async def budget_page(request: Request) -> HTMLResponse:
        """Render the summary header, both lists and the entry form."""

        LOGGER.debug(
            "Rendering page with %s income and %s expense rows",
            len(surface.income_rows),
            len(surface.expense_rows),
        )
        return render_page(request)

    @app.post("/entries")
    async def submit_entry(
        request: Request,
        kind: str = Form(...),
        description: str = Form(""),
        amount: str = Form(""),
    ):
        """Record a new income or expense from the entry form."""

        try:
            presenter.submit_entry(kind, description, amount)
        except ValidationError as error:
            presenter.report_error(error)
            surface.remember_form(kind, description, amount)
            return render_page(request, status_code=400)
        return RedirectResponse(url="/", status_code=303)

    @app.post("/entries/{kind}/{entry_id}/delete")
    async def delete_entry(kind: EntryKind, entry_id: int) -> RedirectResponse:
        """Remove an entry by id; unknown ids are ignored."""

        if kind is EntryKind.INCOME:
            presenter.delete_income(entry_id)
        else:
            presenter.delete_expense(entry_id)
        return RedirectResponse(url="/", status_code=303)

    @app.get("/api/summary")
    async def summary() -> JSONResponse:
        """Return the formatted summary, both lists and the raw ledger snapshot."""

        return JSONResponse(
            {
                "summary": surface.summary.as_dict() if surface.summary else None,
                "income": [row.as_dict() for row in surface.income_rows],
                "expenses": [row.as_dict() for row in surface.expense_rows],
                "ledger": presenter.ledger.export_snapshot(),
            }
        )

    return app
