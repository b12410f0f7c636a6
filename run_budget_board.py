"""Mini README: Entry point CLI for launching the Budget Board page.

This script exposes a Typer CLI that starts the FastAPI application with
configurable host, port and production flags, applying the configured log
level and falling back to ``BUDGETBOARD_*`` settings when options are omitted.
"""

from __future__ import annotations

import typer
import uvicorn

from budgetboard.configuration import get_settings
from budgetboard.logging_utils import configure_root_logger

cli = typer.Typer(help="Launch the Budget Board web widget.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    production = production or settings.is_production
    configure_root_logger(settings.log_level)

    # Browsers cannot open the 0.0.0.0 / :: wildcard, so point at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Budget Board on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "budgetboard.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
        log_level=settings.log_level.lower(),
    )


@cli.callback()
def main() -> None:
    """Budget Board command line."""


if __name__ == "__main__":
    cli()
