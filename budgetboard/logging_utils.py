"""Mini README: Application-wide logging helpers for Budget Board.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - one-time root handler setup with a chosen level.

Usage:
    Modules keep a ``LOGGER = get_logger(__name__)`` constant. The CLI calls
    ``configure_root_logger`` with the configured level before starting the
    server; repeated calls only adjust the level so reloads do not stack
    handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Attach a single formatted stream handler to the root logger.

    Later calls only adjust the level, and only when one is given.
    """

    global _LOGGER_INITIALISED
    if isinstance(level, str):
        level = level.upper()
    root_logger = logging.getLogger()
    if _LOGGER_INITIALISED:
        if level is not None:
            root_logger.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger.setLevel(logging.INFO if level is None else level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
