"""Mini README: Runtime configuration for the Budget Board web widget.

Structure:
    * BudgetBoardSettings - Pydantic settings read from ``BUDGETBOARD_*``
      environment variables or a local ``.env`` file.
    * get_settings - cached accessor shared by the CLI and the web app.

The locale and currency are fixed (es-MX / MXN) and deliberately absent here;
only deployment concerns such as the bind address and log level are tunable.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class BudgetBoardSettings(BaseSettings):
    """Runtime configuration for the Budget Board service."""

    environment: str = Field(
        "development",
        description="Environment label; anything but 'production' enables auto-reload.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the web widget to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web widget listens on.",
        ge=1,
        le=65535,
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name (DEBUG, INFO, WARNING, ...).",
    )

    class Config:
        env_prefix = "BUDGETBOARD_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level", pre=True)
    def _normalise_level(cls, value: str) -> str:
        """Accept any casing but only known logging level names."""

        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "production"


@lru_cache()
def get_settings() -> BudgetBoardSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return BudgetBoardSettings()
