"""Mini README: Core package initializer for the Budget Board widget.

This module exposes convenience imports so callers can reach the ledger and
logging helpers without knowing the exact module structure. Web framework
imports stay inside ``budgetboard.interface`` so the ledger can be used and
tested on its own.
"""

from .finance import Entry, EntryKind, Ledger
from .logging_utils import get_logger

__all__ = ["Entry", "EntryKind", "Ledger", "get_logger"]
