"""Mini README: Finance model for the Budget Board widget.

Groups the in-memory ledger of income and expense entries together with the
fixed es-MX currency and percentage formatters used by the presenter. Nothing
in this package knows about the web interface.
"""

from .formatting import format_currency, format_percentage, signed_currency
from .ledger import Entry, EntryKind, Ledger

__all__ = [
    "Entry",
    "EntryKind",
    "Ledger",
    "format_currency",
    "format_percentage",
    "signed_currency",
]
