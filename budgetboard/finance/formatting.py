"""Mini README: Fixed es-MX / MXN formatting for ledger figures.

Currency values render as ``$1,234.56`` (negative: ``-$600.00``) and ratios
as ``40.00%``: comma thousands separator, dot decimal separator and exactly
two fraction digits in both cases. Rounding works on the shortest decimal
form of the float and sends ties away from zero, so ``0.125`` shows as
``$0.13`` and a 1/32 ratio as ``3.13%``.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CURRENCY_SYMBOL = "$"
CENTS = Decimal("0.01")


def _two_decimals(value: Decimal) -> str:
    """Quantise to cents and group thousands; zero never carries a sign."""

    quantized = value.quantize(CENTS, rounding=ROUND_HALF_UP)
    if quantized == 0:
        quantized = abs(quantized)
    return f"{quantized:,.2f}"


def format_currency(value: float) -> str:
    """Format ``value`` as MXN with the symbol before the digits."""

    digits = _two_decimals(Decimal(repr(value)))
    if digits.startswith("-"):
        return f"-{CURRENCY_SYMBOL}{digits[1:]}"
    return f"{CURRENCY_SYMBOL}{digits}"


def format_percentage(ratio: float) -> str:
    """Format a 0..1 ratio as a percentage with two decimals."""

    return f"{_two_decimals(Decimal(repr(ratio)) * 100)}%"


def signed_currency(value: float, sign: str) -> str:
    """Prefix a formatted amount with ``+`` or ``-`` for list rows."""

    return f"{sign}{format_currency(value)}"
