"""Assorted formatting helpers."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from partnercalc.presets import CURRENCY_SYMBOL

CENTS = Decimal("0.01")


def format_currency(value) -> str:
    """Format ``value`` as dollars with two decimals, e.g. ``-$1,234.50``.

    Cents are rounded half away from zero on the exact value, so ``1.125``
    shows as ``$1.13``.
    """
    try:
        amount = Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)
    except (TypeError, ValueError, InvalidOperation):
        amount = Decimal("0.00")
    if amount == 0:
        amount = Decimal("0.00")
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(amount):,.2f}"


def format_percentage(value) -> str:
    """Format a percentage with one decimal, e.g. ``0.7%``."""
    return f"{float(value):.1f}%"


def format_amount_field(value) -> str:
    """Render a turnover for the text field without a trailing ``.0``."""
    v = float(value)
    if v.is_integer():
        return str(int(v))
    return repr(v)
