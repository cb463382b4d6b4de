# core/templatetags/formatting.py
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from django import template

register = template.Library()


def _to_decimal(value: Any) -> Decimal | None:
    """
    Convert common numeric inputs to Decimal safely.
    Returns None for blank/None values.
    """
    if value is None or value == "":
        return None

    if isinstance(value, Decimal):
        return value

    try:
        # Avoid float artifacts by converting through str
        return Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return None


def _fmt_money(amount: Decimal) -> str:
    """
    Format with USD $ and comma grouping, always 2 decimals.
    Negative amounts render as -$123.45 (not parentheses).
    """
    sign = "-" if amount < 0 else ""
    amt = abs(amount).quantize(Decimal("0.01"))
    return f"{sign}${amt:,.2f}"


@register.filter(name="cents")
def cents(value: Any) -> str:
    """Stored cents -> '$1,234.56'. Blank/None => '-'."""
    dec = _to_decimal(value)
    if dec is None:
        return "-"
    return _fmt_money(dec / 100)


@register.filter(name="local_date")
def local_date(value: Any) -> str:
    """
    Format dates as 'Dec 6, 2022'. Blank/None => '-'.
    """
    if not value:
        return "-"
    try:
        return f"{value:%b} {value.day}, {value.year}"
    except (TypeError, ValueError, AttributeError):
        return "-"
