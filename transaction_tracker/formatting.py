"""Display formatting for dates and amounts (fixed ``en-US`` locale, USD).

Both helpers are total: unparseable dates render as ``"Invalid Date"`` and
non-finite amounts render as ``$NaN`` / ``$∞``. Neither is a validator.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

INVALID_DATE = "Invalid Date"

# Tried in order after ISO 8601.
_DATE_FORMATS = ("%m/%d/%Y", "%m/%d/%y", "%B %d, %Y", "%b %d, %Y")


def _parse_date(value: str) -> date | None:
    s = value.strip()
    if not s:
        return None
    try:
        return datetime.fromisoformat(s).date()
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    return None


def format_date(date_text: str | date | None) -> str:
    """Return ``M/D/YYYY`` for ``date_text``, or ``"Invalid Date"``.

    The calendar date is rendered as written; no timezone conversion is
    applied to ISO datetimes.
    """

    if isinstance(date_text, datetime):
        d: date | None = date_text.date()
    elif isinstance(date_text, date):
        d = date_text
    elif isinstance(date_text, str):
        d = _parse_date(date_text)
    else:
        d = None
    if d is None:
        return INVALID_DATE
    return f"{d.month}/{d.day}/{d.year}"


def format_currency(amount: int | float | Decimal | str) -> str:
    """Return ``amount`` as US dollars, e.g. ``$1,234.50`` or ``-$5.00``."""

    try:
        d = Decimal(str(amount).strip())
    except InvalidOperation:
        return "$NaN"
    if d.is_nan():
        return "$NaN"
    sign = "-" if d.is_signed() and d != 0 else ""
    if d.is_infinite():
        return f"{sign}$∞"

    # Decimal ROUND_HALF_UP rounds half away from zero.
    q = abs(d).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    if q == 0:
        sign = ""
    return f"{sign}${q:,.2f}"


# Names used by the web client
formatDate = format_date
formatCurrency = format_currency

__all__ = ["INVALID_DATE", "format_date", "format_currency", "formatDate", "formatCurrency"]
