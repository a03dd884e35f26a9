"""Calendar helpers for loan schedules."""

from datetime import date

from dateutil.relativedelta import relativedelta


def months_between(start: date, end: date) -> int:
    """Return the number of whole months from ``start`` to ``end``.

    Partial months are truncated toward zero, so the result is negative
    when ``end`` is before ``start``.
    """
    delta = relativedelta(end, start)
    return delta.years * 12 + delta.months


def add_months(start: date, months: int) -> date:
    """Shift ``start`` by ``months``, clamping to the end of short months."""
    return start + relativedelta(months=months)
