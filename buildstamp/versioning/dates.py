"""
Calendar helpers measuring elapsed time since a reference date.

Only the date part of the arguments is used; the time of day is dropped.
"""

from datetime import date, datetime
from typing import Union

from ..exceptions import InvalidArgumentError, ReferenceDateError

DateLike = Union[date, datetime]


def to_date(value: DateLike) -> date:
    """Truncate a date or datetime to its calendar date."""
    if isinstance(value, datetime):
        return value.date()
    return value


def _checked(me: DateLike, other: DateLike):
    me, other = to_date(me), to_date(other)
    if other > me:
        raise ReferenceDateError(
            f"The reference date {other.isoformat()} must not be later than {me.isoformat()}"
        )
    return me, other


def years_since(me: DateLike, other: DateLike) -> int:
    """Whole years from ``other`` to ``me``.

    The day of the month is ignored: a year counts as elapsed once ``me``
    reaches the month of ``other``.
    """
    me, other = _checked(me, other)

    years = me.year - other.year
    if me.month < other.month:
        years -= 1
    return years


def months_since(me: DateLike, other: DateLike) -> int:
    """Whole months from ``other`` to ``me``, ignoring the day of the month."""
    me, other = _checked(me, other)

    if me.month < other.month:
        months = me.month + 12 - other.month
    else:
        months = me.month - other.month
    return months + years_since(me, other) * 12


def days_since(me: DateLike, other: DateLike) -> int:
    """Whole days from ``other`` to ``me``."""
    me, other = _checked(me, other)
    return (me - other).days


# Invariant-culture forms accepted besides ISO 8601.
DATE_FORMATS = (
    '%m/%d/%Y',
    '%m/%d/%Y %H:%M:%S',
    '%Y/%m/%d',
    '%Y/%m/%d %H:%M:%S',
)


def parse_date(text: str) -> datetime:
    """Parse a starting date such as ``2008-01-01`` or ``01/01/2008``."""
    if isinstance(text, datetime):
        return text
    if isinstance(text, date):
        return datetime(text.year, text.month, text.day)
    if not isinstance(text, str) or not text.strip():
        raise InvalidArgumentError(f"Invalid date: {text!r}")

    text = text.strip()
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    raise InvalidArgumentError(f"Invalid date: {text!r}")
