"""
Calendar helpers shared by both timeline layouts.

Event dates are plain calendar dates. Anything else is rejected up front
so range computations never see a string or a datetime.
"""
from datetime import date, datetime

from lifetracer.errors import InvalidEventDate

# Embedded locale: French month abbreviations
FRENCH_MONTHS = (
    "janv.", "févr.", "mars", "avr.", "mai", "juin",
    "juil.", "août", "sept.", "oct.", "nov.", "déc.",
)

DAYS_PER_YEAR = 365


def ensure_date(value) -> date:
    """Return value if it is a calendar date, raise InvalidEventDate otherwise."""
    # datetime is a date subclass but carries a time component
    if isinstance(value, datetime) or not isinstance(value, date):
        raise InvalidEventDate(f"Expected a calendar date, got {value!r}")
    return value


def days_between(later: date, earlier: date) -> int:
    return (ensure_date(later) - ensure_date(earlier)).days


def precise_year(value: date) -> float:
    """Year plus the elapsed fraction of that year (leap years included)."""
    value = ensure_date(value)
    start = date(value.year, 1, 1)
    length = (date(value.year + 1, 1, 1) - start).days
    return value.year + (value - start).days / length


def format_event_date(value: date) -> str:
    """'15 juin 2020'"""
    value = ensure_date(value)
    return f"{value.day} {FRENCH_MONTHS[value.month - 1]} {value.year}"
