"""
Calendar arithmetic between dates and period spans.

Spans are measured against a common period: whole units of the period plus
a remainder of odd days. All rounding goes through the builtin ``round``
(round half to even).
"""

from datetime import date

from aprlib.conventions.types import PeriodSpan, PeriodType, UnitPeriod
from aprlib.utils.date import (
    add_days,
    add_months,
    add_years,
    day_of_year,
    days_between,
)


def diff_months(start: date, end: date) -> int:
    """Whole calendar months between two dates, rounded down."""
    adjustment = 1 if end.day < start.day else 0
    return (end.year - start.year) * 12 + (end.month - start.month) - adjustment


def diff_years(start: date, end: date) -> int:
    """Whole calendar years between two dates, rounded down."""
    adjustment = 1 if day_of_year(end) < day_of_year(start) else 0
    return (end.year - start.year) - adjustment


def diff_weeks(start: date, end: date) -> int:
    """Weeks between two dates, rounded to the nearest week.

    A whole number of days divided by seven is never an exact half, so the
    half-to-even rule of ``round`` never decides a result here.
    """
    return round(days_between(start, end) / 7)


def add_units(start: date, units: int, period_type: PeriodType) -> date:
    """Advance ``start`` by ``units`` calendar units of ``period_type``."""
    if period_type == PeriodType.MONTHLY:
        return add_months(start, units)
    elif period_type == PeriodType.YEARLY:
        return add_years(start, units)
    elif period_type == PeriodType.WEEKLY:
        return add_days(start, units * 7)
    elif period_type == PeriodType.DAILY:
        return add_days(start, units)
    else:
        raise ValueError(f"Unknown period type: {period_type}")


def add_period(current: date, period: UnitPeriod) -> date:
    """Advance a date by one whole unit period (e.g. 2 months for ``2M``)."""
    return add_units(current, period.count, period.period_type)


def resolve_span(start: date, end: date, common_period: UnitPeriod) -> PeriodSpan:
    """Express the time from ``start`` to ``end`` in common periods plus odd days."""
    period_type = common_period.period_type
    if period_type == PeriodType.MONTHLY:
        units = diff_months(start, end)
    elif period_type == PeriodType.YEARLY:
        units = diff_years(start, end)
    elif period_type == PeriodType.WEEKLY:
        units = diff_weeks(start, end)
    else:
        units = days_between(start, end)

    periods = round(units / common_period.count)
    anchor = add_units(start, periods * common_period.count, period_type)
    return PeriodSpan(periods=periods, odd_days=days_between(anchor, end))


def resolve_date(span: PeriodSpan, start: date, common_period: UnitPeriod) -> date:
    """Inverse of :func:`resolve_span`: the date ``span`` after ``start``."""
    anchor = add_units(
        start, span.periods * common_period.count, common_period.period_type
    )
    return add_days(anchor, span.odd_days)


def periods_per_year(period: UnitPeriod) -> float:
    """Number of unit periods in a year."""
    if period.period_type == PeriodType.MONTHLY:
        return 12.0 / period.count
    elif period.period_type == PeriodType.WEEKLY:
        return 52.0 / period.count
    elif period.period_type == PeriodType.YEARLY:
        # A common period never exceeds one year
        return 1.0
    elif period.period_type == PeriodType.DAILY:
        return 365.0 / period.count
    raise ValueError(f"Unknown period type: {period.period_type}")


def days_per_period(period: UnitPeriod) -> int:
    """Days in one unit period (months count as 30 days)."""
    if period.period_type == PeriodType.MONTHLY:
        return 30 * period.count
    elif period.period_type == PeriodType.WEEKLY:
        return 7 * period.count
    elif period.period_type == PeriodType.YEARLY:
        return 365 * period.count
    elif period.period_type == PeriodType.DAILY:
        return period.count
    raise ValueError(f"Unknown period type: {period.period_type}")
