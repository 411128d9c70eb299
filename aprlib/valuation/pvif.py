"""Present value interest factors (Regulation Z, Appendix J).

Whole unit periods are discounted with compound interest; the odd days left
over are discounted with simple interest at the same periodic rate.
"""

from __future__ import annotations

import math
from datetime import date

from aprlib.conventions.types import PeriodSpan, UnitPeriod
from aprlib.schedule.periods import add_period, resolve_span


def pvif(
    span: PeriodSpan,
    rate: float,
    periods_per_year: float,
    days_per_period: float,
) -> float:
    """Discount factor for a single cash flow ``span`` after the start date.

    PVIF = 1 / ((1 + i)^t * (1 + f * i)), with i = rate / periods_per_year,
    t the whole periods and f = odd_days / days_per_period.

    Extreme rates saturate instead of raising: a compound factor too large
    for a float discounts to 0.0, and a denominator that underflows to zero
    gives ``inf``.
    """
    i = rate / periods_per_year
    try:
        compound = (1.0 + i) ** span.periods
    except OverflowError:
        return 0.0
    simple = 1.0 + (span.odd_days / days_per_period) * i
    denominator = compound * simple
    if denominator == 0.0:
        return math.inf
    return 1.0 / denominator


def pvifa(
    start_date: date,
    first_date: date,
    recurrence_period: UnitPeriod,
    rate: float,
    periods_per_year: float,
    days_per_period: float,
    occurrences: int,
    common_period: UnitPeriod,
) -> float:
    """Summed discount factor of a recurring cash flow.

    Each occurrence is re-measured from ``start_date`` against the common
    period, so the recurrence does not have to line up with it.
    """
    total = 0.0
    current = first_date
    for _ in range(occurrences):
        span = resolve_span(start_date, current, common_period)
        total += pvif(span, rate, periods_per_year, days_per_period)
        current = add_period(current, recurrence_period)
    return total


def pvifa_stream(
    rate: float,
    periods_per_year: float,
    starting_period: int,
    number_of_periods: int,
) -> float:
    """Annuity factor over whole unit periods.

    Sum of (1 + rate/periods_per_year)^-k for k in
    [starting_period, starting_period + number_of_periods).
    """
    if number_of_periods < 0:
        raise ValueError("number_of_periods must be non-negative")
    base = 1.0 + rate / periods_per_year
    if base == 0.0:
        raise ValueError(f"Annuity factor undefined at rate {rate}")
    return sum(
        base ** -k for k in range(starting_period, starting_period + number_of_periods)
    )
