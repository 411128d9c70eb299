"""Date helpers shared across the schedule and valuation packages."""

from .date import (
    add_days,
    add_months,
    add_years,
    datetime_to_str,
    day_of_year,
    days_between,
    to_date,
)

__all__ = [
    "to_date",
    "datetime_to_str",
    "days_between",
    "day_of_year",
    "add_days",
    "add_months",
    "add_years",
]
