from typing import Union
from datetime import datetime, date
from dateutil.relativedelta import relativedelta
from pandas import Timestamp

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[str, date, datetime, Timestamp]


def to_date(date_like: DateLike) -> date:
    """
    Convert a string, datetime or pandas Timestamp to a plain date.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like, fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def datetime_to_str(date_like: DateLike) -> str:
    """
    Format a date-like into 'YYYY-MM-DD' string.
    """
    return to_date(date_like).strftime(DATE_FMT)


def days_between(start: date, end: date) -> int:
    """Signed number of calendar days from start to end."""
    return (end - start).days


def day_of_year(dt: date) -> int:
    return dt.timetuple().tm_yday


def add_days(dt: date, days: int) -> date:
    return dt + relativedelta(days=days)


def add_months(dt: date, months: int) -> date:
    """
    Add calendar months. Days past the end of the target month clamp to its
    last day (Jan 31 + 1 month = Feb 28/29).
    """
    return dt + relativedelta(months=months)


def add_years(dt: date, years: int) -> date:
    """Add calendar years; Feb 29 clamps to Feb 28 in non-leap years."""
    return dt + relativedelta(years=years)
