"""Common period inference.

Regulation Z measures every cash flow in units of the schedule's *common
period*: the most frequent interval between consecutive events. Each gap
between adjacent dates is classified into a unit-period tag, the tags are
counted, and the statistical mode wins. When no tag occurs more than once
and several were seen, the average spacing decides instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Optional

import logging

from aprlib.conventions.types import PeriodType, UnitPeriod, YEARLY
from aprlib.utils.date import DateLike, days_between, to_date

from .periods import diff_months, diff_weeks

logger = logging.getLogger(__name__)


@dataclass
class _TagTally:
    occurrences: int
    gap_days: int
    day_of_month: int


@dataclass(frozen=True)
class CommonPeriodInference:
    """Outcome of classifying the gaps of a schedule.

    ``day_of_month`` is the day the mode interval first landed on; it is left
    unset when the average spacing decides.
    """

    period: Optional[UnitPeriod]
    tag_counts: Dict[UnitPeriod, int] = field(default_factory=dict)
    mode_count: int = 0
    gap_count: int = 0
    used_average: bool = False
    day_of_month: Optional[int] = None


def classify_gap(prior: date, current: date) -> UnitPeriod:
    """Tag the interval between two distinct dates.

    Same day of month is a monthly interval (yearly from 12 months on);
    otherwise more than 365 days is yearly, a whole number of weeks past six
    days is weekly, and anything else is counted in days.
    """
    gap_days = days_between(prior, current)
    if prior.day == current.day:
        months = diff_months(prior, current)
        if months >= 12:
            return YEARLY
        return UnitPeriod(PeriodType.MONTHLY, months)
    if gap_days > 365:
        return YEARLY
    if gap_days > 6 and gap_days % 7 == 0:
        return UnitPeriod(PeriodType.WEEKLY, diff_weeks(prior, current))
    return UnitPeriod(PeriodType.DAILY, gap_days)


def _outranks(candidate: _TagTally, incumbent: Optional[_TagTally]) -> bool:
    """More occurrences win; on a tie the shorter interval wins."""
    if incumbent is None:
        return True
    if candidate.occurrences != incumbent.occurrences:
        return candidate.occurrences > incumbent.occurrences
    return candidate.gap_days < incumbent.gap_days


def _average_period(
    first: date, last: date, gap_count: int, all_months: bool
) -> UnitPeriod:
    gap_count = max(gap_count, 1)
    avg_days = round(days_between(first, last) / gap_count)
    if avg_days >= 365:
        return YEARLY

    months = diff_months(first, last)
    if all_months and months % gap_count == 0:
        return UnitPeriod(PeriodType.MONTHLY, months // gap_count)
    if avg_days >= 7:
        return UnitPeriod(PeriodType.WEEKLY, round(avg_days / 7))
    return UnitPeriod(PeriodType.DAILY, avg_days)


def analyze_common_period(dates: Iterable[DateLike]) -> CommonPeriodInference:
    """Classify every gap of ``dates`` and pick the common period.

    ``period`` is ``None`` when fewer than two distinct dates are given.
    """
    ordered: List[date] = sorted(to_date(d) for d in dates)

    tallies: Dict[UnitPeriod, _TagTally] = {}
    all_months = True
    gap_count = 0

    for prior, current in zip(ordered, ordered[1:]):
        # Events on the same date say nothing about spacing
        if prior == current:
            continue
        tag = classify_gap(prior, current)
        if prior.day != current.day:
            all_months = False

        tally = tallies.get(tag)
        if tally is None:
            tallies[tag] = _TagTally(1, days_between(prior, current), current.day)
        else:
            tally.occurrences += 1
        gap_count += 1

    tag_counts = {tag: tally.occurrences for tag, tally in tallies.items()}
    if not tallies:
        logger.debug("No classifiable gaps among %s dates", len(ordered))
        return CommonPeriodInference(period=None)

    mode: Optional[UnitPeriod] = None
    for tag, tally in tallies.items():
        if _outranks(tally, tallies[mode] if mode is not None else None):
            mode = tag
    mode_count = tallies[mode].occurrences

    logger.debug("Gap tally %s; mode %s x%s", tag_counts, mode, mode_count)

    if mode_count <= 1 and len(tallies) > 1:
        period = _average_period(ordered[0], ordered[-1], gap_count, all_months)
        logger.debug("No dominant gap; average spacing gives %s", period)
        return CommonPeriodInference(
            period=period,
            tag_counts=tag_counts,
            mode_count=mode_count,
            gap_count=gap_count,
            used_average=True,
        )

    return CommonPeriodInference(
        period=mode,
        tag_counts=tag_counts,
        mode_count=mode_count,
        gap_count=gap_count,
        day_of_month=tallies[mode].day_of_month,
    )


def infer_common_period(dates: Iterable[DateLike]) -> Optional[UnitPeriod]:
    """Return the common period of ``dates`` (``None`` with no usable gaps)."""
    return analyze_common_period(dates).period
