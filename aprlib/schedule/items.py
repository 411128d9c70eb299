"""
Line items: the individual cash flows of an APR schedule.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from aprlib.conventions.types import LineItemKind, PeriodSpan, UnitPeriod
from aprlib.utils.date import DateLike, to_date

from .periods import resolve_date, resolve_span


@dataclass(frozen=True)
class ByDate:
    """Item placed on a calendar date."""

    date: date


@dataclass(frozen=True)
class ByOffset:
    """Item placed a number of common periods and odd days after the start date."""

    span: PeriodSpan


Schedule = Union[ByDate, ByOffset]


@dataclass(frozen=True)
class LineItem:
    """A single cash flow, optionally recurring.

    Attributes:
        amount: Magnitude of the cash flow; must be >= 0. The sign comes from ``kind``.
        kind: Payment (inflow, positive) or disbursement (outflow, negative)
        schedule: Where the item sits, by date or by offset from the start date
        occurrences: Number of times the item repeats
        recurrence_period: Spacing between repeats (only used when occurrences > 1)
    """

    amount: float
    kind: LineItemKind
    schedule: Schedule
    occurrences: int = 1
    recurrence_period: Optional[UnitPeriod] = None

    def __post_init__(self):
        if self.amount < 0:
            raise ValueError(f"LineItem amount must be >= 0, got {self.amount}")
        if self.occurrences < 1:
            raise ValueError(f"occurrences must be >= 1, got {self.occurrences}")
        if isinstance(self.schedule, ByOffset):
            span = self.schedule.span
            if span.periods < 0 or span.odd_days < 0:
                raise ValueError(f"Offsets must be non-negative, got {span}")
        elif not isinstance(self.schedule, ByDate):
            raise TypeError(f"Unsupported schedule: {self.schedule!r}")

    @classmethod
    def on_date(
        cls,
        amount: float,
        when: DateLike,
        kind: LineItemKind,
        occurrences: int = 1,
        recurrence_period: Optional[UnitPeriod] = None,
    ) -> "LineItem":
        return cls(
            float(amount), kind, ByDate(to_date(when)), occurrences, recurrence_period
        )

    @classmethod
    def at_offset(
        cls,
        amount: float,
        periods: int,
        odd_days: int,
        kind: LineItemKind,
        occurrences: int = 1,
        recurrence_period: Optional[UnitPeriod] = None,
    ) -> "LineItem":
        return cls(
            float(amount),
            kind,
            ByOffset(PeriodSpan(periods, odd_days)),
            occurrences,
            recurrence_period,
        )

    @property
    def signed_amount(self) -> float:
        return self.amount * self.kind.value

    @property
    def is_dated(self) -> bool:
        return isinstance(self.schedule, ByDate)

    def resolve(
        self, start_date: date, common_period: UnitPeriod
    ) -> "ResolvedLineItem":
        """Fill in whichever of date / span the item was not given."""
        if isinstance(self.schedule, ByDate):
            when = self.schedule.date
            span = resolve_span(start_date, when, common_period)
        else:
            span = self.schedule.span
            when = resolve_date(span, start_date, common_period)
        recurrence = self.recurrence_period
        if self.occurrences > 1 and recurrence is None:
            recurrence = common_period
        return ResolvedLineItem(
            item=self, date=when, span=span, recurrence_period=recurrence
        )


@dataclass(frozen=True)
class ResolvedLineItem:
    """A line item with both its date and its span known."""

    item: LineItem
    date: date
    span: PeriodSpan
    recurrence_period: Optional[UnitPeriod] = None

    @property
    def amount(self) -> float:
        """Signed amount (payments positive, disbursements negative)."""
        return self.item.signed_amount

    @property
    def occurrences(self) -> int:
        return self.item.occurrences

    @property
    def periods(self) -> int:
        return self.span.periods

    @property
    def odd_days(self) -> int:
        return self.span.odd_days
