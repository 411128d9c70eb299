"""Line item series: the ordered set of cash flows an APR is solved over."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Iterator, List, Optional, Tuple

import logging

from aprlib.conventions.types import DAILY, UnitPeriod
from aprlib.utils.date import DateLike, to_date

from .common_period import infer_common_period
from .items import ByDate, LineItem, ResolvedLineItem
from .periods import days_per_period, periods_per_year

logger = logging.getLogger(__name__)


class SeriesCompletedError(RuntimeError):
    """Raised when a completed series is modified."""


class CommonPeriodError(ValueError):
    """Raised when items cannot be placed against a common period."""


class LineItemSeries:
    """Collects line items, then freezes them into a dated, measured schedule.

    Items are added while the series is open. :meth:`complete` sorts them,
    fixes the start date and common period, and resolves every item's date
    and span. A completed series cannot change.
    """

    def __init__(
        self,
        items: Iterable[LineItem] = (),
        *,
        common_period: Optional[UnitPeriod] = None,
        start_date: Optional[DateLike] = None,
    ):
        self._pending: List[LineItem] = []
        self._resolved: Tuple[ResolvedLineItem, ...] = ()
        self._common_period = common_period
        self._start_date: Optional[date] = (
            to_date(start_date) if start_date is not None else None
        )
        self._periods_per_year: Optional[float] = None
        self._days_per_period: Optional[int] = None
        self._completed = False
        for item in items:
            self.add(item)

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------
    def add(self, item: LineItem) -> None:
        if self._completed:
            raise SeriesCompletedError(
                "Cannot add a line item after the series has been completed"
            )
        if not isinstance(item, LineItem):
            raise TypeError(f"Expected LineItem, got {type(item).__name__}")
        self._pending.append(item)

    def extend(self, items: Iterable[LineItem]) -> None:
        for item in items:
            self.add(item)

    def complete(self) -> "LineItemSeries":
        """Resolve all items and freeze the series. Completing twice is a no-op."""
        if self._completed:
            return self
        if not self._pending:
            raise CommonPeriodError("Cannot complete an empty series")

        dated = sorted(
            (item for item in self._pending if isinstance(item.schedule, ByDate)),
            key=lambda item: item.schedule.date,
        )
        start = self._resolve_start_date(dated)

        common = self._common_period
        if common is None:
            common = infer_common_period(item.schedule.date for item in dated)
        if common is None:
            if len(dated) != len(self._pending):
                raise CommonPeriodError(
                    "A line item is scheduled by period, but the series has no "
                    "common period; supply one or add dated items"
                )
            # Every item sits on the same date, so any unit measures zero time
            common = DAILY

        resolved = [item.resolve(start, common) for item in self._pending]
        resolved.sort(key=lambda r: r.date)

        self._start_date = start
        self._common_period = common
        self._periods_per_year = periods_per_year(common)
        self._days_per_period = days_per_period(common)
        self._resolved = tuple(resolved)
        self._pending = []
        self._completed = True

        logger.debug(
            "Completed series: %s items from %s, common period %s",
            len(self._resolved),
            start,
            common,
        )
        return self

    def _resolve_start_date(self, dated: List[LineItem]) -> date:
        earliest = dated[0].schedule.date if dated else None
        if self._start_date is None:
            if earliest is None:
                raise CommonPeriodError(
                    "Series needs at least one dated item or an explicit start_date"
                )
            return earliest
        if earliest is not None and self._start_date > earliest:
            raise ValueError(
                f"start_date {self._start_date} is after the earliest item {earliest}"
            )
        return self._start_date

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def common_period(self) -> Optional[UnitPeriod]:
        return self._common_period

    @common_period.setter
    def common_period(self, value: Optional[UnitPeriod]) -> None:
        """Override the common period. Only set this if you are sure of it."""
        if self._completed:
            raise SeriesCompletedError(
                "Cannot change the common period of a completed series"
            )
        self._common_period = value

    @property
    def start_date(self) -> Optional[date]:
        return self._start_date

    @property
    def periods_per_year(self) -> Optional[float]:
        return self._periods_per_year

    @property
    def days_per_period(self) -> Optional[int]:
        return self._days_per_period

    @property
    def items(self) -> Tuple[ResolvedLineItem, ...]:
        """Resolved items in date order (completes the series if needed)."""
        self.complete()
        return self._resolved

    def __len__(self) -> int:
        return len(self._resolved) if self._completed else len(self._pending)

    def __iter__(self) -> Iterator[ResolvedLineItem]:
        return iter(self.items)

    def __repr__(self) -> str:
        state = "completed" if self._completed else "open"
        return (
            f"LineItemSeries({len(self)} items, {state}, "
            f"common_period={self._common_period})"
        )
