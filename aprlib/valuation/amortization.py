"""Amortization pass: apply one candidate rate across a completed series."""

from __future__ import annotations

from typing import List

from aprlib.schedule.items import ResolvedLineItem
from aprlib.schedule.series import LineItemSeries

from .pvif import pvif, pvifa
from .types import Ledger, LedgerEntry


def present_value_factor(
    resolved: ResolvedLineItem, series: LineItemSeries, rate: float
) -> float:
    """PVIFA for recurring items, PVIF otherwise."""
    if resolved.occurrences > 1:
        return pvifa(
            start_date=series.start_date,
            first_date=resolved.date,
            recurrence_period=resolved.recurrence_period,
            rate=rate,
            periods_per_year=series.periods_per_year,
            days_per_period=series.days_per_period,
            occurrences=resolved.occurrences,
            common_period=series.common_period,
        )
    return pvif(resolved.span, rate, series.periods_per_year, series.days_per_period)


def amortize(series: LineItemSeries, rate: float) -> Ledger:
    """Discount every item at ``rate`` and accumulate the running balance.

    The series is completed first if it is still open. Nothing on the series
    or its items is modified; the result is a fresh :class:`Ledger`.
    """
    items = series.items

    entries: List[LedgerEntry] = []
    balance = 0.0
    for resolved in items:
        factor = present_value_factor(resolved, series, rate)
        present_value = resolved.amount * factor
        balance += present_value
        entries.append(
            LedgerEntry(
                date=resolved.date,
                amount=resolved.amount,
                periods=resolved.periods,
                odd_days=resolved.odd_days,
                occurrences=resolved.occurrences,
                recurrence_period=resolved.recurrence_period,
                present_value_factor=factor,
                present_value=present_value,
                balance=balance,
            )
        )

    return Ledger(
        rate=rate,
        common_period=series.common_period,
        periods_per_year=series.periods_per_year,
        days_per_period=series.days_per_period,
        start_date=series.start_date,
        entries=tuple(entries),
        final_balance=balance,
    )
