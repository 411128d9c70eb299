"""Result types for APR valuation.

Ledgers are immutable snapshots of one amortization pass, so any number of
candidate rates can be evaluated against the same series independently.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from aprlib.conventions.types import UnitPeriod
from aprlib.utils.date import datetime_to_str


@dataclass(frozen=True)
class LedgerEntry:
    """One line item amortized at a given rate.

    Attributes:
        date: Resolved date of the (first) cash flow
        amount: Signed amount (payments positive, disbursements negative)
        periods: Whole common periods from the start date
        odd_days: Days left over after the whole periods
        occurrences: Number of recurrences of the item
        recurrence_period: Spacing between recurrences, if any
        present_value_factor: PVIF, or PVIFA for recurring items
        present_value: amount * present_value_factor
        balance: Running balance including this item
    """

    date: date
    amount: float
    periods: int
    odd_days: int
    occurrences: int
    recurrence_period: Optional[UnitPeriod]
    present_value_factor: float
    present_value: float
    balance: float


@dataclass(frozen=True)
class Ledger:
    """Full amortization of a series at one rate."""

    rate: float
    common_period: UnitPeriod
    periods_per_year: float
    days_per_period: int
    start_date: date
    entries: Tuple[LedgerEntry, ...]
    final_balance: float

    def to_records(self) -> List[Dict[str, Any]]:
        """Entries as plain dicts; unit periods are rendered as tags like ``"1M"``."""
        records = []
        for entry in self.entries:
            record = asdict(entry)
            if entry.recurrence_period is not None:
                record["recurrence_period"] = str(entry.recurrence_period)
            records.append(record)
        return records

    def to_frame(self) -> pd.DataFrame:
        """Entries as a DataFrame, one row per line item."""
        return pd.DataFrame(self.to_records(), columns=[f.name for f in fields(LedgerEntry)])

    def summary(self) -> Dict[str, Any]:
        return {
            "rate": self.rate,
            "common_period": str(self.common_period),
            "periods_per_year": self.periods_per_year,
            "days_per_period": self.days_per_period,
            "start_date": datetime_to_str(self.start_date),
            "final_balance": self.final_balance,
        }


@dataclass(frozen=True)
class IterationRecord:
    """State of the rate search at one iteration."""

    iteration: int
    step: float
    rate: float
    final_balance: float


@dataclass(frozen=True)
class AprResult:
    """Outcome of the APR search.

    Attributes:
        apr: Annual percentage rate as a decimal fraction (0.0694 = 6.94%)
        iterations: Number of amortization passes run
        converged: Whether the final balance reached the tolerance
        ledger: Ledger at ``apr``
        trace: Every iteration of the search, in order
    """

    apr: float
    iterations: int
    converged: bool
    ledger: Ledger
    trace: Tuple[IterationRecord, ...] = ()

    @property
    def final_balance(self) -> float:
        return self.ledger.final_balance

    def __float__(self) -> float:
        return self.apr
