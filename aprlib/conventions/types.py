"""
Basic types and enums used across the APR calculation.
"""

from dataclasses import dataclass
from enum import Enum


class PeriodType(Enum):
    """Calendar granularity of a unit period."""

    DAILY = "D"
    WEEKLY = "W"
    MONTHLY = "M"
    YEARLY = "Y"


class LineItemKind(Enum):
    """Cash-flow direction. The value is the sign applied to the amount."""

    PAYMENT = 1
    DISBURSEMENT = -1


@dataclass(frozen=True)
class UnitPeriod:
    """A recurring calendar granularity, e.g. ``UnitPeriod(MONTHLY, 2)`` = 2 months."""

    period_type: PeriodType
    count: int = 1

    def __post_init__(self):
        if self.count < 1:
            raise ValueError(f"UnitPeriod count must be >= 1, got {self.count}")

    def __str__(self) -> str:
        return f"{self.count}{self.period_type.value}"

    @classmethod
    def parse(cls, text: str) -> "UnitPeriod":
        """Parse a tag such as ``"1M"``, ``"2W"``, ``"15D"`` or ``"1Y"``."""
        t = text.upper().strip()
        if len(t) < 2:
            raise ValueError(f"Unsupported unit period: {text!r}")
        try:
            period_type = PeriodType(t[-1])
            count = int(t[:-1])
        except ValueError as exc:
            raise ValueError(f"Unsupported unit period: {text!r}") from exc
        return cls(period_type, count)


@dataclass(frozen=True)
class PeriodSpan:
    """Elapsed time as whole unit periods plus a remainder of odd days."""

    periods: int = 0
    odd_days: int = 0


MONTHLY = UnitPeriod(PeriodType.MONTHLY, 1)
WEEKLY = UnitPeriod(PeriodType.WEEKLY, 1)
DAILY = UnitPeriod(PeriodType.DAILY, 1)
YEARLY = UnitPeriod(PeriodType.YEARLY, 1)
