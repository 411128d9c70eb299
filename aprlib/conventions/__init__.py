from .types import (
    DAILY,
    MONTHLY,
    WEEKLY,
    YEARLY,
    LineItemKind,
    PeriodSpan,
    PeriodType,
    UnitPeriod,
)

__all__ = [
    "PeriodType",
    "LineItemKind",
    "UnitPeriod",
    "PeriodSpan",
    "DAILY",
    "WEEKLY",
    "MONTHLY",
    "YEARLY",
]
