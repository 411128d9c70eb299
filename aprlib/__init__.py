"""Regulation Z APR calculation.

This package computes the Annual Percentage Rate of a schedule of
disbursements and payments using the actuarial method of Regulation Z,
Appendix J.

Key modules:
- conventions: unit periods, period spans and cash-flow kinds
- schedule: date arithmetic, common period inference, line items and series
- valuation: present value factors, amortization and the APR solver
- settings: solver configuration
"""

from aprlib.conventions.types import LineItemKind, PeriodSpan, PeriodType, UnitPeriod
from aprlib.schedule import (
    CommonPeriodError,
    LineItem,
    LineItemSeries,
    SeriesCompletedError,
    infer_common_period,
)
from aprlib.settings import SolverSettings
from aprlib.valuation import (
    AprConvergenceError,
    AprResult,
    Ledger,
    amortize,
    calculate_apr,
    solve_apr,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "PeriodType",
    "UnitPeriod",
    "PeriodSpan",
    "LineItemKind",
    "LineItem",
    "LineItemSeries",
    "SeriesCompletedError",
    "CommonPeriodError",
    "infer_common_period",
    "SolverSettings",
    "amortize",
    "solve_apr",
    "calculate_apr",
    "AprResult",
    "AprConvergenceError",
    "Ledger",
]
