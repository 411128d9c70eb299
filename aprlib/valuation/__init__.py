"""APR valuation: present value factors, amortization and the rate search.

Key modules:
- pvif: PVIF / PVIFA discount factors with odd-day adjustment
- amortization: one pass of a rate over a series, returned as a Ledger
- solver: the Regulation Z step search for the zero-balance rate
- scan: balances over a grid of rates
"""

from .amortization import amortize, present_value_factor
from .pvif import pvif, pvifa, pvifa_stream
from .scan import balance_profile, find_sign_changes
from .solver import AprConvergenceError, calculate_apr, solve_apr
from .types import AprResult, IterationRecord, Ledger, LedgerEntry

__all__ = [
    "pvif",
    "pvifa",
    "pvifa_stream",
    "amortize",
    "present_value_factor",
    "solve_apr",
    "calculate_apr",
    "AprConvergenceError",
    "balance_profile",
    "find_sign_changes",
    "AprResult",
    "IterationRecord",
    "Ledger",
    "LedgerEntry",
]
