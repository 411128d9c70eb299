"""APR solver.

Finds the rate at which the amortized balance of a series is zero using the
Regulation Z step search: walk the rate by a fixed step, turn the step toward
zero from the side the balance was last seen on, and divide the step by ten
every time the balance crosses zero. No derivative is used.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import logging
import math

from aprlib.conventions.types import UnitPeriod
from aprlib.schedule.items import LineItem
from aprlib.schedule.series import LineItemSeries
from aprlib.settings import SolverSettings, get_default_settings
from aprlib.utils.date import DateLike

from .amortization import amortize
from .types import AprResult, IterationRecord

logger = logging.getLogger(__name__)


class AprConvergenceError(RuntimeError):
    """Raised when the step search exhausts its iterations."""

    def __init__(self, message: str, result: AprResult):
        super().__init__(message)
        self.result = result


def solve_apr(
    series: LineItemSeries,
    starting_rate: float = 0.0,
    *,
    settings: Optional[SolverSettings] = None,
) -> AprResult:
    """Solve the APR of ``series``.

    Args:
        series: Line items to solve over; completed here if still open
        starting_rate: First rate tried, e.g. the contract interest rate
        settings: Search parameters (defaults to :func:`get_default_settings`)

    Returns:
        AprResult holding the rate whose final balance met the tolerance, or,
        with ``converged=False``, the last rate whose balance was finite when
        the iterations ran out or the search left the domain of the discount
        factors (a non-finite balance, or a periodic rate at or below -100%).

    Raises:
        ValueError: If ``series`` is None or ``starting_rate`` is at or below
            -100% per period
        AprConvergenceError: On non-convergence when
            ``settings.raise_on_nonconvergence`` is set
    """
    if series is None:
        raise ValueError("A line item series must be supplied before solving")
    settings = settings or get_default_settings()
    series.complete()

    rate = float(starting_rate)
    if rate / series.periods_per_year <= -1.0:
        raise ValueError(
            f"starting_rate {rate} is at or below -100% per {series.common_period}"
        )
    step = settings.initial_step
    last_balance = 0.0
    trace: List[IterationRecord] = []
    ledger = None
    last_finite = None
    stop_reason = None

    for iteration in range(settings.max_iterations):
        if rate / series.periods_per_year <= -1.0:
            stop_reason = f"periodic rate fell to -100% or below at rate {rate}"
            break

        ledger = amortize(series, rate)
        balance = ledger.final_balance
        trace.append(IterationRecord(iteration, step, rate, balance))
        logger.debug(
            "APR iter %s: rate=%s step=%s balance=%s", iteration, rate, step, balance
        )

        if not math.isfinite(balance):
            stop_reason = f"balance is not finite at rate {rate}"
            break
        last_finite = ledger

        if abs(balance) <= settings.tolerance:
            logger.info("APR converged to %s after %s iterations", rate, iteration + 1)
            return AprResult(rate, iteration + 1, True, ledger, tuple(trace))

        # Crossing zero since the last pass: refine the step
        if (last_balance < 0 < balance) or (last_balance > 0 > balance):
            step /= settings.shrink_factor
        if (last_balance < 0 and step > 0) or (last_balance > 0 and step < 0):
            step = -step

        rate += step
        last_balance = balance

    if last_finite is not None:
        ledger = last_finite
    result = AprResult(ledger.rate, len(trace), False, ledger, tuple(trace))
    if stop_reason is None:
        message = (
            f"APR search did not converge within {settings.max_iterations} iterations; "
            f"last rate {ledger.rate} left a balance of {ledger.final_balance}"
        )
    else:
        message = (
            f"APR search stopped after {len(trace)} iterations: {stop_reason}; "
            f"last rate {ledger.rate} left a balance of {ledger.final_balance}"
        )
    if settings.raise_on_nonconvergence:
        raise AprConvergenceError(message, result)
    logger.warning(message)
    return result


def calculate_apr(
    items: Iterable[LineItem],
    *,
    common_period: Optional[UnitPeriod] = None,
    start_date: Optional[DateLike] = None,
    starting_rate: float = 0.0,
    settings: Optional[SolverSettings] = None,
) -> AprResult:
    """Build a series from ``items`` and solve its APR in one call."""
    series = LineItemSeries(items, common_period=common_period, start_date=start_date)
    return solve_apr(series, starting_rate, settings=settings)
