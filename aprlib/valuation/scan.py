"""Rate scans over a completed series.

Every amortization pass is independent of the others, so balances for a
whole grid of rates can be computed side by side. A scan shows where the
balance changes sign; more than one change means the step search may settle
on either root, or fail to settle at all.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

import numpy as np

from aprlib.schedule.series import LineItemSeries

from .amortization import amortize


def balance_profile(series: LineItemSeries, rates: Iterable[float]) -> np.ndarray:
    """Final balance of ``series`` at each rate in ``rates``."""
    grid = np.asarray(list(rates), dtype=float)
    series.complete()
    return np.fromiter(
        (amortize(series, float(r)).final_balance for r in grid),
        dtype=float,
        count=grid.size,
    )


def find_sign_changes(
    series: LineItemSeries, rates: Iterable[float]
) -> List[Tuple[float, float]]:
    """Adjacent rate pairs of the (sorted) grid whose balances bracket zero.

    A rate that hits zero exactly is returned as a degenerate ``(r, r)`` pair.
    """
    grid = np.sort(np.asarray(list(rates), dtype=float))
    if grid.size == 0:
        return []
    balances = balance_profile(series, grid)

    brackets: List[Tuple[float, float]] = []
    for idx in range(grid.size):
        if balances[idx] == 0.0:
            brackets.append((float(grid[idx]), float(grid[idx])))
            continue
        if idx + 1 < grid.size and balances[idx] * balances[idx + 1] < 0:
            brackets.append((float(grid[idx]), float(grid[idx + 1])))
    return brackets
