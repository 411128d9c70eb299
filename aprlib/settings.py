"""Solver configuration.

The defaults are the constants of the Regulation Z reference search; change
them only to trade exactness against that reference for speed or precision.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SolverSettings:
    """Parameters of the APR step search.

    Attributes:
        initial_step: First rate increment
        tolerance: Largest absolute final balance accepted as zero
        shrink_factor: Divisor applied to the step when the balance changes sign
        max_iterations: Number of amortization passes before giving up
        raise_on_nonconvergence: Raise instead of returning an unconverged result
    """

    initial_step: float = 0.1
    tolerance: float = 0.001
    shrink_factor: float = 10.0
    max_iterations: int = 1000
    raise_on_nonconvergence: bool = False

    def __post_init__(self):
        if self.initial_step <= 0:
            raise ValueError("initial_step must be positive")
        if self.tolerance <= 0:
            raise ValueError("tolerance must be positive")
        if self.shrink_factor <= 1:
            raise ValueError("shrink_factor must be greater than 1")
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")


_DEFAULT_SETTINGS = SolverSettings()


def get_default_settings() -> SolverSettings:
    """Settings used when a solver call does not pass its own."""
    return _DEFAULT_SETTINGS


def set_default_settings(settings: SolverSettings | None) -> None:
    """Replace the process-wide default settings (``None`` restores the reference)."""
    global _DEFAULT_SETTINGS
    _DEFAULT_SETTINGS = settings if settings is not None else SolverSettings()
