"""
Numerical building blocks (advanced API).

Top-level package `option_greeks` exposes the everyday pricing API.
This subpackage exposes the finite-difference stencils and step grids.
"""

from .finite_diff import (
    central_first,
    central_second,
    derivative,
    one_sided,
    second_derivative,
)
from .grids import build_step_grid, daily_step_grid, uniform_step_grid

__all__ = [
    # Finite differences
    "central_first",
    "central_second",
    "one_sided",
    "derivative",
    "second_derivative",
    # Step grids
    "build_step_grid",
    "uniform_step_grid",
    "daily_step_grid",
]
