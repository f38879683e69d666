"""Finite-difference stencils on a uniform bump.

Responsibility: turn function values at ``x - h``, ``x`` and ``x + h`` into
derivative estimates. No option-pricing conventions live here; the bump
sizes and which parameter is bumped are decided by
:mod:`option_greeks.pricers.finite_diff`.

All stencils are the uniform special case of the usual 3-point Lagrange
formulas: the central ones are second-order accurate, the one-sided ones
first-order.
"""

from __future__ import annotations

from ..typing import ScalarFn


def _check_step(h: float) -> None:
    if not h > 0.0:
        raise ValueError("step h must be > 0")


def central_first(f_up: float, f_down: float, h: float) -> float:
    """(f(x+h) - f(x-h)) / 2h."""
    _check_step(h)
    return (f_up - f_down) / (2.0 * h)


def central_second(f_up: float, f_mid: float, f_down: float, h: float) -> float:
    """(f(x+h) - 2 f(x) + f(x-h)) / h^2."""
    _check_step(h)
    return (f_up - 2.0 * f_mid + f_down) / (h * h)


def one_sided(f_hi: float, f_lo: float, h: float) -> float:
    """(f(x) - f(x-h)) / h, or equivalently the forward form with shifted x."""
    _check_step(h)
    return (f_hi - f_lo) / h


def derivative(fn: ScalarFn, x: float, h: float) -> float:
    """Central first derivative of a scalar function at ``x``.

    Parameters
    ----------
    fn:
        Scalar function of one variable.
    x:
        Evaluation point.
    h:
        Bump size (> 0). The truncation error is ``O(h^2)`` for smooth ``fn``.
    """
    return central_first(fn(x + h), fn(x - h), h)


def second_derivative(fn: ScalarFn, x: float, h: float) -> float:
    """Central second derivative of a scalar function at ``x``."""
    return central_second(fn(x + h), fn(x), fn(x - h), h)
