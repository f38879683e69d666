"""Time-stepped Black-Scholes valuation.

A discretization strategy walks a step grid ``0 = t_0 < ... < t_n = T`` and
produces the option value for every maturity ``t_i`` on it (the *term
structure*). At each step the strategy accumulates discounting, dividend
and variance contributions over the steps so far, recomputes ``d1``/``d2``
from those running totals (the per-step time variable is the elapsed time
``t_i``) and evaluates the Black-Scholes call/put formula on them.

The value at ``t_0`` is the intrinsic value, the ``T -> 0+`` limit of the
formula. The discrete price is the last entry.

Two strategies are provided:

- :class:`CompoundingAccumulation` compounds the rate and the dividend yield
  once per step (simple interest within a step), so the discount factor is
  the running product of ``1 / (1 + r dt_i)``. It converges to the
  continuous-time price with error ``O(max dt_i)``.
- :class:`ForwardDriftAccumulation` carries a synthetic forward of the
  underlying along the grid with the risk-neutral drift ``exp((r - q) dt_i)``
  and discounts with ``exp(-r dt_i)`` per step. It reproduces the
  continuous-time price for every step count, up to rounding.

All work is done on NumPy arrays local to the call, so strategies are pure
and safe to call repeatedly with bumped inputs.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import numpy as np

from ..config import DiscretizationKind
from ..exceptions import InvalidParameterError
from ..typing import FloatArray
from .bs import _validate_scalar_inputs, intrinsic_value
from .normal import norm_cdf


def black_from_accumulations(
    *,
    prepaid_forward: FloatArray,
    discounted_strike: FloatArray,
    total_variance: FloatArray,
    is_call: bool,
) -> FloatArray:
    """Black-Scholes value from per-step running totals.

    ``prepaid_forward`` is :math:`S e^{-q t}` (or its discrete analogue),
    ``discounted_strike`` is :math:`K e^{-r t}` and ``total_variance`` is
    :math:`\\sigma^2 t`, all evaluated at each grid time ``t``.
    """
    sd = np.sqrt(total_variance)
    d1 = (np.log(prepaid_forward / discounted_strike) + 0.5 * total_variance) / sd
    d2 = d1 - sd
    if is_call:
        return prepaid_forward * norm_cdf(d1) - discounted_strike * norm_cdf(d2)
    return discounted_strike * norm_cdf(-d2) - prepaid_forward * norm_cdf(-d1)


@runtime_checkable
class DiscretizationStrategy(Protocol):
    """Maps a step grid to the option value at every grid maturity."""

    name: str

    def term_structure(
        self,
        *,
        spot: float,
        strike: float,
        r: float,
        q: float,
        sigma: float,
        times: FloatArray,
        is_call: bool,
    ) -> FloatArray:
        """Return ``V(t_0), ..., V(t_n)`` with ``V(t_0)`` the intrinsic value."""

    def rate_floor(self, times: FloatArray) -> float:
        """Rates at or below this value are rejected for the grid ``times``."""


def _steps(times: FloatArray) -> FloatArray:
    times = np.asarray(times, dtype=float)
    if times.ndim != 1 or times.size < 2:
        raise ValueError("times must be 1D with at least 2 points")
    if times[0] != 0.0:
        raise ValueError("times must start at 0")
    dts = np.diff(times)
    if np.any(dts <= 0.0):
        raise ValueError("times must be strictly increasing")
    return dts


@dataclass(frozen=True, slots=True)
class CompoundingAccumulation:
    name: str = DiscretizationKind.COMPOUNDING.value

    def rate_floor(self, times: FloatArray) -> float:
        # 1 + r*dt > 0 on the longest step
        return -1.0 / float(_steps(times).max())

    def term_structure(
        self,
        *,
        spot: float,
        strike: float,
        r: float,
        q: float,
        sigma: float,
        times: FloatArray,
        is_call: bool,
    ) -> FloatArray:
        dts = _steps(times)
        _validate_scalar_inputs(spot=spot, strike=strike, sigma=sigma, tau=dts[-1])

        growth_r = 1.0 + r * dts
        if np.any(growth_r <= 0.0):
            raise InvalidParameterError(
                f"per-step growth 1 + r*dt must be > 0 (r={r}, max dt={dts.max()})"
            )
        growth_q = 1.0 + q * dts

        df_r = np.cumprod(1.0 / growth_r)
        df_q = np.cumprod(1.0 / growth_q)
        variance = np.cumsum(sigma * sigma * dts)

        values = black_from_accumulations(
            prepaid_forward=spot * df_q,
            discounted_strike=strike * df_r,
            total_variance=variance,
            is_call=is_call,
        )
        v0 = intrinsic_value(spot=spot, strike=strike, is_call=is_call)
        return np.concatenate(([v0], values))


@dataclass(frozen=True, slots=True)
class ForwardDriftAccumulation:
    name: str = DiscretizationKind.FORWARD_DRIFT.value

    def rate_floor(self, times: FloatArray) -> float:
        return -math.inf

    def term_structure(
        self,
        *,
        spot: float,
        strike: float,
        r: float,
        q: float,
        sigma: float,
        times: FloatArray,
        is_call: bool,
    ) -> FloatArray:
        dts = _steps(times)
        _validate_scalar_inputs(spot=spot, strike=strike, sigma=sigma, tau=dts[-1])

        # synthetic underlying carried forward one step at a time
        fwd = spot * np.cumprod(np.exp((r - q) * dts))
        df_r = np.cumprod(np.exp(-r * dts))
        variance = np.cumsum(sigma * sigma * dts)

        values = black_from_accumulations(
            prepaid_forward=fwd * df_r,
            discounted_strike=strike * df_r,
            total_variance=variance,
            is_call=is_call,
        )
        v0 = intrinsic_value(spot=spot, strike=strike, is_call=is_call)
        return np.concatenate(([v0], values))


_STRATEGIES: dict[DiscretizationKind, DiscretizationStrategy] = {
    DiscretizationKind.COMPOUNDING: CompoundingAccumulation(),
    DiscretizationKind.FORWARD_DRIFT: ForwardDriftAccumulation(),
}


def get_strategy(kind: DiscretizationKind | str) -> DiscretizationStrategy:
    try:
        return _STRATEGIES[DiscretizationKind(kind)]
    except (KeyError, ValueError) as exc:
        raise ValueError(f"Unknown discretization strategy: {kind!r}") from exc
