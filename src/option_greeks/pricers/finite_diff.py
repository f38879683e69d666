from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import replace

from ..config import BumpConfig
from ..numerics.finite_diff import central_first, central_second
from ..types import OptionParameters

PriceFn = Callable[[OptionParameters], float]


def bump_sizes(
    p: OptionParameters, bump: BumpConfig, rate_floor: float = -math.inf
) -> tuple[float, float, float]:
    """Spot, volatility and rate bumps, clamped so down-bumps stay in the domain.

    The rate down-bump stays above ``rate_floor``, the lowest rate the pricer
    accepts (``-inf`` when any rate is fine).
    """
    h_x = min(bump.spot, 0.5 * p.spot)  # keep S-h_x positive
    h_sigma = min(bump.volatility, 0.5 * p.volatility)  # keep sigma-h_sigma positive
    h_r = min(bump.rate, 0.5 * (p.risk_free_rate - rate_floor))
    return h_x, h_sigma, h_r


def finite_diff_greeks(
    p: OptionParameters,
    *,
    price_fn: PriceFn,
    bump: BumpConfig | None = None,
    base_price: float | None = None,
    theta: float | None = None,
    rate_floor: float = -math.inf,
) -> dict[str, float]:
    """
    Finite-difference Greeks for a pricer that takes OptionParameters -> price.

    Every Greek is a central difference of ``price_fn`` around ``p``:
    delta/gamma bump spot, vega bumps volatility, rho bumps the rate.

    ``base_price`` and ``theta`` may be supplied by pricers that get them for
    free (the discrete pricer reads both off its term structure). Otherwise
    theta is the central difference in maturity, reported as ∂V/∂t
    (calendar time, holding expiry fixed), i.e. ``-∂V/∂T``.

    Returns dict with price, delta, gamma, theta, vega, rho.
    """
    bump = bump or BumpConfig()
    h_x, h_sigma, h_r = bump_sizes(p, bump, rate_floor)

    # --- base price
    V = price_fn(p) if base_price is None else base_price

    # --- delta, gamma (bump spot)
    V_up_x = price_fn(replace(p, spot=p.spot + h_x))
    V_down_x = price_fn(replace(p, spot=p.spot - h_x))
    delta = central_first(V_up_x, V_down_x, h_x)
    gamma = central_second(V_up_x, V, V_down_x, h_x)

    # --- vega (bump sigma)
    V_up_sigma = price_fn(replace(p, volatility=p.volatility + h_sigma))
    V_down_sigma = price_fn(replace(p, volatility=p.volatility - h_sigma))
    vega = central_first(V_up_sigma, V_down_sigma, h_sigma)

    # --- rho (bump r)
    V_up_r = price_fn(replace(p, risk_free_rate=p.risk_free_rate + h_r))
    V_down_r = price_fn(replace(p, risk_free_rate=p.risk_free_rate - h_r))
    rho = central_first(V_up_r, V_down_r, h_r)

    # --- theta (bump maturity)
    if theta is None:
        T = p.time_to_maturity
        h_t = min(bump.theta_step, 0.5 * T)
        V_up_t = price_fn(replace(p, time_to_maturity=T + h_t))
        V_down_t = price_fn(replace(p, time_to_maturity=T - h_t))
        theta = -central_first(V_up_t, V_down_t, h_t)

    return {
        "price": V,
        "delta": delta,
        "gamma": gamma,
        "theta": theta,
        "vega": vega,
        "rho": rho,
    }
