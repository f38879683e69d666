from __future__ import annotations

import math

from ..exceptions import InvalidParameterError, SingularInputError
from .normal import norm_cdf, norm_pdf


def _validate_scalar_inputs(
    *, spot: float, strike: float, sigma: float, tau: float
) -> None:
    if spot <= 0.0:
        raise InvalidParameterError("spot must be positive")
    if strike <= 0.0:
        raise InvalidParameterError("strike must be positive")
    if sigma < 0.0:
        raise InvalidParameterError("sigma must be >= 0")
    if tau < 0.0:
        raise InvalidParameterError("tau must be >= 0")
    # d1/d2 divide by sigma*sqrt(tau)
    if sigma == 0.0:
        raise SingularInputError("sigma must be positive: d1/d2 are undefined")
    if tau == 0.0:
        raise SingularInputError("tau must be positive: d1/d2 are undefined")


def discount_factor(rate: float, tau: float) -> float:
    return math.exp(-rate * tau)


def d1_d2_from_spot(
    *, spot: float, strike: float, r: float, q: float, sigma: float, tau: float
) -> tuple[float, float]:
    _validate_scalar_inputs(spot=spot, strike=strike, sigma=sigma, tau=tau)
    vol_sqrt_t = sigma * math.sqrt(tau)
    num = math.log(spot / strike) + (r - q + 0.5 * sigma * sigma) * tau
    d1 = num / vol_sqrt_t
    d2 = d1 - vol_sqrt_t
    return float(d1), float(d2)


def call_price(
    *, spot: float, strike: float, r: float, q: float, sigma: float, tau: float
) -> float:
    """
    Black–Scholes European call with continuous dividend yield q.
    """
    d1, d2 = d1_d2_from_spot(spot=spot, strike=strike, r=r, q=q, sigma=sigma, tau=tau)
    df_r = discount_factor(r, tau)
    df_q = discount_factor(q, tau)
    return spot * df_q * norm_cdf(d1) - strike * df_r * norm_cdf(d2)


def put_price(
    *, spot: float, strike: float, r: float, q: float, sigma: float, tau: float
) -> float:
    """
    Black–Scholes European put with continuous dividend yield q.
    """
    d1, d2 = d1_d2_from_spot(spot=spot, strike=strike, r=r, q=q, sigma=sigma, tau=tau)
    df_r = discount_factor(r, tau)
    df_q = discount_factor(q, tau)
    return strike * df_r * norm_cdf(-d2) - spot * df_q * norm_cdf(-d1)


def call_greeks(
    *, spot: float, strike: float, r: float, q: float, sigma: float, tau: float
) -> dict[str, float]:
    """
    Analytic price and Greeks for a BS European call (with dividend yield q).

    theta is ∂Price/∂t (calendar time, holding expiry fixed), per year.
    vega and rho are per unit (1.00) of volatility and rate.
    """
    d1, d2 = d1_d2_from_spot(spot=spot, strike=strike, r=r, q=q, sigma=sigma, tau=tau)
    sqrt_tau = math.sqrt(tau)
    df_r = discount_factor(r, tau)
    df_q = discount_factor(q, tau)

    Nd1 = norm_cdf(d1)
    Nd2 = norm_cdf(d2)
    phi_d1 = norm_pdf(d1)

    price = spot * df_q * Nd1 - strike * df_r * Nd2
    delta = df_q * Nd1
    gamma = df_q * phi_d1 / (spot * sigma * sqrt_tau)
    vega = spot * df_q * phi_d1 * sqrt_tau
    theta = (
        -(spot * df_q * phi_d1 * sigma) / (2.0 * sqrt_tau)
        - r * strike * df_r * Nd2
        + q * spot * df_q * Nd1
    )
    rho = strike * tau * df_r * Nd2

    return {
        "price": price,
        "delta": delta,
        "gamma": gamma,
        "theta": theta,
        "vega": vega,
        "rho": rho,
    }


def put_greeks(
    *, spot: float, strike: float, r: float, q: float, sigma: float, tau: float
) -> dict[str, float]:
    """
    Analytic price and Greeks for a BS European put (with dividend yield q).

    theta is ∂Price/∂t (calendar time, holding expiry fixed), per year.
    vega and rho are per unit (1.00) of volatility and rate.
    """
    d1, d2 = d1_d2_from_spot(spot=spot, strike=strike, r=r, q=q, sigma=sigma, tau=tau)
    sqrt_tau = math.sqrt(tau)
    df_r = discount_factor(r, tau)
    df_q = discount_factor(q, tau)

    Nmd1 = norm_cdf(-d1)
    Nmd2 = norm_cdf(-d2)
    # phi is even: phi(-d1) == phi(d1)
    phi_d1 = norm_pdf(d1)

    price = strike * df_r * Nmd2 - spot * df_q * Nmd1
    delta = -df_q * Nmd1
    gamma = df_q * phi_d1 / (spot * sigma * sqrt_tau)
    vega = spot * df_q * phi_d1 * sqrt_tau
    theta = (
        -(spot * df_q * phi_d1 * sigma) / (2.0 * sqrt_tau)
        + r * strike * df_r * Nmd2
        - q * spot * df_q * Nmd1
    )
    rho = -strike * tau * df_r * Nmd2

    return {
        "price": price,
        "delta": delta,
        "gamma": gamma,
        "theta": theta,
        "vega": vega,
        "rho": rho,
    }


def intrinsic_value(*, spot: float, strike: float, is_call: bool) -> float:
    """Payoff at expiry; the T -> 0+ limit of the BS price."""
    if is_call:
        return max(spot - strike, 0.0)
    return max(strike - spot, 0.0)
