from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..config import BumpConfig, GreeksMethod
from ..models import bs as bs_model
from ..types import OptionParameters, OptionSide, PricingResult
from .finite_diff import finite_diff_greeks

logger = logging.getLogger(__name__)


# -------------------------
# BSM wrappers (scalar)
# -------------------------
def bs_price_call(p: OptionParameters) -> float:
    return bs_model.call_price(
        spot=p.S,
        strike=p.K,
        r=p.r,
        q=p.q,
        sigma=p.sigma,
        tau=p.T,
    )


def bs_price_put(p: OptionParameters) -> float:
    return bs_model.put_price(
        spot=p.S,
        strike=p.K,
        r=p.r,
        q=p.q,
        sigma=p.sigma,
        tau=p.T,
    )


def bs_price(p: OptionParameters) -> float:
    if p.side == OptionSide.CALL:
        return bs_price_call(p)
    if p.side == OptionSide.PUT:
        return bs_price_put(p)
    raise ValueError(f"Unsupported option side: {p.side}")


def bs_greeks(p: OptionParameters) -> dict[str, float]:
    kwargs = dict(spot=p.S, strike=p.K, r=p.r, q=p.q, sigma=p.sigma, tau=p.T)
    if p.side == OptionSide.CALL:
        return bs_model.call_greeks(**kwargs)
    if p.side == OptionSide.PUT:
        return bs_model.put_greeks(**kwargs)
    raise ValueError(f"Unsupported option side: {p.side}")


@dataclass(frozen=True, slots=True)
class ContinuousPricer:
    """Closed-form Black-Scholes-Merton pricer.

    Parameters
    ----------
    greeks : GreeksMethod, default GreeksMethod.ANALYTIC
        ``ANALYTIC`` uses the closed-form sensitivities; ``BUMP`` re-prices the
        closed-form value with the bumps in ``bump``.
    bump : BumpConfig
        Bump sizes used when ``greeks`` is ``BUMP``.

    Raises
    ------
    SingularInputError
        From :meth:`price`, when ``time_to_maturity`` or ``volatility`` is zero.
    """

    greeks: GreeksMethod = GreeksMethod.ANALYTIC
    bump: BumpConfig = field(default_factory=BumpConfig)

    def price(self, p: OptionParameters) -> PricingResult:
        if self.greeks == GreeksMethod.ANALYTIC:
            out = bs_greeks(p)
        elif self.greeks == GreeksMethod.BUMP:
            out = finite_diff_greeks(p, price_fn=bs_price, bump=self.bump)
        else:
            raise ValueError(f"Unsupported greeks method: {self.greeks}")

        logger.debug("continuous %s greeks for %s", self.greeks.value, p.side.value)
        return PricingResult(**{k: float(v) for k, v in out.items()})
