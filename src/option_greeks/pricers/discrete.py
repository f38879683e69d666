from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..config import BumpConfig, DiscreteConfig
from ..exceptions import SingularInputError
from ..models.discrete import DiscretizationStrategy, get_strategy
from ..numerics.finite_diff import one_sided
from ..numerics.grids import build_step_grid
from ..types import OptionParameters, OptionSide, PricingResult
from ..typing import FloatArray
from .finite_diff import finite_diff_greeks

logger = logging.getLogger(__name__)


def _check_not_singular(p: OptionParameters) -> None:
    if p.time_to_maturity == 0.0:
        raise SingularInputError("time_to_maturity must be positive: no steps to take")
    if p.volatility == 0.0:
        raise SingularInputError("volatility must be positive: d1/d2 are undefined")


@dataclass(frozen=True, slots=True)
class DiscretePricer:
    """Time-stepped Black-Scholes pricer with bumped Greeks.

    The price is the last value of the strategy's term structure over the
    step grid built from ``config``. Greeks are central differences of that
    price with the bumps in ``bump``, the rate bump shrunk to keep the
    strategy's per-step growth positive; theta is the one-sided difference over
    the final step of the same term structure, ``-(V(T) - V(T - dt)) / dt``.

    The pricer holds only immutable configuration, so one instance can be
    shared and called concurrently.
    """

    config: DiscreteConfig = field(default_factory=DiscreteConfig)
    bump: BumpConfig = field(default_factory=BumpConfig)

    @property
    def strategy(self) -> DiscretizationStrategy:
        return get_strategy(self.config.strategy)

    def times(self, p: OptionParameters) -> FloatArray:
        _check_not_singular(p)
        return build_step_grid(p.time_to_maturity, self.config)

    def term_structure(self, p: OptionParameters) -> FloatArray:
        """Option value for every maturity on the step grid, ``V(0)..V(T)``."""
        times = self.times(p)
        return self.strategy.term_structure(
            spot=p.S,
            strike=p.K,
            r=p.r,
            q=p.q,
            sigma=p.sigma,
            times=times,
            is_call=p.side == OptionSide.CALL,
        )

    def price_only(self, p: OptionParameters) -> float:
        return float(self.term_structure(p)[-1])

    def price(self, p: OptionParameters) -> PricingResult:
        times = self.times(p)
        strategy = self.strategy
        values = strategy.term_structure(
            spot=p.S,
            strike=p.K,
            r=p.r,
            q=p.q,
            sigma=p.sigma,
            times=times,
            is_call=p.side == OptionSide.CALL,
        )
        dt_last = float(times[-1] - times[-2])
        # V grows with maturity T; calendar theta is the negative of that slope
        theta = -one_sided(float(values[-1]), float(values[-2]), dt_last)

        logger.debug(
            "discrete %s via %s: %d steps",
            p.side.value,
            strategy.name,
            times.size - 1,
        )

        out = finite_diff_greeks(
            p,
            price_fn=self.price_only,
            bump=self.bump,
            base_price=float(values[-1]),
            theta=theta,
            rate_floor=strategy.rate_floor(times),
        )
        return PricingResult(**{k: float(v) for k, v in out.items()})
