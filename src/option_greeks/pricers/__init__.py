"""option_greeks.pricers

Pricing engines: each takes an :class:`~option_greeks.types.OptionParameters`
and returns a :class:`~option_greeks.types.PricingResult`.

- :class:`ContinuousPricer`: closed-form Black-Scholes-Merton, analytic or
  bumped Greeks.
- :class:`DiscretePricer`: time-stepped valuation with bumped Greeks.
"""

from .continuous import ContinuousPricer, bs_greeks, bs_price
from .discrete import DiscretePricer
from .finite_diff import finite_diff_greeks

__all__ = [
    "ContinuousPricer",
    "DiscretePricer",
    "bs_price",
    "bs_greeks",
    "finite_diff_greeks",
]
