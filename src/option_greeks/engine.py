"""Single entry point: parameters in, priced result out.

:class:`PricingFacade` validates an :class:`~option_greeks.types.OptionParameters`,
dispatches on its ``mode`` to the continuous or the discrete pricer and
returns a fully-populated :class:`~option_greeks.types.PricingResult`, or
raises. It keeps nothing between calls besides its (immutable) configuration.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .config import EngineConfig
from .exceptions import SingularInputError, UnsupportedModeError
from .pricers.continuous import ContinuousPricer
from .pricers.discrete import DiscretePricer
from .types import (
    OptionParameters,
    PricingMode,
    PricingResult,
    parse_mode,
    parse_side,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PricingFacade:
    config: EngineConfig = field(default_factory=EngineConfig)

    @property
    def continuous(self) -> ContinuousPricer:
        return ContinuousPricer(
            greeks=self.config.continuous_greeks, bump=self.config.bump
        )

    @property
    def discrete(self) -> DiscretePricer:
        return DiscretePricer(config=self.config.discrete, bump=self.config.bump)

    def price(self, params: OptionParameters) -> PricingResult:
        """Price ``params`` with the pricer selected by ``params.mode``.

        Raises
        ------
        SingularInputError
            For a zero maturity or volatility, or if any output is not finite.
        InvalidParameterError
            For inputs outside the model's domain.
        UnsupportedModeError
            If ``params.mode`` is not a :class:`PricingMode`.
        """
        logger.debug(
            "pricing %s %s: S=%g K=%g T=%g sigma=%g r=%g q=%g",
            params.mode.value,
            params.side.value,
            params.spot,
            params.strike,
            params.time_to_maturity,
            params.volatility,
            params.risk_free_rate,
            params.dividend_yield,
        )

        if params.mode == PricingMode.CONTINUOUS:
            result = self.continuous.price(params)
        elif params.mode == PricingMode.DISCRETE:
            result = self.discrete.price(params)
        else:
            raise UnsupportedModeError(f"Unsupported pricing mode: {params.mode!r}")

        if not result.is_finite():
            raise SingularInputError(f"non-finite pricing result: {result.as_dict()}")
        return result

    def price_request(
        self,
        *,
        side: str,
        spot: float,
        strike: float,
        time_to_maturity: float,
        volatility: float,
        risk_free_rate: float,
        dividend_yield: float = 0.0,
        mode: str = PricingMode.CONTINUOUS.value,
    ) -> PricingResult:
        """Price from the plain request contract (``side``/``mode`` as strings)."""
        params = OptionParameters(
            side=parse_side(side),
            spot=spot,
            strike=strike,
            time_to_maturity=time_to_maturity,
            volatility=volatility,
            risk_free_rate=risk_free_rate,
            dividend_yield=dividend_yield,
            mode=parse_mode(mode),
        )
        return self.price(params)


_DEFAULT_FACADE = PricingFacade()


def price(params: OptionParameters) -> PricingResult:
    """Price ``params`` with the default engine configuration."""
    return _DEFAULT_FACADE.price(params)


def price_option(**request) -> PricingResult:
    """Module-level shortcut for :meth:`PricingFacade.price_request`."""
    return _DEFAULT_FACADE.price_request(**request)
