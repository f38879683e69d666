from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from enum import Enum

from .exceptions import InvalidParameterError, UnsupportedModeError, UnsupportedSideError


class OptionSide(str, Enum):
    """Option contract side.

    Attributes
    ----------
    CALL : str
        Call option ("call").
    PUT : str
        Put option ("put").
    """

    CALL = "call"
    PUT = "put"


class PricingMode(str, Enum):
    """How the Black-Scholes value is computed.

    Attributes
    ----------
    CONTINUOUS : str
        Closed-form continuous-time formula ("continuous").
    DISCRETE : str
        Time-stepped approximation ("discrete").
    """

    CONTINUOUS = "continuous"
    DISCRETE = "discrete"


def parse_side(value: OptionSide | str) -> OptionSide:
    """Coerce ``value`` to :class:`OptionSide` (case-insensitive)."""
    if isinstance(value, OptionSide):
        return value
    if isinstance(value, str):
        try:
            return OptionSide(value.strip().lower())
        except ValueError:
            pass
    raise UnsupportedSideError(f"Unsupported option side: {value!r}")


def parse_mode(value: PricingMode | str) -> PricingMode:
    """Coerce ``value`` to :class:`PricingMode` (case-insensitive)."""
    if isinstance(value, PricingMode):
        return value
    if isinstance(value, str):
        try:
            return PricingMode(value.strip().lower())
        except ValueError:
            pass
    raise UnsupportedModeError(f"Unsupported pricing mode: {value!r}")


def _require_finite(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(f"{name} must be a real number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidParameterError(f"{name} must be finite, got {value!r}")


@dataclass(frozen=True, slots=True)
class OptionParameters:
    """Everything needed to price one European option.

    Parameters
    ----------
    side : OptionSide or str
        Call or put. Strings are parsed case-insensitively.
    spot : float
        Current price of the underlying, :math:`S`.
    strike : float
        Strike price, :math:`K`.
    time_to_maturity : float
        Time to expiry in years, :math:`T`.
    volatility : float
        Annualized Black-Scholes volatility, :math:`\\sigma`.
    risk_free_rate : float
        Continuously-compounded risk-free rate, :math:`r`. May be negative.
    dividend_yield : float, default 0.0
        Continuously-compounded dividend yield, :math:`q`.
    mode : PricingMode or str, default PricingMode.CONTINUOUS
        Pricing mode used by :class:`~option_greeks.engine.PricingFacade`.

    Raises
    ------
    InvalidParameterError
        If a field is non-finite, ``spot``/``strike`` are not positive, or
        ``volatility``, ``time_to_maturity`` or ``dividend_yield`` are negative.
    UnsupportedSideError, UnsupportedModeError
        If ``side`` or ``mode`` do not name a supported side or mode.

    Notes
    -----
    A zero ``time_to_maturity`` or ``volatility`` is accepted here; the pricers
    reject it with :class:`~option_greeks.exceptions.SingularInputError`.
    """

    side: OptionSide
    spot: float
    strike: float
    time_to_maturity: float
    volatility: float
    risk_free_rate: float
    dividend_yield: float = 0.0
    mode: PricingMode = PricingMode.CONTINUOUS

    def __post_init__(self) -> None:
        # frozen: coerce strings like "call" / "Discrete" in place
        object.__setattr__(self, "side", parse_side(self.side))
        object.__setattr__(self, "mode", parse_mode(self.mode))

        for name in (
            "spot",
            "strike",
            "time_to_maturity",
            "volatility",
            "risk_free_rate",
            "dividend_yield",
        ):
            _require_finite(name, getattr(self, name))

        if self.spot <= 0.0:
            raise InvalidParameterError(f"spot must be positive, got {self.spot}")
        if self.strike <= 0.0:
            raise InvalidParameterError(f"strike must be positive, got {self.strike}")
        if self.time_to_maturity < 0.0:
            raise InvalidParameterError(
                f"time_to_maturity must be >= 0, got {self.time_to_maturity}"
            )
        if self.volatility < 0.0:
            raise InvalidParameterError(
                f"volatility must be >= 0, got {self.volatility}"
            )
        if self.dividend_yield < 0.0:
            raise InvalidParameterError(
                f"dividend_yield must be >= 0, got {self.dividend_yield}"
            )

    @property
    def S(self) -> float:
        return self.spot

    @property
    def K(self) -> float:
        return self.strike

    @property
    def T(self) -> float:
        return self.time_to_maturity

    @property
    def sigma(self) -> float:
        return self.volatility

    @property
    def r(self) -> float:
        return self.risk_free_rate

    @property
    def q(self) -> float:
        return self.dividend_yield


@dataclass(frozen=True, slots=True)
class PricingResult:
    """Theoretical value and sensitivities of one option.

    Attributes
    ----------
    price : float
        Option value, in the units of spot/strike.
    delta : float
        dV/dS.
    gamma : float
        d2V/dS2.
    theta : float
        dV/dt per year of calendar time (time decay is negative for a long
        vanilla in normal conditions).
    vega : float
        dV/dsigma per 1.00 of volatility.
    rho : float
        dV/dr per 1.00 of rate.
    """

    price: float
    delta: float
    gamma: float
    theta: float
    vega: float
    rho: float

    def as_dict(self) -> dict[str, float]:
        return {
            "price": self.price,
            "delta": self.delta,
            "gamma": self.gamma,
            "theta": self.theta,
            "vega": self.vega,
            "rho": self.rho,
        }

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in self.as_dict().values())
