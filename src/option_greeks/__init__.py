"""
option_greeks

Black-Scholes option prices and Greeks, closed-form or time-stepped.

This package exposes the main user-facing names at the top level, so you
can write, for example:

    from option_greeks import OptionParameters, OptionSide, price
"""

import logging

# Re-export pricing entrypoints (nice public names)
from .config import (
    BumpConfig,
    DiscreteConfig,
    DiscretizationKind,
    EngineConfig,
    GreeksMethod,
    StepRule,
)
from .engine import PricingFacade, price, price_option
from .exceptions import (
    InvalidParameterError,
    PricingError,
    SingularInputError,
    UnsupportedModeError,
    UnsupportedSideError,
)
from .models.normal import NormalDistribution, norm_cdf, norm_pdf
from .pricers import ContinuousPricer, DiscretePricer
from .types import OptionParameters, OptionSide, PricingMode, PricingResult

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Types
    "OptionSide",
    "PricingMode",
    "OptionParameters",
    "PricingResult",
    # Config
    "BumpConfig",
    "DiscreteConfig",
    "DiscretizationKind",
    "EngineConfig",
    "GreeksMethod",
    "StepRule",
    # Errors
    "PricingError",
    "InvalidParameterError",
    "SingularInputError",
    "UnsupportedSideError",
    "UnsupportedModeError",
    # Pricers
    "NormalDistribution",
    "norm_cdf",
    "norm_pdf",
    "ContinuousPricer",
    "DiscretePricer",
    "PricingFacade",
    "price",
    "price_option",
]

__version__ = "0.1.0"
