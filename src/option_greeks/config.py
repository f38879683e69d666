from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class GreeksMethod(str, Enum):
    ANALYTIC = "analytic"  # closed-form sensitivities
    BUMP = "bump"  # central finite differences of the price function


class StepRule(str, Enum):
    FIXED = "fixed"  # n_steps equal steps over [0, T]
    DAILY = "daily"  # one step per day, stub first


class DiscretizationKind(str, Enum):
    COMPOUNDING = "compounding"
    FORWARD_DRIFT = "forward_drift"


@dataclass(frozen=True, slots=True)
class BumpConfig:
    """Absolute bump sizes for finite-difference Greeks.

    ``theta_step`` is only used when bumping the closed-form price; the
    discrete pricer differences over its own final step.
    """

    spot: float = 0.01
    volatility: float = 0.01
    rate: float = 0.01
    theta_step: float = 1.0 / 365.0

    def __post_init__(self) -> None:
        if self.spot <= 0 or self.volatility <= 0 or self.rate <= 0:
            raise ValueError("bump sizes must be > 0")
        if self.theta_step <= 0:
            raise ValueError("theta_step must be > 0")


@dataclass(frozen=True, slots=True)
class DiscreteConfig:
    n_steps: int = 100
    step_rule: StepRule = StepRule.FIXED
    days_per_year: int = 365
    max_steps: int = 10_000
    strategy: DiscretizationKind = DiscretizationKind.COMPOUNDING

    def __post_init__(self) -> None:
        if self.max_steps <= 0:
            raise ValueError("max_steps must be > 0")
        if self.n_steps <= 0:
            raise ValueError("n_steps must be > 0")
        if self.n_steps > self.max_steps:
            raise ValueError("n_steps must be <= max_steps")
        if self.days_per_year <= 0:
            raise ValueError("days_per_year must be > 0")


@dataclass(frozen=True, slots=True)
class EngineConfig:
    discrete: DiscreteConfig = field(default_factory=DiscreteConfig)
    bump: BumpConfig = field(default_factory=BumpConfig)
    continuous_greeks: GreeksMethod = GreeksMethod.ANALYTIC
