# src/option_greeks/numerics/grids.py
from __future__ import annotations

import logging
import math

import numpy as np

from ..config import DiscreteConfig, StepRule
from ..exceptions import InvalidParameterError
from ..typing import FloatArray

__all__ = [
    "uniform_step_grid",
    "daily_step_grid",
    "build_step_grid",
]

logger = logging.getLogger(__name__)

# T*days_per_year within this of an integer counts as whole days
_DAY_TOL = 1e-9


def uniform_step_grid(T: float, n_steps: int) -> FloatArray:
    """Times ``0 = t_0 < t_1 < ... < t_n = T`` with equal spacing ``T / n``."""
    if T <= 0:
        raise ValueError("T must be > 0")
    if n_steps <= 0:
        raise ValueError("n_steps must be > 0")
    return np.linspace(0.0, T, n_steps + 1, dtype=float)


def daily_step_grid(T: float, days_per_year: int = 365) -> FloatArray:
    """Day-count grid with step ``1 / days_per_year``.

    The number of steps is ``ceil(T * days_per_year)``. When ``T`` is not a
    whole number of days, the short stub step comes first so the final step
    (the one theta is read from) is one full day. The exception is ``T``
    shorter than one day: the grid is then the single stub step ``[0, T]``.
    """
    if T <= 0:
        raise ValueError("T must be > 0")
    if days_per_year <= 0:
        raise ValueError("days_per_year must be > 0")

    dt = 1.0 / days_per_year
    n_days = math.floor(T * days_per_year + _DAY_TOL)
    stub = T - n_days * dt
    if stub <= _DAY_TOL * dt:
        stub = 0.0

    # counted back from expiry so the final steps are exact days
    times = T - dt * np.arange(n_days, -1, -1, dtype=float)
    if stub > 0.0:
        times = np.concatenate(([0.0], times))
    else:
        times[0] = 0.0
    times[-1] = T
    return times


def build_step_grid(T: float, cfg: DiscreteConfig) -> FloatArray:
    """Step grid for ``T`` under ``cfg``, capped at ``cfg.max_steps`` steps."""
    if cfg.step_rule == StepRule.FIXED:
        n_steps = cfg.n_steps
    elif cfg.step_rule == StepRule.DAILY:
        n_steps = math.ceil(T * cfg.days_per_year - _DAY_TOL)
    else:
        raise ValueError(f"Unsupported step rule: {cfg.step_rule}")

    if n_steps > cfg.max_steps:
        raise InvalidParameterError(
            f"{n_steps} steps exceeds max_steps={cfg.max_steps}; "
            "shorten the maturity or raise the cap"
        )

    if cfg.step_rule == StepRule.FIXED:
        times = uniform_step_grid(T, n_steps)
    else:
        times = daily_step_grid(T, cfg.days_per_year)

    logger.debug(
        "step grid: rule=%s T=%g steps=%d last_dt=%g",
        cfg.step_rule.value,
        T,
        times.size - 1,
        times[-1] - times[-2],
    )
    return times
