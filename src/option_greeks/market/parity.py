from __future__ import annotations

import math

from ..types import OptionParameters


def forward_discounted(p: OptionParameters) -> float:
    """S*e^{-q T} - K*e^{-r T} (the RHS of put-call parity)."""
    return p.S * math.exp(-p.q * p.T) - p.K * math.exp(-p.r * p.T)


def put_call_parity_residual(*, call: float, put: float, p: OptionParameters) -> float:
    """
    Residual = (C - P) - (S e^{-q T} - K e^{-r T}).
    Should be ~0 for European options under consistent inputs.
    """
    return (call - put) - forward_discounted(p)


def delta_parity_residual(
    *, call_delta: float, put_delta: float, p: OptionParameters
) -> float:
    """Residual = (delta_C - delta_P) - e^{-q T}."""
    return (call_delta - put_delta) - math.exp(-p.q * p.T)
