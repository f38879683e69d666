"""Pytest helpers for the option_greeks library."""

from __future__ import annotations

import pytest

from option_greeks.types import OptionParameters, OptionSide, PricingMode


@pytest.fixture
def make_params():
    """Factory fixture for constructing the library's OptionParameters."""

    def _make(
        *,
        S: float = 100.0,
        K: float = 100.0,
        r: float = 0.05,
        sigma: float = 0.2,
        T: float = 1.0,
        q: float = 0.0,
        side: OptionSide = OptionSide.CALL,
        mode: PricingMode = PricingMode.CONTINUOUS,
    ) -> OptionParameters:
        return OptionParameters(
            side=side,
            spot=S,
            strike=K,
            time_to_maturity=T,
            volatility=sigma,
            risk_free_rate=r,
            dividend_yield=q,
            mode=mode,
        )

    return _make
