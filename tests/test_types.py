from __future__ import annotations

import dataclasses
import math

import numpy as np
import pytest

from option_greeks.exceptions import (
    InvalidParameterError,
    UnsupportedModeError,
    UnsupportedSideError,
)
from option_greeks.types import (
    OptionParameters,
    OptionSide,
    PricingMode,
    PricingResult,
    parse_mode,
    parse_side,
)


def test_aliases(make_params):
    p = make_params(S=101.0, K=99.0, r=0.02, q=0.01, sigma=0.3, T=0.5)
    assert (p.S, p.K, p.r, p.q, p.sigma, p.T) == (101.0, 99.0, 0.02, 0.01, 0.3, 0.5)


def test_parameters_are_immutable(make_params):
    p = make_params()
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.spot = 50.0  # type: ignore[misc]


@pytest.mark.parametrize(
    "overrides",
    [
        {"S": 0.0},
        {"S": -1.0},
        {"K": 0.0},
        {"T": -0.1},
        {"sigma": -0.2},
        {"q": -0.01},
        {"S": math.nan},
        {"r": math.inf},
    ],
)
def test_invalid_values_are_rejected(make_params, overrides):
    with pytest.raises(InvalidParameterError):
        make_params(**overrides)


def test_zero_maturity_and_volatility_are_constructible(make_params):
    """They are singular only at pricing time."""
    assert make_params(T=0.0).T == 0.0
    assert make_params(sigma=0.0).sigma == 0.0


def test_non_numeric_field_is_rejected():
    with pytest.raises(InvalidParameterError):
        OptionParameters(
            side=OptionSide.CALL,
            spot="100",  # type: ignore[arg-type]
            strike=100.0,
            time_to_maturity=1.0,
            volatility=0.2,
            risk_free_rate=0.05,
        )


def test_numpy_scalars_are_accepted():
    p = OptionParameters(
        side=OptionSide.CALL,
        spot=np.float64(100.0),
        strike=np.int64(100),
        time_to_maturity=1.0,
        volatility=0.2,
        risk_free_rate=0.05,
    )
    assert p.K == 100


def test_enum_fields_accept_their_string_names():
    kw = dict(
        spot=100.0,
        strike=100.0,
        time_to_maturity=1.0,
        volatility=0.2,
        risk_free_rate=0.05,
    )
    p = OptionParameters(side=" Call", mode="DISCRETE", **kw)  # type: ignore[arg-type]
    assert p.side is OptionSide.CALL
    assert p.mode is PricingMode.DISCRETE
    assert dataclasses.replace(p, side="put").side is OptionSide.PUT  # type: ignore[arg-type]

    with pytest.raises(UnsupportedSideError):
        OptionParameters(side="straddle", **kw)  # type: ignore[arg-type]
    with pytest.raises(UnsupportedModeError):
        OptionParameters(side=OptionSide.PUT, mode="american", **kw)  # type: ignore[arg-type]
    with pytest.raises(UnsupportedSideError):
        OptionParameters(side=None, **kw)  # type: ignore[arg-type]


def test_parse_helpers():
    assert parse_side("CALL") is OptionSide.CALL
    assert parse_side(OptionSide.PUT) is OptionSide.PUT
    assert parse_mode("Discrete") is PricingMode.DISCRETE
    with pytest.raises(UnsupportedSideError):
        parse_side("binary")
    with pytest.raises(UnsupportedSideError):
        parse_side(1)  # type: ignore[arg-type]
    with pytest.raises(UnsupportedModeError):
        parse_mode("american")


def test_result_helpers():
    res = PricingResult(price=1.0, delta=0.5, gamma=0.1, theta=-0.2, vega=3.0, rho=0.4)
    assert res.is_finite()
    assert res.as_dict()["theta"] == -0.2
    assert not dataclasses.replace(res, vega=math.inf).is_finite()
