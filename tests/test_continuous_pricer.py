import math

import pytest

from option_greeks.config import BumpConfig, GreeksMethod
from option_greeks.exceptions import SingularInputError
from option_greeks.market.parity import delta_parity_residual, put_call_parity_residual
from option_greeks.pricers.continuous import ContinuousPricer, bs_price
from option_greeks.types import OptionSide, PricingResult


def test_returns_pricing_result(make_params):
    res = ContinuousPricer().price(make_params())
    assert isinstance(res, PricingResult)
    assert res.price == pytest.approx(10.450583572185565, abs=1e-6)
    assert set(res.as_dict()) == {"price", "delta", "gamma", "theta", "vega", "rho"}


@pytest.mark.parametrize("side", list(OptionSide))
def test_bumped_greeks_agree_with_analytic(make_params, side):
    p = make_params(S=105.0, K=100.0, r=0.03, q=0.01, sigma=0.25, T=0.8, side=side)
    analytic = ContinuousPricer().price(p)
    bumped = ContinuousPricer(greeks=GreeksMethod.BUMP).price(p)

    assert bumped.price == analytic.price
    assert bumped.delta == pytest.approx(analytic.delta, abs=1e-6)
    assert bumped.gamma == pytest.approx(analytic.gamma, abs=1e-6)
    assert bumped.vega == pytest.approx(analytic.vega, abs=1e-2)
    assert bumped.rho == pytest.approx(analytic.rho, abs=1e-2)
    assert bumped.theta == pytest.approx(analytic.theta, abs=1e-3)


def test_bump_sizes_are_clamped_for_small_inputs(make_params):
    """A 0.01 vol bump on a 0.5% vol would go negative without clamping."""
    p = make_params(sigma=0.005, T=0.1)
    pricer = ContinuousPricer(greeks=GreeksMethod.BUMP, bump=BumpConfig(volatility=0.01))
    assert math.isfinite(pricer.price(p).vega)


def test_put_call_parity(make_params):
    kw = dict(S=100.0, K=110.0, r=0.02, q=0.03, sigma=0.4, T=1.5)
    call = ContinuousPricer().price(make_params(**kw))
    put_params = make_params(side=OptionSide.PUT, **kw)
    put = ContinuousPricer().price(put_params)

    assert abs(put_call_parity_residual(call=call.price, put=put.price, p=put_params)) < 1e-6
    assert abs(
        delta_parity_residual(call_delta=call.delta, put_delta=put.delta, p=put_params)
    ) < 1e-12


def test_scalar_wrapper_dispatches_on_side(make_params):
    call = bs_price(make_params())
    put = bs_price(make_params(side=OptionSide.PUT))
    assert call > put > 0.0


def test_zero_maturity_raises(make_params):
    with pytest.raises(SingularInputError):
        ContinuousPricer().price(make_params(T=0.0))
    with pytest.raises(SingularInputError):
        ContinuousPricer(greeks=GreeksMethod.BUMP).price(make_params(sigma=0.0))
