import math

import pytest

from option_greeks.numerics.finite_diff import (
    central_first,
    central_second,
    derivative,
    one_sided,
    second_derivative,
)


def _quadratic(x: float) -> float:
    return 3.0 * x * x + 2.0 * x + 1.0


def test_central_stencils_exact_for_quadratics():
    """Central differences have no truncation error on a quadratic."""
    assert derivative(_quadratic, 0.7, 0.1) == pytest.approx(6.2, abs=1e-12)
    assert second_derivative(_quadratic, 0.7, 0.1) == pytest.approx(6.0, abs=1e-9)


def test_one_sided_exact_for_linear():
    f_hi, f_lo = 2.0 * 1.5 + 3.0, 2.0 * 1.25 + 3.0
    assert one_sided(f_hi, f_lo, 0.25) == pytest.approx(2.0, abs=1e-14)


def test_central_first_is_second_order():
    """Halving h should cut the error on exp by about 4x."""
    errs = [abs(derivative(math.exp, 1.0, h) - math.e) for h in (0.1, 0.05)]
    assert errs[0] / errs[1] == pytest.approx(4.0, rel=0.02)


@pytest.mark.parametrize("h", [0.0, -0.1])
def test_step_must_be_positive(h):
    with pytest.raises(ValueError):
        central_first(1.0, 0.0, h)
    with pytest.raises(ValueError):
        central_second(1.0, 0.5, 0.0, h)
    with pytest.raises(ValueError):
        one_sided(1.0, 0.0, h)
