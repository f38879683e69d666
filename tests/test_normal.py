import math

import numpy as np
import pytest

from option_greeks.models.normal import (
    CDF_SATURATION,
    STANDARD_NORMAL,
    norm_cdf,
    norm_pdf,
)


def _erf_cdf(x: float) -> float:
    return 0.5 * (1.0 + math.erf(x / math.sqrt(2.0)))


def test_cdf_known_values():
    assert norm_cdf(0.0) == 0.5
    assert norm_cdf(1.96) == pytest.approx(0.9750021048517795, abs=1e-12)
    assert norm_cdf(-1.0) == pytest.approx(0.15865525393145707, abs=1e-12)


def test_cdf_matches_erf_within_1e_6_on_practical_range():
    """Accuracy requirement: 1e-6 absolute on [-10, 10] (we are far inside it)."""
    xs = np.linspace(-10.0, 10.0, 2001)
    approx = norm_cdf(xs)
    exact = np.array([_erf_cdf(float(x)) for x in xs])
    np.testing.assert_allclose(approx, exact, rtol=0.0, atol=1e-12)


def test_cdf_is_symmetric_and_bounded():
    xs = np.linspace(-8.0, 8.0, 161)
    np.testing.assert_allclose(norm_cdf(xs) + norm_cdf(-xs), 1.0, atol=1e-15)
    assert np.all((norm_cdf(xs) >= 0.0) & (norm_cdf(xs) <= 1.0))


def test_cdf_saturates_beyond_practical_range():
    assert norm_cdf(CDF_SATURATION + 1.0) == 1.0
    assert norm_cdf(-CDF_SATURATION - 1.0) == 0.0
    assert norm_cdf(math.inf) == 1.0
    assert norm_cdf(-math.inf) == 0.0


def test_pdf_known_values():
    assert norm_pdf(0.0) == pytest.approx(1.0 / math.sqrt(2.0 * math.pi), abs=1e-15)
    assert norm_pdf(1.5) == pytest.approx(norm_pdf(-1.5), abs=0.0)
    assert norm_pdf(1.0) == pytest.approx(math.exp(-0.5) / math.sqrt(2 * math.pi))


def test_scalar_in_float_out_array_in_array_out():
    assert isinstance(norm_cdf(0.3), float)
    assert isinstance(norm_pdf(0.3), float)

    xs = np.array([[-1.0, 0.0], [1.0, 2.0]])
    assert norm_cdf(xs).shape == (2, 2)
    assert norm_pdf(xs).shape == (2, 2)


def test_distribution_object_delegates():
    assert STANDARD_NORMAL.cdf(0.7) == norm_cdf(0.7)
    assert STANDARD_NORMAL.pdf(0.7) == norm_pdf(0.7)
