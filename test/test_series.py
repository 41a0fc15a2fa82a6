from dataclasses import replace

import numpy as np
import pytest
import scipy.special

from besselkit import DEFAULT_CONFIG, ConvergenceError, DomainError, SingularityError
from besselkit.series import iv_series, jv_series, log_iv_series, log_jv_series, power_sum


@pytest.mark.parametrize("v", [0.0, 0.5, 1.0, 2.7, -1.2, -4.5, 12.25])
@pytest.mark.parametrize("z", [0.1, 1.0, 1.9, -1.5, 1.2 + 0.8j, -0.3 - 1.4j])
def test_series_against_scipy(v, z):
    z = complex(z)
    assert jv_series(v, z) == pytest.approx(scipy.special.jv(v, z), rel=1e-13, abs=1e-15)
    assert iv_series(v, z) == pytest.approx(scipy.special.iv(v, z), rel=1e-13, abs=1e-15)


def test_series_near_negative_integer():
    """1/Gamma keeps the leading coefficients finite close to the poles"""
    v = -3.0 + 1e-9
    assert jv_series(v, 1.3 + 0j) == pytest.approx(scipy.special.jv(v, 1.3), rel=1e-10)
    # the Y_3 admixture is visible at this distance from the pole
    assert jv_series(v, 1.3 + 0j) != pytest.approx(-scipy.special.jv(3, 1.3), rel=1e-8)


def test_series_very_negative_order():
    """(z/2)^v / Gamma(v+1) stays finite where 1/Gamma(v+1) alone overflows"""
    # J_{-n-1/2} = (-1)^{n+1} Y_{n+1/2}, n = 172
    value = jv_series(-172.5, 30 + 0j)
    assert np.isfinite(value)
    assert value == pytest.approx(-scipy.special.yv(172.5, 30.0), rel=1e-10)
    assert iv_series(-172.25, 30 + 0j) == pytest.approx(scipy.special.iv(-172.25, 30.0), rel=1e-10)


def test_series_rejects_negative_integer():
    with pytest.raises(DomainError):
        jv_series(-2.0, 1.0 + 0j)


def test_series_at_origin():
    assert jv_series(0.0, 0j) == 1.0
    assert iv_series(2.5, 0j) == 0.0
    with pytest.raises(SingularityError):
        iv_series(-0.5, 0j)


def test_power_sum_budget():
    config = replace(DEFAULT_CONFIG, max_series_terms=3)
    with pytest.raises(ConvergenceError) as excinfo:
        power_sum(0.3, 1.5 + 0j, -1, config)
    err = excinfo.value
    assert err.path == "series"
    assert err.estimate is not None
    assert 0 < err.error < 1


def test_power_sum_leading_term():
    assert power_sum(1.0, 0j, 1) == 1.0
    assert power_sum(0.0, 1e-9 + 0j, -1) == pytest.approx(1.0)


@pytest.mark.parametrize("v, z", [(30.5, 4.0), (5.0, 3.0 + 2.0j), (80.0, 10.0)])
def test_log_series(v, z):
    z = complex(z)
    expected_j = np.log(scipy.special.jv(v, z))
    expected_i = np.log(scipy.special.iv(v, z))
    # compare through exp to avoid 2 pi i ambiguities in the phase
    assert np.exp(log_jv_series(v, z) - expected_j) == pytest.approx(1.0, rel=1e-12)
    assert np.exp(log_iv_series(v, z) - expected_i) == pytest.approx(1.0, rel=1e-12)


def test_log_series_underflow():
    """The logarithm stays finite where the value is below the double range"""
    logj = log_jv_series(400.0, 2.0 + 0j)
    assert np.isfinite(logj)
    assert logj.real < np.log(np.finfo(float).tiny)
    with pytest.raises(DomainError):
        log_jv_series(-1.5, 2.0 + 0j)
