"""Limit resolution at and near integer orders"""

import numpy as np
import pytest
import scipy.special

from besselkit import kv, yv
from besselkit.limits import reflect_integer_order, symmetric_limit


def test_symmetric_limit_smooth():
    assert symmetric_limit(np.cos, 0.7) == pytest.approx(np.cos(0.7), rel=1e-12)
    assert symmetric_limit(np.exp, -2.0) == pytest.approx(np.exp(-2.0), rel=1e-12)


def test_symmetric_limit_never_samples_center():
    def quotient(nu):
        # sin(x)/x, which is 0/0 at the center
        assert nu != 0.0
        return np.sin(nu) / nu

    assert symmetric_limit(quotient, 0.0) == pytest.approx(1.0, rel=1e-13)


def test_reflect_integer_order():
    assert reflect_integer_order(lambda v: v + 1, -3.0, -1) == -4
    assert reflect_integer_order(lambda v: v + 1, -2.0, -1) == 3
    assert reflect_integer_order(lambda v: v + 1, -3.0, 1) == 4
    assert reflect_integer_order(lambda v: v + 1, 2.5, -1) == 3.5


@pytest.mark.parametrize("n", [0, 1, 2, 5])
@pytest.mark.parametrize("z", [0.5, 3.0, 10.0, -5 + 2j])
def test_yv_integer(n, z):
    z = complex(z)
    expected = scipy.special.yv(n, z)
    scale = max(abs(expected), abs(scipy.special.yv(n + 1, z)))
    assert yv(n, z) == pytest.approx(expected, rel=1e-9, abs=1e-9 * scale)


@pytest.mark.parametrize("n", [0, 1, 3])
@pytest.mark.parametrize("z", [0.5, 1.5, 8.0, -5 + 2j])
def test_kv_integer(n, z):
    z = complex(z)
    assert kv(n, z) == pytest.approx(scipy.special.kv(n, z), rel=1e-9)


@pytest.mark.parametrize("n", [0, 1, 2])
@pytest.mark.parametrize("eps", [1e-4, 5e-4, -1e-6])
def test_continuity_across_integer(n, eps):
    z = complex(3.0)
    # orders inside the near-integer band stay continuous with the integer value
    assert yv(n + eps, z) == pytest.approx(scipy.special.yv(n + eps, z), rel=1e-9)
    assert kv(n + eps, z) == pytest.approx(scipy.special.kv(n + eps, z), rel=1e-9)
    assert yv(n + eps, z) == pytest.approx(yv(n, z), abs=1e-3)


def test_yv_half_integer():
    assert yv(3.5, 1.0) == pytest.approx(scipy.special.yv(3.5, 1.0), rel=1e-12)


def test_kv_tiny_argument():
    z = 1e-10
    assert kv(0, z) == pytest.approx(scipy.special.kv(0, z), rel=1e-6)
    assert kv(1, z) == pytest.approx(scipy.special.kv(1, z), rel=1e-6)
