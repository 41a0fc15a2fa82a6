import numpy as np
import pytest
import scipy.special

import besselkit
from besselkit import SingularityError

DERIVATIVES = [
    (besselkit.jvp, scipy.special.jvp),
    (besselkit.yvp, scipy.special.yvp),
    (besselkit.ivp, scipy.special.ivp),
    (besselkit.kvp, scipy.special.kvp),
    (besselkit.h1vp, scipy.special.h1vp),
    (besselkit.h2vp, scipy.special.h2vp),
]


@pytest.mark.parametrize("func, reference", DERIVATIVES)
@pytest.mark.parametrize("v", [0, 0.3, 1.7, 3])
@pytest.mark.parametrize("z", [0.8, 5.0, 3 + 2j, 30.0])
def test_derivatives_against_scipy(func, reference, v, z):
    z = complex(z)
    expected = reference(v, z)
    scale = max(abs(expected), abs(reference(v + 1, z)))
    assert func(v, z) == pytest.approx(expected, rel=1e-9, abs=1e-9 * scale)


def test_derivative_forms():
    """The equivalent forms of the derivative agree"""
    v, z = 1.7, complex(2.5, 0.5)
    iv, kv = besselkit.iv, besselkit.kv
    assert besselkit.ivp(v, z) == pytest.approx(v / z * iv(v, z) + iv(v + 1, z), rel=1e-12)
    assert besselkit.kvp(v, z) == pytest.approx(v / z * kv(v, z) - kv(v + 1, z), rel=1e-12)
    assert besselkit.jvp(v, z) == pytest.approx(besselkit.jv(v - 1, z) - v / z * besselkit.jv(v, z), rel=1e-12)


@pytest.mark.parametrize("v", [1, 2, 2.5])
@pytest.mark.parametrize("z", [1e-12, 1e-9, 1e-6, 0.5, 3.0])
def test_jv_over_z(v, z):
    expected = scipy.special.jv(v, z) / z
    assert besselkit.jv_over_z(v, z) == pytest.approx(expected, rel=1e-9)


def test_jv_over_z_cutoff():
    """Both sides of the cutoff agree to leading order"""
    v = 1.5
    z = 1e-7
    below = besselkit.jv_over_z(v, z * (1 - 1e-9))
    above = besselkit.jv_over_z(v, z * (1 + 1e-9))
    assert below == pytest.approx(above, rel=1e-8)
    assert besselkit.jv_over_z(v, 1e-4, cutoff=1e-3) == pytest.approx(
        np.exp(0.5 * np.log(1e-4) - 1.5 * np.log(2)) / scipy.special.gamma(2.5), rel=1e-15
    )


def test_jv_over_z_at_origin():
    assert besselkit.jv_over_z(1, 0) == 0.5
    assert besselkit.jv_over_z(3, 0) == 0.0
    with pytest.raises(SingularityError):
        besselkit.jv_over_z(0.5, 0)
    with pytest.raises(SingularityError):
        besselkit.jv_over_z(0, 0)
