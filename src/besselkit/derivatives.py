"""Derivatives with respect to the argument, and J_v(z)/z near the origin"""

import numpy as np
from scipy.special import rgamma

from besselkit.config import DEFAULT_CONFIG, RegimeConfig
from besselkit.cylindrical import iv, jv, kv, yv
from besselkit.errors import SingularityError
from besselkit.family import hankel1, hankel2
from besselkit.regime import validate
from besselkit.types import SComplex, SReal


def _cylindrical_prime(func, v, z, config):
    if v == 0:
        return -func(1, z, config=config)
    return 0.5 * (func(v - 1, z, config=config) - func(v + 1, z, config=config))


def jvp(v: SReal, z: SComplex, *, config: RegimeConfig = DEFAULT_CONFIG) -> np.complex128:
    """Derivative of the Bessel function of the first kind.

    From https://functions.wolfram.com/Bessel-TypeFunctions/BesselJ/20/ShowAll.html
    """
    v, z = validate(v, z, path="jvp")
    return _cylindrical_prime(jv, v, z, config)


def yvp(v: SReal, z: SComplex, *, config: RegimeConfig = DEFAULT_CONFIG) -> np.complex128:
    """Derivative of the Bessel function of the second kind."""
    v, z = validate(v, z, path="yvp")
    return _cylindrical_prime(yv, v, z, config)


def h1vp(v: SReal, z: SComplex, *, config: RegimeConfig = DEFAULT_CONFIG) -> np.complex128:
    v, z = validate(v, z, path="h1vp")
    return _cylindrical_prime(hankel1, v, z, config)


def h2vp(v: SReal, z: SComplex, *, config: RegimeConfig = DEFAULT_CONFIG) -> np.complex128:
    v, z = validate(v, z, path="h2vp")
    return _cylindrical_prime(hankel2, v, z, config)


def ivp(v: SReal, z: SComplex, *, config: RegimeConfig = DEFAULT_CONFIG) -> np.complex128:
    """Derivative of modified Bessel function of the first kind.

    From https://functions.wolfram.com/Bessel-TypeFunctions/BesselI/20/ShowAll.html
    """
    v, z = validate(v, z, path="ivp")
    if v == 0:
        return iv(1, z, config=config)
    return 0.5 * (iv(v - 1, z, config=config) + iv(v + 1, z, config=config))


def kvp(v: SReal, z: SComplex, *, config: RegimeConfig = DEFAULT_CONFIG) -> np.complex128:
    """Derivative of modified Bessel function of the second kind.

    From https://functions.wolfram.com/Bessel-TypeFunctions/BesselK/20/ShowAll.html
    """
    v, z = validate(v, z, path="kvp")
    if v == 0:
        return -kv(1, z, config=config)
    return -0.5 * (kv(v - 1, z, config=config) + kv(v + 1, z, config=config))


def jv_over_z(v: SReal, z: SComplex, *, cutoff: float = 1e-7, config: RegimeConfig = DEFAULT_CONFIG) -> np.complex128:
    """Compute J_v(z) / z with care around z=0

    Uses the leading term of the power series for |z| < cutoff
    """
    v, z = validate(v, z, path="jv_over_z")
    if z == 0:
        if v == 1:
            return np.complex128(0.5)
        if v > 1:
            return np.complex128(0.0)
        raise SingularityError("J_v(z)/z is unbounded at z=0 for v < 1", path="jv_over_z", order=v, argument=z)
    if abs(z) < cutoff:
        return np.complex128(np.exp((v - 1) * np.log(z) - v * np.log(2)) * rgamma(v + 1))
    return jv(v, z, config=config) / z
