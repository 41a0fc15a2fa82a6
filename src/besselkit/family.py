"""Hankel, spherical and Riccati-Bessel functions

All are exact algebraic transforms of the cylindrical functions:

    H1_v = J_v + i Y_v,  H2_v = J_v - i Y_v
    f_n(z) = sqrt(pi / (2z)) F_{n+1/2}(z)   for (f, F) in (j, J), (y, Y), (h1, H1), (h2, H2)
    S_n = z j_n,  C_n = -z y_n,  Xi_n = z h1_n = S_n - i C_n,  Zeta_n = z h2_n = S_n + i C_n

Riccati-Bessel conventions follow the scattering literature
(https://en.wikipedia.org/wiki/Bessel_function#Riccati%E2%80%93Bessel_functions:_Sn,_Cn,_%CE%BEn,_%CE%B6n).
"""

import numpy as np

from besselkit.config import DEFAULT_CONFIG, RegimeConfig
from besselkit.cylindrical import hankel_pair, jv, yv
from besselkit.errors import SingularityError
from besselkit.regime import validate
from besselkit.types import SComplex, SReal


def hankel1(v: SReal, z: SComplex, *, config: RegimeConfig = DEFAULT_CONFIG) -> np.complex128:
    """Hankel function of the first kind H1_v(z)"""
    v, z = validate(v, z, path="hankel1")
    if z == 0:
        raise SingularityError("H1 is unbounded at z=0", path="hankel1", order=v, argument=z)
    return hankel_pair(v, z, config)[0]


def hankel2(v: SReal, z: SComplex, *, config: RegimeConfig = DEFAULT_CONFIG) -> np.complex128:
    """Hankel function of the second kind H2_v(z)"""
    v, z = validate(v, z, path="hankel2")
    if z == 0:
        raise SingularityError("H2 is unbounded at z=0", path="hankel2", order=v, argument=z)
    return hankel_pair(v, z, config)[1]


def _spherical_prefactor(z: complex) -> np.complex128:
    # principal sqrt(z), so the negative real axis keeps the upper-lip convention
    return np.sqrt(np.pi / 2) / np.sqrt(z)


def spherical_jn(n: SReal, z: SComplex, *, config: RegimeConfig = DEFAULT_CONFIG) -> np.complex128:
    """Spherical Bessel function of the first kind j_n(z)"""
    n, z = validate(n, z, path="spherical_jn")
    if z == 0:
        # j_n(z) ~ z^n / (2n+1)!!
        if n == 0:
            return np.complex128(1.0)
        if n > 0:
            return np.complex128(0.0)
        raise SingularityError("j_n is unbounded at z=0 for n < 0", path="spherical_jn", order=n, argument=z)
    return _spherical_prefactor(z) * jv(n + 0.5, z, config=config)


def spherical_yn(n: SReal, z: SComplex, *, config: RegimeConfig = DEFAULT_CONFIG) -> np.complex128:
    """Spherical Bessel function of the second kind y_n(z)"""
    n, z = validate(n, z, path="spherical_yn")
    if z == 0:
        raise SingularityError("y_n is unbounded at z=0", path="spherical_yn", order=n, argument=z)
    return _spherical_prefactor(z) * yv(n + 0.5, z, config=config)


def spherical_h1(n: SReal, z: SComplex, *, config: RegimeConfig = DEFAULT_CONFIG) -> np.complex128:
    """Spherical Hankel function of the first kind h1_n(z)"""
    n, z = validate(n, z, path="spherical_h1")
    if z == 0:
        raise SingularityError("h1_n is unbounded at z=0", path="spherical_h1", order=n, argument=z)
    return _spherical_prefactor(z) * hankel1(n + 0.5, z, config=config)


def spherical_h2(n: SReal, z: SComplex, *, config: RegimeConfig = DEFAULT_CONFIG) -> np.complex128:
    """Spherical Hankel function of the second kind h2_n(z)"""
    n, z = validate(n, z, path="spherical_h2")
    if z == 0:
        raise SingularityError("h2_n is unbounded at z=0", path="spherical_h2", order=n, argument=z)
    return _spherical_prefactor(z) * hankel2(n + 0.5, z, config=config)


def riccati_s(n: SReal, z: SComplex, *, config: RegimeConfig = DEFAULT_CONFIG) -> np.complex128:
    """Riccati-Bessel S_n(z) = z j_n(z)"""
    n, z = validate(n, z, path="riccati_s")
    if z == 0:
        if n > -1:
            return np.complex128(0.0)
        raise SingularityError("S_n is unbounded at z=0 for n <= -1", path="riccati_s", order=n, argument=z)
    return z * spherical_jn(n, z, config=config)


def riccati_c(n: SReal, z: SComplex, *, config: RegimeConfig = DEFAULT_CONFIG) -> np.complex128:
    """Riccati-Bessel C_n(z) = -z y_n(z)"""
    n, z = validate(n, z, path="riccati_c")
    if z == 0:
        # C_0(z) = cos z
        if n == 0:
            return np.complex128(1.0)
        raise SingularityError("C_n is unbounded at z=0 for n != 0", path="riccati_c", order=n, argument=z)
    return -z * spherical_yn(n, z, config=config)


def riccati_xi(n: SReal, z: SComplex, *, config: RegimeConfig = DEFAULT_CONFIG) -> np.complex128:
    """Riccati-Bessel Xi_n(z) = z h1_n(z) = S_n(z) - i C_n(z)"""
    n, z = validate(n, z, path="riccati_xi")
    if z == 0:
        if n == 0:
            return np.complex128(-1j)
        raise SingularityError("Xi_n is unbounded at z=0 for n != 0", path="riccati_xi", order=n, argument=z)
    return z * spherical_h1(n, z, config=config)


def riccati_zeta(n: SReal, z: SComplex, *, config: RegimeConfig = DEFAULT_CONFIG) -> np.complex128:
    """Riccati-Bessel Zeta_n(z) = z h2_n(z) = S_n(z) + i C_n(z)"""
    n, z = validate(n, z, path="riccati_zeta")
    if z == 0:
        if n == 0:
            return np.complex128(1j)
        raise SingularityError("Zeta_n is unbounded at z=0 for n != 0", path="riccati_zeta", order=n, argument=z)
    return z * spherical_h2(n, z, config=config)
