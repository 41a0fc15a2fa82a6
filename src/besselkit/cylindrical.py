"""Cylindrical Bessel functions J, Y, I, K of real order and complex argument

Each call classifies (v, z) and routes to one evaluator:

* small |z|: power series (J, I) and the order-reflection formulas (Y, K)
* large |z|: Hankel asymptotic expansions, after reflecting Re z < 0 into
  the right half plane
* otherwise: recurrence in the order. Miller for J and I at non-negative
  order, upward for K and for the Hankel function that decays off the real
  axis, from which Y follows. Negative orders are reflected.
* orders within tolerance of an integer: the limit resolver

Branch cut: principal branch, along the negative real axis, approached from
above. This matches scipy.special for complex input.
"""

import logging
import math

import numpy as np

from besselkit import asymptotic, limits, recurrence, series
from besselkit.config import DEFAULT_CONFIG, RegimeConfig
from besselkit.errors import SingularityError
from besselkit.recurrence import RecurrenceFamily
from besselkit.regime import (
    Regime,
    argument_regime,
    classify,
    is_negative_integer,
    validate,
)
from besselkit.types import SComplex, SReal

logger = logging.getLogger(__name__)


def _sinpi(x: float) -> float:
    """sin(pi x), exactly zero at integers"""
    r = math.fmod(x, 2.0)
    if r == round(r):
        return 0.0
    return math.sin(math.pi * r)


def _cospi(x: float) -> float:
    """cos(pi x), exactly zero at half-integers"""
    r = math.fmod(abs(x), 2.0)
    if r == 0.5 or r == 1.5:
        return 0.0
    return math.cos(math.pi * r)


def _expipi(x: float) -> complex:
    return complex(_cospi(x), _sinpi(x))


def _reflect(z: complex) -> tuple[complex, int]:
    """Write z = w e^{i m pi} with Re w >= 0, returning (w, m)"""
    return -z, 1 if z.imag >= 0 else -1


def uses_hankel_asymptotic(v: float, z: complex, config: RegimeConfig = DEFAULT_CONFIG) -> bool:
    """True where the large-argument expansion is applied directly, without reflection"""
    return z.real >= 0 and argument_regime(v, z, config) is Regime.LARGE_ARGUMENT


def _first_kind_at_zero(v: float, z: complex, path: str) -> np.complex128:
    if v == 0:
        return np.complex128(1.0)
    if v > 0 or is_negative_integer(v):
        return np.complex128(0.0)
    raise SingularityError("unbounded at z=0 for negative non-integer order", path=path, order=v, argument=z)


def _mid_range(v: float, z: complex, config: RegimeConfig) -> tuple[complex, complex, complex]:
    """J_v, H1_v and H2_v in the mid range, for v >= 0

    J is recessive in the order and comes from Miller recurrence. Of H1 and
    H2, the one decaying away from the real axis in the half plane of z grows
    with the order and is recursed upward from its seed pair; the other one
    follows from H1 + H2 = 2J.
    """
    j = recurrence.miller(RecurrenceFamily.CYLINDRICAL, v, z, config)
    n = round(v)
    mu = v - n
    kind = 1 if z.imag >= 0 else 2
    h_mu, h_mu1 = recurrence.hankel_seed_pair(kind, mu, z, config)
    logger.debug(f"H{kind} seed at mu={mu}, recursing upward {n} orders")
    h = recurrence.forward(RecurrenceFamily.CYLINDRICAL, mu, z, h_mu, h_mu1, n)
    if kind == 1:
        return j, h, 2 * j - h
    return j, 2 * j - h, h


def _jv_regular(v: float, z: complex, config: RegimeConfig) -> np.complex128:
    """J_v(z) by argument regime only; v must not be a negative integer"""
    regime = argument_regime(v, z, config)
    if regime is Regime.SMALL_ARGUMENT:
        return series.jv_series(v, z, config)
    if regime is Regime.LARGE_ARGUMENT:
        if z.real >= 0:
            return asymptotic.jv_asymptotic(v, z, config).value
        w, m = _reflect(z)
        return np.complex128(_expipi(m * v) * asymptotic.jv_asymptotic(v, w, config).value)
    if v >= 0:
        return np.complex128(recurrence.miller(RecurrenceFamily.CYLINDRICAL, v, z, config))
    # J_{-nu} = cos(nu pi) J_nu - sin(nu pi) Y_nu
    nu = -v
    j, h1, h2 = _mid_range(nu, z, config)
    return np.complex128(_cospi(nu) * j - _sinpi(nu) * (h1 - h2) / 2j)


def _iv_regular(v: float, z: complex, config: RegimeConfig) -> np.complex128:
    """I_v(z) by argument regime only; v must not be a negative integer"""
    regime = argument_regime(v, z, config)
    if regime is Regime.SMALL_ARGUMENT:
        return series.iv_series(v, z, config)
    if regime is Regime.LARGE_ARGUMENT:
        if z.real >= 0:
            return asymptotic.iv_asymptotic(v, z, config).value
        w, m = _reflect(z)
        return np.complex128(_expipi(m * v) * asymptotic.iv_asymptotic(v, w, config).value)
    if v >= 0:
        return np.complex128(recurrence.miller(RecurrenceFamily.MODIFIED_I, v, z, config))
    # I_{-nu} = I_nu + (2/pi) sin(nu pi) K_nu
    nu = -v
    i_nu = recurrence.miller(RecurrenceFamily.MODIFIED_I, nu, z, config)
    return np.complex128(i_nu + 2 / np.pi * _sinpi(nu) * _kv_regular(nu, z, config))


def _yv_reflection(v: float, z: complex, config: RegimeConfig) -> np.complex128:
    """Y_v = (J_v cos(v pi) - J_{-v}) / sin(v pi), for v away from integers"""
    jpos = _jv_regular(v, z, config)
    jneg = _jv_regular(-v, z, config)
    return np.complex128((jpos * _cospi(v) - jneg) / _sinpi(v))


def _yv_mid(v: float, z: complex, config: RegimeConfig) -> np.complex128:
    """Y_v(z) in the mid range; well defined at integer orders"""
    nu = abs(v)
    j, h1, h2 = _mid_range(nu, z, config)
    y = (h1 - h2) / 2j
    if v < 0:
        # Y_{-nu} = cos(nu pi) Y_nu + sin(nu pi) J_nu
        y = _cospi(nu) * y + _sinpi(nu) * j
    return np.complex128(y)


def _kv_reflection(v: float, z: complex, config: RegimeConfig) -> np.complex128:
    """K_v = pi/2 (I_{-v} - I_v) / sin(v pi), for v away from integers"""
    ipos = _iv_regular(v, z, config)
    ineg = _iv_regular(-v, z, config)
    return np.complex128(np.pi / 2 * (ineg - ipos) / _sinpi(v))


def _kv_right(v: float, z: complex, config: RegimeConfig) -> np.complex128:
    """K_v(z) for v >= 0, Re z >= 0 and |z| outside the series regime"""
    if argument_regime(v, z, config) is Regime.LARGE_ARGUMENT:
        return asymptotic.kv_asymptotic(v, z, config).value
    n = round(v)
    mu = v - n
    k_mu, k_mu1 = recurrence.kv_seed_pair(mu, z, config)
    logger.debug(f"K seed at mu={mu}, recursing upward {n} orders")
    return np.complex128(recurrence.forward(RecurrenceFamily.MODIFIED_K, mu, z, k_mu, k_mu1, n))


def _kv_regular(v: float, z: complex, config: RegimeConfig) -> np.complex128:
    """K_v(z) for v >= 0 and |z| outside the series regime, on either half plane"""
    if z.real >= 0:
        return _kv_right(v, z, config)
    # K_v(w e^{i m pi}) = e^{-i m v pi} K_v(w) - i pi m I_v(w)
    w, m = _reflect(z)
    kw = _kv_right(v, w, config)
    iw = _iv_regular(v, w, config)
    return np.complex128(_expipi(-m * v) * kw - 1j * np.pi * m * iw)


def hankel_pair(v: float, z: complex, config: RegimeConfig = DEFAULT_CONFIG) -> tuple[np.complex128, np.complex128]:
    """H1_v(z) and H2_v(z) for validated (v, z) with z != 0

    Wherever one of the two is available without going through Y, the
    recessive one is computed directly rather than as J +- iY.
    """
    if uses_hankel_asymptotic(v, z, config):
        return (
            asymptotic.hankel1_asymptotic(v, z, config).value,
            asymptotic.hankel2_asymptotic(v, z, config).value,
        )
    if argument_regime(v, z, config) is Regime.MID_RANGE_RECURRENCE:
        nu = abs(v)
        _, h1, h2 = _mid_range(nu, z, config)
        if v < 0:
            # H1_{-nu} = e^{i nu pi} H1_nu, H2_{-nu} = e^{-i nu pi} H2_nu
            h1, h2 = _expipi(nu) * h1, _expipi(-nu) * h2
        return np.complex128(h1), np.complex128(h2)
    j = jv(v, z, config=config)
    y = yv(v, z, config=config)
    return j + 1j * y, j - 1j * y


def jv(v: SReal, z: SComplex, *, config: RegimeConfig = DEFAULT_CONFIG) -> np.complex128:
    """Bessel function of the first kind J_v(z)"""
    v, z = validate(v, z, path="jv")
    if z == 0:
        return _first_kind_at_zero(v, z, "jv")
    regime = classify(v, z, config)
    logger.debug(f"jv({v}, {z}): {regime.name}")
    if regime is Regime.NEAR_INTEGER_ORDER:
        return np.complex128(limits.reflect_integer_order(lambda nu: _jv_regular(nu, z, config), v, -1))
    return _jv_regular(v, z, config)


def iv(v: SReal, z: SComplex, *, config: RegimeConfig = DEFAULT_CONFIG) -> np.complex128:
    """Modified Bessel function of the first kind I_v(z)"""
    v, z = validate(v, z, path="iv")
    if z == 0:
        return _first_kind_at_zero(v, z, "iv")
    regime = classify(v, z, config)
    logger.debug(f"iv({v}, {z}): {regime.name}")
    if regime is Regime.NEAR_INTEGER_ORDER:
        return np.complex128(limits.reflect_integer_order(lambda nu: _iv_regular(nu, z, config), v, 1))
    return _iv_regular(v, z, config)


def yv(v: SReal, z: SComplex, *, config: RegimeConfig = DEFAULT_CONFIG) -> np.complex128:
    """Bessel function of the second kind Y_v(z)"""
    v, z = validate(v, z, path="yv")
    if z == 0:
        raise SingularityError("Y is unbounded at z=0", path="yv", order=v, argument=z)
    regime = classify(v, z, config)
    logger.debug(f"yv({v}, {z}): {regime.name}")
    if uses_hankel_asymptotic(v, z, config):
        # well defined at integer orders, no limit needed
        return asymptotic.yv_asymptotic(v, z, config).value
    if argument_regime(v, z, config) is Regime.MID_RANGE_RECURRENCE:
        return _yv_mid(v, z, config)
    if regime is Regime.NEAR_INTEGER_ORDER:
        return np.complex128(limits.symmetric_limit(lambda nu: _yv_reflection(nu, z, config), v, config))
    return _yv_reflection(v, z, config)


def kv(v: SReal, z: SComplex, *, config: RegimeConfig = DEFAULT_CONFIG) -> np.complex128:
    """Modified Bessel function of the second kind K_v(z)"""
    v, z = validate(v, z, path="kv")
    if z == 0:
        raise SingularityError("K is unbounded at z=0", path="kv", order=v, argument=z)
    # K is even in the order
    v = abs(v)
    regime = classify(v, z, config)
    logger.debug(f"kv({v}, {z}): {regime.name}")
    if argument_regime(v, z, config) is Regime.SMALL_ARGUMENT:
        if regime is Regime.NEAR_INTEGER_ORDER:
            return np.complex128(limits.symmetric_limit(lambda nu: _kv_reflection(nu, z, config), v, config))
        return _kv_reflection(v, z, config)
    return _kv_regular(v, z, config)
