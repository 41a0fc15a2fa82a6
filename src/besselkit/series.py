"""Power series for the functions of the first kind

    J_v(z) = (z/2)^v sum_k (-z^2/4)^k / (k! Gamma(v+k+1))
    I_v(z) = (z/2)^v sum_k (+z^2/4)^k / (k! Gamma(v+k+1))

Accurate while the terms do not grow much before decaying, i.e. for |z|^2/4
small compared to the order. Coefficients come from the term ratio, with the
Gamma function only entering through the leading factor.
"""

import logging

import numpy as np
from scipy.special import loggamma

from besselkit.config import DEFAULT_CONFIG, RegimeConfig
from besselkit.errors import ConvergenceError, DomainError, SingularityError
from besselkit.regime import is_negative_integer

logger = logging.getLogger(__name__)


def power_sum(v: float, z: complex, sign: int, config: RegimeConfig = DEFAULT_CONFIG) -> complex:
    """Normalised sum  sum_k (sign z^2/4)^k Gamma(v+1) / (k! Gamma(v+k+1))

    Stops once the terms are decreasing for good and the last one is below the
    relative tolerance. ``v`` must not be a negative integer.
    """
    x = sign * z * z / 4
    term = 1 + 0j
    total = 1 + 0j
    for k in range(1, config.max_series_terms + 1):
        term *= x / (k * (v + k))
        total += term
        # terms shrink monotonically once k (v + k) exceeds |x|
        if v + k > 0 and abs(x) < k * (v + k) and abs(term) <= config.tolerance * abs(total):
            logger.debug(f"Power series v={v} z={z} converged after {k} terms")
            return total
    raise ConvergenceError(
        f"power series did not converge in {config.max_series_terms} terms",
        estimate=total,
        error=abs(term) / abs(total) if total != 0 else float("inf"),
        path="series",
        order=v,
        argument=z,
    )


def _first_kind_series(v: float, z: complex, sign: int, config: RegimeConfig) -> np.complex128:
    if is_negative_integer(v):
        raise DomainError(
            "series requires a non-negative-integer order; reflect first",
            path="series",
            order=v,
            argument=z,
        )
    if z == 0:
        if v == 0:
            return np.complex128(1.0)
        if v > 0:
            return np.complex128(0.0)
        raise SingularityError("negative non-integer order at z=0", path="series", order=v, argument=z)
    s = power_sum(v, z, sign, config)
    # log form keeps (z/2)^v / Gamma(v+1) finite for large |v|; the complex
    # log-gamma carries the sign of Gamma below zero as a phase of k pi
    return np.complex128(np.exp(v * np.log(z / 2) - loggamma(complex(v + 1))) * s)


def jv_series(v: float, z: complex, config: RegimeConfig = DEFAULT_CONFIG) -> np.complex128:
    """J_v(z) from its power series"""
    return _first_kind_series(v, z, -1, config)


def iv_series(v: float, z: complex, config: RegimeConfig = DEFAULT_CONFIG) -> np.complex128:
    """I_v(z) from its power series"""
    return _first_kind_series(v, z, 1, config)


def _log_first_kind_series(v: float, z: complex, sign: int, config: RegimeConfig) -> complex:
    if not v > -1:
        raise DomainError("log series requires v > -1", path="series", order=v, argument=z)
    if z == 0:
        raise SingularityError("log of the series vanishes at z=0", path="series", order=v, argument=z)
    s = power_sum(v, z, sign, config)
    return complex(v * np.log(z / 2) - loggamma(v + 1) + np.log(s))


def log_jv_series(v: float, z: complex, config: RegimeConfig = DEFAULT_CONFIG) -> complex:
    """Complex logarithm of J_v(z), usable where J_v(z) itself underflows"""
    return _log_first_kind_series(v, z, -1, config)


def log_iv_series(v: float, z: complex, config: RegimeConfig = DEFAULT_CONFIG) -> complex:
    """Complex logarithm of I_v(z), usable where I_v(z) itself underflows"""
    return _log_first_kind_series(v, z, 1, config)
