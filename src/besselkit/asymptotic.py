"""Hankel asymptotic expansions for large |z|

All kinds share the coefficients

    a_k(v) = (4v^2 - 1)(4v^2 - 9)...(4v^2 - (2k-1)^2) / (k! 8^k)

and differ only in the envelope and in the phase of the correction series
sum_k a_k (d/z)^k, with d one of {i, -i, -1, +1}:

    H1_v(z) ~ sqrt(2/(pi z)) e^{+i w} sum a_k ( i/z)^k,   w = z - v pi/2 - pi/4
    H2_v(z) ~ sqrt(2/(pi z)) e^{-i w} sum a_k (-i/z)^k
    I_v(z)  ~ e^z / sqrt(2 pi z) sum a_k (-1/z)^k  (+ exponentially small part)
    K_v(z)  ~ sqrt(pi/(2 z)) e^{-z} sum a_k (1/z)^k

The series diverge, so summation stops at the smallest term. Only the right
half plane is accepted; other arguments are reflected by the dispatcher.

Reference: DLMF 10.17 and 10.40
"""

import logging
from dataclasses import dataclass

import numpy as np

from besselkit.config import DEFAULT_CONFIG, RegimeConfig
from besselkit.errors import ConvergenceError, DomainError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AsymptoticResult:
    value: np.complex128
    terms: int
    """Number of correction terms summed (beyond the leading 1)"""
    error: float
    """Relative size of the last retained term, an estimate of the truncation error"""


def _correction_sum(
    v: float, z: complex, direction: complex, config: RegimeConfig, path: str
) -> tuple[complex, int, float]:
    mu = 4 * v * v
    term = 1 + 0j
    total = 1 + 0j
    previous = 1.0
    error = 0.0
    k = 0
    # a_k vanishes from k = |v| + 1/2 on for half-integer v
    terminates = (2 * v) % 2 == 1 and abs(v) + 0.5 <= config.max_asymptotic_terms
    for k in range(1, config.max_asymptotic_terms + 1):
        numerator = mu - (2 * k - 1) ** 2
        if numerator == 0.0:
            # half-integer order: the expansion terminates and is exact
            return total, k - 1, 0.0
        candidate = term * direction * numerator / (8 * k * z)
        size = abs(candidate)
        if size > previous and not terminates:
            # past the optimal truncation point
            k -= 1
            error = previous / abs(total)
            break
        term = candidate
        total += term
        previous = size
        error = size / abs(total)
        if error <= config.tolerance:
            break
    logger.debug(f"Asymptotic series v={v} z={z} d={direction}: {k} terms, error {error:.2e}")
    if error > config.max_asymptotic_error:
        raise ConvergenceError(
            f"asymptotic expansion reached error {error:.2e} after {k} terms",
            estimate=total,
            error=error,
            path=path,
            order=v,
            argument=z,
        )
    return total, k, error


def _check_half_plane(v: float, z: complex, path: str):
    if z.real < 0:
        raise DomainError("asymptotic expansion requires Re z >= 0", path=path, order=v, argument=z)
    if z == 0:
        raise DomainError("asymptotic expansion requires z != 0", path=path, order=v, argument=z)


def _hankel_pair(v: float, z: complex, config: RegimeConfig, path: str):
    _check_half_plane(v, z, path)
    omega = z - v * np.pi / 2 - np.pi / 4
    envelope = np.sqrt(2 / (np.pi * z))
    s1, n1, e1 = _correction_sum(v, z, 1j, config, path)
    s2, n2, e2 = _correction_sum(v, z, -1j, config, path)
    h1 = envelope * np.exp(1j * omega) * s1
    h2 = envelope * np.exp(-1j * omega) * s2
    return h1, h2, max(n1, n2), max(e1, e2)


def hankel1_asymptotic(v: float, z: complex, config: RegimeConfig = DEFAULT_CONFIG) -> AsymptoticResult:
    h1, _, terms, error = _hankel_pair(v, z, config, "asymptotic")
    return AsymptoticResult(np.complex128(h1), terms, error)


def hankel2_asymptotic(v: float, z: complex, config: RegimeConfig = DEFAULT_CONFIG) -> AsymptoticResult:
    _, h2, terms, error = _hankel_pair(v, z, config, "asymptotic")
    return AsymptoticResult(np.complex128(h2), terms, error)


def jv_asymptotic(v: float, z: complex, config: RegimeConfig = DEFAULT_CONFIG) -> AsymptoticResult:
    h1, h2, terms, error = _hankel_pair(v, z, config, "asymptotic")
    return AsymptoticResult(np.complex128((h1 + h2) / 2), terms, error)


def yv_asymptotic(v: float, z: complex, config: RegimeConfig = DEFAULT_CONFIG) -> AsymptoticResult:
    h1, h2, terms, error = _hankel_pair(v, z, config, "asymptotic")
    return AsymptoticResult(np.complex128((h1 - h2) / 2j), terms, error)


def iv_asymptotic(v: float, z: complex, config: RegimeConfig = DEFAULT_CONFIG) -> AsymptoticResult:
    """I_v(z) for large |z|, Re z >= 0

    Off the real axis the recessive e^{-z} contribution is kept, with the
    sign of the branch matching the half plane of z (DLMF 10.40.5).
    """
    path = "asymptotic"
    _check_half_plane(v, z, path)
    envelope = 1 / np.sqrt(2 * np.pi * z)
    s, terms, error = _correction_sum(v, z, -1, config, path)
    value = envelope * np.exp(z) * s
    if z.imag != 0.0:
        sgn = 1 if z.imag > 0 else -1
        s2, n2, e2 = _correction_sum(v, z, 1, config, path)
        value += sgn * 1j * np.exp(sgn * 1j * v * np.pi) * envelope * np.exp(-z) * s2
        terms, error = max(terms, n2), max(error, e2)
    return AsymptoticResult(np.complex128(value), terms, error)


def kv_asymptotic(v: float, z: complex, config: RegimeConfig = DEFAULT_CONFIG) -> AsymptoticResult:
    path = "asymptotic"
    _check_half_plane(v, z, path)
    s, terms, error = _correction_sum(v, z, 1, config, path)
    value = np.sqrt(np.pi / (2 * z)) * np.exp(-z) * s
    return AsymptoticResult(np.complex128(value), terms, error)
