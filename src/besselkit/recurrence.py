"""Three-term recurrence in the order

    J, Y, H1, H2:  f_{v-1} + f_{v+1} =  (2v/z) f_v
    I:             f_{v-1} - f_{v+1} =  (2v/z) f_v
    K:             f_{v-1} - f_{v+1} = -(2v/z) f_v

Upward recurrence is stable for solutions that grow with the order (H1, H2,
K); for the decaying ones (J, I) we recurse downward from an arbitrary seed
and rescale afterwards (Miller's algorithm). The K seed pair at small order
comes from Steed's evaluation of Temme's continued fraction, and the Hankel
seed pairs follow from it by rotating the argument a quarter turn.

References:
    Numerical Recipes 3rd ed., sections 6.5 and 6.6
    N. M. Temme, "On the numerical evaluation of the modified Bessel function
    of the third kind", J. Comput. Phys. 19 (1975) 324
"""

import enum
import logging
import math
from collections.abc import Callable

import numpy as np

from besselkit.config import DEFAULT_CONFIG, RegimeConfig
from besselkit.errors import ConvergenceError, DomainError
from besselkit.series import log_iv_series, log_jv_series

logger = logging.getLogger(__name__)

_RESCALE = 1e100


class RecurrenceFamily(enum.Enum):
    """Sign pattern (s1, s2) of  f_{v-1} + s1 f_{v+1} = s2 (2v/z) f_v"""

    CYLINDRICAL = (1, 1)
    MODIFIED_I = (-1, 1)
    MODIFIED_K = (-1, -1)

    def forward(self, v: float, z: complex, f_v: complex, f_prev: complex) -> complex:
        """f_{v+1} from f_v and f_{v-1}"""
        s1, s2 = self.value
        return (s2 * (2 * v / z) * f_v - f_prev) / s1

    def backward(self, v: float, z: complex, f_v: complex, f_next: complex) -> complex:
        """f_{v-1} from f_v and f_{v+1}"""
        s1, s2 = self.value
        return s2 * (2 * v / z) * f_v - s1 * f_next

    def residual(self, v: float, z: complex, f_prev: complex, f_v: complex, f_next: complex) -> float:
        """Relative violation of the recurrence by the triple (f_{v-1}, f_v, f_{v+1})"""
        s1, s2 = self.value
        scaled = s2 * (2 * v / z) * f_v
        scale = max(abs(f_prev), abs(f_next), abs(scaled))
        if scale == 0:
            return 0.0
        return abs(f_prev + s1 * f_next - scaled) / scale


def residual(
    func: Callable[[float, complex], complex], family: RecurrenceFamily, v: float, z: complex
) -> float:
    """Check a computed function against its three-term recurrence at order v"""
    return family.residual(v, z, func(v - 1, z), func(v, z), func(v + 1, z))


def forward(
    family: RecurrenceFamily, v: float, z: complex, f_v: complex, f_v1: complex, steps: int
) -> complex:
    """Recurse upward from (f_v, f_{v+1}) and return f_{v+steps}"""
    if steps == 0:
        return f_v
    lower, upper = complex(f_v), complex(f_v1)
    for i in range(1, steps):
        lower, upper = upper, family.forward(v + i, z, upper, lower)
    return upper


def miller(
    family: RecurrenceFamily, v: float, z: complex, config: RegimeConfig = DEFAULT_CONFIG
) -> complex:
    """Value at order v of the recessive solution (J or I) by backward recurrence

    First pass: start at an order well above v with the seed (f_{top+1}, f_top)
    = (0, 1) and sweep downward, rescaling whenever the values get large.
    Second pass: normalise with the power series at an intermediate order
    v + m chosen large enough (v + m >= |z|^2/4) that the series has no
    cancellation. The normalisation is done in logarithms, since that
    reference value can be far below the floating point range.

    Only non-negative orders are accepted: below order zero the recessive
    solution picks up the dominant one, so negative orders are reflected by
    the caller.
    """
    if family is RecurrenceFamily.CYLINDRICAL:
        log_reference = log_jv_series
    elif family is RecurrenceFamily.MODIFIED_I:
        log_reference = log_iv_series
    else:
        raise ValueError(f"Miller recurrence applies to J and I only, not {family.name}")
    if v < 0:
        raise DomainError("Miller recurrence requires a non-negative order", path="miller", order=v, argument=z)

    r = abs(z)
    m = max(1, math.ceil(max(r * r / 4, r) - v))
    steps = m + config.miller_margin
    if steps > config.max_recurrence_steps:
        raise ConvergenceError(
            f"Miller recurrence would need {steps} steps",
            error=float("inf"),
            path="miller",
            order=v,
            argument=z,
        )
    logger.debug(f"Miller recurrence {family.name} v={v} z={z}: {steps} steps, normalising at v+{m}")

    z = complex(z)
    f_next, f_curr = 0j, 1 + 0j
    log_scale = 0.0
    log_norm = None
    for i in range(steps, 0, -1):
        # f_curr is at order v + i
        f_prev = family.backward(v + i, z, f_curr, f_next)
        f_next, f_curr = f_curr, f_prev
        size = abs(f_curr)
        if size > _RESCALE:
            f_next /= size
            f_curr /= size
            log_scale += math.log(size)
        if i - 1 == m:
            if f_curr == 0:
                raise ConvergenceError(
                    "Miller recurrence vanished at the normalisation order",
                    path="miller",
                    order=v,
                    argument=z,
                )
            log_norm = np.log(f_curr) + log_scale

    if f_curr == 0:
        return 0j
    log_value = log_reference(v + m, z, config) + np.log(f_curr) + log_scale - log_norm
    return complex(np.exp(log_value))


def kv_seed_pair(mu: float, z: complex, config: RegimeConfig = DEFAULT_CONFIG) -> tuple[complex, complex]:
    """K_mu(z) and K_{mu+1}(z) for |mu| <= 1/2 and Re z >= 0

    Steed's algorithm for Temme's continued fraction CF2, which delivers both
    the ratio K_{mu+1}/K_mu and the normalisation in the same sweep.
    """
    if abs(mu) > 0.5:
        raise DomainError("seed order must satisfy |mu| <= 1/2", path="continued-fraction", order=mu, argument=z)
    if z.real < 0 or z == 0:
        raise DomainError("continued fraction requires Re z >= 0, z != 0", path="continued-fraction", order=mu, argument=z)

    z = complex(z)
    b = 2 * (1 + z)
    d = 1 / b
    h = delh = d
    q1, q2 = 0j, 1 + 0j
    a1 = 0.25 - mu * mu
    q = c = a1
    a = -a1
    s = 1 + q * delh
    for i in range(2, config.max_fraction_terms + 1):
        a -= 2 * (i - 1)
        c = -a * c / i
        qnew = (q1 - b * q2) / a
        q1, q2 = q2, qnew
        q += c * qnew
        b += 2
        d = 1 / (b + a * d)
        delh = (b * d - 1) * delh
        h += delh
        dels = q * delh
        s += dels
        if abs(dels) <= config.tolerance * abs(s):
            logger.debug(f"CF2 mu={mu} z={z} converged after {i} terms")
            break
    else:
        raise ConvergenceError(
            f"continued fraction did not converge in {config.max_fraction_terms} terms",
            estimate=s,
            error=abs(dels / s),
            path="continued-fraction",
            order=mu,
            argument=z,
        )
    h = a1 * h
    k_mu = np.sqrt(np.pi / (2 * z)) * np.exp(-z) / s
    k_mu1 = k_mu * (mu + z + 0.5 - h) / z
    return complex(k_mu), complex(k_mu1)


def hankel_seed_pair(
    kind: int, mu: float, z: complex, config: RegimeConfig = DEFAULT_CONFIG
) -> tuple[complex, complex]:
    """H_mu(z) and H_{mu+1}(z) of the first or second kind for |mu| <= 1/2

    Rotates the K seed pair into the Hankel functions (DLMF 10.27.8):

        H1_v(z) = 2/(pi i) e^{-i v pi/2} K_v(-i z),   Im z >= 0
        H2_v(z) = 2i/pi e^{+i v pi/2} K_v(+i z),      Im z <= 0

    so that the K argument stays in the closed right half plane.
    """
    if kind == 1:
        if z.imag < 0:
            raise DomainError("H1 seed requires Im z >= 0", path="continued-fraction", order=mu, argument=z)
        quarter = -1j
    elif kind == 2:
        if z.imag > 0:
            raise DomainError("H2 seed requires Im z <= 0", path="continued-fraction", order=mu, argument=z)
        quarter = 1j
    else:
        raise ValueError(f"Hankel functions are of kind 1 or 2, not {kind}")
    k_mu, k_mu1 = kv_seed_pair(mu, quarter * complex(z), config)
    # 2/(pi i) for H1 and 2i/pi for H2 are both 2 quarter / pi
    h_mu = 2 * quarter / np.pi * np.exp(quarter * mu * np.pi / 2) * k_mu
    # one more quarter turn of phase for the next order
    h_mu1 = 2 * quarter / np.pi * np.exp(quarter * mu * np.pi / 2) * quarter * k_mu1
    return complex(h_mu), complex(h_mu1)
