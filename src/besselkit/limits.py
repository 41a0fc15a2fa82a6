"""Removable singularities in the order

    Y_v = (J_v cos(v pi) - J_{-v}) / sin(v pi)
    K_v = pi/2 (I_{-v} - I_v) / sin(v pi)

are 0/0 at integer v, and lose accuracy in a neighbourhood of it. Near such
orders we never evaluate the quotient at v itself: we sample it on a
symmetric stencil around v and extrapolate. The stencil spacing is larger
than the near-integer tolerance, so every sample is safely away from the
integer.
"""

import logging
from collections.abc import Callable

from besselkit.config import DEFAULT_CONFIG, RegimeConfig
from besselkit.regime import is_negative_integer

logger = logging.getLogger(__name__)

# Richardson weights for A(h), A(2h), A(3h), cancelling the h^2 and h^4 terms
# of the symmetric average A(h) = (f(v+h) + f(v-h)) / 2
_WEIGHTS = (1.5, -0.6, 0.1)


def symmetric_limit(
    func: Callable[[float], complex], v: float, config: RegimeConfig = DEFAULT_CONFIG
) -> complex:
    """Value at v of a smooth function of the order, without evaluating it at v

    The truncation error is O(h^6) in the stencil spacing h = config.limit_step.
    """
    h = config.limit_step
    logger.debug(f"Resolving order v={v} from stencil with spacing {h}")
    total = 0j
    for k, weight in enumerate(_WEIGHTS, start=1):
        average = (func(v + k * h) + func(v - k * h)) / 2
        total += weight * average
    return total


def reflect_integer_order(func: Callable[[float], complex], v: float, parity: int) -> complex:
    """Evaluate func at v, mapping exact negative integers n to parity^n func(-n)

    J_{-n} = (-1)^n J_n and I_{-n} = I_n; the power series cannot be summed at
    a negative integer order directly.
    """
    if is_negative_integer(v):
        n = int(-v)
        return parity**n * func(float(n))
    return func(v)
