"""Regime classification

Decides, as a pure function of (order, argument), which evaluator handles a
call. No single method works across the whole plane: power series terms grow
factorially for large |z|, asymptotic expansions diverge for small |z|, and
the closed-form combinations for Y and K are 0/0 at integer order.
"""

import enum
import math

import numpy as np

from besselkit.config import DEFAULT_CONFIG, RegimeConfig
from besselkit.errors import DomainError
from besselkit.types import SComplex, SReal


class Regime(enum.Enum):
    SMALL_ARGUMENT = "series"
    LARGE_ARGUMENT = "asymptotic"
    MID_RANGE_RECURRENCE = "recurrence"
    NEAR_INTEGER_ORDER = "limit"


def validate(v: SReal, z: SComplex, path: str | None = None) -> tuple[float, complex]:
    """Coerce (order, argument) to (float, complex), raising DomainError if unusable

    A negative zero imaginary part is folded to +0, so the negative real axis
    is always read from above (arg z = +pi).
    """
    if isinstance(v, complex | np.complexfloating):
        if v.imag != 0.0:
            raise DomainError("order must be real", path=path, order=v, argument=z)
        v = v.real
    try:
        order = float(v)
        arg = complex(z)
    except (TypeError, ValueError) as ex:
        raise DomainError(str(ex), path=path, order=v, argument=z) from ex
    if not math.isfinite(order):
        raise DomainError("order must be finite", path=path, order=v, argument=z)
    if not (math.isfinite(arg.real) and math.isfinite(arg.imag)):
        raise DomainError("argument must be finite", path=path, order=v, argument=z)
    if arg.imag == 0.0:
        arg = complex(arg.real, 0.0)
    return order, arg


def is_near_integer(v: float, tolerance: float) -> bool:
    return abs(v - round(v)) <= tolerance


def is_negative_integer(v: float) -> bool:
    return v < 0 and v == round(v)


def argument_regime(v: float, z: complex, config: RegimeConfig = DEFAULT_CONFIG) -> Regime:
    """Regime chosen from the magnitude of z relative to the order alone"""
    r = abs(z)
    if r <= config.small_argument or r * r / 4 <= config.series_order_ratio * (abs(v) + 1):
        return Regime.SMALL_ARGUMENT
    if r >= config.large_argument and r >= config.asymptotic_order_ratio * v * v:
        return Regime.LARGE_ARGUMENT
    return Regime.MID_RANGE_RECURRENCE


def classify(v: SReal, z: SComplex, config: RegimeConfig = DEFAULT_CONFIG) -> Regime:
    """Evaluation regime for the pair (v, z)

    Near-integer orders take priority regardless of |z|, then small, large
    and finally mid-range arguments.
    """
    v, z = validate(v, z, path="classify")
    if is_near_integer(v, config.near_integer_tolerance):
        return Regime.NEAR_INTEGER_ORDER
    return argument_regime(v, z, config)
