"""Bessel functions of real order and complex argument

Cylindrical (J, Y, I, K, H1, H2), spherical (j, y, h1, h2) and Riccati-Bessel
(S, C, Xi, Zeta) functions, one evaluation per call.
"""

from besselkit.config import DEFAULT_CONFIG, RegimeConfig
from besselkit.cylindrical import iv, jv, kv, yv
from besselkit.derivatives import h1vp, h2vp, ivp, jv_over_z, jvp, kvp, yvp
from besselkit.errors import BesselError, ConvergenceError, DomainError, SingularityError
from besselkit.family import (
    hankel1,
    hankel2,
    riccati_c,
    riccati_s,
    riccati_xi,
    riccati_zeta,
    spherical_h1,
    spherical_h2,
    spherical_jn,
    spherical_yn,
)
from besselkit.regime import Regime, classify

__all__ = [
    "DEFAULT_CONFIG",
    "BesselError",
    "ConvergenceError",
    "DomainError",
    "Regime",
    "RegimeConfig",
    "SingularityError",
    "classify",
    "h1vp",
    "h2vp",
    "hankel1",
    "hankel2",
    "iv",
    "ivp",
    "jv",
    "jv_over_z",
    "jvp",
    "kv",
    "kvp",
    "riccati_c",
    "riccati_s",
    "riccati_xi",
    "riccati_zeta",
    "spherical_h1",
    "spherical_h2",
    "spherical_jn",
    "spherical_yn",
    "yv",
]
