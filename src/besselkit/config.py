"""Tunable regime boundaries and iteration budgets"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RegimeConfig:
    """Constants steering the choice of evaluation method

    The defaults target double precision. Use ``dataclasses.replace`` to derive
    a modified configuration and pass it as ``config=`` to any public function.
    """

    tolerance: float = 1e-16
    """Relative size of the last term at which series and fractions stop"""
    max_series_terms: int = 1000
    """Power series term budget"""
    small_argument: float = 2.0
    """|z| at or below which the power series is always used"""
    series_order_ratio: float = 1.0
    """Power series is also used when |z|^2/4 <= ratio * (|v| + 1)"""
    large_argument: float = 25.0
    """Minimum |z| for the asymptotic expansion"""
    asymptotic_order_ratio: float = 0.5
    """Asymptotic expansion additionally requires |z| >= ratio * v^2"""
    max_asymptotic_terms: int = 200
    max_asymptotic_error: float = 1e-10
    """Largest acceptable relative error at the optimal truncation point"""
    near_integer_tolerance: float = 1e-3
    """Orders closer than this to an integer go through the limit resolver"""
    limit_step: float = 4e-3
    """Spacing of the symmetric stencil used by the limit resolver"""
    miller_margin: int = 30
    """Extra orders above the normalisation order where Miller recurrence starts"""
    max_recurrence_steps: int = 100_000
    max_fraction_terms: int = 10_000
    """Continued fraction term budget"""

    def __post_init__(self):
        if not 0.0 < self.tolerance < 1.0:
            raise ValueError("tolerance must be in (0, 1)")
        if self.small_argument < 0.0:
            raise ValueError("small_argument must be non-negative")
        if self.large_argument <= self.small_argument:
            raise ValueError("large_argument must exceed small_argument")
        if self.near_integer_tolerance < 0.0:
            raise ValueError("near_integer_tolerance must be non-negative")
        if not self.near_integer_tolerance < self.limit_step < 0.1:
            raise ValueError("limit_step must be in (near_integer_tolerance, 0.1)")
        for name in (
            "max_series_terms",
            "max_asymptotic_terms",
            "max_recurrence_steps",
            "max_fraction_terms",
            "miller_margin",
        ):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be >= 1")


DEFAULT_CONFIG = RegimeConfig()
