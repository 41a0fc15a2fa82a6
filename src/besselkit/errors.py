"""Error taxonomy for Bessel evaluation

Every failure is local to a single call, so nothing is retried: errors carry
the evaluator path that was attempted and the offending inputs.
"""


class BesselError(Exception):
    """Base class for evaluation failures"""

    def __init__(self, message: str, *, path: str | None = None, order=None, argument=None):
        super().__init__(message)
        self.path = path
        """Evaluator that was attempted (e.g. "series", "miller")"""
        self.order = order
        self.argument = argument

    def __str__(self):
        msg = super().__str__()
        if self.path is not None:
            msg = f"[{self.path}] {msg}"
        return msg


class DomainError(BesselError, ValueError):
    """Inputs outside any supported regime (NaN, infinities, complex order)"""


class ConvergenceError(BesselError, ArithmeticError):
    """A series, continued fraction or recurrence ran out of its term budget"""

    def __init__(self, message: str, *, estimate=None, error: float | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.estimate = estimate
        """Partial result at the point of failure"""
        self.error = error
        """Estimated relative error of the partial result"""


class SingularityError(BesselError, ZeroDivisionError):
    """The requested value is a true (infinite) singularity"""
