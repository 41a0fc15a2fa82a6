from dataclasses import replace

import pytest

from besselkit import DEFAULT_CONFIG, DomainError, Regime, RegimeConfig, classify
from besselkit.regime import argument_regime, is_near_integer, validate


@pytest.mark.parametrize(
    "v, z, expected",
    [
        (0.5, 1.0, Regime.SMALL_ARGUMENT),
        (3.5, 3.0, Regime.SMALL_ARGUMENT),  # |z|^2/4 below the order
        (0.5, 30.0, Regime.LARGE_ARGUMENT),
        (0.5, -30.0 + 4j, Regime.LARGE_ARGUMENT),
        (0.5, 10.0, Regime.MID_RANGE_RECURRENCE),
        (10.5, 30.0, Regime.MID_RANGE_RECURRENCE),  # too large an order for the expansion
        (2.0000001, 5.0, Regime.NEAR_INTEGER_ORDER),
        (-3.0, 100.0, Regime.NEAR_INTEGER_ORDER),
        (0.0, 0.1, Regime.NEAR_INTEGER_ORDER),
    ],
)
def test_classify(v, z, expected):
    assert classify(v, z) is expected


def test_near_integer_priority():
    """Near-integer orders win regardless of the argument magnitude"""
    for z in (1e-3, 5.0, 1e3):
        assert classify(4.0005, z) is Regime.NEAR_INTEGER_ORDER
        assert classify(4.0015, z) is not Regime.NEAR_INTEGER_ORDER
    assert argument_regime(4.0005, 1e3) is Regime.LARGE_ARGUMENT


def test_classify_custom_config():
    config = replace(DEFAULT_CONFIG, large_argument=8.0)
    assert classify(0.5, 10.0) is Regime.MID_RANGE_RECURRENCE
    assert classify(0.5, 10.0, config) is Regime.LARGE_ARGUMENT


def test_is_near_integer():
    assert is_near_integer(3.0, 0.0)
    assert is_near_integer(-2.9999, 1e-3)
    assert not is_near_integer(2.5, 1e-3)


@pytest.mark.parametrize(
    "v, z",
    [
        (float("nan"), 1.0),
        (float("inf"), 1.0),
        (1.0, complex(1.0, float("inf"))),
        (1.0, float("nan")),
        (1 + 2j, 1.0),
        ("abc", 1.0),
    ],
)
def test_validate_rejects(v, z):
    with pytest.raises(DomainError):
        validate(v, z)


def test_validate_coerces():
    v, z = validate(2, -3.0)
    assert isinstance(v, float) and isinstance(z, complex)
    # negative zero imaginary part is folded onto the upper lip of the cut
    _, z = validate(1.0, complex(-2.0, -0.0))
    assert z.imag == 0.0 and str(z.imag) == "0.0"
    v, _ = validate(1.5 + 0j, 1.0)
    assert v == 1.5


def test_domain_error_is_value_error():
    with pytest.raises(ValueError, match=r"\[classify\]"):
        classify(float("nan"), 1.0)


@pytest.mark.parametrize(
    "changes",
    [
        {"limit_step": 1e-4},
        {"near_integer_tolerance": -1.0},
        {"large_argument": 1.0},
        {"tolerance": 0.0},
        {"max_series_terms": 0},
        {"miller_margin": 0},
    ],
)
def test_config_validation(changes):
    with pytest.raises(ValueError):
        RegimeConfig(**changes)
