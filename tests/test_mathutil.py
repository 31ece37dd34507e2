import math

import pytest

from matgui.mathutil import round_down, round_middle


@pytest.mark.parametrize(
    "value,factor",
    [(7.3, 2.0), (-3.5, 0.5), (10.0, 0.25), (0.1, 1.0), (123.456, 0.1), (-0.01, 3.0)],
)
def test_round_down_invariants(value, factor):
    result = round_down(value, factor)
    assert result <= value + 1e-9
    assert value - result < factor + 1e-9
    quotient = result / factor
    assert quotient == pytest.approx(round(quotient))


def test_round_down_exact_multiple_is_unchanged():
    assert round_down(6.0, 2.0) == 6.0
    assert round_down(-4.0, 2.0) == -4.0


def test_round_down_default_factor_is_floor():
    for value in (2.7, -2.7, 0.0, 5.0):
        assert round_down(value) == math.floor(value)


def test_round_middle_rounds_half_away_from_zero():
    assert round_middle(0.0) == 1.0
    assert round_middle(1.0) == 2.0
    assert round_middle(-1.0) == -1.0


@pytest.mark.parametrize("value,factor", [(3.2, 1.0), (7.7, 2.0), (-2.3, 0.5)])
def test_round_middle_is_multiple_of_factor(value, factor):
    result = round_middle(value, factor)
    quotient = result / factor
    assert quotient == pytest.approx(round(quotient))
    assert abs(result - (value + factor / 2)) <= factor / 2 + 1e-9