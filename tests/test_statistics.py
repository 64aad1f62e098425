from __future__ import annotations

import math

import pytest

from fund_monthly.aggregate.statistics import average, median, round_half_up, std_dev


def test_empty_input_is_zero() -> None:
    assert average([]) == 0
    assert median([]) == 0
    assert std_dev([]) == 0


def test_std_dev_of_single_value_is_zero() -> None:
    assert std_dev([7.3]) == 0


def test_average_and_median() -> None:
    assert average([1, 2, 3, 4]) == 2.5
    assert median([1, 2, 3, 4]) == 2.5
    assert median([1, 2, 3]) == 2
    assert median([3, 1, 2]) == 2


def test_std_dev_is_population() -> None:
    # sample std dev of this set would be 2.14
    assert std_dev([2, 4, 4, 4, 5, 5, 7, 9]) == 2.0


def test_results_are_rounded_to_two_places() -> None:
    values = [1.234, 5.678, 9.1011, 3.3333]
    for v in (average(values), median(values), std_dev(values)):
        assert round(v, 2) == v
    assert average([1, 2, 2]) == 1.67


@pytest.mark.parametrize(
    "value, expected",
    [(0.125, 0.13), (-0.125, -0.13), (2.5, 2.5), (1.004, 1.0)],
)
def test_round_half_up(value: float, expected: float) -> None:
    assert round_half_up(value) == expected


def test_large_finite_values_round_without_error() -> None:
    assert average([1e30]) == 1e30
    assert median([1e28]) == 1e28
    assert round_half_up(1.2345678901234568e29) == 1.2345678901234568e29
    assert std_dev([1e30, 3e30]) == pytest.approx(1e30)


def test_overflow_passes_through_unrounded() -> None:
    assert average([1e308, 1e308]) == float("inf")
    assert round_half_up(float("-inf")) == float("-inf")
    assert math.isnan(round_half_up(float("nan")))
