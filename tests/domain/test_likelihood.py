import math

import pytest

from flood_simulator.domain.errors import InvalidInput
from flood_simulator.domain.likelihood import current_likelihood, logit


def test_assam_reference_scenario():
    # x = 1.44 + 0.42 + 2.0 - 1.2 = 2.66
    assert logit(0.80, 120, 7) == pytest.approx(2.66)
    assert current_likelihood(0.80, 120, 7) == pytest.approx(93.46, abs=0.01)


def test_upper_corner_stays_below_ceiling():
    value = current_likelihood(1.0, 300, 14)
    assert value == pytest.approx(99.68, abs=0.01)
    assert value <= 100.0


def test_lower_corner_below_upper_corner():
    assert current_likelihood(0.0, 0, 1) < current_likelihood(1.0, 300, 14)


def test_midpoint_is_fifty_percent():
    # x = 0 when 2.5 * p = 1.2 - 0.06 with zero rain and a one-day window
    p = (1.2 - 0.06) / 2.5
    assert current_likelihood(p, 0, 1) == pytest.approx(50.0)


def test_monotone_in_intensity():
    values = [current_likelihood(0.5, i, 7) for i in range(0, 301, 5)]
    assert all(a <= b for a, b in zip(values, values[1:]))


def test_monotone_in_window():
    values = [current_likelihood(0.5, 120, w) for w in range(1, 15)]
    assert all(a <= b for a, b in zip(values, values[1:]))


def test_monotone_in_predisposition():
    values = [current_likelihood(p / 20, 120, 7) for p in range(21)]
    assert all(a <= b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize(
    "args, field",
    [
        ((1.2, 100, 7), "predisposition"),
        ((-0.1, 100, 7), "predisposition"),
        ((0.5, -1, 7), "intensity"),
        ((0.5, 300.5, 7), "intensity"),
        ((0.5, math.nan, 7), "intensity"),
        ((0.5, 100, 0), "window_days"),
        ((0.5, 100, 15), "window_days"),
        ((0.5, 100, 2.5), "window_days"),
        ((0.5, 100, True), "window_days"),
    ],
)
def test_out_of_domain_inputs_rejected(args, field):
    with pytest.raises(InvalidInput) as excinfo:
        current_likelihood(*args)
    assert excinfo.value.field == field


def test_whole_float_window_accepted():
    assert current_likelihood(0.5, 100, 7.0) == current_likelihood(0.5, 100, 7)
