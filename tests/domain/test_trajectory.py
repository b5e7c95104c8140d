import math

import pytest

from flood_simulator.domain.errors import InvalidInput
from flood_simulator.domain.trajectory import HORIZON_DAYS, project


@pytest.mark.parametrize("likelihood", [0.0, 12.5, 50.0, 93.46, 100.0])
def test_length_and_bounds(likelihood):
    series = project(likelihood)
    assert len(series) == HORIZON_DAYS == 14
    assert all(0.0 <= v <= 100.0 for v in series)


def test_idempotent():
    assert project(61.3) == project(61.3)


def test_known_values_at_fifty_percent():
    series = project(50.0)
    assert series[0] == pytest.approx(50.0)
    expected_day3 = (0.5 + math.sin(1.0) * 0.05 - 3 * 0.005) * 100
    assert series[3] == pytest.approx(expected_day3)


def test_clamped_at_ceiling_and_floor():
    assert project(100.0)[1] == 100.0
    assert project(0.0)[-1] == 0.0


def test_peak_follows_sine_crest():
    series = project(93.46)
    assert series.index(max(series)) == 4


@pytest.mark.parametrize("bad", [-1.0, 100.1, math.inf, "50"])
def test_invalid_likelihood_rejected(bad):
    with pytest.raises(InvalidInput):
        project(bad)
