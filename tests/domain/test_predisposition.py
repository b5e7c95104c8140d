import itertools

import pytest

from flood_simulator.domain.errors import InvalidInput
from flood_simulator.domain.inputs import RegionCode, SoilClass, TerrainClass
from flood_simulator.domain.predisposition import region_baseline, score


def test_score_bounded_for_every_combination():
    for region, terrain, soil in itertools.product(RegionCode, TerrainClass, SoilClass):
        s = score(region, terrain, soil)
        assert 0.0 <= s <= 1.0


def test_score_maximum_is_high_baseline_flat_clayey():
    best = max(
        score(r, t, s) for r, t, s in itertools.product(RegionCode, TerrainClass, SoilClass))
    assert best == pytest.approx(0.80)
    assert score(RegionCode.BIHAR, TerrainClass.FLAT_PLAIN, SoilClass.CLAYEY) == pytest.approx(0.80)


def test_assam_flat_clayey():
    assert score("Assam", "Flat plain", "Clayey") == pytest.approx(0.80)


def test_rajasthan_hilly_sandy():
    # 0.12 + 0.05 + 0.08
    assert score("Rajasthan", "HillySteep", "Sandy") == pytest.approx(0.25)


def test_region_baseline_tiers():
    assert region_baseline(RegionCode.ODISHA) == 0.30
    assert region_baseline(RegionCode.KERALA) == 0.20
    assert region_baseline(RegionCode.PUNJAB) == 0.12


def test_moderate_region_loamy_undulating():
    # 0.20 + 0.15 + 0.15
    assert score("Tamil Nadu", "Undulating", "Loamy") == pytest.approx(0.50)


@pytest.mark.parametrize("spelling", ["West Bengal", "WestBengal", "WEST_BENGAL", "west bengal"])
def test_region_spellings_resolve(spelling):
    assert score(spelling, TerrainClass.UNDULATING, SoilClass.SANDY) == pytest.approx(0.30 + 0.15 + 0.08)


def test_unknown_region_rejected_not_bucketed():
    with pytest.raises(InvalidInput) as excinfo:
        score("Atlantis", "Flat plain", "Clayey")
    assert excinfo.value.field == "region"


def test_unknown_terrain_and_soil_rejected():
    with pytest.raises(InvalidInput) as excinfo:
        score("Assam", "Mountain", "Clayey")
    assert excinfo.value.field == "terrain"
    with pytest.raises(InvalidInput) as excinfo:
        score("Assam", "Flat plain", "Peat")
    assert excinfo.value.field == "soil"


def test_non_string_region_rejected():
    with pytest.raises(InvalidInput):
        score(7, "Flat plain", "Clayey")
