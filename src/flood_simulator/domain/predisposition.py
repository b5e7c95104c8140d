"""Static flood predisposition from region, terrain and soil.

An additive, bounded model: a regional baseline plus terrain and soil
modifiers, capped at 1.0.
"""
from typing import Dict, Union

from flood_simulator.utils.logging import get_logger

from .inputs import RegionCode, SoilClass, TerrainClass

__all__ = ["score", "region_baseline", "TERRAIN_WEIGHTS", "SOIL_WEIGHTS"]

logger = get_logger(__name__)

TERRAIN_WEIGHTS: Dict[TerrainClass, float] = {
    TerrainClass.FLAT_PLAIN: 0.25,
    TerrainClass.UNDULATING: 0.15,
    TerrainClass.HILLY_STEEP: 0.05,
}

SOIL_WEIGHTS: Dict[SoilClass, float] = {
    SoilClass.CLAYEY: 0.25,
    SoilClass.LOAMY: 0.15,
    SoilClass.SANDY: 0.08,
}

# Gangetic/Brahmaputra plains and the east coast
HIGH_BASELINE_REGIONS = frozenset({
    RegionCode.ASSAM,
    RegionCode.BIHAR,
    RegionCode.WEST_BENGAL,
    RegionCode.UTTAR_PRADESH,
    RegionCode.ODISHA,
})
# Monsoon-exposed western and southern states
MODERATE_BASELINE_REGIONS = frozenset({
    RegionCode.KERALA,
    RegionCode.TAMIL_NADU,
    RegionCode.KARNATAKA,
    RegionCode.MAHARASHTRA,
})

HIGH_BASELINE = 0.30
MODERATE_BASELINE = 0.20
LOW_BASELINE = 0.12


def region_baseline(region: RegionCode) -> float:
    """Three-tier baseline for an already-validated region."""
    if region in HIGH_BASELINE_REGIONS:
        return HIGH_BASELINE
    if region in MODERATE_BASELINE_REGIONS:
        return MODERATE_BASELINE
    return LOW_BASELINE


def score(
    region: Union[RegionCode, str],
    terrain: Union[TerrainClass, str],
    soil: Union[SoilClass, str],
) -> float:
    """Compute the predisposition score in [0, 1].

    Parameters
    ----------
    region : RegionCode or str
        One of the 15 enumerated states. Unknown names are rejected rather
        than given the lowest baseline.
    terrain : TerrainClass or str
        Terrain class.
    soil : SoilClass or str
        Soil class.

    Returns
    -------
    float
        ``min(1.0, baseline + terrain_weight + soil_weight)``.

    Raises
    ------
    InvalidInput
        If any input is not a member of its enumeration.
    """
    region = RegionCode.parse(region, "region")
    terrain = TerrainClass.parse(terrain, "terrain")
    soil = SoilClass.parse(soil, "soil")

    result = min(1.0, region_baseline(region) + TERRAIN_WEIGHTS[terrain] + SOIL_WEIGHTS[soil])
    logger.debug("predisposition region=%s terrain=%s soil=%s -> %.4f",
                 region.value, terrain.value, soil.value, result)
    return result
