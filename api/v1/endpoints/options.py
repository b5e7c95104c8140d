"""Form options endpoint.

Returns the accepted enumerations, numeric ranges and default values so a
client can build its selectors and sliders without hard-coding them.
"""
from fastapi import APIRouter, Depends

from flood_simulator.auth.auth import verify_token
from flood_simulator.domain.inputs import (
    DEFAULT_INTENSITY_MM,
    DEFAULT_WINDOW_DAYS,
    INTENSITY_MAX_MM,
    INTENSITY_MIN_MM,
    INTENSITY_STEP_MM,
    WINDOW_MAX_DAYS,
    WINDOW_MIN_DAYS,
    RegionCode,
    SoilClass,
    TerrainClass,
    default_start_date,
)

router = APIRouter()


@router.get("/options")
def options(token: str = Depends(verify_token)):
    """List regions, terrain and soil classes plus slider ranges and defaults."""
    return {
        "regions": [r.value for r in RegionCode],
        "terrains": [t.value for t in TerrainClass],
        "soils": [s.value for s in SoilClass],
        "intensity_mm_per_day": {
            "min": INTENSITY_MIN_MM, "max": INTENSITY_MAX_MM, "step": INTENSITY_STEP_MM},
        "window_days": {"min": WINDOW_MIN_DAYS, "max": WINDOW_MAX_DAYS, "step": 1},
        "defaults": {
            "region": RegionCode.ASSAM.value,
            "start_date": default_start_date().isoformat(),
            "intensity_mm_per_day": DEFAULT_INTENSITY_MM,
            "window_days": DEFAULT_WINDOW_DAYS,
            "terrain": TerrainClass.FLAT_PLAIN.value,
            "soil": SoilClass.CLAYEY.value,
        },
    }
