"""FastAPI endpoint for running one flood risk scenario.

This module exposes a POST /simulate route that accepts the six simulator
inputs (region, start date, rainfall intensity, window length, terrain and
soil) and returns the predisposition score, current likelihood, 14-day
trajectory and the readouts a UI needs to draw its gauge and sparkline.

Notes
-----
- Range checks are declared on the request model so they appear in the
  OpenAPI schema; enumeration membership is checked by the domain layer and
  surfaces as a 422 through the ``InvalidInput`` handler in ``main.py``.
- `start_date` is display-only and does not affect any number returned.
"""

from datetime import date
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from flood_simulator.auth.auth import verify_token
from flood_simulator.domain.inputs import (
    DEFAULT_INTENSITY_MM,
    DEFAULT_WINDOW_DAYS,
    INTENSITY_MAX_MM,
    INTENSITY_MIN_MM,
    WINDOW_MAX_DAYS,
    WINDOW_MIN_DAYS,
    RegionCode,
    ScenarioInputs,
    SoilClass,
    TerrainClass,
)
from flood_simulator.domain.simulation import simulate_scenario
from flood_simulator.presentation import (
    format_display_date,
    gauge_angle,
    gauge_label,
    input_summary,
    sparkline_points,
)
from flood_simulator.utils.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


class ScenarioRequest(BaseModel):
    """Request body schema for the simulation endpoint.

    Attributes
    ----------
    region:
        State name, e.g. "Assam" or "West Bengal".
    start_date:
        Start date shown in the header; defaults to today.
    intensity_mm_per_day:
        Rainfall intensity in millimeters per day, [0, 300].
    window_days:
        Rainfall accumulation window in days, [1, 14].
    terrain:
        "Flat plain", "Undulating" or "Hilly/Steep".
    soil:
        "Clayey", "Loamy" or "Sandy".
    """
    region: str = Field(RegionCode.ASSAM.value, examples=["Assam"])
    start_date: Optional[date] = Field(None, examples=["2025-07-01"])
    intensity_mm_per_day: float = Field(
        DEFAULT_INTENSITY_MM, ge=INTENSITY_MIN_MM, le=INTENSITY_MAX_MM, examples=[120])
    window_days: int = Field(
        DEFAULT_WINDOW_DAYS, ge=WINDOW_MIN_DAYS, le=WINDOW_MAX_DAYS, examples=[7])
    terrain: str = Field(TerrainClass.FLAT_PLAIN.value, examples=["Flat plain"])
    soil: str = Field(SoilClass.CLAYEY.value, examples=["Clayey"])


class GaugeReadout(BaseModel):
    angle_deg: float  # needle angle on a 0-180 degree semicircle
    label: str


class ScenarioResponse(BaseModel):
    region: str
    start_date: date
    display_date: str
    # Static susceptibility (0-1 scale)
    predisposition: float
    # Current likelihood (0-100 scale)
    likelihood: float
    # Categorical band: very_low, low, medium, high, very_high
    risk_level: str
    # 14 daily likelihood values, day offset 0 first
    trajectory: List[float]
    peak_day: int
    gauge: GaugeReadout
    # SVG polyline points on a 100x100 viewBox
    sparkline: str
    summary: List[Dict[str, str]]


@router.post("/simulate", response_model=ScenarioResponse)
def simulate(req: ScenarioRequest, token: str = Depends(verify_token)):
    """Run a flood risk scenario for the provided inputs.

    Parameters
    ----------
    req : ScenarioRequest
        Parsed and range-validated request body.

    Returns
    -------
    ScenarioResponse
        Model outputs plus gauge, sparkline and summary readouts.
    """
    raw = {
        "region": req.region,
        "intensity": req.intensity_mm_per_day,
        "window_days": req.window_days,
        "terrain": req.terrain,
        "soil": req.soil,
    }
    if req.start_date is not None:
        raw["start_date"] = req.start_date
    inputs = ScenarioInputs.from_raw(**raw)
    result = simulate_scenario(inputs)
    logger.info("Simulated %s: likelihood=%.2f%% (%s)",
                inputs.region.value, result["likelihood"], result["risk_level"])

    return ScenarioResponse(
        region=inputs.region.value,
        start_date=inputs.start_date,
        display_date=format_display_date(inputs.start_date),
        predisposition=result["predisposition"],
        likelihood=result["likelihood"],
        risk_level=result["risk_level"],
        trajectory=result["trajectory"],
        peak_day=result["peak_day"],
        gauge=GaugeReadout(
            angle_deg=gauge_angle(result["likelihood"]),
            label=gauge_label(result["likelihood"]),
        ),
        sparkline=sparkline_points(result["trajectory"]),
        summary=input_summary(inputs),
    )
