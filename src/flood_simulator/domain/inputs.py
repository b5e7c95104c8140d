"""Input value types for the flood risk simulator.

Regions, terrain classes and soil classes are closed enumerations; rainfall
intensity and window length carry fixed numeric domains. ``ScenarioInputs``
bundles all six caller-supplied inputs with the defaults shown by the
simulator form.
"""
from __future__ import annotations

import math
import re
from datetime import date
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InvalidInput

INTENSITY_MIN_MM = 0.0
INTENSITY_MAX_MM = 300.0
INTENSITY_STEP_MM = 5
WINDOW_MIN_DAYS = 1
WINDOW_MAX_DAYS = 14

DEFAULT_INTENSITY_MM = 120.0
DEFAULT_WINDOW_DAYS = 7

_SEPARATORS = re.compile(r"[\s_/\-]+")


def _normalise(value: str) -> str:
    return _SEPARATORS.sub("", value).casefold()


class _LabelledEnum(str, Enum):
    """String enum whose value is the human-readable label."""

    @classmethod
    def parse(cls, value: Union[str, "_LabelledEnum"], field: str):
        """Resolve ``value`` to a member by label, member name or CamelCase.

        Raises
        ------
        InvalidInput
            If ``value`` is not a string or matches no member.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidInput(f"{field} must be a string, got {type(value).__name__}", field)
        key = _normalise(value)
        for member in cls:
            if key in (_normalise(member.value), _normalise(member.name)):
                return member
        allowed = ", ".join(m.value for m in cls)
        raise InvalidInput(f"Unknown {field} '{value}'. Expected one of: {allowed}", field)

    def __str__(self) -> str:
        return self.value


class RegionCode(_LabelledEnum):
    ASSAM = "Assam"
    BIHAR = "Bihar"
    UTTAR_PRADESH = "Uttar Pradesh"
    WEST_BENGAL = "West Bengal"
    MAHARASHTRA = "Maharashtra"
    KERALA = "Kerala"
    TAMIL_NADU = "Tamil Nadu"
    GUJARAT = "Gujarat"
    RAJASTHAN = "Rajasthan"
    KARNATAKA = "Karnataka"
    ANDHRA_PRADESH = "Andhra Pradesh"
    MADHYA_PRADESH = "Madhya Pradesh"
    ODISHA = "Odisha"
    PUNJAB = "Punjab"
    HARYANA = "Haryana"


class TerrainClass(_LabelledEnum):
    FLAT_PLAIN = "Flat plain"
    UNDULATING = "Undulating"
    HILLY_STEEP = "Hilly/Steep"


class SoilClass(_LabelledEnum):
    CLAYEY = "Clayey"
    LOAMY = "Loamy"
    SANDY = "Sandy"


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_intensity(intensity: float) -> float:
    """Return ``intensity`` as float if it is a finite value in [0, 300] mm/day."""
    if not _is_number(intensity) or not math.isfinite(intensity):
        raise InvalidInput(f"intensity must be a finite number, got {intensity!r}", "intensity")
    if not INTENSITY_MIN_MM <= intensity <= INTENSITY_MAX_MM:
        raise InvalidInput(
            f"intensity {intensity} outside [{INTENSITY_MIN_MM:g}, {INTENSITY_MAX_MM:g}] mm/day",
            "intensity",
        )
    return float(intensity)


def validate_window(window_days: int) -> int:
    """Return ``window_days`` as int if it is a whole number of days in [1, 14]."""
    if not _is_number(window_days) or not math.isfinite(window_days):
        raise InvalidInput(f"window_days must be an integer, got {window_days!r}", "window_days")
    if int(window_days) != window_days:
        raise InvalidInput(f"window_days must be a whole number of days, got {window_days}", "window_days")
    if not WINDOW_MIN_DAYS <= window_days <= WINDOW_MAX_DAYS:
        raise InvalidInput(
            f"window_days {window_days} outside [{WINDOW_MIN_DAYS}, {WINDOW_MAX_DAYS}]",
            "window_days",
        )
    return int(window_days)


def default_start_date() -> date:
    """Today's date in the configured timezone."""
    from flood_simulator.config import settings, local_today

    return local_today(settings.TIMEZONE)


class ScenarioInputs(BaseModel):
    """The six inputs of one simulator run.

    ``start_date`` is carried for display only and plays no part in the
    computation.
    """

    model_config = ConfigDict(frozen=True)

    region: RegionCode = RegionCode.ASSAM
    start_date: date = Field(default_factory=default_start_date)
    intensity: float = DEFAULT_INTENSITY_MM
    window_days: int = DEFAULT_WINDOW_DAYS
    terrain: TerrainClass = TerrainClass.FLAT_PLAIN
    soil: SoilClass = SoilClass.CLAYEY

    @field_validator("region", mode="before")
    @classmethod
    def _parse_region(cls, v):
        return RegionCode.parse(v, "region")

    @field_validator("terrain", mode="before")
    @classmethod
    def _parse_terrain(cls, v):
        return TerrainClass.parse(v, "terrain")

    @field_validator("soil", mode="before")
    @classmethod
    def _parse_soil(cls, v):
        return SoilClass.parse(v, "soil")

    @field_validator("intensity", mode="before")
    @classmethod
    def _check_intensity(cls, v):
        return validate_intensity(v)

    @field_validator("window_days", mode="before")
    @classmethod
    def _check_window(cls, v):
        return validate_window(v)

    @classmethod
    def from_raw(cls, **values) -> "ScenarioInputs":
        """Build inputs from loosely-typed values, raising ``InvalidInput`` on failure.

        Pydantic wraps validator errors in ``ValidationError``; this unwraps the
        first one so callers deal with a single error type.
        """
        try:
            return cls(**values)
        except ValidationError as exc:
            first = exc.errors()[0]
            original = first.get("ctx", {}).get("error")
            if isinstance(original, InvalidInput):
                raise original from exc
            field = ".".join(str(p) for p in first.get("loc", ())) or None
            raise InvalidInput(f"{field}: {first['msg']}", field) from exc
