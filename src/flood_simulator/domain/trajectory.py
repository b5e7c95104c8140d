"""Deterministic 14-day forward trajectory of the likelihood."""
import math
from typing import List

from .errors import InvalidInput

__all__ = ["project", "HORIZON_DAYS"]

HORIZON_DAYS = 14
OSCILLATION_AMPLITUDE = 0.05
OSCILLATION_PERIOD = 3.0     # divisor of the day index inside sin()
DAILY_DECAY = 0.005


def project(likelihood: float) -> List[float]:
    """Project ``likelihood`` (percent) over the next 14 days.

    Each point is ``clamp(base + sin(i/3) * 0.05 - i * 0.005, 0, 1) * 100``
    with ``base = likelihood / 100``. The oscillation is a fixed sine wave,
    so identical inputs always yield identical sequences.
    """
    if (isinstance(likelihood, bool) or not isinstance(likelihood, (int, float))
            or not math.isfinite(likelihood)):
        raise InvalidInput(f"likelihood must be a finite number, got {likelihood!r}", "likelihood")
    if not 0.0 <= likelihood <= 100.0:
        raise InvalidInput(f"likelihood {likelihood} outside [0, 100]", "likelihood")

    base = likelihood / 100
    return [
        max(0.0, min(1.0, base + math.sin(i / OSCILLATION_PERIOD) * OSCILLATION_AMPLITUDE
                     - i * DAILY_DECAY)) * 100
        for i in range(HORIZON_DAYS)
    ]
