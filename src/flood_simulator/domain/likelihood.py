"""Current flood likelihood via a logistic transform."""
import math

from flood_simulator.utils.logging import get_logger

from .errors import InvalidInput
from .inputs import validate_intensity, validate_window

__all__ = ["current_likelihood", "logit"]

logger = get_logger(__name__)

# Calibration constants (fixed, not user-configurable)
INTENSITY_WEIGHT = 0.012      # per mm/day
WINDOW_WEIGHT = 0.06          # per day
PREDISPOSITION_WEIGHT = 2.5
OFFSET = -1.2                 # shifts the curve midpoint


def _validate_predisposition(predisposition: float) -> float:
    if (isinstance(predisposition, bool) or not isinstance(predisposition, (int, float))
            or not math.isfinite(predisposition)):
        raise InvalidInput(f"predisposition must be a finite number, got {predisposition!r}",
                           "predisposition")
    if not 0.0 <= predisposition <= 1.0:
        raise InvalidInput(f"predisposition {predisposition} outside [0, 1]", "predisposition")
    return float(predisposition)


def logit(predisposition: float, intensity: float, window_days: int) -> float:
    """Linear predictor fed to the sigmoid (inputs assumed valid)."""
    return (INTENSITY_WEIGHT * intensity + WINDOW_WEIGHT * window_days
            + PREDISPOSITION_WEIGHT * predisposition + OFFSET)


def current_likelihood(predisposition: float, intensity: float, window_days: int) -> float:
    """Map predisposition, rainfall intensity and window length to a percentage.

    x = 0.012 * intensity + 0.06 * window_days + 2.5 * predisposition - 1.2
    p = 1 / (1 + exp(-x))

    Parameters
    ----------
    predisposition : float
        Predisposition score in [0, 1].
    intensity : float
        Rainfall intensity in mm/day, [0, 300].
    window_days : int
        Accumulation window in days, [1, 14].

    Returns
    -------
    float
        Likelihood in [0, 100], monotone non-decreasing in every input.

    Raises
    ------
    InvalidInput
        If any input is outside its domain.
    """
    predisposition = _validate_predisposition(predisposition)
    intensity = validate_intensity(intensity)
    window_days = validate_window(window_days)

    x = logit(predisposition, intensity, window_days)
    p = 1.0 / (1.0 + math.exp(-x))
    result = max(0.0, min(1.0, p)) * 100
    logger.debug("likelihood x=%.4f -> %.4f%%", x, result)
    return result
