"""Compose predisposition, likelihood and trajectory into one scenario run."""
from typing import Dict

from .inputs import ScenarioInputs
from .likelihood import current_likelihood
from .predisposition import score
from .trajectory import project


def classify_risk(likelihood: float) -> str:
    """Categorical band for a likelihood percentage."""
    p = likelihood / 100
    if p >= 0.8:
        return "very_high"
    elif p >= 0.6:
        return "high"
    elif p >= 0.4:
        return "medium"
    elif p >= 0.2:
        return "low"
    return "very_low"


def simulate_scenario(inputs: ScenarioInputs) -> Dict:
    """Run the full pipeline for one set of inputs.

    Returns
    -------
    dict
        ``predisposition``, ``likelihood``, ``trajectory`` (14 values),
        ``risk_level`` and ``peak_day`` (first index of the trajectory maximum).
    """
    predisposition = score(inputs.region, inputs.terrain, inputs.soil)
    likelihood = current_likelihood(predisposition, inputs.intensity, inputs.window_days)
    trajectory = project(likelihood)
    peak_day = trajectory.index(max(trajectory))
    return {
        "predisposition": predisposition,
        "likelihood": likelihood,
        "trajectory": trajectory,
        "risk_level": classify_risk(likelihood),
        "peak_day": peak_day,
    }
