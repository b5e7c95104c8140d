"""Rendering helpers for the simulator readouts.

Everything here is presentation: it formats values produced by the domain
functions and never feeds back into them.
"""
from datetime import date
from typing import Dict, List, Sequence

from flood_simulator.domain.errors import InvalidInput
from flood_simulator.domain.inputs import ScenarioInputs

GAUGE_SWEEP_DEG = 180.0
SPARK_BLOCKS = "▁▂▃▄▅▆▇█"


def gauge_angle(likelihood: float) -> float:
    """Needle angle in degrees on a semicircular 0-100% gauge."""
    return likelihood / 100 * GAUGE_SWEEP_DEG


def gauge_label(likelihood: float) -> str:
    return f"{likelihood:.0f}%"


def sparkline_points(series: Sequence[float]) -> str:
    """SVG ``polyline`` points for ``series`` on a 100x100 viewBox.

    Values are scaled against ``max(series)`` (at least 1) and the y axis
    is flipped so higher values sit nearer the top.
    """
    if len(series) < 2:
        raise InvalidInput("sparkline needs at least two points", "series")
    top = max(max(series), 1)
    last = len(series) - 1
    return " ".join(
        f"{i / last * 100:g},{100 - v / top * 100:g}" for i, v in enumerate(series)
    )


def sparkline_text(series: Sequence[float]) -> str:
    """Unicode block sparkline, scaled the same way as ``sparkline_points``."""
    top = max(max(series), 1)
    steps = len(SPARK_BLOCKS) - 1
    return "".join(SPARK_BLOCKS[round(v / top * steps)] for v in series)


def format_display_date(value: date) -> str:
    # display only, e.g. "19 Oct 2026"
    return f"{value.day} {value:%b %Y}"


def input_summary(inputs: ScenarioInputs) -> List[Dict[str, str]]:
    """Summary cards for the selected inputs."""
    return [
        {"label": "Rainfall intensity", "value": f"{inputs.intensity:g} mm/day"},
        {"label": "Window length", "value": f"{inputs.window_days} days"},
        {"label": "Terrain", "value": inputs.terrain.value},
        {"label": "Soil type", "value": inputs.soil.value},
    ]


def render_text_report(inputs: ScenarioInputs, result: Dict) -> str:
    """Plain-text panel combining the header, gauge, trajectory and summary."""
    likelihood = result["likelihood"]
    trajectory = result["trajectory"]
    report = [
        "=" * 60,
        "India Flood Risk Simulator",
        "=" * 60,
        f"Selected: {inputs.region.value} - {format_display_date(inputs.start_date)}",
        "",
        f"Predicted flood likelihood: {gauge_label(likelihood)} "
        f"({result['risk_level'].replace('_', ' ')})",
        f"Predisposition score: {result['predisposition']:.2f}",
        "",
        "14-day risk trajectory (illustrative)",
        f"  {sparkline_text(trajectory)}  "
        f"{trajectory[0]:.0f}% -> {trajectory[-1]:.0f}% (peak day {result['peak_day']})",
        "",
        "[Input summary]",
    ]
    report.extend(f"  {card['label']}: {card['value']}" for card in input_summary(inputs))
    report.append("=" * 60)
    return "\n".join(report)
