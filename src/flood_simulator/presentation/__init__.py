"""Presentation helpers (gauge, sparkline, summaries)."""

from .display import (
    format_display_date,
    gauge_angle,
    gauge_label,
    input_summary,
    render_text_report,
    sparkline_points,
    sparkline_text,
)

__all__ = [
    "format_display_date",
    "gauge_angle",
    "gauge_label",
    "input_summary",
    "render_text_report",
    "sparkline_points",
    "sparkline_text",
]
