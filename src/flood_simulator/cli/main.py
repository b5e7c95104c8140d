"""Command line interface for the India Flood Risk Simulator.

Usage examples (from repository root):

  python -m flood_simulator.cli simulate --region Assam --intensity 120 --window 7
  python -m flood_simulator.cli simulate --region "Tamil Nadu" --terrain Undulating --soil Loamy --json
  python -m flood_simulator.cli options
  python -m flood_simulator.cli trajectory --likelihood 62.5
"""
from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from typing import List

from flood_simulator.domain.errors import InvalidInput
from flood_simulator.domain.inputs import (
    DEFAULT_INTENSITY_MM,
    DEFAULT_WINDOW_DAYS,
    RegionCode,
    ScenarioInputs,
    SoilClass,
    TerrainClass,
)
from flood_simulator.domain.simulation import simulate_scenario
from flood_simulator.domain.trajectory import project
from flood_simulator.presentation import render_text_report, sparkline_text
from flood_simulator.utils.logging import get_logger

logger = get_logger(__name__)

EXIT_INVALID_INPUT = 2


def _cmd_simulate(args: argparse.Namespace) -> int:
    raw = {
        "region": args.region,
        "terrain": args.terrain,
        "soil": args.soil,
        "intensity": args.intensity,
        "window_days": args.window,
    }
    if args.date:
        raw["start_date"] = args.date
    inputs = ScenarioInputs.from_raw(**raw)
    result = simulate_scenario(inputs)
    logger.info("Simulated %s: likelihood=%.2f%% (%s)",
                inputs.region.value, result["likelihood"], result["risk_level"])
    if args.json:
        payload = {
            "inputs": inputs.model_dump(mode="json"),
            **result,
        }
        print(json.dumps(payload, indent=2))
    else:
        print(render_text_report(inputs, result))
    return 0


def _cmd_options(_: argparse.Namespace) -> int:
    print("Regions:")
    for region in RegionCode:
        print(f" - {region.value}")
    print("Terrain classes:")
    for terrain in TerrainClass:
        print(f" - {terrain.value}")
    print("Soil classes:")
    for soil in SoilClass:
        print(f" - {soil.value}")
    return 0


def _cmd_trajectory(args: argparse.Namespace) -> int:
    series = project(args.likelihood)
    for day, value in enumerate(series):
        print(f"day {day:2d}: {value:6.2f}%")
    print(sparkline_text(series))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flood-sim",
        description="India Flood Risk Simulator CLI",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_sim = sub.add_parser(
        "simulate", help="Compute predisposition, likelihood and 14-day trajectory")
    p_sim.add_argument("--region", default=RegionCode.ASSAM.value,
                       help="State name, e.g. 'West Bengal'")
    p_sim.add_argument("--terrain", default=TerrainClass.FLAT_PLAIN.value,
                       help="Flat plain | Undulating | Hilly/Steep")
    p_sim.add_argument("--soil", default=SoilClass.CLAYEY.value,
                       help="Clayey | Loamy | Sandy")
    p_sim.add_argument("--intensity", type=float, default=DEFAULT_INTENSITY_MM,
                       help="Rainfall intensity (mm/day), 0-300")
    p_sim.add_argument("--window", type=int, default=DEFAULT_WINDOW_DAYS,
                       help="Window length (days), 1-14")
    p_sim.add_argument("--date", type=date.fromisoformat,
                       help="Start date YYYY-MM-DD (display only; defaults to today)")
    p_sim.add_argument("--json", action="store_true",
                       help="Emit machine-readable JSON instead of the text panel")
    p_sim.set_defaults(func=_cmd_simulate)

    p_opt = sub.add_parser(
        "options", help="List accepted regions, terrain and soil classes")
    p_opt.set_defaults(func=_cmd_options)

    p_traj = sub.add_parser(
        "trajectory", help="Project a likelihood percentage over 14 days")
    p_traj.add_argument("--likelihood", type=float, required=True,
                        help="Current likelihood (%%), 0-100")
    p_traj.set_defaults(func=_cmd_trajectory)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except InvalidInput as exc:
        logger.warning("Rejected input (%s): %s", exc.field, exc)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
