"""CLI package for the India Flood Risk Simulator.

Execute via:
  python -m flood_simulator.cli <command> [options]

Or, once installed, through the console script:
  flood-sim <command>

Commands implemented in `main.py` using the standard library `argparse`.
"""

from .main import main  # re-export for python -m flood_simulator.cli

__all__ = ["main"]
