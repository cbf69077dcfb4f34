"""Particle-based hydraulic erosion package."""

from .config import DEFAULT_OUTPUT, SimParams
from .grid import HeightGrid
from .pipeline import ErosionResult, run_erosion

__all__ = ["DEFAULT_OUTPUT", "SimParams", "HeightGrid", "ErosionResult", "run_erosion"]
