"""Erosion run composition: simulate, then clamp."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

from erosion.config import PROGRESS_INTERVAL, SimParams
from erosion.grid import HeightGrid
from erosion.postprocess import clamp_unit_range
from erosion.simulate import ParticleSimulator, SimulationMetrics


@dataclass(frozen=True)
class ErosionResult:
    grid: HeightGrid
    metrics: SimulationMetrics
    clamped: bool
    seed: int | None


def run_erosion(
    grid: HeightGrid,
    params: SimParams | None = None,
    *,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
    progress: Callable[[int], None] | None = None,
    progress_interval: int = PROGRESS_INTERVAL,
) -> ErosionResult:
    """Erode `grid` in place with `params` and clamp the result to [0, 1]."""

    cfg = params or SimParams()
    simulator = ParticleSimulator(grid, cfg, rng=rng, seed=seed)
    metrics = simulator.run(progress=progress, progress_interval=progress_interval)
    clamped = clamp_unit_range(grid)
    return ErosionResult(grid=grid, metrics=metrics, clamped=clamped, seed=simulator.seed)
