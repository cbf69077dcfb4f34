"""Configuration models for particle erosion runs."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


DEFAULT_OUTPUT = "output.pgm"
PROGRESS_INTERVAL = 10_000


@dataclass(frozen=True)
class SimParams:
    """Particle erosion parameters, fixed for the duration of a run."""

    particles: int = 70_000
    ttl: int = 30
    radius: int = 2
    inertia: float = 0.1
    capacity: float = 10.0
    gravity: float = 4.0
    evaporation: float = 0.1
    erosion: float = 0.1
    deposition: float = 1.0
    min_slope: float = 0.0001

    def __post_init__(self) -> None:
        if self.particles <= 0:
            raise ValueError("particles must be positive")
        if self.ttl <= 0:
            raise ValueError("ttl must be positive")
        if self.radius < 0:
            raise ValueError("radius must be >= 0")
        if not 0.0 <= self.inertia < 1.0:
            raise ValueError("inertia must be in [0, 1)")
        if self.capacity <= 0.0:
            raise ValueError("capacity must be positive")
        if self.gravity <= 0.0:
            raise ValueError("gravity must be positive")
        if not 0.0 <= self.evaporation < 1.0:
            raise ValueError("evaporation must be in [0, 1)")
        if not 0.0 < self.erosion <= 1.0:
            raise ValueError("erosion must be in (0, 1]")
        if not 0.0 < self.deposition <= 1.0:
            raise ValueError("deposition must be in (0, 1]")
        if self.min_slope <= 0.0:
            raise ValueError("min_slope must be positive")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
