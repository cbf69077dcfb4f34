from __future__ import annotations

import pytest

from erosion.config import SimParams


def test_defaults_match_command_line_defaults() -> None:
    params = SimParams()

    assert params.to_dict() == {
        "particles": 70000,
        "ttl": 30,
        "radius": 2,
        "inertia": 0.1,
        "capacity": 10.0,
        "gravity": 4.0,
        "evaporation": 0.1,
        "erosion": 0.1,
        "deposition": 1.0,
        "min_slope": 0.0001,
    }


@pytest.mark.parametrize(
    "overrides",
    [
        {"particles": 0},
        {"ttl": -1},
        {"radius": -1},
        {"inertia": 1.0},
        {"capacity": 0.0},
        {"gravity": -4.0},
        {"evaporation": 1.0},
        {"erosion": 0.0},
        {"deposition": 1.5},
        {"min_slope": 0.0},
    ],
)
def test_invalid_params_are_rejected(overrides: dict) -> None:
    with pytest.raises(ValueError):
        SimParams(**overrides)


def test_zero_radius_and_zero_inertia_are_allowed() -> None:
    params = SimParams(radius=0, inertia=0.0, evaporation=0.0)

    assert params.radius == 0
