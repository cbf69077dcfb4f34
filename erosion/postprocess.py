"""Final range clamping of eroded grids."""

from __future__ import annotations

import numpy as np

from erosion.grid import HeightGrid


def clamp_unit_range(grid: HeightGrid) -> bool:
    """Clamp every cell to [0, 1] in place; return whether any cell was out of range."""

    values = grid.values
    out_of_range = (values < 0.0) | (values > 1.0)
    if not np.any(out_of_range):
        return False
    np.clip(values, 0.0, 1.0, out=values)
    return True
