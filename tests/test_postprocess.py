from __future__ import annotations

import numpy as np

from erosion.grid import HeightGrid
from erosion.postprocess import clamp_unit_range


def test_clamp_reports_and_fixes_out_of_range_cells() -> None:
    grid = HeightGrid.from_array([[-0.5, 0.3], [1.7, 1.0]])

    assert clamp_unit_range(grid) is True
    assert grid.cell(0, 0) == 0.0
    assert grid.cell(1, 0) == np.float32(0.3)
    assert grid.cell(0, 1) == 1.0
    assert grid.cell(1, 1) == 1.0
    assert grid.values.min() >= 0.0
    assert grid.values.max() <= 1.0


def test_clamp_leaves_in_range_grid_untouched() -> None:
    rng = np.random.default_rng(1)
    grid = HeightGrid.from_array(rng.random((5, 5)))
    before = grid.values.copy()

    assert clamp_unit_range(grid) is False
    assert np.array_equal(grid.values, before)
