"""Sediment deposition and radius-weighted erosion on a height grid."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from erosion.grid import HeightGrid


@dataclass(frozen=True)
class ErosionKernel:
    """Clipped cell window [x0, x1) x [y0, y1) and its normalized weights."""

    x0: int
    x1: int
    y0: int
    y1: int
    weights: np.ndarray


def _splat_cells(grid: HeightGrid, x: float, y: float) -> list[tuple[int, int, float]]:
    """In-grid cells around (x, y) with their bilinear weights."""

    xi = int(x)
    yi = int(y)
    u = x - xi
    v = y - yi

    cells = [(xi, yi, (1.0 - u) * (1.0 - v))]
    has_right = xi + 1 < grid.width
    if has_right:
        cells.append((xi + 1, yi, u * (1.0 - v)))
    if yi + 1 < grid.height:
        cells.append((xi, yi + 1, (1.0 - u) * v))
        if has_right:
            cells.append((xi + 1, yi + 1, u * v))
    return cells


def deposit(grid: HeightGrid, x: float, y: float, amount: float) -> None:
    """Splat `amount` bilinearly onto the 4 cells around (x, y).

    Shares that fall past the right or bottom edge are dropped. A negative
    amount removes material the same way.
    """

    for cx, cy, weight in _splat_cells(grid, x, y):
        grid.add(cx, cy, amount * weight)


def erosion_kernel(width: int, height: int, x: float, y: float, radius: int) -> ErosionKernel | None:
    """Build the normalized erosion weights around (x, y), or None if they all vanish."""

    if radius < 1:
        raise ValueError("radius must be >= 1")

    side = 2 * radius + 1
    # int() truncates toward zero, which shifts windows that start left of/above the grid.
    ox = int(x - radius)
    oy = int(y - radius)
    x0 = max(0, ox)
    y0 = max(0, oy)
    x1 = min(width, ox + side)
    y1 = min(height, oy + side)
    if x0 >= x1 or y0 >= y1:
        return None

    cy, cx = np.mgrid[y0:y1, x0:x1]
    distance = np.hypot(cx - x, cy - y)
    weights = np.maximum(0.0, radius - distance)
    total = float(weights.sum())
    if total <= 0.0:
        return None
    return ErosionKernel(x0=x0, x1=x1, y0=y0, y1=y1, weights=weights / total)


def erode(grid: HeightGrid, x: float, y: float, amount: float, radius: int) -> None:
    """Remove `amount` around (x, y) spread over a radius-weighted kernel, flooring heights at 0."""

    if radius < 1:
        deposit(grid, x, y, -amount)
        for cx, cy, weight in _splat_cells(grid, x, y):
            if weight > 0.0 and grid.cell(cx, cy) < 0.0:
                grid.set_cell(cx, cy, 0.0)
        return

    kernel = erosion_kernel(grid.width, grid.height, x, y, radius)
    if kernel is None:
        return
    block = grid.window(kernel.x0, kernel.x1, kernel.y0, kernel.y1)
    block[...] = np.maximum(0.0, block - amount * kernel.weights)
