"""Interpolated height and gradient sampling."""

from __future__ import annotations

from dataclasses import dataclass

from erosion.grid import HeightGrid


@dataclass(frozen=True)
class HeightGradient:
    gx: float
    gy: float
    height: float


def sample_height_and_gradient(grid: HeightGrid, x: float, y: float) -> HeightGradient:
    """Bilinearly blend the forward-difference gradients of the 4 surrounding cells.

    Height is interpolated separately from the corner heights. The +1 corner
    index is clamped to the last column/row so positions on the far edge
    stay inside the grid.
    """

    xi = int(x)
    yi = int(y)
    u = x - xi
    v = y - yi
    xr = min(xi + 1, grid.width - 1)
    yb = min(yi + 1, grid.height - 1)

    ul_x, ul_y = grid.gradient_at(xi, yi)
    ur_x, ur_y = grid.gradient_at(xr, yi)
    ll_x, ll_y = grid.gradient_at(xi, yb)
    lr_x, lr_y = grid.gradient_at(xr, yb)

    left_x = (1.0 - v) * ul_x + v * ll_x
    left_y = (1.0 - v) * ul_y + v * ll_y
    right_x = (1.0 - v) * ur_x + v * lr_x
    right_y = (1.0 - v) * ur_y + v * lr_y

    return HeightGradient(
        gx=(1.0 - u) * left_x + u * right_x,
        gy=(1.0 - u) * left_y + u * right_y,
        height=grid.height_at(x, y),
    )
