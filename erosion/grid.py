"""Dense height grid with bounds-checked access and bilinear sampling."""

from __future__ import annotations

import numpy as np


class HeightGrid:
    """Row-major float32 height buffer of shape (height, width).

    All scalar access goes through the accessor methods, which raise
    `IndexError` for cells outside the grid. Continuous positions use
    x for the column and y for the row.
    """

    def __init__(self, values: np.ndarray) -> None:
        if values.ndim != 2:
            raise ValueError("height grid must be a 2D array")
        if values.shape[0] <= 0 or values.shape[1] <= 0:
            raise ValueError("height grid must not be empty")
        if values.dtype.kind != "f":
            raise ValueError(f"height grid must hold floats, got {values.dtype}")
        self.values = values

    @classmethod
    def from_array(cls, data) -> "HeightGrid":
        """Build a grid from a 2D array-like, copying into float32."""

        values = np.array(data, dtype=np.float32, copy=True)
        return cls(values)

    @classmethod
    def filled(cls, width: int, height: int, value: float = 0.0) -> "HeightGrid":
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        return cls(np.full((height, width), value, dtype=np.float32))

    @property
    def width(self) -> int:
        return int(self.values.shape[1])

    @property
    def height(self) -> int:
        return int(self.values.shape[0])

    def copy(self) -> "HeightGrid":
        return HeightGrid(self.values.copy())

    def index(self, x: int, y: int) -> int:
        """Flat row-major index of cell (x, y)."""

        self._check(x, y)
        return y * self.width + x

    def contains(self, x: float, y: float) -> bool:
        """Whether a continuous position lies in [0, W-1] x [0, H-1]."""

        return 0.0 <= x <= self.width - 1 and 0.0 <= y <= self.height - 1

    def cell(self, x: int, y: int) -> float:
        self._check(x, y)
        return float(self.values[y, x])

    def set_cell(self, x: int, y: int, value: float) -> None:
        self._check(x, y)
        self.values[y, x] = value

    def add(self, x: int, y: int, delta: float) -> None:
        self._check(x, y)
        self.values[y, x] += delta

    def window(self, x0: int, x1: int, y0: int, y1: int) -> np.ndarray:
        """Writable view of columns [x0, x1) and rows [y0, y1)."""

        if not (0 <= x0 < x1 <= self.width and 0 <= y0 < y1 <= self.height):
            raise IndexError(f"window [{x0}:{x1}, {y0}:{y1}] outside {self.width}x{self.height} grid")
        return self.values[y0:y1, x0:x1]

    def height_at(self, x: float, y: float) -> float:
        """Bilinearly interpolated height at a continuous position."""

        xi = int(x)
        yi = int(y)
        u = x - xi
        v = y - yi
        xr = min(xi + 1, self.width - 1)
        yb = min(yi + 1, self.height - 1)

        ul = self.cell(xi, yi)
        ur = self.cell(xr, yi)
        ll = self.cell(xi, yb)
        lr = self.cell(xr, yb)

        left = (1.0 - v) * ul + v * ll
        right = (1.0 - v) * ur + v * lr
        return (1.0 - u) * left + u * right

    def gradient_at(self, x: int, y: int) -> tuple[float, float]:
        """Forward-difference gradient at cell (x, y), zero across the last row/column."""

        here = self.cell(x, y)
        right = self.cell(x + 1, y) if x < self.width - 1 else here
        below = self.cell(x, y + 1) if y < self.height - 1 else here
        return right - here, below - here

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")
