"""Height image loading and serialization."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import numpy as np
from PIL import Image, UnidentifiedImageError

from erosion.grid import HeightGrid


_MODE_SCALE = {
    "L": 255.0,
    "I": 65535.0,
    "I;16": 65535.0,
    "I;16B": 65535.0,
    "I;16L": 65535.0,
    "F": 1.0,
}

# Keeps plain PGM lines under the 70 characters Netpbm asks for.
PLAIN_VALUES_PER_LINE = 17


class HeightmapFormatError(ValueError):
    """Raised when a file cannot be decoded as a grayscale height image."""


def load_height_grid(path: str | Path) -> HeightGrid:
    """Load a grayscale image as a grid normalized to [0, 1]."""

    source = Path(path)
    if not source.is_file():
        raise FileNotFoundError(f"No such height image: {source}")

    try:
        with Image.open(source) as image:
            if image.mode not in _MODE_SCALE:
                image = image.convert("L")
            scale = _MODE_SCALE[image.mode]
            raster = np.asarray(image, dtype=np.float32)
    except (UnidentifiedImageError, SyntaxError, ValueError) as exc:
        raise HeightmapFormatError(f"Cannot decode {source}: {exc}") from exc

    if raster.ndim != 2 or raster.size == 0:
        raise HeightmapFormatError(f"Expected a non-empty single-channel image in {source}")
    return HeightGrid(raster / np.float32(scale))


def height_u8(grid: HeightGrid) -> np.ndarray:
    """Encode grid values in [0, 1] as 8-bit grayscale."""

    return np.round(np.clip(grid.values, 0.0, 1.0) * 255.0).astype(np.uint8)


def save_height_grid(path: str | Path, grid: HeightGrid, *, ascii: bool = False) -> None:
    """Write the grid as 8-bit grayscale; `ascii` selects plain-text PGM."""

    target = Path(path)
    raster = height_u8(grid)
    if ascii:
        with target.open("w", encoding="ascii") as fh:
            fh.write(f"P2\n{grid.width} {grid.height}\n255\n")
            values = raster.ravel()
            for start in range(0, values.size, PLAIN_VALUES_PER_LINE):
                chunk = values[start : start + PLAIN_VALUES_PER_LINE]
                fh.write(" ".join(str(v) for v in chunk.tolist()) + "\n")
        return

    image_format = Image.registered_extensions().get(target.suffix.lower(), "PPM")
    image = Image.fromarray(raster)
    image.save(target, format=image_format)


def write_json(path: str | Path, payload: dict[str, Any]) -> None:
    text = json.dumps(payload, indent=2, sort_keys=True)
    Path(path).write_text(text + "\n", encoding="utf-8")
