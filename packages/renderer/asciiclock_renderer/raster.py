"""Grayscale raster buffer and text serialization."""

from __future__ import annotations

import math
from enum import Enum

import numpy as np

from .palette import DEFAULT_PALETTE, Palette


class ClipPolicy(str, Enum):
    DISCARD = "discard"
    CLAMP = "clamp"


def round_half_away(value: float) -> int:
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


class RasterBuffer:
    """Row-major brightness grid, origin top-left.

    Cells start black (0.0). Plots round to the nearest cell and overwrite
    whatever was there. Plots outside the grid follow ``clip``: ``DISCARD``
    drops them, ``CLAMP`` pins them to the nearest edge cell.
    """

    def __init__(self, width: int, height: int, clip: ClipPolicy = ClipPolicy.DISCARD) -> None:
        width = int(width)
        height = int(height)
        if width <= 0 or height <= 0:
            raise ValueError(f"Buffer dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.clip = ClipPolicy(clip)
        self._cells = np.zeros((height, width), dtype=np.float64)

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def get(self, x: int, y: int) -> float:
        return float(self._cells[y, x])

    def plot(self, x: float, y: float, value: float) -> bool:
        col = round_half_away(x)
        row = round_half_away(y)
        inside = 0 <= col < self.width and 0 <= row < self.height
        if not inside:
            if self.clip is ClipPolicy.DISCARD:
                return False
            col = min(self.width - 1, max(0, col))
            row = min(self.height - 1, max(0, row))
        self._cells[row, col] = min(1.0, max(0.0, float(value)))
        return True

    def lit_cells(self) -> list[tuple[int, int, float]]:
        """Return ``(x, y, value)`` for every non-black cell, row by row."""
        rows, cols = np.nonzero(self._cells)
        return [(int(c), int(r), float(self._cells[r, c])) for r, c in zip(rows, cols)]

    def as_array(self) -> np.ndarray:
        out = self._cells.copy()
        out.setflags(write=False)
        return out

    def serialize(self, palette: Palette | None = None) -> str:
        palette = palette or DEFAULT_PALETTE
        lines: list[str] = []
        for row in self._cells.tolist():
            # Each glyph is emitted twice to offset the 2:1 height:width terminal cell.
            lines.append("".join(palette.char_for(cell) * 2 for cell in row))
        return "\n".join(lines)
