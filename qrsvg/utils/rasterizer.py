"""Rasterization utilities — stroke path back to module grid, grid to text.

Used to check a compiled path against its matrix and to build text previews.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray
from svgpathtools import Line, parse_path

logger = logging.getLogger(__name__)


def rasterize_path(d: str, cell_size: float, n: int) -> NDArray[np.bool_]:
    """Paint a horizontal-stroke path onto an n×n module grid.

    Each segment is stroked with width ``cell_size`` and butt caps, so it
    covers row ``floor(y / cell_size)`` and columns ``[x0, x1)`` in cell units.
    """
    grid = np.zeros((n, n), dtype=np.bool_)
    if not d.strip():
        return grid

    for seg in parse_path(d):
        if not isinstance(seg, Line):
            logger.warning("Skipping non-line segment %r", seg)
            continue
        x0, x1 = sorted((seg.start.real, seg.end.real))
        row = int(np.floor(seg.start.imag / cell_size))
        c0 = int(round(x0 / cell_size))
        c1 = int(round(x1 / cell_size))
        if 0 <= row < n:
            grid[row, max(c0, 0):min(c1, n)] = True

    return grid


def matrix_to_grid(matrix: Sequence[Sequence[bool]]) -> NDArray[np.bool_]:
    return np.asarray(matrix, dtype=np.bool_)


def grid_to_text(
    grid: NDArray[np.bool_],
    filled: str = "X",
    empty: str = ".",
) -> str:
    """Convert a grid to a text representation."""
    rows = []
    for row in grid:
        rows.append(" ".join(filled if cell else empty for cell in row))
    return "\n".join(rows)


def grid_fill_percentage(grid: NDArray[np.bool_]) -> float:
    """Percentage of filled cells."""
    total = grid.size
    if total == 0:
        return 0.0
    return float(np.sum(grid) / total * 100)


def grid_to_halfblock(grid: NDArray[np.bool_]) -> str:
    """Render grid using Unicode half-block characters for 2x vertical resolution.

    Each output character represents 2 vertical cells:
    - █ (full block) = both top and bottom filled
    - ▀ (upper half) = top filled, bottom empty
    - ▄ (lower half) = bottom filled, top empty
    - space = both empty
    """
    rows, cols = grid.shape
    lines = []
    for r in range(0, rows - 1, 2):
        line_chars = []
        for c in range(cols):
            top = grid[r, c]
            bottom = grid[r + 1, c]
            if top and bottom:
                line_chars.append("█")
            elif top:
                line_chars.append("▀")
            elif bottom:
                line_chars.append("▄")
            else:
                line_chars.append(" ")
        lines.append("".join(line_chars))
    # Odd row count: last row on its own
    if rows % 2 == 1:
        lines.append("".join("▀" if grid[rows - 1, c] else " " for c in range(cols)))
    return "\n".join(lines)
