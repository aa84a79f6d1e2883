"""Matrix → SVG path compiler.

Every maximal horizontal run of dark modules becomes one stroke segment
through the vertical centre of its row:

    M{x0} {yc} L{x1} {yc}

Stroked with width = cell size (butt caps), a segment paints exactly the
cells of its run, so the path grows with the number of runs, not N².
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)

MOVE = "M"
LINE = "L"


@dataclass(frozen=True)
class PathCommand:
    op: str
    x: float
    y: float

    def format(self, precision: int | None = None) -> str:
        return f"{self.op}{format_number(self.x, precision)} {format_number(self.y, precision)}"


@dataclass(frozen=True)
class PathDescriptor:
    """Immutable list of move-to/line-to commands."""

    commands: tuple[PathCommand, ...] = ()

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    def __bool__(self) -> bool:
        return bool(self.commands)

    @property
    def d(self) -> str:
        return self.to_d()

    def to_d(self, precision: int | None = None) -> str:
        """SVG ``d`` attribute. ``precision`` rounds coordinates to that many decimals."""
        return " ".join(cmd.format(precision) for cmd in self.commands)

    def segments(self) -> list[tuple[tuple[float, float], tuple[float, float]]]:
        """(start, end) pairs, one per stroked run."""
        cmds = self.commands
        return [
            ((cmds[i].x, cmds[i].y), (cmds[i + 1].x, cmds[i + 1].y))
            for i in range(0, len(cmds) - 1, 2)
        ]


def format_number(value: float, precision: int | None = None) -> str:
    """Print integral values without a fractional part, others as shortest repr."""
    if precision is not None:
        value = round(value, precision)
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def find_runs(row: Sequence[bool]) -> list[tuple[int, int]]:
    """Maximal runs of truthy cells as half-open (start, stop) column ranges."""
    runs: list[tuple[int, int]] = []
    start: int | None = None
    for j, cell in enumerate(row):
        if cell:
            if start is None:
                start = j
        elif start is not None:
            runs.append((start, j))
            start = None
    if start is not None:
        # Row ended while drawing: close at the right boundary
        runs.append((start, len(row)))
    return runs


def count_runs(matrix: Sequence[Sequence[bool]]) -> int:
    return sum(len(find_runs(row)) for row in matrix)


def compile_path(matrix: Sequence[Sequence[bool]], cell_size: float) -> PathDescriptor:
    """Compile a square boolean matrix into a stroke path.

    Args:
        matrix: N×N rows of module values (truthy = dark).
        cell_size: Width/height of one module in render units.

    Returns:
        PathDescriptor with one M/L pair per maximal run, rows top to bottom.
    """
    commands: list[PathCommand] = []
    half = cell_size / 2

    for i, row in enumerate(matrix):
        y = cell_size * i + half
        for start, stop in find_runs(row):
            commands.append(PathCommand(MOVE, cell_size * start, y))
            commands.append(PathCommand(LINE, cell_size * stop, y))

    logger.debug(
        "Compiled %d-row matrix into %d segments (cell %.3f)",
        len(matrix),
        len(commands) // 2,
        cell_size,
    )
    return PathDescriptor(tuple(commands))
