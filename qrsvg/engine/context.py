"""RenderState — the cached matrix/path pairing held between render passes."""

from __future__ import annotations

from dataclasses import dataclass, field

from qrsvg.engine.path_compiler import PathDescriptor


@dataclass(frozen=True)
class RenderState:
    """Matrix and path computed from one (value, size, ecl) snapshot.

    Frozen so matrix and path can only be replaced together.
    """

    # (value, size, ecl) the state was computed from; None = nothing cached
    key: tuple[str, float, str] | None = None
    matrix: tuple[tuple[bool, ...], ...] = ()
    path: PathDescriptor = field(default_factory=PathDescriptor)
    cell_size: float = 0.0

    @property
    def module_count(self) -> int:
        return len(self.matrix)

    @property
    def is_empty(self) -> bool:
        return not self.path or self.cell_size <= 0


EMPTY_STATE = RenderState()
