"""Generation orchestration — matrix + path as one unit, failures as values.

``generate`` never raises for encoder failures; it returns a
GenerationResult the caller inspects. ``resolve`` applies the error policy:
route to a handler when one is configured, otherwise raise.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from qrsvg.engine.config import ErrorHandler
from qrsvg.engine.context import EMPTY_STATE, RenderState
from qrsvg.engine.matrix import Matrix, generate_matrix
from qrsvg.engine.path_compiler import compile_path
from qrsvg.errors import GenerationError

logger = logging.getLogger(__name__)

MatrixGenerator = Callable[[str, str], Matrix]


@dataclass(frozen=True)
class GenerationResult:
    """Either a computed RenderState or the GenerationError that prevented it."""

    state: RenderState = EMPTY_STATE
    error: GenerationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> RenderState:
        if self.error is not None:
            raise self.error
        return self.state


def generate(
    value: str,
    size: float,
    ecl: str,
    generator: MatrixGenerator = generate_matrix,
) -> GenerationResult:
    """Run the generator and compile its matrix at ``size / N`` per cell."""
    t0 = time.perf_counter()
    try:
        matrix = generator(value, ecl)
    except GenerationError as e:
        return GenerationResult(error=e)

    cell_size = size / len(matrix)
    path = compile_path(matrix, cell_size)
    state = RenderState(
        key=(value, size, ecl),
        matrix=tuple(tuple(bool(c) for c in row) for row in matrix),
        path=path,
        cell_size=cell_size,
    )

    elapsed = (time.perf_counter() - t0) * 1000
    logger.info(
        "Generated %d×%d code: %d segments in %.1fms",
        state.module_count,
        state.module_count,
        len(path) // 2,
        elapsed,
    )
    return GenerationResult(state=state)


def resolve(result: GenerationResult, on_error: ErrorHandler | None = None) -> RenderState:
    """Apply the error policy to a result.

    With a handler the error is passed to it and an empty state is returned
    (nothing cached, so the next update retries). Without one it is raised.
    """
    if result.ok:
        return result.state
    if on_error is None:
        raise result.error
    logger.warning("Generation failed, routed to handler: %s", result.error)
    on_error(result.error)
    return EMPTY_STATE
