"""POST /api/preview — text preview of the compiled path."""

from __future__ import annotations

import numpy as np
from fastapi import APIRouter, HTTPException

from qrsvg.engine.generation import generate
from qrsvg.errors import GenerationError
from qrsvg.models.requests import PreviewRequest
from qrsvg.models.responses import PreviewResponse
from qrsvg.utils.rasterizer import (
    grid_fill_percentage,
    grid_to_halfblock,
    grid_to_text,
    matrix_to_grid,
    rasterize_path,
)

router = APIRouter()

# Unit square; only the grid matters for a preview
_PREVIEW_SIZE = 1.0


@router.post("/preview", response_model=PreviewResponse)
async def preview(req: PreviewRequest) -> PreviewResponse:
    result = generate(req.value, _PREVIEW_SIZE, req.ecl)
    try:
        state = result.unwrap()
    except GenerationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    n = state.module_count
    grid = rasterize_path(state.path.d, state.cell_size, n)
    text = grid_to_halfblock(grid) if req.style == "halfblock" else grid_to_text(grid)

    return PreviewResponse(
        preview=text,
        module_count=n,
        fill_percentage=round(grid_fill_percentage(grid), 2),
        matches_matrix=bool(np.array_equal(grid, matrix_to_grid(state.matrix))),
    )
