"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from qrsvg import __version__


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = __version__


class LayoutResponse(BaseModel):
    canvas_size: float
    path_origin: tuple[float, float]
    logo_position: tuple[float, float]
    logo_wrapper_size: float
    logo_wrapper_radius: float
    logo_size: float
    logo_radius: float


class RenderResponse(BaseModel):
    svg: str
    path: str = ""
    cell_size: float = 0.0
    module_count: int = 0
    segment_count: int = 0
    layout: LayoutResponse
    error: str | None = None


class PreviewResponse(BaseModel):
    preview: str
    module_count: int = 0
    fill_percentage: float = 0.0
    matches_matrix: bool = Field(default=True, description="Rasterized path equals the module matrix")
