"""POST /api/render* — QR code rendering endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from qrsvg.config import Settings
from qrsvg.dependencies import get_settings
from qrsvg.engine.layout import LayoutGeometry
from qrsvg.engine.renderer import QRCode
from qrsvg.errors import GenerationError
from qrsvg.models.requests import RenderRequest
from qrsvg.models.responses import LayoutResponse, RenderResponse
from qrsvg.svg.serializer import serialize_scene

logger = logging.getLogger(__name__)

router = APIRouter()


def _build(req: RenderRequest) -> tuple[QRCode, list[Exception]]:
    """Render the request; GenerationError → 422 unless fallback is requested."""
    errors: list[Exception] = []
    config = req.to_config()
    if req.fallback_on_error:
        config = config.evolve(on_error=errors.append)
    try:
        return QRCode(config), errors
    except GenerationError as e:
        logger.info("Render rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e


def _layout_response(layout: LayoutGeometry) -> LayoutResponse:
    return LayoutResponse(
        canvas_size=layout.canvas_size,
        path_origin=layout.path_origin,
        logo_position=layout.logo_position,
        logo_wrapper_size=layout.logo_wrapper.width,
        logo_wrapper_radius=layout.logo_wrapper.radius,
        logo_size=layout.logo.width,
        logo_radius=layout.logo.radius,
    )


@router.post("/render", response_model=RenderResponse)
async def render(req: RenderRequest) -> RenderResponse:
    qr, errors = _build(req)
    state = qr.state
    return RenderResponse(
        svg=qr.to_svg(),
        path=state.path.d,
        cell_size=state.cell_size,
        module_count=state.module_count,
        segment_count=len(state.path) // 2,
        layout=_layout_response(qr.layout()),
        error=str(errors[-1]) if errors else None,
    )


@router.post("/render.svg")
async def render_svg(req: RenderRequest) -> Response:
    qr, _ = _build(req)
    return Response(content=qr.to_svg(), media_type="image/svg+xml")


@router.post("/render.png")
async def render_png(req: RenderRequest, settings: Settings = Depends(get_settings)) -> Response:
    from qrsvg.svg.export import render_png as svg_to_png

    qr, _ = _build(req)
    scene = qr.render()
    png = svg_to_png(serialize_scene(scene), scene.width, scene.height, scale=settings.png_scale)
    return Response(content=png, media_type="image/png")
