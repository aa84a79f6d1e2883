"""SVG → PNG export via cairosvg."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def render_png(svg: str, width: float, height: float, scale: float = 1.0) -> bytes:
    """Render SVG markup to PNG bytes at ``scale`` pixels per SVG unit."""
    import cairosvg

    try:
        return cairosvg.svg2png(
            bytestring=svg.encode("utf-8"),
            output_width=max(1, round(width * scale)),
            output_height=max(1, round(height * scale)),
        )
    except Exception as e:
        logger.warning("Failed to render SVG to PNG: %s", e)
        raise
