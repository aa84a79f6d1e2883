"""QRCode — stateful rendering shell with an explicit memoization contract.

Matrix + path are recomputed only when (value, size, ecl) differs from the
cached state; layout is recomputed on every render.

Usage:
    qr = QRCode(RenderConfig(value="https://example.com", size=200))
    svg = qr.to_svg()
    qr.update(qr.config.evolve(color="navy"))  # no recompilation
"""

from __future__ import annotations

import logging

from qrsvg.engine.config import RenderConfig
from qrsvg.engine.context import EMPTY_STATE, RenderState
from qrsvg.engine.generation import MatrixGenerator, generate, resolve
from qrsvg.engine.layout import LayoutGeometry, compute_layout
from qrsvg.engine.matrix import generate_matrix
from qrsvg.engine.scene import Scene, compose_scene

logger = logging.getLogger(__name__)


class QRCode:
    def __init__(
        self,
        config: RenderConfig | None = None,
        generator: MatrixGenerator = generate_matrix,
    ) -> None:
        self.generator = generator
        self.generations = 0
        self.state: RenderState = EMPTY_STATE
        self.config = config or RenderConfig()
        self.state = self._compute(self.config)

    def update(self, config: RenderConfig) -> bool:
        """Swap in a new config snapshot. Returns True if the path was recompiled.

        If generation raises, neither config nor state is replaced.
        """
        recompiled = self.state.key != config.matrix_key
        state = self._compute(config)
        self.config = config
        self.state = state
        return recompiled

    def _compute(self, config: RenderConfig) -> RenderState:
        if self.state.key == config.matrix_key:
            return self.state
        value, size, ecl = config.matrix_key
        logger.debug("Matrix inputs changed, regenerating (size=%s, ecl=%s)", size, ecl)
        result = generate(value, size, ecl, self.generator)
        self.generations += 1
        return resolve(result, config.on_error)

    def layout(self) -> LayoutGeometry:
        c = self.config
        return compute_layout(
            size=c.size,
            padding=c.padding,
            logo_size=c.resolved_logo_size,
            logo_margin=c.logo_margin,
            logo_border_radius=c.logo_border_radius,
        )

    def render(self) -> Scene:
        return compose_scene(self.config, self.state, self.layout())

    def to_svg(self) -> str:
        from qrsvg.svg.serializer import serialize_scene

        return serialize_scene(self.render())


def render_svg(config: RenderConfig, generator: MatrixGenerator = generate_matrix) -> str:
    """One-shot render: config in, SVG markup out."""
    return QRCode(config, generator).to_svg()
