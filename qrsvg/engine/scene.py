"""Scene graph — primitive draw nodes and the QR code composition.

The scene is a plain tree (rect, path, image, clip-path, group) that the
serializer turns into markup. ``compose_scene`` is the only place that
knows how a QR code is assembled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from qrsvg.engine.config import RenderConfig
from qrsvg.engine.context import RenderState
from qrsvg.engine.layout import LayoutGeometry

CLIP_WRAPPER_ID = "clip-wrapper"
CLIP_LOGO_ID = "clip-logo"


@dataclass
class RectNode:
    width: float
    height: float
    x: float = 0.0
    y: float = 0.0
    radius: float = 0.0
    fill: str | None = None
    clip_path: str | None = None


@dataclass
class PathNode:
    d: str
    stroke: str
    stroke_width: float
    x: float = 0.0
    y: float = 0.0
    fill: str = "none"


@dataclass
class ImageNode:
    href: str
    width: float
    height: float
    preserve_aspect_ratio: str = "xMidYMid slice"
    clip_path: str | None = None


@dataclass
class ClipPathNode:
    id: str
    shape: RectNode


@dataclass
class GroupNode:
    x: float = 0.0
    y: float = 0.0
    children: list[Node] = field(default_factory=list)


Node = Union[RectNode, PathNode, ImageNode, GroupNode]


@dataclass
class Scene:
    width: float
    height: float
    defs: list[ClipPathNode] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)

    def find(self, node_type: type) -> list[Node]:
        """All nodes of ``node_type``, depth first."""
        found: list[Node] = []
        stack: list[Node] = list(reversed(self.children))
        while stack:
            node = stack.pop()
            if isinstance(node, node_type):
                found.append(node)
            if isinstance(node, GroupNode):
                stack.extend(reversed(node.children))
        return found


def _clip_url(clip_id: str) -> str:
    return f"url(#{clip_id})"


def compose_scene(config: RenderConfig, state: RenderState, layout: LayoutGeometry) -> Scene:
    """Assemble background, module path and optional logo."""
    wrapper = layout.logo_wrapper
    logo = layout.logo

    scene = Scene(
        width=layout.canvas_size,
        height=layout.canvas_size,
        defs=[
            ClipPathNode(
                CLIP_WRAPPER_ID,
                RectNode(wrapper.width, wrapper.height, radius=wrapper.radius),
            ),
            ClipPathNode(
                CLIP_LOGO_ID,
                RectNode(logo.width, logo.height, radius=logo.radius),
            ),
        ],
    )

    scene.children.append(
        RectNode(layout.canvas.width, layout.canvas.height, fill=config.background_color)
    )

    if not state.is_empty:
        ox, oy = layout.path_origin
        scene.children.append(
            PathNode(
                d=state.path.d,
                stroke=config.color,
                stroke_width=state.cell_size,
                x=ox,
                y=oy,
            )
        )

    if config.logo:
        lx, ly = layout.logo_position
        scene.children.append(
            GroupNode(
                x=lx,
                y=ly,
                children=[
                    RectNode(
                        wrapper.width,
                        wrapper.height,
                        fill=config.resolved_logo_background_color,
                        clip_path=_clip_url(CLIP_WRAPPER_ID),
                    ),
                    GroupNode(
                        x=logo.x,
                        y=logo.y,
                        children=[
                            ImageNode(
                                href=config.logo,
                                width=logo.width,
                                height=logo.height,
                                clip_path=_clip_url(CLIP_LOGO_ID),
                            )
                        ],
                    ),
                ],
            )
        )

    return scene
