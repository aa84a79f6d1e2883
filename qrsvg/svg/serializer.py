"""Write SVG markup from a composed scene."""

from __future__ import annotations

from html import escape
from typing import Any

from qrsvg.engine.path_compiler import format_number
from qrsvg.engine.scene import (
    ClipPathNode,
    GroupNode,
    ImageNode,
    Node,
    PathNode,
    RectNode,
    Scene,
)

_INDENT = "  "


def _attrs(**attrs: Any) -> str:
    """Render attributes, dropping None. Underscores become hyphens."""
    parts = []
    for key, value in attrs.items():
        if value is None:
            continue
        if isinstance(value, (int, float)):
            value = format_number(value)
        parts.append(f'{key.rstrip("_").replace("_", "-")}="{escape(str(value), quote=True)}"')
    return " ".join(parts)


def _translate(x: float, y: float) -> str | None:
    if not x and not y:
        return None
    return f"translate({format_number(x)} {format_number(y)})"


def _rect(node: RectNode) -> str:
    radius = node.radius or None
    return "<rect " + _attrs(
        x=node.x or None,
        y=node.y or None,
        width=node.width,
        height=node.height,
        rx=radius,
        ry=radius,
        fill=node.fill,
        clip_path=node.clip_path,
    ) + " />"


def _node_lines(node: Node, depth: int) -> list[str]:
    pad = _INDENT * depth

    if isinstance(node, RectNode):
        return [pad + _rect(node)]

    if isinstance(node, PathNode):
        return [pad + "<path " + _attrs(
            transform=_translate(node.x, node.y),
            d=node.d,
            fill=node.fill,
            stroke=node.stroke,
            stroke_width=node.stroke_width,
        ) + " />"]

    if isinstance(node, ImageNode):
        return [pad + "<image " + _attrs(
            width=node.width,
            height=node.height,
            preserveAspectRatio=node.preserve_aspect_ratio,
            href=node.href,
            clip_path=node.clip_path,
        ) + " />"]

    if isinstance(node, GroupNode):
        transform = _translate(node.x, node.y)
        open_tag = f"<g {_attrs(transform=transform)}>" if transform else "<g>"
        lines = [pad + open_tag]
        for child in node.children:
            lines.extend(_node_lines(child, depth + 1))
        lines.append(pad + "</g>")
        return lines

    raise TypeError(f"Unsupported scene node: {type(node).__name__}")


def _clip_lines(clip: ClipPathNode, depth: int) -> list[str]:
    pad = _INDENT * depth
    return [
        pad + f"<clipPath {_attrs(id=clip.id)}>",
        pad + _INDENT + _rect(clip.shape),
        pad + "</clipPath>",
    ]


def serialize_scene(scene: Scene, title: str = "") -> str:
    """Generate SVG markup for a scene."""
    w = format_number(scene.width)
    h = format_number(scene.height)
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="http://www.w3.org/2000/svg"'
        f' width="{w}" height="{h}" viewBox="0 0 {w} {h}" role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")

    if scene.defs:
        lines.append("  <defs>")
        for clip in scene.defs:
            lines.extend(_clip_lines(clip, 2))
        lines.append("  </defs>")

    for node in scene.children:
        lines.extend(_node_lines(node, 1))

    lines.append("</svg>")
    return "\n".join(lines)
