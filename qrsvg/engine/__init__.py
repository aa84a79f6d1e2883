"""QR code path compiler, layout engine and renderer."""

from qrsvg.engine.config import RenderConfig
from qrsvg.engine.generation import GenerationResult, generate
from qrsvg.engine.layout import LayoutGeometry, Rect, compute_layout
from qrsvg.engine.path_compiler import PathCommand, PathDescriptor, compile_path
from qrsvg.engine.renderer import QRCode, render_svg

__all__ = [
    "RenderConfig",
    "GenerationResult",
    "generate",
    "LayoutGeometry",
    "Rect",
    "compute_layout",
    "PathCommand",
    "PathDescriptor",
    "compile_path",
    "QRCode",
    "render_svg",
]
