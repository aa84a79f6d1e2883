"""Layout engine — pixel geometry derived from size, padding and logo options."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    radius: float = 0.0

    def translate(self, dx: float, dy: float) -> Rect:
        return Rect(self.x + dx, self.y + dy, self.width, self.height, self.radius)


@dataclass(frozen=True)
class LayoutGeometry:
    canvas_size: float
    # Background: fills the whole padded canvas
    canvas: Rect
    # Translation applied to the module path
    path_origin: tuple[float, float]
    # Top-left of the logo wrapper, canvas coordinates
    logo_position: tuple[float, float]
    # Logo background + clip, canvas coordinates
    logo_wrapper: Rect
    # Logo image + clip, relative to the wrapper
    logo: Rect

    @property
    def logo_absolute(self) -> Rect:
        return self.logo.translate(*self.logo_position)


def wrapper_radius(logo_border_radius: float, logo_margin: float) -> float:
    """Square logos keep square wrapper corners; rounded ones grow by the margin."""
    return logo_border_radius + (logo_margin if logo_border_radius > 0 else 0)


def compute_layout(
    size: float,
    padding: float = 0,
    logo_size: float = 0,
    logo_margin: float = 0,
    logo_border_radius: float = 0,
) -> LayoutGeometry:
    """Compute canvas, path offset and logo placement.

    The logo block (logo + margin on each side) is centred in the unpadded
    code area, then shifted by half the padding. No bounds checking: a logo
    larger than the code simply overflows.
    """
    canvas_size = size + padding
    offset = padding / 2
    wrapper_size = logo_size + logo_margin * 2
    position = size / 2 - logo_size / 2 - logo_margin + offset

    return LayoutGeometry(
        canvas_size=canvas_size,
        canvas=Rect(0, 0, canvas_size, canvas_size),
        path_origin=(offset, offset),
        logo_position=(position, position),
        logo_wrapper=Rect(
            position,
            position,
            wrapper_size,
            wrapper_size,
            wrapper_radius(logo_border_radius, logo_margin),
        ),
        logo=Rect(logo_margin, logo_margin, logo_size, logo_size, logo_border_radius),
    )
