"""Render configuration — one immutable snapshot per render pass."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable

DEFAULT_VALUE = "This is a QR Code."
DEFAULT_SIZE = 100.0
DEFAULT_COLOR = "black"
DEFAULT_BG_COLOR = "white"
DEFAULT_LOGO_SIZE_RATIO = 0.2  # 20% of size
DEFAULT_LOGO_MARGIN = 2.0
DEFAULT_ECL = "M"

ErrorHandler = Callable[[Exception], Any]


@dataclass(frozen=True)
class RenderConfig:
    """Every caller-supplied option of a QR code render."""

    value: str = DEFAULT_VALUE
    size: float = DEFAULT_SIZE
    color: str = DEFAULT_COLOR
    background_color: str = DEFAULT_BG_COLOR
    # Image href (URL or data URI); no logo when None
    logo: str | None = None
    # None = DEFAULT_LOGO_SIZE_RATIO × size
    logo_size: float | None = None
    # None = background_color
    logo_background_color: str | None = None
    logo_margin: float = DEFAULT_LOGO_MARGIN
    logo_border_radius: float = 0.0
    ecl: str = DEFAULT_ECL
    padding: float = 0.0
    # Called with the GenerationError instead of raising it
    on_error: ErrorHandler | None = None

    @property
    def resolved_logo_size(self) -> float:
        if self.logo_size is None:
            return self.size * DEFAULT_LOGO_SIZE_RATIO
        return self.logo_size

    @property
    def resolved_logo_background_color(self) -> str:
        return self.logo_background_color or self.background_color

    @property
    def matrix_key(self) -> tuple[str, float, str]:
        """Inputs that change the matrix or path; everything else is render-time only."""
        return (self.value, self.size, self.ecl)

    def evolve(self, **changes: Any) -> RenderConfig:
        return replace(self, **changes)
