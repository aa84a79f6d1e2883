"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from qrsvg.engine.config import (
    DEFAULT_BG_COLOR,
    DEFAULT_COLOR,
    DEFAULT_ECL,
    DEFAULT_LOGO_MARGIN,
    DEFAULT_SIZE,
    DEFAULT_VALUE,
    RenderConfig,
)


class RenderRequest(BaseModel):
    value: str = Field(default=DEFAULT_VALUE, description="Text to encode")
    size: float = Field(default=DEFAULT_SIZE, gt=0, description="Code area width/height")
    color: str = Field(default=DEFAULT_COLOR, description="Module color")
    background_color: str = Field(default=DEFAULT_BG_COLOR, description="Canvas color")
    logo: str | None = Field(default=None, description="Logo image href (URL or data URI)")
    logo_size: float | None = Field(default=None, ge=0, description="Logo size, default 20% of size")
    logo_background_color: str | None = Field(
        default=None,
        description="Logo backdrop color, default background_color. Use 'transparent' to disable.",
    )
    logo_margin: float = Field(default=DEFAULT_LOGO_MARGIN, ge=0, description="Logo distance to its wrapper")
    logo_border_radius: float = Field(default=0, ge=0, description="Logo corner radius")
    ecl: Literal["L", "M", "Q", "H"] = Field(default=DEFAULT_ECL, description="Error correction level")
    padding: float = Field(default=0, ge=0, description="Padding around the code")
    fallback_on_error: bool = Field(
        default=False,
        description="Render an empty code and report the error instead of failing",
    )

    def to_config(self) -> RenderConfig:
        data = self.model_dump(exclude={"fallback_on_error"})
        return RenderConfig(**data)


class PreviewRequest(BaseModel):
    value: str = Field(default=DEFAULT_VALUE, description="Text to encode")
    ecl: Literal["L", "M", "Q", "H"] = Field(default=DEFAULT_ECL, description="Error correction level")
    style: Literal["text", "halfblock"] = Field(default="halfblock", description="Preview character set")
