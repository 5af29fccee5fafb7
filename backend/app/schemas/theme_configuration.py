"""Theme configuration request/response schemas."""

import re
import uuid
from datetime import datetime

from pydantic import Field, field_validator

from app.schemas.common import CamelModel

_HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")
_PX_RE = re.compile(r"^\d+(\.\d+)?px$")
_PERCENT_RE = re.compile(r"^\d+(\.\d+)?%$")


class ThemeConfigurationIn(CamelModel):
    theme_code: str = Field(..., min_length=1, max_length=64)
    primary_color: str
    secondary_color: str
    background_color: str
    button_color: str
    app_bar_background_color: str
    button_radius: str
    edge_padding: str
    splash_screen_width: str

    @field_validator(
        "primary_color",
        "secondary_color",
        "background_color",
        "button_color",
        "app_bar_background_color",
    )
    @classmethod
    def validate_hex_color(cls, v: str) -> str:
        if not _HEX_COLOR_RE.match(v):
            raise ValueError("Must be a hex color in #RRGGBB format")
        return v

    @field_validator("button_radius", "edge_padding")
    @classmethod
    def validate_pixels(cls, v: str) -> str:
        if not _PX_RE.match(v):
            raise ValueError("Must be a pixel value such as 12px")
        return v

    @field_validator("splash_screen_width")
    @classmethod
    def validate_percent(cls, v: str) -> str:
        if not _PERCENT_RE.match(v):
            raise ValueError("Must be a percentage such as 50%")
        return v


class ThemeConfigurationResponse(CamelModel):
    id: uuid.UUID
    shop_name: str
    theme_code: str
    primary_color: str
    secondary_color: str
    background_color: str
    button_color: str
    app_bar_background_color: str
    button_radius: str
    edge_padding: str
    splash_screen_width: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
