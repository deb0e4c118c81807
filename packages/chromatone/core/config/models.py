"""Configuration models for Chromatone."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chromatone.core.color.color_utils import argb_from_hex
from chromatone.core.dynamiccolor.enums import Platform, SpecVersion, Variant

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit one JSON object per record")
    filename: str | None = Field(default=None, description="Log file path; stdout if unset")


class SchemeConfig(BaseModel):
    """Inputs for building one dynamic color scheme."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source_color: str = Field(default="#4285F4", description="Seed color as #RRGGBB")
    additional_colors: tuple[str, ...] = Field(
        default=(), description="Extra source colors as #RRGGBB; the first drives CMF tertiary"
    )
    variant: Variant = Variant.TONAL_SPOT
    is_dark: bool = False
    contrast_level: float = Field(
        default=0.0, ge=-1.0, le=1.0, description="-1 (reduced) to 1 (maximum)"
    )
    platform: Platform = Platform.PHONE
    spec_version: SpecVersion = SpecVersion.SPEC_2021

    @field_validator("source_color")
    @classmethod
    def validate_source_color(cls, value: str) -> str:
        if not _HEX_COLOR.match(value):
            raise ValueError(f"source_color must be #RRGGBB, got {value!r}")
        return value

    @field_validator("additional_colors")
    @classmethod
    def validate_additional_colors(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for color in value:
            if not _HEX_COLOR.match(color):
                raise ValueError(f"additional_colors entries must be #RRGGBB, got {color!r}")
        return value

    @property
    def source_argb(self) -> int:
        return argb_from_hex(self.source_color)

    @property
    def additional_argbs(self) -> tuple[int, ...]:
        return tuple(argb_from_hex(color) for color in self.additional_colors)


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    scheme: SchemeConfig = SchemeConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("config.json")
