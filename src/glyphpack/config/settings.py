"""Configuration settings for Glyphpack."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class IconStyle(str, Enum):
    """Glyph family variant of an icon set."""

    REGULAR = "regular"
    SOLID = "solid"
    BRANDS = "brands"
    LIGHT = "light"
    SHARP = "sharp"
    THIN = "thin"

    @classmethod
    def free_styles(cls) -> list["IconStyle"]:
        """Styles shipped with the free icon set."""
        return [cls.REGULAR, cls.SOLID, cls.BRANDS]


class RenderConfig(BaseModel):
    """Configuration for glyph rasterization."""

    canvas_size: int = Field(
        default=144,
        ge=16,
        le=1024,
        description="Width and height of the square output image in pixels",
    )
    font_size: int = Field(
        default=72,
        ge=8,
        le=1024,
        description="Point size the glyph is drawn at",
    )


class ProcessingConfig(BaseModel):
    """Configuration for pack generation."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto, 1 = render in-process)",
    )
    skip_invalid_glyphs: bool = Field(
        default=False,
        description="Skip icons whose code point cannot be decoded instead of aborting",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GlyphPackSettings(BaseModel):
    """Main application settings."""

    render: RenderConfig = Field(default_factory=RenderConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class GeneratorConfig(BaseModel):
    """Parameters for a single pack generation run.

    Colors are 3 or 6 hex digits without a leading ``#``. They are validated
    by the command-line layer before a config is built.
    """

    model_config = ConfigDict(frozen=True)

    style: IconStyle = Field(
        default=IconStyle.SOLID,
        description="Icon style to render",
    )
    icon_color: str = Field(
        default="FFFFFF",
        description="Glyph color (hex)",
    )
    background_color: str = Field(
        default="0A1423",
        description="Background color (hex)",
    )
    output_root: Path = Field(
        description="Directory the pack is written to",
    )
    licensed: bool = Field(
        default=False,
        description="Whether fonts and metadata come from the licensed set",
    )
