"""Configuration management for glyphpack.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- IconStyle: Supported glyph styles
- RenderConfig: Canvas and font size settings
- ProcessingConfig: Worker and error policy settings
- LoggingConfig: Logging settings
- GlyphPackSettings: Main application settings
- GeneratorConfig: Parameters of one generation run
"""

from glyphpack.config.settings import (
    GeneratorConfig,
    GlyphPackSettings,
    IconStyle,
    LoggingConfig,
    ProcessingConfig,
    RenderConfig,
)

__all__ = [
    "GeneratorConfig",
    "GlyphPackSettings",
    "IconStyle",
    "LoggingConfig",
    "ProcessingConfig",
    "RenderConfig",
]
