"""Exception hierarchy for Glyphpack.

Every error carries the pipeline ``stage`` it belongs to (load, render or
persist) so callers can report where a run stopped.
"""

STAGE_LOAD = "load"
STAGE_RENDER = "render"
STAGE_PERSIST = "persist"


class GlyphPackError(Exception):
    """Base exception for all Glyphpack errors."""

    stage: str | None = None


class CatalogError(GlyphPackError):
    """Errors related to icon and category metadata."""

    stage = STAGE_LOAD


class CatalogParseError(CatalogError):
    """A catalog document is not well-formed or lacks required fields."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse catalog '{path}': {reason}")


class GlyphRenderError(GlyphPackError):
    """Error rendering a glyph to an image."""

    stage = STAGE_RENDER

    def __init__(
        self,
        reason: str,
        label: str | None = None,
        slug: str | None = None,
    ) -> None:
        self.reason = reason
        self.label = label
        self.slug = slug
        if label is not None:
            super().__init__(f"Failed to render icon '{label}' ({slug}): {reason}")
        else:
            super().__init__(f"Failed to render glyph: {reason}")


class FontResolutionError(GlyphRenderError):
    """A font could not be located or loaded when building the font catalog."""

    def __init__(self, style: str, path: str, reason: str) -> None:
        self.style = style
        self.path = path
        super().__init__(f"font for style '{style}' at '{path}' unusable: {reason}")


class FileSystemError(GlyphPackError):
    """Errors related to reading or writing pack files."""

    stage = STAGE_PERSIST


class PackWriteError(FileSystemError):
    """Error writing an image or manifest file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write '{path}': {reason}")
