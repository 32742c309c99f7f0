"""Glyph rasterization.

This module turns a single code point into a square PNG image using
Pillow. Fonts are loaded once into a FontCatalog which is handed to the
renderer; nothing is registered globally and no drawing surface is shared
between calls.

Key classes:
- FontFace: A loaded font for one style
- FontCatalog: Style -> font table with solid fallback
- GlyphRenderer: Draws one glyph per call and returns PNG bytes
"""

from collections.abc import Mapping
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import Any

import structlog
from PIL import Image, ImageDraw, ImageFont

from glyphpack.config import IconStyle, RenderConfig
from glyphpack.exceptions import FontResolutionError, GlyphRenderError
from glyphpack.io.fonts import FontInfo, read_font_info
from glyphpack.io.sources import FontSource

FALLBACK_STYLE = IconStyle.SOLID.value


def _style_key(style: IconStyle | str) -> str:
    return style.value if isinstance(style, IconStyle) else str(style)


def decode_codepoint(unicode_hex: str) -> str:
    """Decode a hex code point string into a one-character string.

    Raises:
        GlyphRenderError: If the value is not a valid hex code point
    """
    try:
        return chr(int(unicode_hex, 16))
    except (TypeError, ValueError, OverflowError) as e:
        raise GlyphRenderError(f"invalid code point {unicode_hex!r}") from e


@dataclass(frozen=True)
class FontFace:
    """A font loaded for one style.

    Attributes:
        style: Style the face is registered for
        family: Family name the style maps to
        path: Font file path
        font: Pillow font at the configured point size
        info: Code point coverage read from the font file
    """

    style: str
    family: str
    path: Path
    font: ImageFont.FreeTypeFont
    info: FontInfo


class FontCatalog:
    """Fonts for each style, loaded once at construction.

    Styles with no registered font resolve to the solid style's face, so
    the solid style must always be present.

    Example:
        fonts = FontCatalog({"solid": ("Font Awesome 6 Free Solid", Path("fa-solid-900.ttf"))})
        face = fonts.resolve("brands")  # falls back to solid
    """

    def __init__(
        self,
        fonts: Mapping[IconStyle | str, tuple[str, Path]],
        font_size: int = 72,
    ) -> None:
        """Load every font in the table.

        Args:
            fonts: Mapping of style to (family name, font file path)
            font_size: Point size to load the fonts at

        Raises:
            FontResolutionError: If a font cannot be loaded or the solid
                style is missing
        """
        self._font_size = font_size
        self._faces: dict[str, FontFace] = {}

        for style, (family, path) in fonts.items():
            key = _style_key(style)
            self._faces[key] = self._load_face(key, family, Path(path))

        if FALLBACK_STYLE not in self._faces:
            raise FontResolutionError(FALLBACK_STYLE, "<unset>", "fallback style has no font")

    @classmethod
    def from_sources(
        cls,
        sources: Mapping[IconStyle, FontSource],
        font_size: int = 72,
    ) -> "FontCatalog":
        """Build a catalog from resolved font sources."""
        return cls(
            {style: (source.family, source.path) for style, source in sources.items()},
            font_size=font_size,
        )

    def _load_face(self, style: str, family: str, path: Path) -> FontFace:
        try:
            font = ImageFont.truetype(str(path), self._font_size)
            info = read_font_info(path)
        except Exception as e:
            raise FontResolutionError(style, str(path), str(e)) from e

        return FontFace(
            style=style,
            family=family,
            path=path,
            font=font,
            info=info,
        )

    @property
    def font_size(self) -> int:
        """Point size the fonts are loaded at."""
        return self._font_size

    @property
    def styles(self) -> list[str]:
        """Styles with a registered font."""
        return list(self._faces)

    def resolve(self, style: IconStyle | str) -> FontFace:
        """Get the face for a style, falling back to solid."""
        return self._faces.get(_style_key(style), self._faces[FALLBACK_STYLE])

    def family_for(self, style: IconStyle | str) -> str:
        """Get the family name a style renders with."""
        return self.resolve(style).family

    def to_dict(self) -> dict[str, Any]:
        """Serialize the font table for worker processes.

        Returns:
            Dictionary with the point size and style -> family/path entries
        """
        return {
            "font_size": self._font_size,
            "fonts": {
                style: {"family": face.family, "path": str(face.path)}
                for style, face in self._faces.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FontCatalog":
        """Rebuild a catalog from its serialized table, reloading the fonts."""
        return cls(
            {
                style: (entry["family"], Path(entry["path"]))
                for style, entry in data["fonts"].items()
            },
            font_size=data["font_size"],
        )


class GlyphRenderer:
    """Draws a single glyph centered on a solid square canvas.

    Every call allocates its own image, so calls are independent and the
    renderer can be shared freely.
    """

    def __init__(
        self,
        fonts: FontCatalog,
        config: RenderConfig | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            fonts: Loaded font catalog
            config: Canvas settings (defaults to 144x144)
            logger: Logger for coverage warnings

        Raises:
            ValueError: If config asks for a font size the catalog was not
                loaded at
        """
        if config is not None and config.font_size != fonts.font_size:
            raise ValueError(
                f"render font size {config.font_size} does not match "
                f"font catalog size {fonts.font_size}"
            )
        self._fonts = fonts
        self._config = config or RenderConfig(font_size=fonts.font_size)
        self._logger = logger or structlog.get_logger("glyphpack")

    @property
    def fonts(self) -> FontCatalog:
        """Font catalog used for drawing."""
        return self._fonts

    def render(
        self,
        unicode_hex: str,
        style: IconStyle | str,
        background_color: str,
        icon_color: str,
    ) -> bytes:
        """Render one code point as PNG bytes.

        Args:
            unicode_hex: Code point as a hex string (e.g., "f0f4")
            style: Icon style selecting the font
            background_color: Canvas fill color, 3 or 6 hex digits
            icon_color: Glyph color, 3 or 6 hex digits

        Returns:
            PNG-encoded image bytes

        Raises:
            GlyphRenderError: If the code point or a color cannot be decoded
        """
        glyph = decode_codepoint(unicode_hex)
        face = self._fonts.resolve(style)

        if not face.info.covers(ord(glyph)):
            self._logger.warning(
                "Code point not covered by font",
                codepoint=unicode_hex,
                family=face.family,
            )

        size = self._config.canvas_size
        try:
            image = Image.new("RGB", (size, size), f"#{background_color}")
            draw = ImageDraw.Draw(image)
            draw.text(
                (size / 2, size / 2),
                glyph,
                font=face.font,
                fill=f"#{icon_color}",
                anchor="mm",
            )
        except ValueError as e:
            raise GlyphRenderError(f"invalid color: {e}") from e

        buffer = BytesIO()
        image.save(buffer, format="PNG")
        return buffer.getvalue()
