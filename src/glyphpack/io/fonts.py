"""Font inspection using fonttools.

Reads the set of encoded code points from a TTF/OTF file so the renderer
can warn about code points the font does not cover.
"""

from dataclasses import dataclass
from pathlib import Path

from fontTools.ttLib import TTFont


@dataclass(frozen=True)
class FontInfo:
    """Facts about a font file.

    Attributes:
        path: Font file path
        codepoints: Code points mapped by the font's best cmap subtable
    """

    path: Path
    codepoints: frozenset[int]

    def covers(self, codepoint: int) -> bool:
        """Check if the font maps a code point to a glyph."""
        return codepoint in self.codepoints


def read_font_info(font_path: Path) -> FontInfo:
    """Read cmap coverage from a font file.

    Args:
        font_path: Path to the TTF or OTF font file

    Returns:
        FontInfo for the file

    Raises:
        FileNotFoundError: If font file does not exist
        Exception: If font file is invalid or cannot be loaded
    """
    if not font_path.exists():
        raise FileNotFoundError(f"Font file not found: {font_path}")

    with TTFont(str(font_path), lazy=True) as font:
        cmap = font.getBestCmap() or {}

    return FontInfo(path=font_path, codepoints=frozenset(cmap))
