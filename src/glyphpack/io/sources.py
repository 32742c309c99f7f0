"""Resolution of font and metadata files for free and licensed icon sets.

The free set follows the npm package layout (``webfonts/`` and
``metadata/`` under the package root). The licensed set is a flat directory
holding the font files and both metadata documents.
"""

from dataclasses import dataclass
from pathlib import Path

from glyphpack.config import IconStyle
from glyphpack.io.catalog import CatalogSource

DEFAULT_FREE_ROOT = Path("node_modules/@fortawesome/fontawesome-free")
DEFAULT_PRO_ROOT = Path("pro")

ICONS_DOCUMENT = "icons.yml"
CATEGORIES_DOCUMENT = "categories.yml"

# style -> (family name, font file name)
FREE_FONTS: dict[IconStyle, tuple[str, str]] = {
    IconStyle.REGULAR: ("Font Awesome 6 Free Regular", "fa-regular-400.ttf"),
    IconStyle.SOLID: ("Font Awesome 6 Free Solid", "fa-solid-900.ttf"),
    IconStyle.BRANDS: ("Font Awesome 6 Brands Regular", "fa-brands-400.ttf"),
}

PRO_FONTS: dict[IconStyle, tuple[str, str]] = {
    IconStyle.REGULAR: ("Font Awesome 6 Pro Regular", "fa-regular-400.ttf"),
    IconStyle.SOLID: ("Font Awesome 6 Pro Solid", "fa-solid-900.ttf"),
    IconStyle.BRANDS: ("Font Awesome 6 Brands Regular", "fa-brands-400.ttf"),
    IconStyle.LIGHT: ("Font Awesome 6 Pro Light", "fa-light-300.ttf"),
    IconStyle.SHARP: ("Font Awesome 6 Sharp Solid", "fa-sharp-solid-900.ttf"),
    IconStyle.THIN: ("Font Awesome 6 Pro Thin", "fa-thin-100.ttf"),
}


@dataclass(frozen=True)
class FontSource:
    """A font file and the family name it is registered under."""

    style: IconStyle
    family: str
    path: Path


def resolve_font_sources(root: Path, licensed: bool = False) -> dict[IconStyle, FontSource]:
    """Build the style -> font table for an icon set.

    Styles whose font file is absent are left out, except solid which is
    the fallback style and is always included so a missing file is
    reported when the fonts are loaded.

    Args:
        root: Root directory of the free package or the licensed set
        licensed: Whether root holds the licensed set

    Returns:
        Mapping of style to font source
    """
    table = PRO_FONTS if licensed else FREE_FONTS
    font_dir = root if licensed else root / "webfonts"

    sources: dict[IconStyle, FontSource] = {}
    for style, (family, filename) in table.items():
        path = font_dir / filename
        if path.exists() or style == IconStyle.SOLID:
            sources[style] = FontSource(style=style, family=family, path=path)
    return sources


def resolve_catalog_source(root: Path, licensed: bool = False) -> CatalogSource:
    """Locate icons.yml and categories.yml for an icon set."""
    metadata_dir = root if licensed else root / "metadata"
    return CatalogSource(
        icons_path=metadata_dir / ICONS_DOCUMENT,
        categories_path=metadata_dir / CATEGORIES_DOCUMENT,
    )


def default_pack_dirname(style: IconStyle, licensed: bool = False) -> str:
    """Default pack directory name for a style.

    Converts: solid -> com.fortawsome.solid.free.sdIconPack
    """
    edition = "pro" if licensed else "free"
    return f"com.fortawsome.{style.value}.{edition}.sdIconPack"
