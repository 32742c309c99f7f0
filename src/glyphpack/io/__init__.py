"""I/O layer for glyphpack.

This module handles everything that touches the filesystem: catalog
documents, font files, pack output and shared assets.

Key responsibilities:
- Parse icon and category YAML documents into domain records
- Inspect font files with fonttools
- Resolve free and licensed source layouts
- Best-effort cleanup and ensure-parent writes

Key classes:
- CatalogSource: Location of the catalog documents
- FontSource: A style's font file and family name
- FontInfo: cmap coverage of a font
"""

from glyphpack.io.catalog import CatalogSource, load_catalog, parse_catalog
from glyphpack.io.fonts import FontInfo, read_font_info
from glyphpack.io.sources import (
    FontSource,
    default_pack_dirname,
    resolve_catalog_source,
    resolve_font_sources,
)

__all__ = [
    "CatalogSource",
    "FontInfo",
    "FontSource",
    "default_pack_dirname",
    "load_catalog",
    "parse_catalog",
    "read_font_info",
    "resolve_catalog_source",
    "resolve_font_sources",
]
