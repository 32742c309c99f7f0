"""Core pack generation for glyphpack.

This module contains:

- Slug generation (label -> filesystem- and tag-safe name)
- Glyph rendering (code point -> PNG bytes)
- Manifest assembly (record + slug + categories -> manifest entry)
- Pack generation (end-to-end orchestration)

Key functions:
- slugify: Normalize a label into a slug
- decode_codepoint: Decode a hex code point
- assemble: Build a manifest entry
- serialize_manifest: Render entries as JSON

Key classes:
- FontCatalog: Fonts per style with solid fallback
- GlyphRenderer: Draws one glyph per call
- PackGenerator: Orchestrates a generation run
"""

from glyphpack.core.generator import PackGenerator, render_icon_task
from glyphpack.core.manifest import (
    ICONS_DIRNAME,
    MANIFEST_FILENAME,
    assemble,
    build_tags,
    serialize_manifest,
)
from glyphpack.core.renderer import FontCatalog, FontFace, GlyphRenderer, decode_codepoint
from glyphpack.core.slug import slugify

__all__ = [
    "ICONS_DIRNAME",
    "MANIFEST_FILENAME",
    "FontCatalog",
    "FontFace",
    "GlyphRenderer",
    "PackGenerator",
    "assemble",
    "build_tags",
    "decode_codepoint",
    "render_icon_task",
    "serialize_manifest",
    "slugify",
]
