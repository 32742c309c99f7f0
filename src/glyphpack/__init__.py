"""Glyphpack - Render glyph-font icon libraries into PNG icon packs.

Glyphpack takes an icon font (one TTF per style) together with its icon and
category metadata, and produces an icon pack: one PNG per icon plus an
``icons.json`` manifest with each icon's name, file name and search tags.

Example:
    $ glyphpack generate --style solid --icon-color FFFFFF

This will create com.fortawsome.solid.free.sdIconPack/ containing icons/*.png
and icons.json.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
