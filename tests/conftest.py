"""Shared fixtures: generated icon fonts and catalog documents."""

import copy
import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
import structlog
import yaml
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from glyphpack.core import FontCatalog
from glyphpack.io import CatalogSource

# Code points every test font maps to a full-size square
SQUARE_CODEPOINTS = (0xF0F4, 0xF09B, 0xF005, 0xF004, 0xF2B4)
# Code point mapped to a small centered square
SMALL_CODEPOINT = 0xF111

SAMPLE_ICONS: dict[str, Any] = {
    "mug-saucer": {
        "label": "Coffee",
        "styles": ["solid"],
        "unicode": "f0f4",
        "search": {"terms": ["drink"]},
    },
    "github": {
        "label": "GitHub",
        "styles": ["brands"],
        "unicode": "f09b",
        "search": {"terms": ["octocat"]},
    },
    "star": {
        "label": "Star",
        "styles": ["solid", "regular"],
        "unicode": "f005",
        "search": {"terms": ["achievement", "rating"]},
    },
    "heart": {
        "label": "Heart",
        "styles": ["solid", "regular"],
        "unicode": "f004",
        "search": {"terms": []},
    },
    "font-awesome": {
        "label": "Font Awesome",
        "styles": ["brands", "solid", "regular"],
        "unicode": "f2b4",
        "search": {"terms": ["meanpath"]},
    },
}

SAMPLE_CATEGORIES: dict[str, Any] = {
    "food-beverage": {"label": "Food + Beverage", "icons": ["mug-saucer", "Coffee"]},
    "shapes": {"label": "Shapes", "icons": ["star", "heart", "missing-icon"]},
    "brands": {"label": "Brands", "icons": ["github", "font-awesome"]},
}


def _draw_rect(pen: TTGlyphPen, x_min: int, y_min: int, x_max: int, y_max: int) -> None:
    pen.moveTo((x_min, y_min))
    pen.lineTo((x_min, y_max))
    pen.lineTo((x_max, y_max))
    pen.lineTo((x_max, y_min))
    pen.closePath()


def build_icon_font(path: Path, family: str) -> Path:
    """Write a TrueType font with square glyphs at the test code points.

    Glyphs are vertically centered on the middle of ascender (800) and
    descender (-200), so a glyph drawn with a middle anchor sits at the
    center of the canvas.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    pen = TTGlyphPen(None)
    _draw_rect(pen, 100, -100, 900, 700)
    square = pen.glyph()

    pen = TTGlyphPen(None)
    _draw_rect(pen, 400, 200, 600, 400)
    small = pen.glyph()

    cmap = {cp: f"uni{cp:04X}" for cp in SQUARE_CODEPOINTS}
    cmap[SMALL_CODEPOINT] = f"uni{SMALL_CODEPOINT:04X}"
    glyph_order = [".notdef", *cmap.values()]

    glyphs = {name: square for name in glyph_order}
    glyphs[cmap[SMALL_CODEPOINT]] = small

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf(glyphs)

    glyph_table = fb.font["glyf"]
    fb.setupHorizontalMetrics(
        {name: (1000, glyph_table[name].xMin) for name in glyph_order}
    )
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable(
        {
            "familyName": family,
            "styleName": "Regular",
            "uniqueFontIdentifier": f"glyphpack-tests: {family}",
            "fullName": f"{family} Regular",
            "psName": family.replace(" ", "") + "-Regular",
            "version": "Version 1.0",
        }
    )
    fb.setupOS2(
        sTypoAscender=800,
        sTypoDescender=-200,
        usWinAscent=800,
        usWinDescent=200,
    )
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Undo logging configuration done by a test (e.g. through the CLI)."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def sample_icons() -> dict[str, Any]:
    """Icon catalog document as a mapping."""
    return copy.deepcopy(SAMPLE_ICONS)


@pytest.fixture
def sample_categories() -> dict[str, Any]:
    """Category catalog document as a mapping."""
    return copy.deepcopy(SAMPLE_CATEGORIES)


@pytest.fixture
def solid_font(tmp_path: Path) -> Path:
    """A generated solid-style font file."""
    return build_icon_font(tmp_path / "fonts" / "solid.ttf", "Test Icons Solid")


@pytest.fixture
def brands_font(tmp_path: Path) -> Path:
    """A generated brands-style font file."""
    return build_icon_font(tmp_path / "fonts" / "brands.ttf", "Test Icons Brands")


@pytest.fixture
def font_catalog(solid_font: Path, brands_font: Path) -> FontCatalog:
    """Font catalog with solid and brands faces."""
    return FontCatalog(
        {
            "solid": ("Test Icons Solid", solid_font),
            "brands": ("Test Icons Brands", brands_font),
        }
    )


@pytest.fixture
def write_catalog(tmp_path: Path) -> Callable[..., CatalogSource]:
    """Factory writing icons.yml and categories.yml into a directory."""

    def _write(
        icons: dict[str, Any],
        categories: dict[str, Any] | None = None,
        directory: Path | None = None,
    ) -> CatalogSource:
        target = directory or tmp_path / "metadata"
        target.mkdir(parents=True, exist_ok=True)
        icons_path = target / "icons.yml"
        categories_path = target / "categories.yml"
        icons_path.write_text(
            yaml.safe_dump(icons, sort_keys=False, allow_unicode=True), encoding="utf-8"
        )
        categories_path.write_text(
            yaml.safe_dump(categories or {}, sort_keys=False, allow_unicode=True),
            encoding="utf-8",
        )
        return CatalogSource(icons_path=icons_path, categories_path=categories_path)

    return _write


@pytest.fixture
def sample_source(
    write_catalog: Callable[..., CatalogSource],
    sample_icons: dict[str, Any],
    sample_categories: dict[str, Any],
) -> CatalogSource:
    """Catalog documents for the sample icons and categories."""
    return write_catalog(sample_icons, sample_categories)
