"""Tests for the catalog loader."""

from pathlib import Path

import pytest

from glyphpack.core.renderer import decode_codepoint
from glyphpack.exceptions import CatalogParseError
from glyphpack.io.catalog import CatalogSource, load_catalog, parse_catalog

ICONS_YAML = """\
mug-saucer:
  changes: ['1', '5.0.0']
  label: Coffee
  search:
    terms:
      - drink
      - beverage
  styles:
    - solid
  unicode: f0f4
  voted: false
github:
  label: GitHub
  search:
    terms: []
  styles: [brands]
  unicode: f09b
one:
  label: '1'
  styles: [solid]
  unicode: 31
"""

CATEGORIES_YAML = """\
food-beverage:
  icons:
    - mug-saucer
    - Coffee
  label: Food + Beverage
brands:
  label: Brands
"""


class TestParseCatalog:
    """Tests for parse_catalog function."""

    def test_parses_icons_in_order(self) -> None:
        """Test icon records are built in document order."""
        catalog = parse_catalog(ICONS_YAML, CATEGORIES_YAML)

        assert [icon.icon_id for icon in catalog.icons] == ["mug-saucer", "github", "one"]
        coffee = catalog.icons[0]
        assert coffee.label == "Coffee"
        assert coffee.styles == frozenset({"solid"})
        assert coffee.unicode == "f0f4"
        assert coffee.search_terms == ("drink", "beverage")

    def test_numeric_unicode_is_stringified(self) -> None:
        """Test unquoted all-digit code points keep their hex digits."""
        catalog = parse_catalog(ICONS_YAML, CATEGORIES_YAML)
        assert catalog.icons[2].unicode == "31"
        assert catalog.icons[2].label == "1"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("0030", "0030"), ("1_0", "1_0"), ("0x41", "0x41"), ("1.5", "1.5")],
    )
    def test_numeric_looking_unicode_kept_verbatim(self, raw: str, expected: str) -> None:
        """Test code points YAML would read as octal or grouped ints keep their digits."""
        icons = f"zero:\n  label: Zero\n  styles: [solid]\n  unicode: {raw}\n"
        catalog = parse_catalog(icons, "{}")
        assert catalog.icons[0].unicode == expected

    def test_leading_zero_code_point_decodes_as_hex(self) -> None:
        """Test an unquoted 0030 renders U+0030, not the octal value."""
        icons = "zero:\n  label: Zero\n  styles: [solid]\n  unicode: 0030\n"
        catalog = parse_catalog(icons, "{}")
        assert decode_codepoint(catalog.icons[0].unicode) == "0"

    def test_non_numeric_scalars_still_resolve(self) -> None:
        """Test null values still resolve as in standard YAML."""
        icons = "zero:\n  label: Zero\n  styles: [solid]\n  unicode: '30'\n  search: ~\n"
        catalog = parse_catalog(icons, "{}")
        assert catalog.icons[0].search_terms == ()

    def test_parses_categories(self) -> None:
        """Test category records and default membership."""
        catalog = parse_catalog(ICONS_YAML, CATEGORIES_YAML)

        food, brands = catalog.categories
        assert food.label == "Food + Beverage"
        assert food.icon_labels == frozenset({"mug-saucer", "Coffee"})
        assert brands.icon_labels == frozenset()

    def test_missing_search_defaults_to_empty(self) -> None:
        """Test icons without search terms."""
        catalog = parse_catalog("x:\n  label: X\n  styles: [solid]\n  unicode: f000\n", "")
        assert catalog.icons[0].search_terms == ()
        assert catalog.categories == ()

    def test_bad_code_point_is_not_rejected(self) -> None:
        """Test code points are validated at render time, not load time."""
        catalog = parse_catalog("x:\n  label: X\n  styles: [solid]\n  unicode: zzzz\n", "")
        assert catalog.icons[0].unicode == "zzzz"

    def test_empty_documents(self) -> None:
        """Test empty documents give an empty catalog."""
        catalog = parse_catalog("", "")
        assert catalog.icons == ()
        assert catalog.categories == ()

    def test_invalid_yaml(self) -> None:
        """Test malformed YAML raises CatalogParseError."""
        with pytest.raises(CatalogParseError, match="invalid YAML") as exc_info:
            parse_catalog("a: [unclosed\n", "", icons_name="icons.yml")
        assert exc_info.value.path == "icons.yml"
        assert exc_info.value.stage == "load"

    def test_top_level_not_mapping(self) -> None:
        """Test a list document raises CatalogParseError."""
        with pytest.raises(CatalogParseError, match="mapping at top level"):
            parse_catalog("- a\n- b\n", "")

    def test_entry_not_mapping(self) -> None:
        """Test a scalar icon entry raises CatalogParseError."""
        with pytest.raises(CatalogParseError, match="not a mapping"):
            parse_catalog("x: 5\n", "")

    @pytest.mark.parametrize("missing", ["label", "styles", "unicode"])
    def test_missing_required_icon_field(self, missing: str) -> None:
        """Test icons missing a required field raise CatalogParseError."""
        fields = {"label": "X", "styles": "[solid]", "unicode": "f000"}
        del fields[missing]
        body = "".join(f"  {key}: {value}\n" for key, value in fields.items())

        with pytest.raises(CatalogParseError, match=f"missing '{missing}'"):
            parse_catalog(f"x:\n{body}", "")

    def test_missing_category_label(self) -> None:
        """Test categories without a label raise CatalogParseError."""
        with pytest.raises(CatalogParseError, match="missing 'label'"):
            parse_catalog("", "c:\n  icons: [a]\n")

    def test_styles_not_list(self) -> None:
        """Test a scalar styles field raises CatalogParseError."""
        with pytest.raises(CatalogParseError, match="must be a list"):
            parse_catalog("x:\n  label: X\n  styles: solid\n  unicode: f000\n", "")


class TestLoadCatalog:
    """Tests for load_catalog function."""

    def test_load_from_files(self, tmp_path: Path) -> None:
        """Test loading both documents from disk."""
        icons_path = tmp_path / "icons.yml"
        categories_path = tmp_path / "categories.yml"
        icons_path.write_text(ICONS_YAML, encoding="utf-8")
        categories_path.write_text(CATEGORIES_YAML, encoding="utf-8")

        catalog = load_catalog(CatalogSource(icons_path, categories_path))

        assert len(catalog.icons) == 3
        assert len(catalog.categories) == 2

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing document raises CatalogParseError naming the file."""
        icons_path = tmp_path / "icons.yml"
        icons_path.write_text(ICONS_YAML, encoding="utf-8")
        missing = tmp_path / "categories.yml"

        with pytest.raises(CatalogParseError) as exc_info:
            load_catalog(CatalogSource(icons_path, missing))
        assert exc_info.value.path == str(missing)
