"""Tests for manifest assembly and serialization."""

import json

from glyphpack.core.manifest import assemble, build_tags, serialize_manifest
from glyphpack.domain import CategoryRecord, IconRecord, ManifestEntry


def _record(label: str = "Coffee", terms: tuple[str, ...] = ("drink",)) -> IconRecord:
    return IconRecord(
        icon_id="mug-saucer",
        label=label,
        styles=frozenset({"solid"}),
        unicode="f0f4",
        search_terms=terms,
    )


def _category(label: str, *members: str) -> CategoryRecord:
    return CategoryRecord(category_id=label.lower(), label=label, icon_labels=frozenset(members))


class TestBuildTags:
    """Tests for build_tags function."""

    def test_order(self) -> None:
        """Test terms, slug, spaced slug, then categories."""
        record = _record("Mug Saucer", ("drink", "tea"))
        categories = [
            _category("Food", "Mug Saucer"),
            _category("Shapes", "square"),
            _category("Kitchen", "mug-saucer"),
        ]

        tags = build_tags(record, "mug-saucer", categories)

        assert tags == ["drink", "tea", "mug-saucer", "mug saucer", "Food", "Kitchen"]

    def test_duplicates_kept(self) -> None:
        """Test repeated tags are preserved."""
        record = _record("Coffee", ("coffee", "drink", "drink"))
        categories = [_category("Food", "Coffee"), _category("Food", "coffee")]

        tags = build_tags(record, "coffee", categories)

        assert tags == ["coffee", "drink", "drink", "coffee", "coffee", "Food", "Food"]

    def test_unmatched_category_members_ignored(self) -> None:
        """Test categories referencing unknown icons do not fail."""
        tags = build_tags(_record(), "coffee", [_category("Ghosts", "nope", "nothing")])
        assert tags == ["drink", "coffee", "coffee"]

    def test_record_not_mutated(self) -> None:
        """Test building tags leaves the record's terms untouched."""
        record = _record()
        build_tags(record, "coffee", [_category("Food", "Coffee")])
        build_tags(record, "coffee", [_category("Food", "Coffee")])
        assert record.search_terms == ("drink",)


class TestAssemble:
    """Tests for assemble function."""

    def test_entry(self) -> None:
        """Test the entry for the Coffee icon."""
        entry = assemble(_record(), "coffee", [_category("Food", "Coffee")])

        assert entry == ManifestEntry(
            name="Coffee",
            path="coffee.png",
            tags=("drink", "coffee", "coffee", "Food"),
        )


class TestSerializeManifest:
    """Tests for serialize_manifest function."""

    def test_pretty_printed(self) -> None:
        """Test two-space indentation and key order."""
        text = serialize_manifest(
            [ManifestEntry(name="Coffee", path="coffee.png", tags=("drink",))]
        )

        assert text == (
            "[\n"
            "  {\n"
            '    "name": "Coffee",\n'
            '    "path": "coffee.png",\n'
            '    "tags": [\n'
            '      "drink"\n'
            "    ]\n"
            "  }\n"
            "]"
        )

    def test_non_ascii_kept(self) -> None:
        """Test non-ASCII text is written as-is."""
        text = serialize_manifest([ManifestEntry(name="Café", path="cafe.png", tags=("crème",))])
        assert "Café" in text
        assert "crème" in text
        assert json.loads(text)[0]["name"] == "Café"

    def test_empty(self) -> None:
        """Test an empty manifest."""
        assert serialize_manifest([]) == "[]"
