"""Icon and category records.

This module defines the read-only records loaded from an icon catalog:
one IconRecord per icon and one CategoryRecord per topic grouping.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class IconRecord:
    """One entry from the icon catalog.

    Attributes:
        icon_id: Key of the icon in the catalog document (e.g., "mug-saucer")
        label: Human-readable name, unique within a style (e.g., "Mug saucer")
        styles: Styles the glyph is available in
        unicode: Hex string of the code point to render (e.g., "f0f4")
        search_terms: Free-text search terms, in catalog order
    """

    icon_id: str
    label: str
    styles: frozenset[str]
    unicode: str
    search_terms: tuple[str, ...] = ()

    def has_style(self, style: str) -> bool:
        """Check if the icon is available in the given style."""
        return style in self.styles


@dataclass(frozen=True)
class CategoryRecord:
    """Groups icon labels under a topic.

    Member references are not checked against the icon catalog; labels that
    match no icon are simply never hit.

    Attributes:
        category_id: Key of the category in the catalog document
        label: Category name used as a tag (e.g., "Food + Beverage")
        icon_labels: Icon labels or ids belonging to this category
    """

    category_id: str
    label: str
    icon_labels: frozenset[str] = field(default_factory=frozenset)

    def contains(self, name: str) -> bool:
        """Check if an icon label or slug is a member of this category."""
        return name in self.icon_labels


@dataclass(frozen=True)
class Catalog:
    """The full set of icon and category records from one metadata source."""

    icons: tuple[IconRecord, ...]
    categories: tuple[CategoryRecord, ...]

    def filter_by_style(self, style: str) -> list[IconRecord]:
        """Return the icons available in a style, in catalog order."""
        return [icon for icon in self.icons if icon.has_style(style)]
