"""Catalog loader for icon and category metadata.

This module parses the two YAML documents that describe an icon set:

- icons.yml: mapping of icon id to ``{label, styles, unicode, search: {terms}}``
- categories.yml: mapping of category id to ``{label, icons}``

Only the fields needed to build a record are checked. Code points are kept
as hex strings and validated when an icon is rendered.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from glyphpack.domain import Catalog, CategoryRecord, IconRecord
from glyphpack.exceptions import CatalogParseError

_SafeLoader = getattr(yaml, "CSafeLoader", yaml.SafeLoader)
_NUMERIC_TAGS = frozenset({"tag:yaml.org,2002:int", "tag:yaml.org,2002:float"})


class CatalogLoader(_SafeLoader):
    """Safe loader that keeps numeric-looking scalars as text.

    Code points such as ``0030`` (octal) or ``1_0`` (grouped digits) would
    otherwise resolve to integers and lose their hex digits.
    """

    yaml_implicit_resolvers = {
        first: [(tag, regexp) for tag, regexp in resolvers if tag not in _NUMERIC_TAGS]
        for first, resolvers in _SafeLoader.yaml_implicit_resolvers.items()
    }


@dataclass(frozen=True)
class CatalogSource:
    """Location of the icon and category documents.

    Attributes:
        icons_path: Path to icons.yml
        categories_path: Path to categories.yml
    """

    icons_path: Path
    categories_path: Path


def load_catalog(source: CatalogSource) -> Catalog:
    """Read and parse both catalog documents.

    Args:
        source: Paths of the icon and category documents

    Returns:
        Parsed catalog, icons and categories in document order

    Raises:
        CatalogParseError: If a document is missing, malformed, or lacks
            required fields
    """
    icons_text = _read_text(source.icons_path)
    categories_text = _read_text(source.categories_path)
    return parse_catalog(
        icons_text,
        categories_text,
        icons_name=str(source.icons_path),
        categories_name=str(source.categories_path),
    )


def parse_catalog(
    icons_text: str,
    categories_text: str,
    icons_name: str = "<icons>",
    categories_name: str = "<categories>",
) -> Catalog:
    """Parse catalog documents from YAML text.

    Args:
        icons_text: YAML text of the icon catalog
        categories_text: YAML text of the category catalog
        icons_name: Name used for the icon document in error messages
        categories_name: Name used for the category document in error messages

    Returns:
        Parsed catalog

    Raises:
        CatalogParseError: If a document is malformed or lacks required fields
    """
    icons_doc = _parse_mapping(icons_text, icons_name)
    categories_doc = _parse_mapping(categories_text, categories_name)

    icons = tuple(
        _parse_icon(str(icon_id), entry, icons_name)
        for icon_id, entry in icons_doc.items()
    )
    categories = tuple(
        _parse_category(str(category_id), entry, categories_name)
        for category_id, entry in categories_doc.items()
    )
    return Catalog(icons=icons, categories=categories)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogParseError(str(path), str(e)) from e


def _parse_mapping(text: str, name: str) -> dict[Any, Any]:
    try:
        document = yaml.load(text, Loader=CatalogLoader)  # noqa: S506
    except yaml.YAMLError as e:
        raise CatalogParseError(name, f"invalid YAML: {e}") from e

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise CatalogParseError(
            name, f"expected a mapping at top level, got {type(document).__name__}"
        )
    return document


def _require(entry: dict[str, Any], key: str, entry_id: str, name: str) -> Any:
    if key not in entry or entry[key] is None:
        raise CatalogParseError(name, f"entry '{entry_id}' is missing '{key}'")
    return entry[key]


def _string_list(value: Any, field: str, entry_id: str, name: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise CatalogParseError(name, f"entry '{entry_id}' field '{field}' must be a list")
    return [str(item) for item in value]


def _parse_icon(icon_id: str, entry: Any, name: str) -> IconRecord:
    if not isinstance(entry, dict):
        raise CatalogParseError(name, f"icon '{icon_id}' is not a mapping")

    label = _require(entry, "label", icon_id, name)
    styles = _string_list(_require(entry, "styles", icon_id, name), "styles", icon_id, name)
    unicode = str(_require(entry, "unicode", icon_id, name))

    search = entry.get("search") or {}
    if not isinstance(search, dict):
        raise CatalogParseError(name, f"icon '{icon_id}' field 'search' must be a mapping")
    terms = _string_list(search.get("terms"), "search.terms", icon_id, name)

    return IconRecord(
        icon_id=icon_id,
        label=str(label),
        styles=frozenset(styles),
        unicode=unicode,
        search_terms=tuple(terms),
    )


def _parse_category(category_id: str, entry: Any, name: str) -> CategoryRecord:
    if not isinstance(entry, dict):
        raise CatalogParseError(name, f"category '{category_id}' is not a mapping")

    label = _require(entry, "label", category_id, name)
    members = _string_list(entry.get("icons"), "icons", category_id, name)

    return CategoryRecord(
        category_id=category_id,
        label=str(label),
        icon_labels=frozenset(members),
    )
