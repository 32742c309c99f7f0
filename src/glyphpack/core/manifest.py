"""Manifest assembly and serialization."""

import json
from collections.abc import Iterable, Sequence

from glyphpack.domain import CategoryRecord, IconRecord, ManifestEntry

ICONS_DIRNAME = "icons"
MANIFEST_FILENAME = "icons.json"
IMAGE_SUFFIX = ".png"


def build_tags(
    record: IconRecord,
    slug: str,
    categories: Iterable[CategoryRecord],
) -> list[str]:
    """Build the ordered tag list for an icon.

    Search terms come first, then the slug, the slug with hyphens as spaces,
    then the label of every category listing the icon by label or slug.
    Duplicates are kept.
    """
    tags = list(record.search_terms)
    tags.append(slug)
    tags.append(slug.replace("-", " "))
    tags.extend(
        category.label
        for category in categories
        if category.contains(record.label) or category.contains(slug)
    )
    return tags


def assemble(
    record: IconRecord,
    slug: str,
    categories: Iterable[CategoryRecord],
) -> ManifestEntry:
    """Combine a record, its slug and matching categories into a manifest entry."""
    return ManifestEntry(
        name=record.label,
        path=f"{slug}{IMAGE_SUFFIX}",
        tags=tuple(build_tags(record, slug, categories)),
    )


def serialize_manifest(entries: Sequence[ManifestEntry]) -> str:
    """Render entries as a pretty-printed JSON array (2-space indent)."""
    return json.dumps(
        [entry.to_dict() for entry in entries],
        indent=2,
        ensure_ascii=False,
    )
