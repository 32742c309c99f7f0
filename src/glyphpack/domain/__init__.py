"""Domain models for glyphpack.

All records are frozen dataclasses, independent of YAML, Pillow and
fontTools details, and serializable for inter-process communication.

Key classes:
- IconRecord: One icon from the catalog
- CategoryRecord: A topic grouping of icon labels
- Catalog: Icons and categories loaded from one source
- ManifestEntry: One row of icons.json
- IconPackOutput: The materialized pack
"""

from glyphpack.domain.icon import Catalog, CategoryRecord, IconRecord
from glyphpack.domain.pack import IconPackOutput, ManifestEntry

__all__: list[str] = [
    "Catalog",
    "CategoryRecord",
    "IconPackOutput",
    "IconRecord",
    "ManifestEntry",
]
