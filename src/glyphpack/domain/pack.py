"""Manifest entries and the materialized pack."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from glyphpack.utils.logging import PackStats


@dataclass(frozen=True)
class ManifestEntry:
    """One row of the output manifest.

    Attributes:
        name: Icon label
        path: Image file name relative to the icons directory
        tags: Search tags, duplicates preserved
    """

    name: str
    path: str
    tags: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the manifest JSON shape (keys: name, path, tags)."""
        return {
            "name": self.name,
            "path": self.path,
            "tags": list(self.tags),
        }


@dataclass
class IconPackOutput:
    """Result of a generation run.

    Attributes:
        root: Resolved pack root directory
        icons_dir: Directory holding the rendered images
        manifest_path: Path of icons.json
        entries: Manifest entries in catalog order
        stats: Run statistics
    """

    root: Path
    icons_dir: Path
    manifest_path: Path
    entries: list[ManifestEntry] = field(default_factory=list)
    stats: "PackStats | None" = None
