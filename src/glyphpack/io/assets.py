"""Copying of files shared by every pack (license text, pack icon)."""

from collections.abc import Iterable
from pathlib import Path

import structlog

from glyphpack.io.filesystem import copy_file_ensuring_parent

COMMON_ASSETS = ("license.txt", "icon.svg")

logger = structlog.get_logger(__name__)


def copy_common_assets(
    assets_dir: Path,
    pack_roots: Iterable[Path],
    names: Iterable[str] = COMMON_ASSETS,
) -> list[Path]:
    """Copy shared asset files into each pack root.

    Assets missing from ``assets_dir`` are skipped with a warning.

    Args:
        assets_dir: Directory holding the shared files
        pack_roots: Pack directories to copy into
        names: File names to copy

    Returns:
        Destination paths that were written

    Raises:
        PackWriteError: If a copy fails
    """
    roots = list(pack_roots)
    written: list[Path] = []

    for name in names:
        source = assets_dir / name
        if not source.is_file():
            logger.warning("Asset not found, skipping", asset=str(source))
            continue

        for root in roots:
            destination = root / name
            logger.info("Copying asset", source=str(source), destination=str(destination))
            copy_file_ensuring_parent(source, destination)
            written.append(destination)

    return written
