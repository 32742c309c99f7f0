"""Filesystem capabilities used by the pack generator.

Cleanup is best-effort: a missing target counts as success and any other
I/O failure is logged and reported through the return value. Writes are
strict: failures raise PackWriteError.
"""

import shutil
from pathlib import Path

import structlog

from glyphpack.exceptions import PackWriteError

logger = structlog.get_logger(__name__)


def remove_tree_best_effort(path: Path, remove_self: bool = True) -> bool:
    """Recursively remove a directory, tolerating a non-existent target.

    Args:
        path: Directory to remove
        remove_self: If False, only the directory's contents are removed

    Returns:
        True if the target is gone (or emptied), False if removal failed
    """
    try:
        if remove_self:
            shutil.rmtree(path)
        else:
            for child in path.iterdir():
                if child.is_dir() and not child.is_symlink():
                    shutil.rmtree(child)
                else:
                    child.unlink()
    except FileNotFoundError:
        return True
    except OSError as e:
        logger.warning("Best-effort cleanup failed", path=str(path), error=str(e))
        return False

    logger.debug("Removed directory", path=str(path), remove_self=remove_self)
    return True


def write_bytes_ensuring_parent(path: Path, data: bytes) -> None:
    """Write bytes to a file, creating parent directories as needed.

    Raises:
        PackWriteError: If the directory or file cannot be written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as e:
        raise PackWriteError(str(path), str(e)) from e


def write_text_ensuring_parent(path: Path, text: str) -> None:
    """Write UTF-8 text to a file, creating parent directories as needed.

    Raises:
        PackWriteError: If the directory or file cannot be written
    """
    write_bytes_ensuring_parent(path, text.encode("utf-8"))


def copy_file_ensuring_parent(source: Path, destination: Path) -> None:
    """Copy a file, creating the destination's parent directories as needed.

    Raises:
        PackWriteError: If the source cannot be read or the copy fails
    """
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, destination)
    except OSError as e:
        raise PackWriteError(str(destination), str(e)) from e
