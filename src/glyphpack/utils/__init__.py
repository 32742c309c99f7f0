"""Utility functions for glyphpack.

This module provides logging setup and per-run statistics tracking.
"""

from glyphpack.utils.logging import (
    PackLogger,
    PackStats,
    configure_logging,
)

__all__ = [
    "PackLogger",
    "PackStats",
    "configure_logging",
]
