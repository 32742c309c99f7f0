"""Filesystem- and tag-safe name normalization."""

import re
import unicodedata

_WHITESPACE_RUN = re.compile(r"\s+")
_NON_WORD = re.compile(r"[^\w\-]+", re.ASCII)
_HYPHEN_RUN = re.compile(r"--+")


def slugify(text: str | None) -> str | None:
    """Normalize a label into a slug.

    Decomposes with NFKD, lowercases, trims, turns whitespace runs into a
    hyphen, drops anything that is not an ASCII word character or hyphen,
    and collapses repeated hyphens.

    Empty or None input is returned unchanged.

    Example:
        >>> slugify("Font Awesome")
        'font-awesome'
        >>> slugify("  Multi   Space  ")
        'multi-space'
    """
    if not text:
        return text

    slug = unicodedata.normalize("NFKD", text).lower().strip()
    slug = _WHITESPACE_RUN.sub("-", slug)
    slug = _NON_WORD.sub("", slug)
    return _HYPHEN_RUN.sub("-", slug)
