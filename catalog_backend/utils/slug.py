"""
Slug utilities for Catalog API

Public book and multimedia URLs have the form /<namespace>/<slug>-<shortId>,
where shortId is the first SHORT_ID_LENGTH characters of the catalog id.
"""

from __future__ import annotations

import re

try:
    import config
except ImportError:
    import catalog_backend.config as config

_INVALID_CHARS = re.compile(r"[^a-z0-9 -]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")
_EDGE_HYPHENS = re.compile(r"^-+|-+$")


def generate_slug(text: str) -> str:
    """
    Generate a URL-friendly slug from a title.

    Lowercases, strips everything except letters, digits, spaces and hyphens,
    collapses whitespace and hyphen runs to a single hyphen and trims hyphens
    from both ends.

    Args:
        text: Input string (e.g., book title)

    Returns:
        str: Slug, or "" for empty input

    Example:
        generate_slug("The Magical Garden of Letters!")
        # "the-magical-garden-of-letters"
    """
    if not text:
        return ""

    slug = _INVALID_CHARS.sub("", text.lower().strip())
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return _EDGE_HYPHENS.sub("", slug)


def short_id(item_id: str, length: int = config.SHORT_ID_LENGTH) -> str:
    return item_id[:length]


def slug_with_id(slug: str, item_id: str, length: int = config.SHORT_ID_LENGTH) -> str:
    """Join a slug and the short form of an id: "magic-forest-abcdefgh"."""
    return f"{slug}-{short_id(item_id, length)}"
