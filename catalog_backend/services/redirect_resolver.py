"""
Legacy redirect resolution

Old links identified books by id only (?id=<uuid>). The site now uses
/<namespace>/<slug>-<shortId>; the resolver looks the id up in the books
collection and builds the new path.
"""

from __future__ import annotations

from typing import Any

try:
    import config
    from utils.errors import NotFound, ValidationError
    from utils.slug import slug_with_id
    from utils.store import RowStore
except ImportError:
    import catalog_backend.config as config
    from catalog_backend.utils.errors import NotFound, ValidationError
    from catalog_backend.utils.slug import slug_with_id
    from catalog_backend.utils.store import RowStore


def build_redirect_path(entry: dict[str, Any], namespace: str) -> str:
    """
    Build "/<namespace>/<slug>-<shortId>" for a catalog entry.

    Raises:
        ValidationError: Unknown namespace
        NotFound: Entry has no slug
    """
    if namespace not in config.REDIRECT_NAMESPACES:
        raise ValidationError(f"Unknown redirect namespace: {namespace}")

    entry_id = str(entry.get("id") or "")
    slug = entry.get("slug")
    if not slug or not entry_id:
        raise NotFound("books", entry_id)

    return f"/{namespace}/{slug_with_id(slug, entry_id)}"


class RedirectResolver:
    """
    Resolves catalog ids to their current public path.

    Args:
        store: RowStore bound to the books table
    """

    def __init__(self, store: RowStore):
        self.store = store

    def resolve(self, entry_id: str, namespace: str) -> str:
        """
        Raises:
            ValidationError: Empty id or unknown namespace
            NotFound: No entry, or entry without slug
            StoreError: Lookup failed
        """
        if not entry_id:
            raise ValidationError("Missing book ID")

        entry = self.store.get_one(entry_id, columns=("id", "slug"))
        return build_redirect_path(entry, namespace)
