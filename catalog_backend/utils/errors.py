"""
Error types for Catalog API

Services raise these; handlers translate them into HTTP responses.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog errors."""


class ValidationError(CatalogError):
    """Required input is missing or malformed (surfaced as 400)."""


class NotFound(CatalogError):
    """No row matched the requested identifier (surfaced as 404)."""

    def __init__(self, collection: str, item_id: str):
        super().__init__(f'{collection} item "{item_id}" not found')
        self.collection = collection
        self.item_id = item_id


class StoreError(CatalogError):
    """The row-store failed; never retried (surfaced as 500)."""


class SchemaMismatch(CatalogError):
    """A stored row is missing columns the canonical record requires."""

    def __init__(self, item_id: str | None, missing: list[str]):
        super().__init__(
            f"Row {item_id!r} is missing required columns: {', '.join(missing)}"
        )
        self.item_id = item_id
        self.missing = missing
