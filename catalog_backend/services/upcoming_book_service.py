"""
Upcoming book service

Maps between the upcoming_books table (snake_case columns, nullable fields)
and the canonical camelCase record used by the API, and wraps the CRUD
operations the admin pages and the public "Coming Soon" section rely on.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

try:
    from utils.errors import SchemaMismatch, ValidationError
    from utils.store import RowStore, utc_now
except ImportError:
    from catalog_backend.utils.errors import SchemaMismatch, ValidationError
    from catalog_backend.utils.store import RowStore, utc_now

logger = logging.getLogger()

# canonical name -> store column; other fields keep their name
FIELD_TO_COLUMN = {
    "coverImageUrl": "cover_image_url",
    "expectedReleaseDate": "expected_release_date",
    "preorderUrl": "preorder_url",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}
COLUMN_TO_FIELD = {column: field for field, column in FIELD_TO_COLUMN.items()}

REQUIRED_FIELDS = ("title", "author", "description", "expectedReleaseDate")
FORM_FIELDS = REQUIRED_FIELDS + ("coverImageUrl", "preorderUrl")
REQUIRED_COLUMNS = ("id", "title", "author", "description", "expected_release_date")

DEFAULT_COVER_IMAGE_URL = ""


def record_from_row(row: dict[str, Any]) -> dict[str, Any]:
    """
    Convert a stored row into a canonical upcoming book record.

    Unknown columns pass through under their own name. Optional columns are
    filled with defaults: coverImageUrl "", preorderUrl/createdAt/updatedAt None.

    Raises:
        SchemaMismatch: A required column is absent or null
    """
    missing = [column for column in REQUIRED_COLUMNS if row.get(column) in (None, "")]
    if missing:
        raise SchemaMismatch(row.get("id"), missing)

    record: dict[str, Any] = {
        COLUMN_TO_FIELD.get(column, column): value for column, value in row.items()
    }
    if not record.get("coverImageUrl"):
        record["coverImageUrl"] = DEFAULT_COVER_IMAGE_URL
    record["preorderUrl"] = record.get("preorderUrl") or None
    record.setdefault("createdAt", None)
    record.setdefault("updatedAt", None)
    return record


def row_from_form(form_data: dict[str, Any]) -> dict[str, Any]:
    """
    Convert form data into store columns.

    Only form fields are written; id and timestamps are store-managed.
    An absent or empty preorderUrl maps to None, which the store treats as
    "no column".
    """
    row: dict[str, Any] = {}
    for field in FORM_FIELDS:
        value = form_data.get(field)
        if field == "preorderUrl":
            value = value or None
        elif field == "coverImageUrl" and value is None:
            value = DEFAULT_COVER_IMAGE_URL
        row[FIELD_TO_COLUMN.get(field, field)] = value
    return row


def release_sort_key(record: dict[str, Any]) -> tuple[date, str]:
    """
    Order by the parsed release date; rows written before dates were
    validated may hold other ISO spellings. Unparseable values sort last.
    """
    value = str(record["expectedReleaseDate"])
    try:
        parsed = date.fromisoformat(value[:10])
    except ValueError:
        parsed = date.max
    return parsed, value


def check_required_fields(form_data: dict[str, Any]) -> None:
    missing = [
        field
        for field in REQUIRED_FIELDS
        if not isinstance(form_data.get(field), str) or not form_data[field].strip()
    ]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


class UpcomingBookService:
    """
    CRUD operations over the upcoming_books collection.

    Args:
        store: RowStore bound to the upcoming_books table
    """

    def __init__(self, store: RowStore):
        self.store = store

    def list_all(self) -> list[dict[str, Any]]:
        """All upcoming books, ascending by expected release date."""
        records = [record_from_row(row) for row in self.store.scan_all()]
        # Stable sort; ties keep scan order
        records.sort(key=release_sort_key)
        return records

    def get_by_id(self, book_id: str) -> dict[str, Any]:
        return record_from_row(self.store.get_one(book_id))

    def create(self, form_data: dict[str, Any]) -> str:
        """
        Insert a new upcoming book.

        Returns:
            str: Store-assigned id
        """
        check_required_fields(form_data)
        item = self.store.insert(row_from_form(form_data))
        logger.info(f"Created upcoming book {item['id']}: {form_data['title']}")
        return item["id"]

    def update(self, book_id: str, form_data: dict[str, Any]) -> str:
        """
        Replace the form fields of an upcoming book and refresh updated_at.

        Raises:
            NotFound: No upcoming book has this id
        """
        check_required_fields(form_data)
        row = row_from_form(form_data)
        row["updated_at"] = utc_now()
        self.store.update(book_id, row)
        return book_id

    def delete_by_id(self, book_id: str) -> bool:
        """Delete an upcoming book. Returns True even if no row existed."""
        self.store.delete(book_id)
        return True
