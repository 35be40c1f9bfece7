"""
Row-store access for Catalog API

RowStore wraps a single DynamoDB table and gives the services a small
collection-style interface: scan, exactly-one read, insert, update, delete.
Every botocore failure is re-raised as StoreError; nothing is retried here.
"""

from __future__ import annotations

import logging
import uuid
from datetime import UTC, datetime
from typing import Any, Iterable

from botocore.exceptions import BotoCoreError, ClientError

try:
    from utils.dynamodb import build_item_update, build_projection
    from utils.errors import NotFound, StoreError
except ImportError:
    from catalog_backend.utils.dynamodb import build_item_update, build_projection
    from catalog_backend.utils.errors import NotFound, StoreError

logger = logging.getLogger()


def utc_now() -> str:
    """Current time as an ISO-8601 UTC timestamp."""
    return datetime.now(UTC).isoformat()


def _error_code(error: Exception) -> str | None:
    if isinstance(error, ClientError):
        return error.response.get("Error", {}).get("Code")  # type: ignore[union-attr]
    return None


class RowStore:
    """
    Collection-style access to one DynamoDB table keyed on "id".

    Args:
        table: boto3 DynamoDB Table (or any object with the same methods)
        collection: Logical collection name used in errors and logs
    """

    def __init__(self, table: Any, collection: str):
        self.table = table
        self.collection = collection

    def scan_all(self) -> list[dict]:
        """Return every item, following scan pagination."""
        try:
            response = self.table.scan()
            items = response.get("Items", [])

            while "LastEvaluatedKey" in response:
                response = self.table.scan(ExclusiveStartKey=response["LastEvaluatedKey"])
                items.extend(response.get("Items", []))
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error scanning {self.collection}: {str(e)}")
            raise StoreError(f"Failed to list {self.collection}") from e

        logger.info(f"Retrieved {len(items)} items from {self.collection}")
        return items

    def get_one(self, item_id: str, columns: Iterable[str] | None = None) -> dict:
        """
        Read exactly one item by id.

        Args:
            item_id: Value of the "id" key
            columns: Optional subset of columns to project

        Raises:
            NotFound: No item has this id
            StoreError: DynamoDB failure
        """
        params: dict[str, Any] = {"Key": {"id": item_id}}
        if columns:
            params.update(build_projection(columns))

        try:
            response = self.table.get_item(**params)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error fetching {self.collection} item {item_id}: {str(e)}")
            raise StoreError(f"Failed to fetch {self.collection} item") from e

        if "Item" not in response:
            raise NotFound(self.collection, item_id)
        return response["Item"]

    def insert(self, fields: dict[str, Any]) -> dict:
        """
        Insert a new item with a store-assigned id and timestamps.

        None/empty values are left out of the item rather than stored.

        Returns:
            dict: The item as written
        """
        now = utc_now()
        item = {column: value for column, value in fields.items() if value not in (None, "")}
        item["id"] = str(uuid.uuid4())
        item["created_at"] = now
        item["updated_at"] = now

        try:
            self.table.put_item(Item=item, ConditionExpression="attribute_not_exists(id)")
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error inserting into {self.collection}: {str(e)}")
            raise StoreError(f"Failed to create {self.collection} item") from e

        logger.info(f"Created {self.collection} item: {item['id']}")
        return item

    def update(self, item_id: str, fields: dict[str, Any]) -> dict:
        """
        Update columns of an existing item; None/empty values remove the column.

        Raises:
            NotFound: No item has this id (conditional update failed)
            StoreError: Any other DynamoDB failure
        """
        update_params = build_item_update(item_id, fields)

        try:
            response = self.table.update_item(**update_params)
        except (ClientError, BotoCoreError) as e:
            if _error_code(e) == "ConditionalCheckFailedException":
                logger.warning(f"{self.collection} item not found for update: {item_id}")
                raise NotFound(self.collection, item_id) from e
            logger.error(f"Error updating {self.collection} item {item_id}: {str(e)}")
            raise StoreError(f"Failed to update {self.collection} item") from e

        logger.info(f"Updated {self.collection} item: {item_id}")
        return response.get("Attributes", {})

    def delete(self, item_id: str) -> None:
        """Delete an item by id. Deleting a missing id is not an error."""
        try:
            self.table.delete_item(Key={"id": item_id})
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error deleting {self.collection} item {item_id}: {str(e)}")
            raise StoreError(f"Failed to delete {self.collection} item") from e

        logger.info(f"Deleted {self.collection} item: {item_id}")
