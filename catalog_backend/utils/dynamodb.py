"""
DynamoDB request builders for RowStore

Catalog tables are keyed on "id". Updates only ever touch existing items and
treat None/"" as "drop the column", so the builders here bake those rules in.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable


def _placeholders(columns: Iterable[str]) -> Dict[str, str]:
    # "#name" placeholders sidestep reserved words such as "name" or "description"
    return {f"#{column}": column for column in columns}


def build_item_update(item_id: str, columns: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build update_item parameters for an existing catalog item.

    Columns with a value go into SET; None or "" go into REMOVE. The update is
    conditional on the item existing and returns the item as stored.

    Example:
        build_item_update("3f2b9c1e-...", {"title": "Moon Song", "preorder_url": None})
        # {"Key": {"id": "3f2b9c1e-..."},
        #  "UpdateExpression": "SET #title = :title REMOVE #preorder_url",
        #  "ExpressionAttributeNames": {"#title": "title", "#preorder_url": "preorder_url"},
        #  "ExpressionAttributeValues": {":title": "Moon Song"},
        #  "ConditionExpression": "attribute_exists(id)",
        #  "ReturnValues": "ALL_NEW"}
    """
    to_set = {column: value for column, value in columns.items() if value not in (None, "")}
    to_remove = [column for column in columns if column not in to_set]

    actions = []
    if to_set:
        actions.append("SET " + ", ".join(f"#{column} = :{column}" for column in to_set))
    if to_remove:
        actions.append("REMOVE " + ", ".join(f"#{column}" for column in to_remove))

    params: Dict[str, Any] = {
        "Key": {"id": item_id},
        "UpdateExpression": " ".join(actions),
        "ExpressionAttributeNames": _placeholders(columns),
        "ConditionExpression": "attribute_exists(id)",
        "ReturnValues": "ALL_NEW",
    }
    # DynamoDB rejects an empty ExpressionAttributeValues map
    if to_set:
        params["ExpressionAttributeValues"] = {
            f":{column}": value for column, value in to_set.items()
        }
    return params


def build_projection(columns: Iterable[str]) -> Dict[str, Any]:
    """
    Build get_item projection parameters for a subset of columns.

    Example:
        build_projection(["id", "slug"])
        # {"ProjectionExpression": "#id, #slug",
        #  "ExpressionAttributeNames": {"#id": "id", "#slug": "slug"}}
    """
    names = _placeholders(columns)
    if not names:
        return {}
    return {
        "ProjectionExpression": ", ".join(names),
        "ExpressionAttributeNames": names,
    }
