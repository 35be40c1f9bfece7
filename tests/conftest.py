"""
Shared fixtures: an in-memory stand-in for a DynamoDB Table.
"""

import copy
import re

import pytest
from botocore.exceptions import ClientError


def _condition_failed(operation):
    return ClientError(  # type: ignore[arg-type]
        {"Error": {"Code": "ConditionalCheckFailedException"}}, operation
    )


class FakeTable:
    """Implements the subset of the boto3 Table API used by RowStore."""

    def __init__(self, items=None, page_size=None):
        self.items = {item["id"]: dict(item) for item in (items or [])}
        self.page_size = page_size
        self.calls = []

    def scan(self, ExclusiveStartKey=None):
        self.calls.append("scan")
        items = list(self.items.values())
        start = 0
        if ExclusiveStartKey:
            ids = [item["id"] for item in items]
            start = ids.index(ExclusiveStartKey["id"]) + 1
        if self.page_size is None:
            return {"Items": copy.deepcopy(items[start:])}
        page = items[start:start + self.page_size]
        response = {"Items": copy.deepcopy(page)}
        if start + self.page_size < len(items):
            response["LastEvaluatedKey"] = {"id": page[-1]["id"]}
        return response

    def get_item(self, Key, ProjectionExpression=None, ExpressionAttributeNames=None):
        self.calls.append("get_item")
        item = self.items.get(Key["id"])
        if item is None:
            return {}
        if ProjectionExpression:
            names = ExpressionAttributeNames or {}
            columns = [names.get(p.strip(), p.strip()) for p in ProjectionExpression.split(",")]
            item = {c: item[c] for c in columns if c in item}
        return {"Item": copy.deepcopy(item)}

    def put_item(self, Item, ConditionExpression=None):
        self.calls.append("put_item")
        if ConditionExpression == "attribute_not_exists(id)" and Item["id"] in self.items:
            raise _condition_failed("PutItem")
        self.items[Item["id"]] = copy.deepcopy(Item)
        return {}

    def update_item(self, Key, UpdateExpression, ExpressionAttributeNames,
                    ReturnValues=None, ExpressionAttributeValues=None,
                    ConditionExpression=None):
        self.calls.append("update_item")
        item = self.items.get(Key["id"])
        if item is None:
            if ConditionExpression == "attribute_exists(id)":
                raise _condition_failed("UpdateItem")
            item = self.items[Key["id"]] = dict(Key)

        values = ExpressionAttributeValues or {}
        for action, body in re.findall(r"(SET|REMOVE) ((?:(?!SET |REMOVE ).)+)", UpdateExpression):
            for part in body.split(","):
                part = part.strip()
                if action == "SET":
                    name, value = (s.strip() for s in part.split("="))
                    item[ExpressionAttributeNames[name]] = values[value]
                else:
                    item.pop(ExpressionAttributeNames[part], None)
        return {"Attributes": copy.deepcopy(item)}

    def delete_item(self, Key):
        self.calls.append("delete_item")
        self.items.pop(Key["id"], None)
        return {}


@pytest.fixture
def fake_table():
    return FakeTable()


@pytest.fixture
def books_table():
    return FakeTable(
        items=[
            {
                "id": "abcdefgh-1234-5678-9abc-def012345678",
                "slug": "magic-forest",
                "title": "The Magic Forest",
            },
            {
                "id": "99999999-0000-0000-0000-000000000000",
                "slug": "",
                "title": "Untitled Draft",
            },
        ]
    )
