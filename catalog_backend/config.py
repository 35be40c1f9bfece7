"""
Configuration and AWS client initialization for Catalog API Lambda handlers

This module provides:
- DynamoDB resource and table handles (books catalog, upcoming books)
- Environment variable configuration
- Constants used across handlers and services
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import boto3
from botocore.config import Config

if TYPE_CHECKING:
    from mypy_boto3_dynamodb.service_resource import DynamoDBServiceResource, Table

# Constants
SHORT_ID_LENGTH = 8  # Characters of the id appended to slugs in public URLs
MAX_STRING_LENGTH = 500  # Maximum length for short string fields
MAX_DESCRIPTION_LENGTH = 5000
MAX_COVER_IMAGE_LENGTH = 2 * 1024 * 1024  # Inline data: payloads are stored as-is

REDIRECT_NAMESPACES = ("books", "multimedia")

# Environment configuration
AWS_REGION = os.environ.get("AWS_REGION", "us-east-2")
BOOKS_TABLE_NAME = os.environ.get("BOOKS_TABLE")
UPCOMING_BOOKS_TABLE_NAME = os.environ.get("UPCOMING_BOOKS_TABLE")

# Initialize AWS resource with type hints
dynamodb: "DynamoDBServiceResource" = boto3.resource(
    "dynamodb",
    region_name=AWS_REGION,
    config=Config(retries={"max_attempts": 0, "mode": "standard"}),
)

# Initialize DynamoDB tables
# For type checking: treat as non-None (tests will mock these)
# For production: Lambda environment must have these env vars set
if BOOKS_TABLE_NAME:
    books_table: "Table" = dynamodb.Table(BOOKS_TABLE_NAME)
else:
    books_table = None  # type: ignore[assignment]

if UPCOMING_BOOKS_TABLE_NAME:
    upcoming_books_table: "Table" = dynamodb.Table(UPCOMING_BOOKS_TABLE_NAME)
else:
    upcoming_books_table = None  # type: ignore[assignment]
