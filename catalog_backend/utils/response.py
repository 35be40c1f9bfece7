"""
Response building utilities for Catalog API

Provides functions to create standardized API Gateway responses.
"""

from __future__ import annotations

import json
from datetime import date
from typing import Any

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,Authorization",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
}


def api_response(status_code: int, body: Any) -> dict:
    """
    Helper to format API Gateway response with CORS headers.

    Args:
        status_code: HTTP status code
        body: Response body (will be JSON serialized)

    Returns:
        dict: API Gateway response with headers
    """
    return {
        "statusCode": status_code,
        "body": json.dumps(body),
        "headers": {"Content-Type": "application/json", **CORS_HEADERS},
    }


def error_response(status_code: int, error: str, message: str) -> dict:
    """
    Helper to create error response.

    Args:
        status_code: HTTP status code
        error: Error type/category
        message: Error message

    Returns:
        dict: API Gateway error response
    """
    return api_response(status_code, {"error": error, "message": message})


def text_response(status_code: int, body: str, headers: dict | None = None) -> dict:
    """Plain-text response, used by the redirect endpoints."""
    return {
        "statusCode": status_code,
        "body": body,
        "headers": {"Content-Type": "text/plain; charset=utf-8", **(headers or {})},
    }


def redirect_response(location: str) -> dict:
    """
    301 Permanent Redirect with a short body for clients that do not follow it.
    """
    return text_response(301, f"Redirecting to {location}", {"Location": location})


def format_release_date(value: str | None) -> str | None:
    """
    Format an ISO date for display: "2025-06-01" -> "June 1, 2025".

    Values that are not ISO dates are returned unchanged.
    """
    if not value:
        return value
    try:
        parsed = date.fromisoformat(str(value)[:10])
    except ValueError:
        return value
    return f"{parsed.strftime('%B')} {parsed.day}, {parsed.year}"


def serialize_upcoming_book(record: dict) -> dict:
    """
    Convert a canonical upcoming book record to API response format.

    Args:
        record: Record from UpcomingBookService

    Returns:
        dict: Upcoming book object for API response
    """
    book: dict[str, Any] = {
        "id": record.get("id"),
        "title": record.get("title"),
        "author": record.get("author"),
        "description": record.get("description"),
        "coverImageUrl": record.get("coverImageUrl"),
        "expectedReleaseDate": record.get("expectedReleaseDate"),
        "expectedReleaseDateDisplay": format_release_date(record.get("expectedReleaseDate")),
        "preorderUrl": record.get("preorderUrl"),
        "createdAt": record.get("createdAt"),
        "updatedAt": record.get("updatedAt"),
    }
    return book
