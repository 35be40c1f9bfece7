"""
Request validation utilities for Catalog API

Provides functions to validate and extract data from API Gateway events.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from urllib.parse import unquote, urlparse

logger = logging.getLogger()


def get_path_param(event: dict, param: str) -> tuple[str | None, dict | None]:
    """
    Extract and URL-decode a path parameter from API Gateway event.

    Args:
        event: API Gateway event
        param: Parameter name to extract

    Returns:
        tuple: (decoded_value, error_response) - If successful, error_response is None
    """
    from .response import error_response

    path_params = event.get("pathParameters") or {}
    if not path_params.get(param):
        logger.warning(f"Missing {param} in path parameters")
        return None, error_response(
            400, "Bad Request", f"{param.capitalize()} is required in path"
        )
    return unquote(path_params[param]), None


def get_query_param(event: dict, param: str) -> str | None:
    """
    Extract a query string parameter, treating absent and empty alike.

    API Gateway sends queryStringParameters as null when the URL has no query.
    """
    query_params = event.get("queryStringParameters") or {}
    value = query_params.get(param)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def parse_json_body(event: dict) -> tuple[dict, dict | None]:
    """
    Parse JSON body from API Gateway event.

    Args:
        event: API Gateway event

    Returns:
        tuple: (parsed_body, error_response) - If successful, error_response is None
               If error, parsed_body is empty dict (caller should check error first)
    """
    from .response import error_response

    try:
        body = json.loads(event.get("body") or "{}")
    except json.JSONDecodeError:
        logger.warning("Invalid JSON in request body")
        return {}, error_response(400, "Bad Request", "Invalid JSON in request body")

    if not isinstance(body, dict):
        return {}, error_response(400, "Bad Request", "Request body must be a JSON object")
    return body, None


def validate_string_field(
    body: dict, field: str, max_length: int = 500, required: bool = False
) -> dict | None:
    """
    Validate a string field in request body.

    Args:
        body: Request body dictionary
        field: Field name to validate
        max_length: Maximum allowed length
        required: Whether the field is required

    Returns:
        dict: Error response if validation fails, None if valid
    """
    from .response import error_response

    if field not in body or body[field] is None:
        if required:
            return error_response(400, "Bad Request", f'Field "{field}" is required')
        return None

    value = body[field]
    if not isinstance(value, str):
        return error_response(400, "Bad Request", f'Field "{field}" must be a string')

    if len(value) > max_length:
        return error_response(
            400,
            "Bad Request",
            f'Field "{field}" exceeds maximum length of {max_length}',
        )

    if required and not value.strip():
        return error_response(400, "Bad Request", f'Field "{field}" cannot be empty')

    return None


def validate_date_field(body: dict, field: str) -> dict | None:
    """
    Validate that a field holds an ISO calendar date (YYYY-MM-DD).

    Returns:
        dict: Error response if validation fails, None if valid
    """
    from .response import error_response

    value = body.get(field)
    if value is None:
        return None
    # Only zero-padded YYYY-MM-DD; fromisoformat would also take compact and week dates
    try:
        parsed = datetime.strptime(str(value), "%Y-%m-%d").date()
        if parsed.isoformat() != value:
            raise ValueError(value)
    except ValueError:
        return error_response(
            400, "Bad Request", f'Field "{field}" must be a date (YYYY-MM-DD)'
        )
    return None


def validate_image_field(body: dict, field: str) -> dict | None:
    """
    Validate an image reference: an http(s) URL, a site path or a data: payload.
    Empty values are allowed (a placeholder is shown).
    """
    from .response import error_response

    value = body.get(field)
    if not value:
        return None
    if value.startswith("data:image/") or value.startswith("/"):
        return None
    if urlparse(value).scheme in ("http", "https"):
        return None
    return error_response(
        400, "Bad Request", f'Field "{field}" must be an image URL or data:image payload'
    )


def validate_url_field(body: dict, field: str) -> dict | None:
    """Validate an optional absolute http(s) URL; empty clears the field."""
    from .response import error_response

    value = body.get(field)
    if not value:
        return None
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return error_response(400, "Bad Request", f'Field "{field}" must be an http(s) URL')
    return None
