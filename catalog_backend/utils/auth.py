"""
Authentication and authorization utilities for Catalog API

Only the admin pages write upcoming books; the public site reads anonymously.
Identity comes from the Cognito authorizer claims API Gateway attaches to
the event.
"""

from __future__ import annotations

import os

ADMIN_GROUP = os.environ.get("ADMIN_GROUP", "admins")


def _claims(event: dict) -> dict:
    authorizer = (event.get("requestContext") or {}).get("authorizer") or {}
    return authorizer.get("claims") or {}


def get_user_id(event: dict) -> str | None:
    """
    Extract user ID (sub) from Cognito authorizer context.

    Returns:
        str: The user's Cognito sub, or None for anonymous requests
    """
    return _claims(event).get("sub")


def get_user_groups(event: dict) -> list[str]:
    """Groups from the comma-separated "cognito:groups" claim."""
    groups_str = _claims(event).get("cognito:groups", "")
    if not groups_str:
        return []
    return [g.strip() for g in groups_str.split(",") if g.strip()]


def is_admin(event: dict) -> bool:
    return ADMIN_GROUP in get_user_groups(event)


def require_admin(event: dict) -> tuple[int, str, str] | None:
    """
    Check that the caller may modify the catalog.

    Returns:
        tuple: (status_code, error, message) when access is denied, otherwise None
    """
    if not get_user_id(event):
        return 401, "Unauthorized", "User not authenticated"
    if not is_admin(event):
        return 403, "Forbidden", "Only administrators can modify upcoming books"
    return None
