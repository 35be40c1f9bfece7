"""
Lambda handlers for legacy book URLs

Old links used ?id=<uuid>. These handlers answer with a 301 to the current
/books/<slug>-<shortId> or /multimedia/<slug>-<shortId> page. Responses are
plain text; error details only go to the log.
"""

from __future__ import annotations

import logging

# Support both Lambda deployment and local development
try:
    # Lambda deployment
    import config
    from services.redirect_resolver import RedirectResolver
    from utils.errors import NotFound, StoreError
    from utils.response import redirect_response, text_response
    from utils.store import RowStore
    from utils.validation import get_query_param
except ImportError:
    # Local development
    import catalog_backend.config as config
    from catalog_backend.services.redirect_resolver import RedirectResolver
    from catalog_backend.utils.errors import NotFound, StoreError
    from catalog_backend.utils.response import redirect_response, text_response
    from catalog_backend.utils.store import RowStore
    from catalog_backend.utils.validation import get_query_param

logger = logging.getLogger()
logger.setLevel(logging.INFO)

# Plain-text bodies per variant: (missing id, not found, internal error)
REDIRECT_MESSAGES = {
    "books": (
        "Missing book ID.",
        "Book with ID {id} not found or missing slug.",
        "An internal error occurred.",
    ),
    "multimedia": (
        "Missing book ID for multimedia redirect.",
        "Book with ID {id} not found or missing slug for multimedia redirect.",
        "An internal error occurred during multimedia redirect.",
    ),
}


def _get_resolver() -> RedirectResolver:
    return RedirectResolver(RowStore(config.books_table, "books"))


def _redirect(event: dict, namespace: str, label: str) -> dict:
    missing_message, not_found_message, error_message = REDIRECT_MESSAGES[namespace]

    entry_id = get_query_param(event, "id")
    if not entry_id:
        logger.warning(f"[{label}] Missing id query parameter")
        return text_response(400, missing_message)

    logger.info(f"[{label}] Resolving redirect for ID: {entry_id}")

    try:
        location = _get_resolver().resolve(entry_id, namespace)
    except (NotFound, StoreError) as e:
        logger.error(f"[{label}] Book not found or missing slug for ID {entry_id}: {str(e)}")
        return text_response(404, not_found_message.format(id=entry_id))
    except Exception as e:
        logger.error(
            f"[{label}] Unexpected error processing redirect for ID {entry_id}: {str(e)}",
            exc_info=True,
        )
        return text_response(500, error_message)

    logger.info(f"[{label}] Redirecting {entry_id} to {location}")
    return redirect_response(location)


def redirect_book_handler(event, context):
    """
    Lambda handler for GET /redirect-book?id=<id>.
    Returns 301 to /books/<slug>-<shortId>.
    """
    logger.info("redirect_book_handler invoked")
    return _redirect(event, "books", "redirect-book")


def redirect_multimedia_handler(event, context):
    """
    Lambda handler for GET /redirect-multimedia?id=<id>.
    Returns 301 to /multimedia/<slug>-<shortId>.
    """
    logger.info("redirect_multimedia_handler invoked")
    return _redirect(event, "multimedia", "redirect-multimedia")
