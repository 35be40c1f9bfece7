"""
Lambda handlers for upcoming books (list, get, create, update, delete)

List and get back the public "Coming Soon" section; create, update and
delete are used by the admin pages and require the admins group.
"""

from __future__ import annotations

import logging

# Support both Lambda deployment and local development
try:
    # Lambda deployment
    import config
    from services.upcoming_book_service import UpcomingBookService
    from utils.auth import require_admin
    from utils.errors import NotFound, SchemaMismatch, StoreError, ValidationError
    from utils.response import api_response, error_response, serialize_upcoming_book
    from utils.store import RowStore
    from utils.validation import (
        get_path_param,
        parse_json_body,
        validate_date_field,
        validate_image_field,
        validate_string_field,
        validate_url_field,
    )
except ImportError:
    # Local development
    import catalog_backend.config as config
    from catalog_backend.services.upcoming_book_service import UpcomingBookService
    from catalog_backend.utils.auth import require_admin
    from catalog_backend.utils.errors import NotFound, SchemaMismatch, StoreError, ValidationError
    from catalog_backend.utils.response import (
        api_response,
        error_response,
        serialize_upcoming_book,
    )
    from catalog_backend.utils.store import RowStore
    from catalog_backend.utils.validation import (
        get_path_param,
        parse_json_body,
        validate_date_field,
        validate_image_field,
        validate_string_field,
        validate_url_field,
    )

logger = logging.getLogger()
logger.setLevel(logging.INFO)


def _get_service() -> UpcomingBookService:
    return UpcomingBookService(RowStore(config.upcoming_books_table, "upcoming_books"))


def _validate_form(body: dict) -> dict | None:
    """Run field validation for create/update; returns the first error response."""
    checks = [
        lambda: validate_string_field(body, "title", config.MAX_STRING_LENGTH, required=True),
        lambda: validate_string_field(body, "author", config.MAX_STRING_LENGTH, required=True),
        lambda: validate_string_field(
            body, "description", config.MAX_DESCRIPTION_LENGTH, required=True
        ),
        lambda: validate_string_field(body, "expectedReleaseDate", 10, required=True),
        lambda: validate_date_field(body, "expectedReleaseDate"),
        lambda: validate_string_field(body, "coverImageUrl", config.MAX_COVER_IMAGE_LENGTH),
        lambda: validate_image_field(body, "coverImageUrl"),
        lambda: validate_string_field(body, "preorderUrl", config.MAX_STRING_LENGTH),
        lambda: validate_url_field(body, "preorderUrl"),
    ]
    for check in checks:
        error = check()
        if error:
            return error
    return None


def _parse_form(event: dict) -> tuple[dict, dict | None]:
    body, error = parse_json_body(event)
    if error:
        return {}, error
    error = _validate_form(body)
    if error:
        return {}, error
    return body, None


def list_upcoming_books_handler(event, context):
    """
    Lambda handler to list upcoming books, soonest release first.
    Public endpoint.
    """
    logger.info("list_upcoming_books_handler invoked")

    try:
        records = _get_service().list_all()
        books = [serialize_upcoming_book(record) for record in records]
        return api_response(200, {"upcomingBooks": books})

    except (StoreError, SchemaMismatch) as e:
        logger.error(f"Error listing upcoming books: {str(e)}", exc_info=True)
        return error_response(500, "Database Error", "Failed to list upcoming books")
    except Exception as e:
        logger.error(f"Error listing upcoming books: {str(e)}", exc_info=True)
        return error_response(500, "Internal Server Error", "Failed to list upcoming books")


def get_upcoming_book_handler(event, context):
    """
    Lambda handler to fetch one upcoming book.
    Expects id in path parameter 'id'. Public endpoint.
    """
    logger.info("get_upcoming_book_handler invoked")

    try:
        book_id, error = get_path_param(event, "id")
        if error:
            return error

        record = _get_service().get_by_id(book_id)
        return api_response(200, serialize_upcoming_book(record))

    except NotFound:
        logger.warning(f"Upcoming book not found: {book_id}")
        return error_response(404, "Not Found", f'Upcoming book "{book_id}" not found')
    except (StoreError, SchemaMismatch) as e:
        logger.error(f"Error fetching upcoming book: {str(e)}", exc_info=True)
        return error_response(500, "Database Error", "Failed to fetch upcoming book")
    except Exception as e:
        logger.error(f"Error fetching upcoming book: {str(e)}", exc_info=True)
        return error_response(500, "Internal Server Error", "Failed to fetch upcoming book")


def create_upcoming_book_handler(event, context):
    """
    Lambda handler to create an upcoming book (admin only).
    Accepts JSON body with title, author, description, expectedReleaseDate,
    coverImageUrl and optional preorderUrl. Returns 201 with the new id.
    """
    logger.info("create_upcoming_book_handler invoked")

    try:
        denied = require_admin(event)
        if denied:
            logger.warning("Non-admin user attempted to create an upcoming book")
            return error_response(*denied)

        body, error = _parse_form(event)
        if error:
            return error

        book_id = _get_service().create(body)
        return api_response(201, {"id": book_id})

    except ValidationError as e:
        return error_response(400, "Bad Request", str(e))
    except StoreError as e:
        logger.error(f"Error creating upcoming book: {str(e)}", exc_info=True)
        return error_response(500, "Database Error", "Failed to create upcoming book")
    except Exception as e:
        logger.error(f"Error creating upcoming book: {str(e)}", exc_info=True)
        return error_response(500, "Internal Server Error", "Failed to create upcoming book")


def update_upcoming_book_handler(event, context):
    """
    Lambda handler to update an upcoming book (admin only).
    Expects id in path parameter 'id' and the full form as JSON body.
    An empty preorderUrl removes the link.
    """
    logger.info("update_upcoming_book_handler invoked")

    try:
        denied = require_admin(event)
        if denied:
            logger.warning("Non-admin user attempted to update an upcoming book")
            return error_response(*denied)

        book_id, error = get_path_param(event, "id")
        if error:
            return error

        body, error = _parse_form(event)
        if error:
            return error

        service = _get_service()
        service.update(book_id, body)
        return api_response(200, serialize_upcoming_book(service.get_by_id(book_id)))

    except ValidationError as e:
        return error_response(400, "Bad Request", str(e))
    except NotFound:
        logger.warning(f"Upcoming book not found: {book_id}")
        return error_response(404, "Not Found", f'Upcoming book "{book_id}" not found')
    except (StoreError, SchemaMismatch) as e:
        logger.error(f"Error updating upcoming book: {str(e)}", exc_info=True)
        return error_response(500, "Database Error", "Failed to update upcoming book")
    except Exception as e:
        logger.error(f"Error updating upcoming book: {str(e)}", exc_info=True)
        return error_response(500, "Internal Server Error", "Failed to update upcoming book")


def delete_upcoming_book_handler(event, context):
    """
    Lambda handler to delete an upcoming book (admin only).
    Deleting an id that does not exist still succeeds.
    """
    logger.info("delete_upcoming_book_handler invoked")

    try:
        denied = require_admin(event)
        if denied:
            logger.warning("Non-admin user attempted to delete an upcoming book")
            return error_response(*denied)

        book_id, error = get_path_param(event, "id")
        if error:
            return error

        deleted = _get_service().delete_by_id(book_id)
        return api_response(200, {"deleted": deleted, "id": book_id})

    except StoreError as e:
        logger.error(f"Error deleting upcoming book: {str(e)}", exc_info=True)
        return error_response(500, "Database Error", "Failed to delete upcoming book")
    except Exception as e:
        logger.error(f"Error deleting upcoming book: {str(e)}", exc_info=True)
        return error_response(500, "Internal Server Error", "Failed to delete upcoming book")
