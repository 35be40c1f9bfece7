"""
Lambda handlers for Catalog API

This module serves as the entry point for all Lambda functions.
It re-exports handlers from their respective modules for Lambda function configuration.

Architecture:
- API Gateway -> Lambda -> DynamoDB books table (legacy id -> slug redirects)
- API Gateway -> Lambda -> DynamoDB upcoming_books table (Coming Soon section, admin CRUD)

Handlers:
1. redirect_book_handler: 301 from ?id=<id> to /books/<slug>-<shortId>
2. redirect_multimedia_handler: 301 from ?id=<id> to /multimedia/<slug>-<shortId>
3. list_upcoming_books_handler: Lists upcoming books by expected release date
4. get_upcoming_book_handler: Gets one upcoming book
5. create_upcoming_book_handler: Creates an upcoming book (admin only)
6. update_upcoming_book_handler: Updates an upcoming book (admin only)
7. delete_upcoming_book_handler: Deletes an upcoming book (admin only)
"""

# Re-export handlers for Lambda function configuration
# Support both local development (catalog_backend.X) and Lambda deployment (X)
try:
    # Lambda deployment (files are in root, not in catalog_backend/)
    from handlers.redirect_handlers import redirect_book_handler, redirect_multimedia_handler
    from handlers.upcoming_book_handlers import (
        create_upcoming_book_handler,
        delete_upcoming_book_handler,
        get_upcoming_book_handler,
        list_upcoming_books_handler,
        update_upcoming_book_handler,
    )
    from config import books_table, upcoming_books_table
except ImportError:
    # Local development / testing (with catalog_backend package structure)
    from catalog_backend.handlers.redirect_handlers import (
        redirect_book_handler,
        redirect_multimedia_handler,
    )
    from catalog_backend.handlers.upcoming_book_handlers import (
        create_upcoming_book_handler,
        delete_upcoming_book_handler,
        get_upcoming_book_handler,
        list_upcoming_books_handler,
        update_upcoming_book_handler,
    )
    from catalog_backend.config import books_table, upcoming_books_table

# Make handlers available at module level for Lambda
__all__ = [
    "redirect_book_handler",
    "redirect_multimedia_handler",
    "list_upcoming_books_handler",
    "get_upcoming_book_handler",
    "create_upcoming_book_handler",
    "update_upcoming_book_handler",
    "delete_upcoming_book_handler",
    # Also export config for tests
    "books_table",
    "upcoming_books_table",
]
