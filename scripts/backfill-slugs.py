#!/usr/bin/env python3
"""
Backfill URL slugs for catalog books in DynamoDB.

Legacy ?id= links are redirected to /books/<slug>-<shortId>, so every book
needs a slug. This script:
1. Scans all books in the Books table
2. For each book without a slug, derives one from its title
3. Updates the DynamoDB record with the slug

Usage:
    python scripts/backfill-slugs.py [--dry-run] [--profile PROFILE]

Environment variables:
    AWS_REGION: AWS region (default: us-east-2)
    BOOKS_TABLE: DynamoDB table name (default: Books)
"""

import argparse
import os
import sys
from typing import Optional

import boto3

from catalog_backend.utils.errors import CatalogError
from catalog_backend.utils.slug import generate_slug, slug_with_id
from catalog_backend.utils.store import RowStore

# Configuration
REGION = os.environ.get("AWS_REGION", "us-east-2")
TABLE_NAME = os.environ.get("BOOKS_TABLE", "Books")


def backfill_slugs(dry_run: bool = False, profile: Optional[str] = None) -> int:
    """
    Add missing slugs to the Books table.

    Args:
        dry_run: If True, only show what would be updated without making changes
        profile: Optional AWS profile name

    Returns:
        int: Number of books that failed to update
    """
    session = boto3.Session(profile_name=profile, region_name=REGION)
    store = RowStore(session.resource("dynamodb").Table(TABLE_NAME), "books")

    print(f"🔍 Scanning {TABLE_NAME} ({REGION})...")
    items = store.scan_all()
    print(f"📊 Found {len(items)} total books")
    print()

    stats = {"total": len(items), "already_has_slug": 0, "slug_added": 0, "no_title": 0, "errors": 0}

    for i, item in enumerate(items, 1):
        book_id = item["id"]

        if item.get("slug"):
            stats["already_has_slug"] += 1
            continue

        slug = generate_slug(item.get("title", ""))
        if not slug:
            print(f"[{i}/{len(items)}] ⚠️  {book_id}: title yields an empty slug - skipping")
            stats["no_title"] += 1
            continue

        print(f"[{i}/{len(items)}] {book_id} -> /books/{slug_with_id(slug, book_id)}")
        if dry_run:
            stats["slug_added"] += 1
            continue

        try:
            store.update(book_id, {"slug": slug})
            stats["slug_added"] += 1
        except CatalogError as e:
            print(f"  ❌ Failed to update DynamoDB: {str(e)}")
            stats["errors"] += 1

    print()
    print("=" * 60)
    print(f"Total books:        {stats['total']}")
    print(f"Already had slug:   {stats['already_has_slug']}")
    print(f"Slug added:         {stats['slug_added']}" + (" (dry run)" if dry_run else ""))
    print(f"No usable title:    {stats['no_title']}")
    print(f"Errors:             {stats['errors']}")
    print("=" * 60)

    if dry_run:
        print("💡 Run without --dry-run to apply changes")

    return stats["errors"]


def main():
    parser = argparse.ArgumentParser(description="Backfill missing book slugs in DynamoDB")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be updated without making changes",
    )
    parser.add_argument("--profile", help="AWS profile name")
    args = parser.parse_args()

    return 0 if backfill_slugs(dry_run=args.dry_run, profile=args.profile) == 0 else 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n⚠️  Interrupted by user")
        sys.exit(130)
