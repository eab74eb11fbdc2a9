#!/usr/bin/env python
"""
Product Seed Script

Loads product transaction records into the sales database, either from a
local JSON file or from the remote seed feed. The whole batch is written
in a single transaction.

Usage:
    python seed_products.py
    python seed_products.py --file data/product_transaction.json
    python seed_products.py --url https://example.com/products.json --replace
    python seed_products.py --database-url sqlite+aiosqlite:///./other.db
"""
import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

from sales_api.database.store import TransactionStore
from sales_api.exceptions.api_exception import SalesAPIException
from sales_api.services.feed_client import fetch_seed_batch
from sales_api.services.ingest_service import ingest_products
from sales_api.settings import settings


def read_json_records(file_path: Path) -> List[Dict[str, Any]]:
    """
    Read raw records from a JSON file.

    Args:
        file_path: Path to a JSON file holding an array of records

    Returns:
        List of raw record dictionaries
    """
    with open(file_path, "r", encoding="utf-8") as f:
        payload = json.load(f)

    if not isinstance(payload, list):
        raise ValueError("JSON file must contain an array of records")
    return payload


async def seed(args: argparse.Namespace) -> int:
    """Fetch or read the batch and ingest it; returns the inserted count."""
    if args.file:
        raw_batch = read_json_records(args.file)
    else:
        raw_batch = await fetch_seed_batch(args.url, timeout=args.timeout)

    store = TransactionStore(args.database_url)
    try:
        await store.ensure_schema()
        report = await ingest_products(store, raw_batch, replace=args.replace)
    finally:
        await store.close()
    return report.inserted_count


def main():
    """Main entry point for the script."""
    parser = argparse.ArgumentParser(
        description="Load product transactions into the sales database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s --file data/product_transaction.json
  %(prog)s --replace --timeout 60
        """
    )

    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Read records from a local JSON file instead of the feed"
    )

    parser.add_argument(
        "--url",
        type=str,
        default=settings.SEED_DATA_URL,
        help="Seed feed URL (default: SEED_DATA_URL setting)"
    )

    parser.add_argument(
        "--database-url",
        type=str,
        default=settings.DATABASE_URL,
        help="Async SQLAlchemy database URL (default: DATABASE_URL setting)"
    )

    parser.add_argument(
        "--replace",
        action="store_true",
        help="Replace existing records instead of appending"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.FEED_TIMEOUT_SECONDS,
        help="Feed request timeout in seconds"
    )

    args = parser.parse_args()

    if args.file is not None and not args.file.is_file():
        print(f"❌ Error: File not found: {args.file}", file=sys.stderr)
        sys.exit(1)

    source = args.file or args.url
    print(f"📂 Loading products from {source}")

    try:
        inserted = asyncio.run(seed(args))
    except SalesAPIException as e:
        print(f"❌ {e.error_type}: {e.detail}", file=sys.stderr)
        sys.exit(1)
    except (OSError, ValueError) as e:
        print(f"❌ Error reading records: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"🎉 Seed complete! Inserted {inserted} product(s)")


if __name__ == "__main__":
    main()
