#!/usr/bin/env python3
"""Seed the catalog database with demo data.

Creates a small category tree and a handful of products in the
database configured by DATABASE_URL.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --create-tables
"""

import argparse
import asyncio

from catalog_api.infrastructure.database import create_tables, session_scope
from catalog_api.infrastructure.logging import configure_logging
from catalog_api.infrastructure.repositories import (
    SqlCategoryRepository,
    SqlProductRepository,
)
from catalog_api.infrastructure.seed import seed_catalog


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Seed the catalog with demo data")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create tables first (for SQLite development databases)",
    )
    args = parser.parse_args()

    configure_logging()

    if args.create_tables:
        await create_tables()

    async with session_scope() as session:
        result = await seed_catalog(
            SqlCategoryRepository(session), SqlProductRepository(session)
        )

    print(f"Seeded {result['categories']} categories and {result['products']} products")


if __name__ == "__main__":
    asyncio.run(main())
