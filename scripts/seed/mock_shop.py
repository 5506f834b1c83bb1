#!/usr/bin/env python3
"""
Seed the mock admin API with its fixture shop.

Creates the "test-store" shop with two products, three variants and two
unshipped orders. Running it again is a no-op unless --reset is given, which
wipes every mock table first.

Usage:
    python scripts/seed/mock_shop.py [--reset] [--create-tables]
"""

import argparse
import asyncio
import os
import sys

# Add project root to path
project_root = os.path.dirname(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)
sys.path.insert(0, project_root)

from libs.common.config import get_settings
from libs.db.config import AsyncSessionLocal, engine
from libs.db.session import create_all_tables
from services.admin_api_service.seed import reset_data, seed_test_data
from services.admin_api_service.store import SqlAlchemyStore


async def seed_mock_shop(reset: bool = False, create_tables: bool = False):
    settings = get_settings()

    if create_tables:
        await create_all_tables(engine)
        print("  Tables created")

    async with AsyncSessionLocal() as session:
        if reset:
            await reset_data(session)
            print("  Existing mock data removed")

        shop = await seed_test_data(SqlAlchemyStore(session), settings)
        if shop is None:
            print(f"  Shop '{settings.SEED_SHOP_NAME}' already exists, skipping...")
        else:
            print(f"  Created shop: {shop.shop_name} (token: {shop.access_token})")

    await engine.dispose()


def main():
    parser = argparse.ArgumentParser(description="Seed the mock admin API")
    parser.add_argument(
        "--reset", action="store_true", help="delete all mock data before seeding"
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="create tables from the models instead of relying on alembic",
    )
    args = parser.parse_args()

    print("Seeding mock shop...")
    asyncio.run(seed_mock_shop(reset=args.reset, create_tables=args.create_tables))
    print("Done!")


if __name__ == "__main__":
    main()
