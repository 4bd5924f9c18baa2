#!/usr/bin/env python3
"""
Seed the database with the default delivery types and staff accounts.

This script:
1. Creates the fixed-price delivery types (Local, Standard, Distant) and Extra
2. Creates the demo deliverers and the manager account
3. Leaves rows that already exist untouched, so it can be re-run safely

Usage:
  python scripts/seed_reference_data.py --password 'initial-secret'
"""

import asyncio
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.application.use_cases.setup import seed_reference_data
from src.config.settings import get_settings
from src.infrastructure.auth.password import PasswordHasher
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)
from src.infrastructure.gateways.reference_data import default_delivery_types, default_users


async def seed(password: str) -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    try:
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            result = await seed_reference_data.execute(
                uow=uow,
                password_hasher=PasswordHasher(),
                delivery_types=default_delivery_types(),
                users=default_users(),
                initial_password=password,
            )
        print(f"Delivery types created: {', '.join(result.created_types) or 'none'}")
        print(f"Users created: {', '.join(result.created_users) or 'none'}")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Seed delivery types and staff accounts")
    parser.add_argument("--password", required=True, help="Initial password for new accounts")
    args = parser.parse_args()

    asyncio.run(seed(args.password))
