"""
Wipe the listings table and fill it with random sample hotels.

Usage:
  python -m hotelbook.db.seed
  python -m hotelbook.db.seed --count 25
"""

import argparse
import asyncio
import random
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from hotelbook.core.config import settings
from hotelbook.core.logging import get_logger, setup_logging
from hotelbook.crud.account import account_crud
from hotelbook.crud.listing import listing_crud
from hotelbook.db.init_db import create_tables
from hotelbook.db.seed_data import CITIES, DESCRIPTION, DESCRIPTORS, PLACES
from hotelbook.db.session import AsyncSessionLocal, engine
from hotelbook.models.account import Account
from hotelbook.schemas.account import RegisterForm

logger = get_logger(__name__)


def sample_listing(rng: random.Random) -> dict:
    """Build the fields of one random hotel."""
    city, state = rng.choice(CITIES)
    return {
        "title": f"{rng.choice(DESCRIPTORS)} {rng.choice(PLACES)}",
        "location": f"{city}, {state}",
        "image": settings.SEED_IMAGE_URL,
        "description": DESCRIPTION,
        "price": float(rng.randrange(100)),
    }


async def get_seed_account(db: AsyncSession) -> Account:
    """Get the account that owns seeded listings, creating it on first run."""
    account = await account_crud.get_by_username(db, settings.SEED_USERNAME)
    if account is None:
        account = await account_crud.create(
            db,
            obj_in=RegisterForm(
                username=settings.SEED_USERNAME,
                email=settings.SEED_EMAIL,
                password=settings.SEED_PASSWORD,
            ),
        )
        logger.info(f"Created seed account {account.username}")
    return account


async def seed_db(
    db: AsyncSession,
    count: int = settings.SEED_COUNT,
    rng: Optional[random.Random] = None,
) -> int:
    """Replace every listing with *count* random ones. Returns the number inserted."""
    rng = rng or random.Random()
    author = await get_seed_account(db)

    removed = await listing_crud.delete_all(db)
    logger.info(f"Removed {removed} existing listing(s)")

    for _ in range(count):
        await listing_crud.create(db, obj_in=sample_listing(rng), author_id=author.id)
    await db.commit()

    logger.info(f"Inserted {count} listing(s)")
    return count


async def main(count: int) -> None:
    await create_tables()
    try:
        async with AsyncSessionLocal() as db:
            await seed_db(db, count=count)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the database with sample hotels")
    parser.add_argument("--count", type=int, default=settings.SEED_COUNT, help="number of hotels to insert")
    args = parser.parse_args()

    setup_logging()
    asyncio.run(main(args.count))
