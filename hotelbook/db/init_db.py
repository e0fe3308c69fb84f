"""Database initialization utilities."""

from hotelbook.db.base import Base
from hotelbook.db.session import engine
from hotelbook.core.logging import get_logger

logger = get_logger(__name__)


async def create_tables() -> None:
    """Create all database tables."""
    # Import models to ensure they're registered
    from hotelbook.models import account, listing, review  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created")

