"""Database module - session management and base classes."""

from hotelbook.db.base import Base
from hotelbook.db.session import get_db, AsyncSessionLocal, engine

__all__ = ["Base", "get_db", "AsyncSessionLocal", "engine"]
