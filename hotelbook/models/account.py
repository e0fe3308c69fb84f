"""Account model for authentication and ownership."""

from datetime import datetime
from typing import TYPE_CHECKING, List

from sqlalchemy import Integer, String, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship, Mapped, mapped_column

from hotelbook.db.base import Base

if TYPE_CHECKING:
    from hotelbook.models.listing import Listing
    from hotelbook.models.review import Review


class Account(Base):
    """A registered user; owns listings and reviews."""
    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    username: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now()
    )

    # Relationships
    listings: Mapped[List["Listing"]] = relationship(
        "Listing",
        back_populates="author"
    )
    reviews: Mapped[List["Review"]] = relationship(
        "Review",
        back_populates="author"
    )

    def __repr__(self) -> str:
        return f"<Account(id={self.id}, username={self.username})>"
