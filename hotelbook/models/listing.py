"""Listing model for hotels offered on the site."""

from datetime import datetime
from typing import TYPE_CHECKING, Optional, List

from sqlalchemy import Integer, String, Text, Float, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship, Mapped, mapped_column

from hotelbook.db.base import Base

if TYPE_CHECKING:
    from hotelbook.models.account import Account
    from hotelbook.models.review import Review


class Listing(Base):
    """A hotel listing owned by an account."""
    __tablename__ = "listings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    image: Mapped[str] = mapped_column(String(500), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now()
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        onupdate=func.now()
    )

    # Relationships
    author: Mapped["Account"] = relationship("Account", back_populates="listings")
    reviews: Mapped[List["Review"]] = relationship(
        "Review",
        back_populates="listing",
        cascade="all, delete-orphan",
        order_by="Review.id"
    )

    def __repr__(self) -> str:
        return f"<Listing(id={self.id}, title={self.title})>"
