"""SQLAlchemy models for the HotelBook application."""

from hotelbook.models.account import Account
from hotelbook.models.listing import Listing
from hotelbook.models.review import Review

__all__ = [
    "Account",
    "Listing",
    "Review",
]
