"""CRUD operations for database models."""

from hotelbook.crud.base import CRUDBase
from hotelbook.crud.account import account_crud
from hotelbook.crud.listing import listing_crud
from hotelbook.crud.review import review_crud

__all__ = [
    "CRUDBase",
    "account_crud",
    "listing_crud",
    "review_crud",
]
