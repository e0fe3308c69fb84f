"""CRUD operations for Listing model."""

from typing import Any, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hotelbook.crud.base import CRUDBase
from hotelbook.models.listing import Listing
from hotelbook.models.review import Review
from hotelbook.schemas.listing import ListingForm


class CRUDListing(CRUDBase[Listing, ListingForm, ListingForm]):
    """CRUD operations for Listing model."""

    async def get_with_relations(
        self,
        db: AsyncSession,
        id: int
    ) -> Optional[Listing]:
        """Get listing with its author, reviews and review authors loaded."""
        result = await db.execute(
            select(Listing)
            .options(
                selectinload(Listing.author),
                selectinload(Listing.reviews).selectinload(Review.author)
            )
            .where(Listing.id == id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def delete(
        self,
        db: AsyncSession,
        *,
        id: Any
    ) -> Optional[Listing]:
        """Delete a listing and every review attached to it."""
        result = await db.execute(
            select(Listing)
            .options(selectinload(Listing.reviews))
            .where(Listing.id == id)
            .execution_options(populate_existing=True)
        )
        obj = result.scalar_one_or_none()
        if obj:
            await db.delete(obj)
            await db.flush()
        return obj

    async def delete_all(self, db: AsyncSession) -> int:
        """Delete every listing along with its reviews. Returns the count removed."""
        result = await db.execute(
            select(Listing)
            .options(selectinload(Listing.reviews))
            .execution_options(populate_existing=True)
        )
        listings = list(result.scalars().all())
        for listing in listings:
            await db.delete(listing)
        await db.flush()
        return len(listings)


listing_crud = CRUDListing(Listing)
