"""CRUD operations for Review model."""

from typing import List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hotelbook.crud.base import CRUDBase
from hotelbook.models.review import Review
from hotelbook.schemas.review import ReviewForm


class CRUDReview(CRUDBase[Review, ReviewForm, ReviewForm]):
    """CRUD operations for Review model."""

    async def get_by_listing(
        self,
        db: AsyncSession,
        *,
        listing_id: int
    ) -> List[Review]:
        """Get reviews attached to a listing, oldest first."""
        result = await db.execute(
            select(Review)
            .where(Review.listing_id == listing_id)
            .order_by(Review.id)
        )
        return list(result.scalars().all())


review_crud = CRUDReview(Review)
