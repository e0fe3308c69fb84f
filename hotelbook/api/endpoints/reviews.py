"""Review routes nested under a listing."""

from fastapi import APIRouter, Depends, status

from hotelbook.api.deps import RequestContext, get_context
from hotelbook.api.endpoints.listings import NOT_FOUND_MESSAGE
from hotelbook.core.flash import SUCCESS
from hotelbook.core.logging import get_logger
from hotelbook.crud.listing import listing_crud
from hotelbook.crud.review import review_crud
from hotelbook.schemas.common import validate_form
from hotelbook.schemas.review import ReviewForm

logger = get_logger(__name__)
router = APIRouter()


@router.post("/{listing_id}/reviews")
async def create(listing_id: int, ctx: RequestContext = Depends(get_context)):
    if not ctx.is_authenticated:
        return ctx.login_required()
    hotel = await listing_crud.get(ctx.db, id=listing_id)
    if hotel is None:
        return ctx.not_found(NOT_FOUND_MESSAGE, "/hotels")

    result = validate_form(ReviewForm, await ctx.request.form())
    if not result.ok:
        return ctx.error(result.message, status.HTTP_400_BAD_REQUEST)

    review = await review_crud.create(
        ctx.db,
        obj_in=result.value,
        author_id=ctx.account.id,
        listing_id=hotel.id,
    )
    await ctx.db.commit()
    logger.info(f"Review {review.id} added to listing {listing_id} by {ctx.account.username}")
    ctx.flash(SUCCESS, "Review added successfully")
    return ctx.redirect(f"/hotels/{listing_id}")


@router.delete("/{listing_id}/reviews/{review_id}")
async def delete(listing_id: int, review_id: int, ctx: RequestContext = Depends(get_context)):
    """Detach a review from its listing and delete it; only its author may do this."""
    if not ctx.is_authenticated:
        return ctx.login_required()
    hotel = await listing_crud.get(ctx.db, id=listing_id)
    if hotel is None:
        return ctx.not_found(NOT_FOUND_MESSAGE, "/hotels")
    review = await review_crud.get(ctx.db, id=review_id)
    if review is None or review.listing_id != hotel.id:
        return ctx.not_found("Review not found", f"/hotels/{listing_id}")
    if not ctx.owns(review):
        return ctx.forbidden(f"/hotels/{listing_id}")

    await review_crud.delete(ctx.db, id=review_id)
    await ctx.db.commit()
    logger.info(f"Review {review_id} deleted from listing {listing_id}")
    ctx.flash(SUCCESS, "Review deleted successfully")
    return ctx.redirect(f"/hotels/{listing_id}")
