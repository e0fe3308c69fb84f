"""Hotel listing routes: index, create, show, edit, update, delete."""

from fastapi import APIRouter, Depends, status

from hotelbook.api.deps import RequestContext, get_context
from hotelbook.core.flash import SUCCESS
from hotelbook.core.logging import get_logger
from hotelbook.crud.listing import listing_crud
from hotelbook.schemas.common import validate_form
from hotelbook.schemas.listing import ListingForm

logger = get_logger(__name__)
router = APIRouter()

NOT_FOUND_MESSAGE = "Hotel not found"


@router.get("")
async def index(ctx: RequestContext = Depends(get_context)):
    hotels = await listing_crud.get_multi(ctx.db)
    return ctx.render("hotels/index.html", hotels=hotels)


@router.get("/new")
async def new_form(ctx: RequestContext = Depends(get_context)):
    if not ctx.is_authenticated:
        return ctx.login_required()
    return ctx.render("hotels/new.html")


@router.post("")
async def create(ctx: RequestContext = Depends(get_context)):
    """Validate the new-listing form and store it under the signed-in account."""
    if not ctx.is_authenticated:
        return ctx.login_required()

    result = validate_form(ListingForm, await ctx.request.form())
    if not result.ok:
        return ctx.error(result.message, status.HTTP_400_BAD_REQUEST)

    hotel = await listing_crud.create(ctx.db, obj_in=result.value, author_id=ctx.account.id)
    await ctx.db.commit()
    logger.info(f"Listing {hotel.id} created by {ctx.account.username}")
    ctx.flash(SUCCESS, "New hotel added successfully")
    return ctx.redirect(f"/hotels/{hotel.id}")


@router.get("/{listing_id}")
async def show(listing_id: int, ctx: RequestContext = Depends(get_context)):
    hotel = await listing_crud.get_with_relations(ctx.db, id=listing_id)
    if hotel is None:
        return ctx.not_found(NOT_FOUND_MESSAGE, "/hotels")
    return ctx.render("hotels/show.html", hotel=hotel)


@router.get("/{listing_id}/edit")
async def edit_form(listing_id: int, ctx: RequestContext = Depends(get_context)):
    if not ctx.is_authenticated:
        return ctx.login_required()
    hotel = await listing_crud.get(ctx.db, id=listing_id)
    if hotel is None:
        return ctx.not_found(NOT_FOUND_MESSAGE, "/hotels")
    if not ctx.owns(hotel):
        return ctx.forbidden(f"/hotels/{listing_id}")
    return ctx.render("hotels/edit.html", hotel=hotel)


@router.put("/{listing_id}")
async def update(listing_id: int, ctx: RequestContext = Depends(get_context)):
    """Replace a listing's fields; only its author may do this."""
    if not ctx.is_authenticated:
        return ctx.login_required()
    hotel = await listing_crud.get(ctx.db, id=listing_id)
    if hotel is None:
        return ctx.not_found(NOT_FOUND_MESSAGE, "/hotels")
    if not ctx.owns(hotel):
        return ctx.forbidden(f"/hotels/{listing_id}")

    result = validate_form(ListingForm, await ctx.request.form())
    if not result.ok:
        return ctx.error(result.message, status.HTTP_400_BAD_REQUEST)

    await listing_crud.update(ctx.db, db_obj=hotel, obj_in=result.value)
    await ctx.db.commit()
    logger.info(f"Listing {listing_id} updated by {ctx.account.username}")
    ctx.flash(SUCCESS, "Hotel updated successfully")
    return ctx.redirect(f"/hotels/{listing_id}")


@router.delete("/{listing_id}")
async def delete(listing_id: int, ctx: RequestContext = Depends(get_context)):
    """Delete a listing and, with it, every review attached to it."""
    if not ctx.is_authenticated:
        return ctx.login_required()
    hotel = await listing_crud.get(ctx.db, id=listing_id)
    if hotel is None:
        return ctx.not_found(NOT_FOUND_MESSAGE, "/hotels")
    if not ctx.owns(hotel):
        return ctx.forbidden(f"/hotels/{listing_id}")

    await listing_crud.delete(ctx.db, id=listing_id)
    await ctx.db.commit()
    logger.info(f"Listing {listing_id} deleted by {ctx.account.username}")
    ctx.flash(SUCCESS, "Hotel deleted successfully")
    return ctx.redirect("/hotels")
