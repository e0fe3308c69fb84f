"""Landing page."""

from fastapi import APIRouter, Depends

from hotelbook.api.deps import RequestContext, get_context

router = APIRouter()


@router.get("/")
async def home(ctx: RequestContext = Depends(get_context)):
    return ctx.render("home.html")
