"""Registration, login and logout."""

from fastapi import APIRouter, Depends, Request

from hotelbook.api.deps import RequestContext, get_context
from hotelbook.core.config import settings
from hotelbook.core.errors import DuplicateAccountError
from hotelbook.core.flash import ERROR, SUCCESS
from hotelbook.core.logging import get_logger
from hotelbook.core.rate_limit import limiter
from hotelbook.core.security import login_session, logout_session, pop_return_to
from hotelbook.crud.account import account_crud
from hotelbook.schemas.account import LoginForm, RegisterForm
from hotelbook.schemas.common import validate_form

logger = get_logger(__name__)
router = APIRouter()

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


@router.get("/register")
async def register_form(ctx: RequestContext = Depends(get_context)):
    return ctx.render("users/register.html")


@router.post("/register")
@limiter.limit(settings.RATE_LIMIT_AUTH)
async def register(request: Request, ctx: RequestContext = Depends(get_context)):
    """Create an account and sign it in straight away."""
    result = validate_form(RegisterForm, await request.form())
    if not result.ok:
        ctx.flash(ERROR, result.message)
        return ctx.redirect("/register")

    try:
        account = await account_crud.create(ctx.db, obj_in=result.value)
    except DuplicateAccountError as e:
        ctx.flash(ERROR, e.message)
        return ctx.redirect("/register")
    await ctx.db.commit()

    login_session(request, account.id)
    logger.info(f"Account {account.id} registered: {account.username}")
    ctx.flash(SUCCESS, f"Welcome to {settings.PROJECT_NAME}!")
    return ctx.redirect("/hotels")


@router.get("/login")
async def login_form(ctx: RequestContext = Depends(get_context)):
    return ctx.render("users/login.html")


@router.post("/login")
@limiter.limit(settings.RATE_LIMIT_AUTH)
async def login(request: Request, ctx: RequestContext = Depends(get_context)):
    """
    Check credentials and bind the session to the account.

    Returns to the page the login guard interrupted, if any.
    """
    result = validate_form(LoginForm, await request.form())
    account = None
    if result.ok:
        account = await account_crud.authenticate(
            ctx.db,
            username=result.value.username,
            password=result.value.password,
        )
    if account is None:
        logger.warning("Failed login attempt")
        ctx.flash(ERROR, INVALID_CREDENTIALS_MESSAGE)
        return ctx.redirect("/login")

    return_to = pop_return_to(request)
    login_session(request, account.id)
    ctx.flash(SUCCESS, "Welcome back!")
    return ctx.redirect(return_to or "/hotels")


@router.get("/logout")
async def logout(request: Request, ctx: RequestContext = Depends(get_context)):
    logout_session(request)
    ctx.flash(SUCCESS, "You are logged out")
    return ctx.redirect("/hotels")
