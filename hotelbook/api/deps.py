"""Per-request context passed explicitly into every route handler."""

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.responses import Response

from hotelbook.api.responses import redirect, render, render_error
from hotelbook.core.flash import ERROR, flash
from hotelbook.core.security import SESSION_RETURN_TO_KEY, session_account_id
from hotelbook.crud.account import account_crud
from hotelbook.db.session import get_db
from hotelbook.models.account import Account

LOGIN_REQUIRED_MESSAGE = "You must be signed in first"
NOT_OWNER_MESSAGE = "You do not have permission to do that"


@dataclass
class RequestContext:
    """The request, its database session and the signed-in account (if any)."""

    request: Request
    db: AsyncSession
    account: Optional[Account] = None

    @property
    def is_authenticated(self) -> bool:
        return self.account is not None

    def owns(self, record: Any) -> bool:
        """True when the signed-in account authored *record*."""
        return self.account is not None and record.author_id == self.account.id

    def flash(self, category: str, message: str) -> None:
        flash(self.request, category, message)

    def render(self, name: str, status_code: int = 200, **context: Any) -> Response:
        return render(self.request, name, context, status_code=status_code)

    def error(self, message: str, status_code: int) -> Response:
        return render_error(self.request, message, status_code)

    def redirect(self, url: str) -> Response:
        return redirect(url)

    def login_required(self) -> Response:
        """Send an anonymous visitor to the login form, remembering where they were going."""
        if self.request.method == "GET":
            self.request.session[SESSION_RETURN_TO_KEY] = self.request.url.path
        self.flash(ERROR, LOGIN_REQUIRED_MESSAGE)
        return redirect("/login")

    def forbidden(self, url: str) -> Response:
        self.flash(ERROR, NOT_OWNER_MESSAGE)
        return redirect(url)

    def not_found(self, message: str, url: str) -> Response:
        self.flash(ERROR, message)
        return redirect(url)


async def get_context(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> RequestContext:
    """Build the request context, resolving the session's account."""
    account = None
    account_id = session_account_id(request)
    if account_id is not None:
        account = await account_crud.get(db, id=account_id)
    # Error views rendered outside a handler read the account from here
    request.state.account = account
    return RequestContext(request=request, db=db, account=account)


async def load_session_account(request: Request) -> Optional[Account]:
    """Resolve the signed-in account for views rendered without a route handler."""
    account_id = session_account_id(request)
    if account_id is None:
        return None
    provider = request.app.dependency_overrides.get(get_db, get_db)
    async with asynccontextmanager(provider)() as db:
        return await account_crud.get(db, id=account_id)
