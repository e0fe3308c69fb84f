"""Security utilities - password hashing and session login state."""

from typing import Optional

from passlib.context import CryptContext
from starlette.requests import Request

from hotelbook.core.config import settings
from hotelbook.core.flash import FLASH_KEY

# Password hashing context
pwd_context = CryptContext(schemes=settings.PASSWORD_SCHEMES, deprecated="auto")

SESSION_ACCOUNT_KEY = "account_id"
SESSION_RETURN_TO_KEY = "return_to"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password with the configured scheme."""
    return pwd_context.hash(password)


def login_session(request: Request, account_id: int) -> None:
    """
    Bind the session to an account.

    The session is cleared first so nothing from the anonymous session
    survives the login, except the pending flash messages.
    """
    flashes = request.session.get(FLASH_KEY)
    request.session.clear()
    if flashes:
        request.session[FLASH_KEY] = flashes
    request.session[SESSION_ACCOUNT_KEY] = account_id


def logout_session(request: Request) -> None:
    """Drop the account from the session."""
    request.session.pop(SESSION_ACCOUNT_KEY, None)
    request.session.pop(SESSION_RETURN_TO_KEY, None)


def session_account_id(request: Request) -> Optional[int]:
    """Get the account ID stored in the session, if any."""
    raw = request.session.get(SESSION_ACCOUNT_KEY)
    if raw is None:
        return None
    try:
        return int(raw)
    except (ValueError, TypeError):
        return None


def pop_return_to(request: Request) -> Optional[str]:
    """Take the path saved by the login guard, if it is a local path."""
    path = request.session.pop(SESSION_RETURN_TO_KEY, None)
    if not isinstance(path, str) or not path.startswith("/") or path.startswith("//"):
        return None
    return path
