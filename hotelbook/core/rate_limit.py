"""Rate limiting configuration."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from hotelbook.core.config import settings

# Rate limiter for the login and register forms
limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    enabled=settings.RATE_LIMIT_ENABLED,
    default_limits=[],
)
