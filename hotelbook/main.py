"""HotelBook web application - hotel listings and reviews."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from hotelbook.core.config import settings
from hotelbook.core.errors import AppError
from hotelbook.core.logging import get_logger, setup_logging
from hotelbook.core.method_override import MethodOverrideMiddleware
from hotelbook.core.rate_limit import limiter
from hotelbook.api.deps import load_session_account
from hotelbook.api.responses import render_error
from hotelbook.api.router import api_router
from hotelbook.db.init_db import create_tables
from hotelbook.db.session import engine

logger = get_logger(__name__)

NOT_FOUND_MESSAGE = "Page not Found"


async def _resolve_account(request: Request) -> None:
    # Unmatched paths never reach get_context, but the nav still needs the account
    if "session" in request.scope and not hasattr(request.state, "account"):
        request.state.account = await load_session_account(request)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager."""
    # Startup
    setup_logging()
    logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION}")
    logger.info(f"Debug mode: {settings.DEBUG}")

    # Create database tables if in debug mode; otherwise run `alembic upgrade head`
    if settings.DEBUG:
        await create_tables()

    yield

    # Shutdown
    logger.info("Shutting down...")
    await engine.dispose()


def register_error_handlers(app: FastAPI) -> None:
    """Route every error to the error view."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error(f"Application error: {exc.message}", exc_info=exc)
        return render_error(request, exc.message, exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        await _resolve_account(request)
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return render_error(request, NOT_FOUND_MESSAGE, exc.status_code)
        return render_error(request, str(exc.detail), exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def bad_path_handler(request: Request, exc: RequestValidationError):
        await _resolve_account(request)
        # Forms are validated in the handlers; only malformed path ids land here
        return render_error(request, NOT_FOUND_MESSAGE, status.HTTP_404_NOT_FOUND)

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
        logger.warning(f"Rate limit exceeded for {request.url.path}")
        return render_error(
            request,
            "Too many attempts, please try again later",
            status.HTTP_429_TOO_MANY_REQUESTS,
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return render_error(request, None, status.HTTP_500_INTERNAL_SERVER_ERROR)


def create_application() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    # Rate limiter
    app.state.limiter = limiter

    # Middleware: the last added runs first, so method override sees the raw request
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SECRET_KEY,
        session_cookie=settings.SESSION_COOKIE,
        max_age=settings.SESSION_MAX_AGE,
        same_site="lax",
    )
    app.add_middleware(MethodOverrideMiddleware)

    app.include_router(api_router)
    register_error_handlers(app)

    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "hotelbook.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
