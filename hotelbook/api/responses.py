"""Response helpers shared by route handlers and the error handlers."""

from pathlib import Path
from typing import Any, Optional

from fastapi import Request, status
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from hotelbook.core.config import settings
from hotelbook.core.errors import DEFAULT_ERROR_MESSAGE
from hotelbook.core.flash import pop_flashes

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


def format_price(value: Any) -> str:
    """Render 42.0 as "42" and 42.5 as "42.50"."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return str(value)
    if number.is_integer():
        return str(int(number))
    return f"{number:.2f}"


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["price"] = format_price


def render(
    request: Request,
    name: str,
    context: Optional[dict] = None,
    status_code: int = status.HTTP_200_OK,
) -> Response:
    """Render a view with the signed-in account and pending flash messages."""
    # The outermost 500 handler runs outside the session middleware
    flashes = pop_flashes(request) if "session" in request.scope else {}
    data = {
        "project_name": settings.PROJECT_NAME,
        "current_user": getattr(request.state, "account", None),
        "success": flashes.get("success", []),
        "error": flashes.get("error", []),
    }
    data.update(context or {})
    return templates.TemplateResponse(request, name, data, status_code=status_code)


def render_error(
    request: Request,
    message: Optional[str] = None,
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
) -> Response:
    """Render the generic error view."""
    return render(
        request,
        "error.html",
        {"message": message or DEFAULT_ERROR_MESSAGE, "status_code": status_code},
        status_code=status_code,
    )


def redirect(url: str) -> RedirectResponse:
    """Redirect after a form post (303 so the browser follows with GET)."""
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)
