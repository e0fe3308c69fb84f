"""Method override middleware.

HTML forms can only send GET and POST. A POST carrying ``?_method=PUT`` or
``?_method=DELETE`` in its query string is dispatched as that method.
"""

from urllib.parse import parse_qs

from starlette.types import ASGIApp, Receive, Scope, Send

OVERRIDE_PARAM = "_method"
ALLOWED_METHODS = {"PUT", "PATCH", "DELETE"}


class MethodOverrideMiddleware:
    """Rewrite the request method of overridden form posts."""

    def __init__(self, app: ASGIApp, param: str = OVERRIDE_PARAM) -> None:
        self.app = app
        self.param = param

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["method"] == "POST":
            query = parse_qs(scope.get("query_string", b"").decode("latin-1"))
            values = query.get(self.param)
            if values:
                method = values[0].upper()
                if method in ALLOWED_METHODS:
                    scope = dict(scope)
                    scope["method"] = method
        await self.app(scope, receive, send)
