"""Tests for the method override middleware."""

import pytest

from hotelbook.core.method_override import MethodOverrideMiddleware


class _RecordingApp:
    """ASGI app that records the method it was called with."""

    def __init__(self):
        self.method = None

    async def __call__(self, scope, receive, send):
        self.method = scope["method"]


async def _dispatch(method: str, query: bytes) -> str:
    inner = _RecordingApp()
    middleware = MethodOverrideMiddleware(inner)
    scope = {"type": "http", "method": method, "query_string": query}
    await middleware(scope, None, None)
    return inner.method


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, query, expected",
    [
        ("POST", b"_method=DELETE", "DELETE"),
        ("POST", b"_method=put", "PUT"),
        ("POST", b"", "POST"),
        ("POST", b"_method=GET", "POST"),
        ("GET", b"_method=DELETE", "GET"),
    ],
)
async def test_override(method, query, expected):
    assert await _dispatch(method, query) == expected
