"""Request ID and correlation ID middleware.

RequestIDMiddleware forwards a sane client X-Request-ID or mints one;
CorrelationIDMiddleware forwards X-Correlation-ID or falls back to the request
ID. Both store the value on scope["state"] and echo it on the response.
Raw ASGI (no BaseHTTPMiddleware) so streaming and background tasks are unaffected.
"""

import re
import uuid
from typing import Callable

# Client-supplied ids end up in logs: alphanumeric, hyphen, underscore only.
REQUEST_ID_MAX_LENGTH = 64
_SAFE_ID = re.compile(r"^[a-zA-Z0-9_-]{1," + str(REQUEST_ID_MAX_LENGTH) + r"}$")


def get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive). Headers are (bytes, bytes)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def safe_id(raw: str | None) -> str | None:
    """Return raw (stripped) when it is a safe id, else None."""
    if raw and _SAFE_ID.match(raw.strip()):
        return raw.strip()
    return None


def _echo_header(send: Callable, header_name: str, value: str) -> Callable:
    async def send_wrapper(message: dict) -> None:
        if message["type"] == "http.response.start":
            headers = list(message.get("headers", []))
            headers.append((header_name.encode(), value.encode()))
            message["headers"] = headers
        await send(message)

    return send_wrapper


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Add or forward X-Request-ID on each request and response. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = safe_id(get_header(scope, header_name)) or str(uuid.uuid4())
        scope.setdefault("state", {})["request_id"] = request_id
        await app(scope, receive, _echo_header(send, header_name, request_id))

    return asgi_app


def CorrelationIDMiddleware(
    app: Callable, header_name: str = "X-Correlation-ID"
) -> Callable:
    """Add or forward X-Correlation-ID; fall back to the request id. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        state = scope.setdefault("state", {})
        correlation_id = (
            safe_id(get_header(scope, header_name))
            or state.get("request_id")
            or str(uuid.uuid4())
        )
        state["correlation_id"] = correlation_id
        await app(scope, receive, _echo_header(send, header_name, correlation_id))

    return asgi_app
