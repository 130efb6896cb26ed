"""Request ID middleware.

Reuses a client-supplied request ID header when it is safe, otherwise
mints one. The ID is echoed on the response, stored in scope state, and
exposed to log records through app.shared.context. Raw ASGI callable.
"""

import re
import uuid
from typing import Callable

from app.shared.context import reset_request_id, set_request_id

# Safe for logging: alphanumeric, hyphen, underscore; max length to avoid abuse.
REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_ALLOWED_PATTERN = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(REQUEST_ID_MAX_LENGTH) + r"}$"
)


def _get_header(scope: dict, name: str) -> str | None:
    """First value of header `name` (case-insensitive) from ASGI byte-pair headers."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def _sanitize_request_id(raw: str | None) -> str:
    """Keep a well-formed client ID; anything else gets a fresh UUID4."""
    candidate = (raw or "").strip()
    if REQUEST_ID_ALLOWED_PATTERN.match(candidate):
        return candidate
    return str(uuid.uuid4())


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Wrap an ASGI app so every HTTP request carries a request ID."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = _sanitize_request_id(_get_header(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (header_name.encode(), request_id.encode()),
                ]
            await send(message)

        token = set_request_id(request_id)
        try:
            await app(scope, receive, send_wrapper)
        finally:
            reset_request_id(token)

    return asgi_app
