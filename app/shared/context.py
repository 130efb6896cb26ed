"""Request context management using contextvars.

Async-safe storage for request-scoped data. Currently only the request ID,
set by RequestIDMiddleware and stamped onto log records.

Usage:
    token = set_request_id("abc123")
    request_id = get_request_id()
    reset_request_id(token)
"""

from contextvars import ContextVar, Token

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(request_id: str) -> Token[str | None]:
    """Set the request ID for the current task; return a token for reset."""
    return _request_id.set(request_id)


def reset_request_id(token: Token[str | None]) -> None:
    _request_id.reset(token)


def get_request_id() -> str | None:
    """Return the current request ID, or None outside a request."""
    return _request_id.get()
