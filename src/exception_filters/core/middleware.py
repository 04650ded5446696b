"""Correlation middleware shared by services that render filtered errors."""

from __future__ import annotations

import re
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from .context import bind_request_id, reset_request_id

MAX_REQUEST_ID_LENGTH = 128
_REQUEST_ID_PATTERN = re.compile(r"[A-Za-z0-9._:\-]+")


def normalize_request_id(value: str | None) -> str | None:
    """Return the stripped inbound identifier, or ``None`` if it is unusable."""

    if value is None:
        return None
    normalized = value.strip()
    if not normalized or len(normalized) > MAX_REQUEST_ID_LENGTH:
        return None
    if _REQUEST_ID_PATTERN.fullmatch(normalized) is None:
        return None
    return normalized


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Resolve a request identifier and expose it to logs and error envelopes.

    A well-formed inbound header value is reused; anything else is replaced by
    a fresh UUID4 so client input never reaches log lines or response headers
    unchecked. The identifier lives on ``request.state.request_id`` and in the
    logging context until the response is produced.
    """

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID") -> None:
        super().__init__(app)
        self.header_name = header_name

    def resolve_request_id(self, request: Request) -> str:
        return normalize_request_id(request.headers.get(self.header_name)) or uuid.uuid4().hex

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.request_id = request_id = self.resolve_request_id(request)
        token = bind_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            reset_request_id(token)
        response.headers[self.header_name] = request_id
        return response


__all__ = ["MAX_REQUEST_ID_LENGTH", "CorrelationIdMiddleware", "normalize_request_id"]
