"""Render normalized errors into the service's JSON error envelope."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.requests import Request

from .core.context import request_id_from
from .normalized import NormalizedError
from .schemas import ErrorResponse


def build_error_response(error: NormalizedError, request: Request) -> ErrorResponse:
    return ErrorResponse(
        status=error.status,
        code=error.code,
        title=error.title,
        details=error.details,
        path=request.url.path,
        timestamp=datetime.now(timezone.utc).isoformat(),
        request_id=request_id_from(request),
    )


def render_error(
    error: NormalizedError,
    request: Request,
    *,
    request_id_header: str = "X-Request-ID",
) -> JSONResponse:
    """Serialize ``error`` and set the status line and headers accordingly."""

    payload = build_error_response(error, request)
    response = JSONResponse(status_code=error.status, content=jsonable_encoder(payload))
    if error.headers:
        response.headers.update(error.headers)
    if payload.request_id:
        response.headers.setdefault(request_id_header, payload.request_id)
    return response


__all__ = ["build_error_response", "render_error"]
