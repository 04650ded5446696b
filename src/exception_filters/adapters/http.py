"""Boundary adapter for exceptions that already carry an HTTP status."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from fastapi import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..exceptions import HttpError
from ..failures import TransportFailure

HTTP_EXCEPTION_TYPES: tuple[type[Exception], ...] = (HttpError, StarletteHTTPException)

_HTTP_STATUS_CODE_MAP: dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "BAD_REQUEST",
    status.HTTP_401_UNAUTHORIZED: "UNAUTHORIZED",
    status.HTTP_403_FORBIDDEN: "FORBIDDEN",
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
    status.HTTP_409_CONFLICT: "CONFLICT",
    422: "UNPROCESSABLE_ENTITY",
    status.HTTP_429_TOO_MANY_REQUESTS: "RATE_LIMITED",
}


def _status_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def _normalize_details(raw: Any) -> Any | None:
    if raw is None:
        return None
    if isinstance(raw, list):
        return {"errors": raw}
    return raw


def _http_exception_title(status_code: int, detail: Any) -> tuple[str, Any | None]:
    if isinstance(detail, str):
        return detail, None
    return _status_phrase(status_code), _normalize_details(detail)


def describe_http_exception(exc: Exception) -> TransportFailure | None:
    """Describe ``exc`` as a transport failure, or return ``None``."""

    if isinstance(exc, HttpError):
        return TransportFailure(
            status=exc.status_code,
            title=exc.title,
            code=exc.code,
            details=exc.details,
            headers=exc.headers,
        )
    if isinstance(exc, StarletteHTTPException):
        title, details = _http_exception_title(exc.status_code, exc.detail)
        return TransportFailure(
            status=exc.status_code,
            title=title,
            code=_HTTP_STATUS_CODE_MAP.get(exc.status_code, "HTTP_ERROR"),
            details=details,
            headers=dict(exc.headers) if exc.headers else None,
        )
    return None


__all__ = ["HTTP_EXCEPTION_TYPES", "describe_http_exception"]
