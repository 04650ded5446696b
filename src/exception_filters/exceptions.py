"""Pre-classified HTTP exceptions for application code."""

from __future__ import annotations

from typing import Any, Mapping

from fastapi import status


class HttpError(Exception):
    """Base class for errors that already know how they should be rendered."""

    def __init__(
        self,
        title: str,
        *,
        code: str = "HTTP_ERROR",
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(title)
        self.title = title
        self.code = code
        self.status_code = status_code
        self.details = details
        self.headers = dict(headers) if headers else None


class BadRequestError(HttpError):
    """The request is malformed or violates a business rule."""

    def __init__(
        self,
        title: str = "Bad request.",
        *,
        code: str = "BAD_REQUEST",
        details: Any | None = None,
    ) -> None:
        super().__init__(
            title,
            code=code,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
        )


class NotFoundError(HttpError):
    """The requested resource does not exist."""

    def __init__(
        self,
        title: str = "Resource not found.",
        *,
        code: str = "NOT_FOUND",
        details: Any | None = None,
    ) -> None:
        super().__init__(
            title,
            code=code,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
        )


class ConflictError(HttpError):
    """The request conflicts with the current state of a resource."""

    def __init__(
        self,
        title: str = "Resource conflict.",
        *,
        code: str = "CONFLICT",
        details: Any | None = None,
    ) -> None:
        super().__init__(
            title,
            code=code,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
        )


class ServerError(HttpError):
    """An unexpected failure the caller cannot fix."""

    def __init__(
        self,
        title: str = "Internal server error.",
        *,
        code: str = "SERVER_ERROR",
        details: Any | None = None,
    ) -> None:
        super().__init__(
            title,
            code=code,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
        )


__all__ = [
    "BadRequestError",
    "ConflictError",
    "HttpError",
    "NotFoundError",
    "ServerError",
]
