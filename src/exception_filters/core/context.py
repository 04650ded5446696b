"""Request-scoped correlation helpers."""

from __future__ import annotations

from contextvars import ContextVar, Token

from starlette.requests import Request

DEFAULT_REQUEST_ID = "-"

_request_id_ctx_var: ContextVar[str] = ContextVar("request_id", default=DEFAULT_REQUEST_ID)


def get_request_id() -> str:
    """Return the correlation identifier bound to the current execution context."""

    return _request_id_ctx_var.get()


def bind_request_id(request_id: str) -> Token[str]:
    """Bind a correlation identifier to the current execution context."""

    return _request_id_ctx_var.set(request_id)


def reset_request_id(token: Token[str]) -> None:
    """Restore the identifier that was bound before ``token`` was issued."""

    _request_id_ctx_var.reset(token)


def request_id_from(request: Request) -> str | None:
    """Return the identifier stored on ``request.state`` by the correlation middleware."""

    request_id = getattr(request.state, "request_id", None)
    return request_id or None


__all__ = [
    "DEFAULT_REQUEST_ID",
    "bind_request_id",
    "get_request_id",
    "request_id_from",
    "reset_request_id",
]
