"""Wire a filter chain into a FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI
from starlette.requests import Request
from starlette.responses import Response

from .chain import FilterChain


def register_exception_filters(app: FastAPI, chain: FilterChain | None = None) -> FilterChain:
    """Route every exception class the chain's filters understand through ``chain``.

    Nothing is registered for ``Exception`` itself: a failure that reaches the
    chain but is claimed by no filter is re-raised and ends up in Starlette's
    default server-error handling.
    """

    filter_chain = chain if chain is not None else FilterChain()

    async def _handle_filtered_exception(request: Request, exc: Exception) -> Response:
        return filter_chain.handle(exc, request)

    for exception_type in filter_chain.catches:
        app.add_exception_handler(exception_type, _handle_filtered_exception)

    app.state.exception_filters = filter_chain
    return filter_chain


__all__ = ["register_exception_filters"]
