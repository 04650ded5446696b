"""Ordered, first-match-wins composition of exception filters."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from starlette.responses import Response

from .filters import ExceptionFilter, default_filters
from .normalized import NormalizedError
from .rendering import render_error

logger = logging.getLogger(__name__)

Renderer = Callable[[NormalizedError, Any], Response]
Resolution = tuple[ExceptionFilter, NormalizedError]


class FilterChain:
    """Dispatch a failure to the first filter that claims it.

    The filter order given at construction is the chain's only configuration.
    Failures no filter claims are re-raised unchanged so the host framework's
    default handler sees the original exception object.
    """

    def __init__(
        self,
        filters: Iterable[ExceptionFilter] | None = None,
        *,
        renderer: Renderer = render_error,
    ) -> None:
        resolved = tuple(default_filters() if filters is None else filters)
        for candidate in resolved:
            if not isinstance(candidate, ExceptionFilter):
                raise TypeError(f"{candidate!r} is not an ExceptionFilter.")
        self._filters = resolved
        self._renderer = renderer

    @property
    def filters(self) -> tuple[ExceptionFilter, ...]:
        return self._filters

    @property
    def catches(self) -> tuple[type[Exception], ...]:
        """Exception classes to route to the chain, in filter order without duplicates."""

        ordered: dict[type[Exception], None] = {}
        for exception_filter in self._filters:
            for exception_type in exception_filter.catches:
                ordered.setdefault(exception_type, None)
        return tuple(ordered)

    def resolve(self, failure: Exception, request: Any) -> Resolution | None:
        """Return the first claiming filter and its result, or ``None``."""

        for exception_filter in self._filters:
            error = exception_filter.attempt(failure, request)
            if error is not None:
                return exception_filter, error
        return None

    def handle(self, failure: Exception, request: Any) -> Response:
        """Render the first translation of ``failure`` or re-raise it untouched."""

        resolution = self.resolve(failure, request)
        if resolution is None:
            logger.debug(
                "No exception filter claimed the failure",
                extra={"exception_type": type(failure).__name__},
            )
            raise failure

        exception_filter, error = resolution
        self._log_translation(exception_filter, failure, error)
        return self._renderer(error, request)

    @staticmethod
    def _log_translation(
        exception_filter: ExceptionFilter,
        failure: Exception,
        error: NormalizedError,
    ) -> None:
        extra = {
            "code": error.code,
            "status_code": error.status,
            "filter": exception_filter.name,
            "exception_type": type(failure).__name__,
        }
        if error.is_server_error:
            logger.error("Exception translated by filter", extra=extra, exc_info=failure)
        else:
            logger.warning("Exception translated by filter", extra=extra)


__all__ = ["FilterChain", "Renderer", "Resolution"]
