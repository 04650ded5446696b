"""Filter for exceptions that already carry an HTTP status and title."""

from __future__ import annotations

from ..adapters.http import HTTP_EXCEPTION_TYPES, describe_http_exception
from ..failures import TransportFailure
from ..normalized import NormalizedError
from ..rules.transport import translate_transport_failure
from .base import ExceptionFilter


class HttpExceptionFilter(ExceptionFilter[TransportFailure]):
    catches = HTTP_EXCEPTION_TYPES

    def describe(self, failure: Exception) -> TransportFailure | None:
        return describe_http_exception(failure)

    def translate(self, variant: TransportFailure) -> NormalizedError:
        return translate_transport_failure(variant)


__all__ = ["HttpExceptionFilter"]
