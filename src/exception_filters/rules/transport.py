"""Pass-through rules for exceptions that already carry an HTTP status."""

from __future__ import annotations

from ..failures import TransportFailure
from ..normalized import NormalizedError


def translate_transport_failure(failure: TransportFailure) -> NormalizedError:
    return NormalizedError(
        status=failure.status,
        title=failure.title,
        code=failure.code,
        details=failure.details,
        headers=failure.headers,
    )


__all__ = ["translate_transport_failure"]
