"""Exception filters and the default chain order."""

from __future__ import annotations

from .base import ExceptionFilter
from .data_access import DataAccessExceptionFilter
from .http import HttpExceptionFilter
from .validation import SchemaValidationFilter


def default_filters() -> list[ExceptionFilter]:
    """Return the standard filter order: transport, data-access, schema validation."""

    return [HttpExceptionFilter(), DataAccessExceptionFilter(), SchemaValidationFilter()]


__all__ = [
    "DataAccessExceptionFilter",
    "ExceptionFilter",
    "HttpExceptionFilter",
    "SchemaValidationFilter",
    "default_filters",
]
