"""Translate data-access, validation and HTTP exceptions into one error envelope."""

__version__ = "0.1.0"

from .chain import FilterChain  # noqa: E402
from .exceptions import BadRequestError, ConflictError, HttpError, NotFoundError, ServerError  # noqa: E402
from .filters import (  # noqa: E402
    DataAccessExceptionFilter,
    ExceptionFilter,
    HttpExceptionFilter,
    SchemaValidationFilter,
    default_filters,
)
from .normalized import NormalizedError  # noqa: E402
from .registration import register_exception_filters  # noqa: E402
from .rendering import render_error  # noqa: E402

__all__ = [
    "BadRequestError",
    "ConflictError",
    "DataAccessExceptionFilter",
    "ExceptionFilter",
    "FilterChain",
    "HttpError",
    "HttpExceptionFilter",
    "NormalizedError",
    "NotFoundError",
    "SchemaValidationFilter",
    "ServerError",
    "__version__",
    "default_filters",
    "register_exception_filters",
    "render_error",
]
