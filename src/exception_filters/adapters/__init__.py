"""Boundary adapters turning collaborator exceptions into tagged failure variants."""

from .database import DATA_ACCESS_EXCEPTION_TYPES, describe_sqlalchemy_error
from .http import HTTP_EXCEPTION_TYPES, describe_http_exception
from .validation import VALIDATION_EXCEPTION_TYPES, describe_validation_error

__all__ = [
    "DATA_ACCESS_EXCEPTION_TYPES",
    "HTTP_EXCEPTION_TYPES",
    "VALIDATION_EXCEPTION_TYPES",
    "describe_http_exception",
    "describe_sqlalchemy_error",
    "describe_validation_error",
]
