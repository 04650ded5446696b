"""Filter for failures raised by the SQLAlchemy data-access layer."""

from __future__ import annotations

from ..adapters.database import DATA_ACCESS_EXCEPTION_TYPES, describe_sqlalchemy_error
from ..failures import DataAccessFailure
from ..normalized import NormalizedError
from ..rules.data_access import translate_data_access_failure
from .base import ExceptionFilter


class DataAccessExceptionFilter(ExceptionFilter[DataAccessFailure]):
    """Translate SQLAlchemy errors into structured HTTP errors.

    Known driver failures (unique and foreign-key violations, missing rows,
    missing tables or columns, serialization conflicts) map to specific codes;
    connection problems, malformed statements and native crashes each get a
    fixed 4xx/5xx template. Driver codes without a mapping are surfaced as-is
    with a 500 status.
    """

    catches = DATA_ACCESS_EXCEPTION_TYPES

    def describe(self, failure: Exception) -> DataAccessFailure | None:
        return describe_sqlalchemy_error(failure)

    def translate(self, variant: DataAccessFailure) -> NormalizedError:
        return translate_data_access_failure(variant)


__all__ = ["DataAccessExceptionFilter"]
