"""Filter for pydantic and request validation errors."""

from __future__ import annotations

from ..adapters.validation import VALIDATION_EXCEPTION_TYPES, describe_validation_error
from ..failures import SchemaValidationFailure
from ..normalized import NormalizedError
from ..rules.schema_validation import translate_schema_validation_failure
from .base import ExceptionFilter


class SchemaValidationFilter(ExceptionFilter[SchemaValidationFailure]):
    """Report every validation issue with its dotted field path."""

    catches = VALIDATION_EXCEPTION_TYPES

    def describe(self, failure: Exception) -> SchemaValidationFailure | None:
        return describe_validation_error(failure)

    def translate(self, variant: SchemaValidationFailure) -> NormalizedError:
        return translate_schema_validation_failure(variant)


__all__ = ["SchemaValidationFilter"]
