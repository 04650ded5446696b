"""Boundary adapter for pydantic and FastAPI request validation errors."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from ..failures import WRONG_TYPE, SchemaValidationFailure, ValidationIssue

VALIDATION_EXCEPTION_TYPES: tuple[type[Exception], ...] = (ValidationError, RequestValidationError)

_TYPE_ERROR_SUFFIXES = ("_type", "_parsing")

_EXPECTED_TYPE_NAMES: dict[str, str] = {
    "int": "integer",
    "float": "number",
    "decimal": "number",
    "complex": "number",
    "str": "string",
    "string": "string",
    "bool": "boolean",
    "none": "null",
    "list": "array",
    "tuple": "array",
    "set": "array",
    "frozen_set": "array",
    "iterable": "array",
    "dict": "object",
    "model": "object",
    "model_attributes": "object",
    "dataclass": "object",
    "date": "date",
    "date_from_datetime": "date",
    "datetime": "datetime",
    "datetime_from_date": "datetime",
    "time": "time",
    "time_delta": "duration",
    "timedelta": "duration",
    "uuid": "uuid",
    "url": "url",
    "bytes": "bytes",
    "json": "json",
}


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple, set, frozenset)):
        return "array"
    return type(value).__name__


def _expected_type(error_type: str) -> str | None:
    for suffix in _TYPE_ERROR_SUFFIXES:
        if error_type.endswith(suffix):
            prefix = error_type[: -len(suffix)]
            return _EXPECTED_TYPE_NAMES.get(prefix, prefix)
    return None


def _issue_from_error(error: Mapping[str, Any]) -> ValidationIssue:
    path = tuple(error.get("loc", ()))
    message = str(error.get("msg", ""))
    error_type = str(error.get("type", "custom"))

    expected = _expected_type(error_type)
    if expected is None:
        return ValidationIssue(path=path, message=message, code=error_type)
    return ValidationIssue(
        path=path,
        message=message,
        code=WRONG_TYPE,
        expected=expected,
        received=_json_type_name(error.get("input")),
    )


def _raw_errors(exc: Exception) -> Sequence[Mapping[str, Any]] | None:
    if isinstance(exc, ValidationError):
        return exc.errors(include_url=False)
    if isinstance(exc, RequestValidationError):
        return list(exc.errors())
    return None


def describe_validation_error(exc: Exception) -> SchemaValidationFailure | None:
    """Describe a validation exception as an ordered sequence of issues."""

    errors = _raw_errors(exc)
    if errors is None:
        return None
    return SchemaValidationFailure(issues=tuple(_issue_from_error(error) for error in errors))


__all__ = ["VALIDATION_EXCEPTION_TYPES", "describe_validation_error"]
