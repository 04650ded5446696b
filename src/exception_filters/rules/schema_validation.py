"""Projection rules for schema-validation failures."""

from __future__ import annotations

from typing import Any

from ..failures import WRONG_TYPE, SchemaValidationFailure, ValidationIssue
from ..normalized import NormalizedError

VALIDATION_STATUS = 400
VALIDATION_CODE = "VALIDATION_ERROR"
VALIDATION_TITLE = "Validation failed"


def field_name(path: tuple[str | int, ...]) -> str:
    """Join path segments with dots; an empty path names no field."""

    return ".".join(str(segment) for segment in path)


def project_issue(issue: ValidationIssue) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "field": field_name(issue.path),
        "message": issue.message,
        "code": issue.code,
    }
    if issue.code == WRONG_TYPE:
        entry["expected"] = issue.expected
        entry["received"] = issue.received
    return entry


def translate_schema_validation_failure(failure: SchemaValidationFailure) -> NormalizedError:
    return NormalizedError(
        status=VALIDATION_STATUS,
        title=VALIDATION_TITLE,
        code=VALIDATION_CODE,
        details={"errors": [project_issue(issue) for issue in failure.issues]},
    )


__all__ = [
    "field_name",
    "project_issue",
    "translate_schema_validation_failure",
]
