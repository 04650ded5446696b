from __future__ import annotations

from exception_filters.failures import SchemaValidationFailure, ValidationIssue
from exception_filters.rules.schema_validation import field_name, translate_schema_validation_failure


def test_issue_projection_joins_path_with_dots() -> None:
    failure = SchemaValidationFailure(
        issues=(ValidationIssue(path=("user", "email"), message="Invalid email", code="invalid_string"),)
    )

    error = translate_schema_validation_failure(failure)

    assert error.status == 400
    assert error.code == "VALIDATION_ERROR"
    assert error.title == "Validation failed"
    assert error.details == {
        "errors": [{"field": "user.email", "message": "Invalid email", "code": "invalid_string"}]
    }


def test_wrong_type_issue_includes_expected_and_received() -> None:
    failure = SchemaValidationFailure(
        issues=(
            ValidationIssue(
                path=("age",),
                message="Expected number, received string",
                code="invalid_type",
                expected="number",
                received="string",
            ),
        )
    )

    [entry] = translate_schema_validation_failure(failure).details["errors"]

    assert entry == {
        "field": "age",
        "message": "Expected number, received string",
        "code": "invalid_type",
        "expected": "number",
        "received": "string",
    }


def test_other_issue_kinds_omit_type_descriptors() -> None:
    issue = ValidationIssue(path=("name",), message="Too short", code="too_small", expected="x", received="y")

    [entry] = translate_schema_validation_failure(SchemaValidationFailure(issues=(issue,))).details["errors"]

    assert "expected" not in entry
    assert "received" not in entry


def test_empty_path_yields_empty_field() -> None:
    issue = ValidationIssue(path=(), message="Passwords do not match", code="custom")

    [entry] = translate_schema_validation_failure(SchemaValidationFailure(issues=(issue,))).details["errors"]

    assert entry["field"] == ""


def test_integer_segments_are_rendered() -> None:
    assert field_name(("items", 2, "sku")) == "items.2.sku"


def test_issue_order_is_preserved() -> None:
    issues = tuple(ValidationIssue(path=(name,), message="Required", code="missing") for name in ("b", "a", "c"))

    entries = translate_schema_validation_failure(SchemaValidationFailure(issues=issues)).details["errors"]

    assert [entry["field"] for entry in entries] == ["b", "a", "c"]
