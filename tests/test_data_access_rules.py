from __future__ import annotations

import pytest

from exception_filters.failures import DataAccessCategory, DataAccessFailure, DataAccessKind
from exception_filters.normalized import NormalizedError
from exception_filters.rules.data_access import (
    CATEGORY_TRANSLATIONS,
    translate_category,
    translate_data_access_failure,
)

TRANSLATION_TABLE = [
    (DataAccessCategory.UNIQUE_CONSTRAINT, 409, "DUPLICATE_ENTRY", "Resource already exists"),
    (DataAccessCategory.NOT_FOUND, 404, "NOT_FOUND", "Resource not found"),
    (DataAccessCategory.FOREIGN_KEY, 400, "FOREIGN_KEY_CONSTRAINT", "Invalid reference"),
    (DataAccessCategory.CONSTRAINT, 400, "CONSTRAINT_VIOLATION", "Database constraint violation"),
    (DataAccessCategory.REQUIRED_RELATION, 400, "RELATION_VIOLATION", "Required relation missing"),
    (DataAccessCategory.MISSING_TABLE, 500, "TABLE_NOT_FOUND", "Database schema error"),
    (DataAccessCategory.MISSING_COLUMN, 500, "COLUMN_NOT_FOUND", "Database schema error"),
    (DataAccessCategory.TRANSIENT_CONFLICT, 409, "TRANSACTION_CONFLICT", "Transaction failed, please retry"),
]


@pytest.mark.parametrize(("category", "status", "code", "title"), TRANSLATION_TABLE)
def test_categorized_failures_follow_translation_table(category: str, status: int, code: str, title: str) -> None:
    failure = DataAccessFailure(DataAccessKind.KNOWN_REQUEST, category)

    assert translate_data_access_failure(failure) == NormalizedError(status=status, title=title, code=code)


def test_translation_table_covers_every_category() -> None:
    assert set(CATEGORY_TRANSLATIONS) == {row[0] for row in TRANSLATION_TABLE}


def test_translation_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        CATEGORY_TRANSLATIONS["unique-constraint"] = None  # type: ignore[index]


@pytest.mark.parametrize("category", ["22001", "SQLITE_CONSTRAINT_TRIGGER", "P2011"])
def test_unmapped_category_surfaces_raw_code(category: str) -> None:
    error = translate_category(category)

    assert error == NormalizedError(status=500, title="Database operation failed", code=category)


@pytest.mark.parametrize(
    ("kind", "status", "code", "title"),
    [
        (DataAccessKind.VALIDATION, 400, "VALIDATION_ERROR", "Invalid data provided"),
        (DataAccessKind.INITIALIZATION, 500, "DATABASE_CONNECTION_ERROR", "Database connection failed"),
        (DataAccessKind.UNKNOWN_REQUEST, 500, "UNKNOWN_DATABASE_ERROR", "An unknown database error occurred"),
        (DataAccessKind.PANIC, 500, "PRISMA_PANIC_ERROR", "Internal server error. Please try again later."),
    ],
)
def test_uncategorized_kinds_use_fixed_templates(kind: DataAccessKind, status: int, code: str, title: str) -> None:
    error = translate_data_access_failure(DataAccessFailure(kind))

    assert (error.status, error.code, error.title) == (status, code, title)
    assert error.details is None


def test_categorized_failure_requires_category() -> None:
    with pytest.raises(ValueError):
        DataAccessFailure(DataAccessKind.KNOWN_REQUEST)


def test_translation_is_deterministic() -> None:
    first = translate_data_access_failure(DataAccessFailure(DataAccessKind.KNOWN_REQUEST, "40P01"))
    second = translate_data_access_failure(DataAccessFailure(DataAccessKind.KNOWN_REQUEST, "40P01"))

    assert first == second
