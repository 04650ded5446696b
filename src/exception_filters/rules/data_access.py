"""Translation rules for data-access failures."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple

from ..failures import DataAccessCategory, DataAccessFailure, DataAccessKind
from ..normalized import NormalizedError


class ErrorTemplate(NamedTuple):
    status: int
    code: str
    title: str


UNMAPPED_CATEGORY_STATUS = 500
UNMAPPED_CATEGORY_TITLE = "Database operation failed"

CATEGORY_TRANSLATIONS: Mapping[str, ErrorTemplate] = MappingProxyType(
    {
        DataAccessCategory.UNIQUE_CONSTRAINT: ErrorTemplate(409, "DUPLICATE_ENTRY", "Resource already exists"),
        DataAccessCategory.NOT_FOUND: ErrorTemplate(404, "NOT_FOUND", "Resource not found"),
        DataAccessCategory.FOREIGN_KEY: ErrorTemplate(400, "FOREIGN_KEY_CONSTRAINT", "Invalid reference"),
        DataAccessCategory.CONSTRAINT: ErrorTemplate(400, "CONSTRAINT_VIOLATION", "Database constraint violation"),
        DataAccessCategory.REQUIRED_RELATION: ErrorTemplate(400, "RELATION_VIOLATION", "Required relation missing"),
        DataAccessCategory.MISSING_TABLE: ErrorTemplate(500, "TABLE_NOT_FOUND", "Database schema error"),
        DataAccessCategory.MISSING_COLUMN: ErrorTemplate(500, "COLUMN_NOT_FOUND", "Database schema error"),
        DataAccessCategory.TRANSIENT_CONFLICT: ErrorTemplate(
            409, "TRANSACTION_CONFLICT", "Transaction failed, please retry"
        ),
    }
)

# Terminal templates for the uncategorized sub-variants, in classification order.
KIND_TRANSLATIONS: Mapping[DataAccessKind, ErrorTemplate] = MappingProxyType(
    {
        DataAccessKind.VALIDATION: ErrorTemplate(400, "VALIDATION_ERROR", "Invalid data provided"),
        DataAccessKind.INITIALIZATION: ErrorTemplate(500, "DATABASE_CONNECTION_ERROR", "Database connection failed"),
        DataAccessKind.UNKNOWN_REQUEST: ErrorTemplate(
            500, "UNKNOWN_DATABASE_ERROR", "An unknown database error occurred"
        ),
        DataAccessKind.PANIC: ErrorTemplate(
            500, "PRISMA_PANIC_ERROR", "Internal server error. Please try again later."
        ),
    }
)


def _from_template(template: ErrorTemplate) -> NormalizedError:
    return NormalizedError(status=template.status, title=template.title, code=template.code)


def translate_category(category: str) -> NormalizedError:
    """Translate a category code; unmapped codes surface as a 500 with the raw code."""

    template = CATEGORY_TRANSLATIONS.get(category)
    if template is None:
        return NormalizedError(
            status=UNMAPPED_CATEGORY_STATUS,
            title=UNMAPPED_CATEGORY_TITLE,
            code=category,
        )
    return _from_template(template)


def translate_data_access_failure(failure: DataAccessFailure) -> NormalizedError:
    """Map a tagged data-access failure to its normalized error."""

    if failure.kind is DataAccessKind.KNOWN_REQUEST:
        return translate_category(str(failure.category))
    return _from_template(KIND_TRANSLATIONS[failure.kind])


__all__ = [
    "CATEGORY_TRANSLATIONS",
    "ErrorTemplate",
    "KIND_TRANSLATIONS",
    "translate_category",
    "translate_data_access_failure",
]
