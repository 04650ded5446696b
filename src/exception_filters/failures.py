"""Tagged failure variants produced at each collaborator's boundary.

Boundary adapters turn a raw exception into exactly one of these values (or
``None`` when the exception does not belong to their collaborator). Rule sets
match on the variant and its tag, never on the shape of the raw exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union


class DataAccessCategory:
    """Category codes understood by the data-access translation table."""

    UNIQUE_CONSTRAINT = "unique-constraint"
    NOT_FOUND = "not-found"
    FOREIGN_KEY = "foreign-key"
    CONSTRAINT = "constraint"
    REQUIRED_RELATION = "required-relation"
    MISSING_TABLE = "missing-table"
    MISSING_COLUMN = "missing-column"
    TRANSIENT_CONFLICT = "transient-conflict"


class DataAccessKind(str, Enum):
    """Sub-variants of a data-access failure, in classification order."""

    KNOWN_REQUEST = "known_request"
    VALIDATION = "validation"
    INITIALIZATION = "initialization"
    UNKNOWN_REQUEST = "unknown_request"
    PANIC = "panic"


WRONG_TYPE = "invalid_type"


@dataclass(frozen=True)
class TransportFailure:
    """An exception that already knows its HTTP status and title."""

    status: int
    title: str
    code: str
    details: Any | None = None
    headers: Mapping[str, str] | None = None


@dataclass(frozen=True)
class DataAccessFailure:
    """A failure raised by the data-access layer.

    ``category`` is only meaningful for ``DataAccessKind.KNOWN_REQUEST`` and is
    either one of the ``DataAccessCategory`` codes or a raw driver code.
    """

    kind: DataAccessKind
    category: str | None = None

    def __post_init__(self) -> None:
        if self.kind is DataAccessKind.KNOWN_REQUEST and not self.category:
            raise ValueError("Categorized data-access failures require a category code.")


@dataclass(frozen=True)
class ValidationIssue:
    """One field-level problem reported by the schema-validation layer."""

    path: tuple[str | int, ...]
    message: str
    code: str
    expected: str | None = None
    received: str | None = None


@dataclass(frozen=True)
class SchemaValidationFailure:
    """An ordered sequence of validation issues."""

    issues: tuple[ValidationIssue, ...]


FailureVariant = Union[TransportFailure, DataAccessFailure, SchemaValidationFailure]


__all__ = [
    "DataAccessCategory",
    "DataAccessFailure",
    "DataAccessKind",
    "FailureVariant",
    "SchemaValidationFailure",
    "TransportFailure",
    "ValidationIssue",
    "WRONG_TYPE",
]
