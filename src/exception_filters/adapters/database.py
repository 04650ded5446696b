"""Boundary adapter for SQLAlchemy exceptions.

SQLAlchemy wraps every driver error in a ``DBAPIError`` subclass and keeps the
driver exception on ``.orig``. Drivers disagree on how they expose the failure
reason, so the category is resolved from whichever of these is available:

* a SQLSTATE (``pgcode``/``sqlstate`` on psycopg and asyncpg errors),
* a MySQL error number (first positional argument),
* a SQLite extended error name (``sqlite_errorname``) or the error message.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import exc as sa_exc
from sqlalchemy.orm.exc import StaleDataError

from ..failures import DataAccessCategory, DataAccessFailure, DataAccessKind

DATA_ACCESS_EXCEPTION_TYPES: tuple[type[Exception], ...] = (sa_exc.SQLAlchemyError,)

_DRIVER_CODE_CATEGORIES: dict[str, str] = {
    # PostgreSQL SQLSTATE
    "23505": DataAccessCategory.UNIQUE_CONSTRAINT,
    "23503": DataAccessCategory.FOREIGN_KEY,
    "23001": DataAccessCategory.REQUIRED_RELATION,
    "23502": DataAccessCategory.CONSTRAINT,
    "23514": DataAccessCategory.CONSTRAINT,
    "23P01": DataAccessCategory.CONSTRAINT,
    "42P01": DataAccessCategory.MISSING_TABLE,
    "42703": DataAccessCategory.MISSING_COLUMN,
    "40001": DataAccessCategory.TRANSIENT_CONFLICT,
    "40P01": DataAccessCategory.TRANSIENT_CONFLICT,
    # MySQL / MariaDB error numbers
    "1062": DataAccessCategory.UNIQUE_CONSTRAINT,
    "1452": DataAccessCategory.FOREIGN_KEY,
    "1451": DataAccessCategory.REQUIRED_RELATION,
    "1048": DataAccessCategory.CONSTRAINT,
    "3819": DataAccessCategory.CONSTRAINT,
    "1146": DataAccessCategory.MISSING_TABLE,
    "1054": DataAccessCategory.MISSING_COLUMN,
    "1205": DataAccessCategory.TRANSIENT_CONFLICT,
    "1213": DataAccessCategory.TRANSIENT_CONFLICT,
    # SQLite extended result codes
    "SQLITE_CONSTRAINT_UNIQUE": DataAccessCategory.UNIQUE_CONSTRAINT,
    "SQLITE_CONSTRAINT_PRIMARYKEY": DataAccessCategory.UNIQUE_CONSTRAINT,
    "SQLITE_CONSTRAINT_FOREIGNKEY": DataAccessCategory.FOREIGN_KEY,
    "SQLITE_CONSTRAINT_NOTNULL": DataAccessCategory.CONSTRAINT,
    "SQLITE_CONSTRAINT_CHECK": DataAccessCategory.CONSTRAINT,
    "SQLITE_BUSY": DataAccessCategory.TRANSIENT_CONFLICT,
    "SQLITE_BUSY_SNAPSHOT": DataAccessCategory.TRANSIENT_CONFLICT,
    "SQLITE_LOCKED": DataAccessCategory.TRANSIENT_CONFLICT,
}

# Checked in order against the lower-cased driver message.
_MESSAGE_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("unique constraint failed", DataAccessCategory.UNIQUE_CONSTRAINT),
    ("primary key constraint failed", DataAccessCategory.UNIQUE_CONSTRAINT),
    ("foreign key constraint failed", DataAccessCategory.FOREIGN_KEY),
    ("not null constraint failed", DataAccessCategory.CONSTRAINT),
    ("check constraint failed", DataAccessCategory.CONSTRAINT),
    ("no such table", DataAccessCategory.MISSING_TABLE),
    ("no such column", DataAccessCategory.MISSING_COLUMN),
    ("has no column named", DataAccessCategory.MISSING_COLUMN),
    ("database is locked", DataAccessCategory.TRANSIENT_CONFLICT),
)

_CONNECTION_ERROR_TYPES: tuple[type[Exception], ...] = (
    sa_exc.DisconnectionError,
    sa_exc.TimeoutError,
    sa_exc.NoSuchModuleError,
    sa_exc.InterfaceError,
)
_CONNECTION_CODES = frozenset(
    {"53300", "57P01", "57P02", "57P03", "1040", "1045", "2002", "2003", "2006", "2013", "SQLITE_CANTOPEN"}
)
_CONNECTION_MESSAGES = (
    "unable to open database file",
    "could not connect to server",
    "connection refused",
)

_PANIC_MESSAGES = ("database disk image is malformed",)

_SHAPE_ERROR_TYPES: tuple[type[Exception], ...] = (
    sa_exc.DataError,
    sa_exc.ArgumentError,
    sa_exc.CompileError,
)


def _driver_code(orig: Any) -> str | None:
    for attribute in ("pgcode", "sqlstate", "sqlite_errorname"):
        value = getattr(orig, attribute, None)
        if isinstance(value, str) and value:
            return value
    diag_sqlstate = getattr(getattr(orig, "diag", None), "sqlstate", None)
    if isinstance(diag_sqlstate, str) and diag_sqlstate:
        return diag_sqlstate
    args = getattr(orig, "args", ())
    if args and isinstance(args[0], int) and not isinstance(args[0], bool):
        return str(args[0])
    return None


def _driver_message(exc: sa_exc.DBAPIError) -> str:
    return str(exc.orig if exc.orig is not None else exc).lower()


def _is_connection_failure(exc: Exception, code: str | None, message: str) -> bool:
    if isinstance(exc, _CONNECTION_ERROR_TYPES):
        return True
    if not isinstance(exc, sa_exc.DBAPIError):
        return False
    if exc.connection_invalidated:
        return True
    if code is not None:
        return code.startswith("08") or code in _CONNECTION_CODES
    return any(fragment in message for fragment in _CONNECTION_MESSAGES)


def _is_native_crash(exc: Exception, code: str | None, message: str) -> bool:
    if isinstance(exc, sa_exc.InternalError):
        return True
    if code is not None:
        return code.startswith("XX") or code.startswith("SQLITE_CORRUPT")
    return any(fragment in message for fragment in _PANIC_MESSAGES)


def _message_category(code: str | None, message: str) -> str | None:
    # Only SQLite reports some categories through message text alone.
    if code is not None and not code.startswith("SQLITE_"):
        return None
    for fragment, category in _MESSAGE_CATEGORIES:
        if fragment in message:
            return category
    return None


def describe_sqlalchemy_error(exc: Exception) -> DataAccessFailure | None:
    """Describe a SQLAlchemy exception as a tagged data-access failure.

    A driver code that maps to a category always wins. Message text is only
    consulted when the driver reports no code, or a SQLite result name.
    Returns ``None`` for anything that is not a ``SQLAlchemyError``.
    """

    if not isinstance(exc, sa_exc.SQLAlchemyError):
        return None

    if isinstance(exc, sa_exc.NoResultFound):
        return DataAccessFailure(DataAccessKind.KNOWN_REQUEST, DataAccessCategory.NOT_FOUND)
    if isinstance(exc, StaleDataError):
        return DataAccessFailure(DataAccessKind.KNOWN_REQUEST, DataAccessCategory.TRANSIENT_CONFLICT)

    if isinstance(exc, sa_exc.DBAPIError):
        code = _driver_code(exc.orig)
        message = _driver_message(exc)
        if code in _DRIVER_CODE_CATEGORIES:
            return DataAccessFailure(DataAccessKind.KNOWN_REQUEST, _DRIVER_CODE_CATEGORIES[code])
    else:
        code = None
        message = str(exc).lower()

    if _is_connection_failure(exc, code, message):
        return DataAccessFailure(DataAccessKind.INITIALIZATION)
    if _is_native_crash(exc, code, message):
        return DataAccessFailure(DataAccessKind.PANIC)

    if isinstance(exc, sa_exc.DBAPIError):
        category = _message_category(code, message)
        if category is not None:
            return DataAccessFailure(DataAccessKind.KNOWN_REQUEST, category)

    if isinstance(exc, _SHAPE_ERROR_TYPES):
        return DataAccessFailure(DataAccessKind.VALIDATION)
    if isinstance(exc, sa_exc.StatementError) and not isinstance(exc, sa_exc.DBAPIError):
        return DataAccessFailure(DataAccessKind.VALIDATION)

    if isinstance(exc, sa_exc.DBAPIError) and code is not None:
        return DataAccessFailure(DataAccessKind.KNOWN_REQUEST, code)

    return DataAccessFailure(DataAccessKind.UNKNOWN_REQUEST)


__all__ = ["DATA_ACCESS_EXCEPTION_TYPES", "describe_sqlalchemy_error"]
