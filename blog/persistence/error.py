"""Persistence layer errors and storage failure classification.

All knowledge of storage-engine failure codes lives here. Repositories hand
a caught exception to ``classify_failure`` together with the error-kind enum
of the operation that failed, and get back one member of that enum.

Failure codes are PostgreSQL SQLSTATE strings. Other engines are mapped onto
them by ``error_code`` so the lookup tables stay engine-independent.
"""

from enum import Enum
from typing import Any, Mapping, Optional, TypeVar

import logfire
from sqlalchemy.exc import SQLAlchemyError

from blog.domain.error import (
    CreateCategoryError,
    CreatePostError,
    CreateTagError,
    DeleteCategoryError,
    DeletePostError,
    DeleteTagError,
    GetCategoryError,
    GetPostError,
    GetTagError,
    UpdatePostError,
)

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
INVALID_TEXT_REPRESENTATION = "22P02"

# SQLite extended result names (sqlite3.Error.sqlite_errorname)
_SQLITE_CODES = {
    "SQLITE_CONSTRAINT_UNIQUE": UNIQUE_VIOLATION,
    "SQLITE_CONSTRAINT_PRIMARYKEY": UNIQUE_VIOLATION,
    "SQLITE_CONSTRAINT_FOREIGNKEY": FOREIGN_KEY_VIOLATION,
}


class PersistenceError(Exception):
    """Base persistence error."""

    pass


class InvalidIdentifierError(PersistenceError):
    """An identifier the store would reject as malformed input."""

    sqlstate = INVALID_TEXT_REPRESENTATION

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid identifier: {value!r}")


# Exceptions a repository catches at its boundary. OSError covers driver
# connection failures and timeouts that are not wrapped by SQLAlchemy.
STORAGE_ERRORS: tuple[type[BaseException], ...] = (
    SQLAlchemyError,
    PersistenceError,
    OSError,
)

E = TypeVar("E", bound=Enum)

# error kind -> (failure code -> kind, fallback kind)
_CLASSIFICATION: dict[type[Enum], tuple[Mapping[str, Enum], Enum]] = {
    GetPostError: (
        {INVALID_TEXT_REPRESENTATION: GetPostError.POST_NOT_FOUND},
        GetPostError.CANNOT_GET_POST,
    ),
    CreatePostError: (
        {
            UNIQUE_VIOLATION: CreatePostError.DUPLICATE_POST_TITLE,
            FOREIGN_KEY_VIOLATION: CreatePostError.CATEGORY_NOT_FOUND,
            INVALID_TEXT_REPRESENTATION: CreatePostError.CATEGORY_NOT_FOUND,
        },
        CreatePostError.CANNOT_CREATE_POST,
    ),
    UpdatePostError: (
        {
            UNIQUE_VIOLATION: UpdatePostError.DUPLICATE_POST_TITLE,
            FOREIGN_KEY_VIOLATION: UpdatePostError.CATEGORY_NOT_FOUND,
            INVALID_TEXT_REPRESENTATION: UpdatePostError.CATEGORY_NOT_FOUND,
        },
        UpdatePostError.CANNOT_UPDATE_POST,
    ),
    DeletePostError: (
        {INVALID_TEXT_REPRESENTATION: DeletePostError.POST_NOT_FOUND},
        DeletePostError.CANNOT_DELETE_POST,
    ),
    GetCategoryError: (
        {INVALID_TEXT_REPRESENTATION: GetCategoryError.CATEGORY_NOT_FOUND},
        GetCategoryError.CANNOT_GET_CATEGORY,
    ),
    CreateCategoryError: (
        {UNIQUE_VIOLATION: CreateCategoryError.DUPLICATE_CATEGORY_NAME},
        CreateCategoryError.CANNOT_CREATE_CATEGORY,
    ),
    DeleteCategoryError: (
        {INVALID_TEXT_REPRESENTATION: DeleteCategoryError.CATEGORY_NOT_FOUND},
        DeleteCategoryError.CANNOT_DELETE_CATEGORY,
    ),
    GetTagError: (
        {INVALID_TEXT_REPRESENTATION: GetTagError.TAG_NOT_FOUND},
        GetTagError.CANNOT_GET_TAG,
    ),
    CreateTagError: (
        {UNIQUE_VIOLATION: CreateTagError.DUPLICATE_TAG_NAME},
        CreateTagError.CANNOT_CREATE_TAG,
    ),
    DeleteTagError: (
        {INVALID_TEXT_REPRESENTATION: DeleteTagError.TAG_NOT_FOUND},
        DeleteTagError.CANNOT_DELETE_TAG,
    ),
}


def error_code(error: BaseException) -> Optional[str]:
    """Extract the storage failure code from an exception.

    Walks the exception, the DBAPI error SQLAlchemy wraps (``.orig``) and
    the cause/context chain, and returns the first code found:
    ``sqlstate`` (asyncpg), ``pgcode`` (psycopg) or a SQLite extended error
    name translated to its SQLSTATE equivalent.

    Args:
        error: Exception raised while talking to the store

    Returns:
        SQLSTATE-style code, or None if the exception carries none
    """
    pending: list[BaseException] = [error]
    seen: set[int] = set()

    while pending:
        current = pending.pop(0)
        if id(current) in seen:
            continue
        seen.add(id(current))

        code = getattr(current, "sqlstate", None) or getattr(current, "pgcode", None)
        if isinstance(code, str) and code:
            return code

        sqlite_name = getattr(current, "sqlite_errorname", None)
        if sqlite_name in _SQLITE_CODES:
            return _SQLITE_CODES[sqlite_name]

        for linked in (
            getattr(current, "orig", None),
            current.__cause__,
            current.__context__,
        ):
            if isinstance(linked, BaseException):
                pending.append(linked)

    return None


def classify(kind: type[E], code: Optional[str]) -> E:
    """Map a failure code to a member of an operation's error kind.

    Args:
        kind: Error kind enum of the failed operation
        code: Failure code from ``error_code`` (None when unknown)

    Returns:
        Matching error kind, or the operation's generic failure kind
    """
    mapping, fallback = _CLASSIFICATION[kind]
    if code is None:
        return fallback  # type: ignore[return-value]
    return mapping.get(code, fallback)  # type: ignore[return-value]


def classify_failure(operation: str, kind: type[E], error: BaseException) -> E:
    """Classify a caught storage exception and log it.

    Args:
        operation: Name of the failed operation (e.g. "post_repository.create")
        kind: Error kind enum of the failed operation
        error: The caught exception

    Returns:
        Error kind to report to the caller
    """
    code = error_code(error)
    result = classify(kind, code)
    _, fallback = _CLASSIFICATION[kind]

    log = logfire.error if result is fallback else logfire.warn
    log(
        "Storage operation failed",
        operation=operation,
        error_kind=result.value,
        code=code,
        error=str(error),
        error_type=type(error).__name__,
    )
    return result
