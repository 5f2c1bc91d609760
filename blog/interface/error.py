"""Interface layer errors.

Translates domain error kinds into problem documents of the form
``{"title", "detail", "status"}``.
"""

from enum import Enum

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from blog.domain.error import OperationError
from blog.persistence.error import PersistenceError


def status_for(code: Enum) -> int:
    """HTTP status for an error kind.

    Not-found kinds map to 404, duplicates to 409, failed writes to 422 and
    every other generic failure to 500.
    """
    value = str(code.value)
    if value.endswith("_not_found"):
        return status.HTTP_404_NOT_FOUND
    if value.startswith("duplicate_"):
        return status.HTTP_409_CONFLICT
    if value.startswith(("cannot_create_", "cannot_update_")):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def title_for(code: Enum) -> str:
    """Human-readable title for an error kind, e.g. "Post not found"."""
    return str(code.value).replace("_", " ").capitalize()


def problem(title: str, detail: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"title": title, "detail": detail, "status": status_code},
    )


async def operation_error_handler(request: Request, exc: OperationError) -> JSONResponse:
    status_code = status_for(exc.code)
    log = logfire.error if status_code >= 500 else logfire.warn
    log(
        "Operation failed",
        path=request.url.path,
        error_kind=exc.code.value,
        status=status_code,
    )
    return problem(title_for(exc.code), exc.detail, status_code)


async def persistence_error_handler(
    request: Request, exc: PersistenceError
) -> JSONResponse:
    logfire.error("Storage failure", path=request.url.path, error=str(exc))
    return problem(
        "Storage failure",
        str(exc),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the problem-document handlers on an application."""
    app.add_exception_handler(OperationError, operation_error_handler)
    app.add_exception_handler(PersistenceError, persistence_error_handler)
