"""Error kinds raised by services and their HTTP translation."""

import enum
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorKind(str, enum.Enum):
    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNHANDLED = "unhandled"


STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 400,
    ErrorKind.UNHANDLED: 500,
}


class JoblyError(Exception):
    """Raised by services and dependencies; the kind selects the status code."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status(self) -> int:
        return STATUS_BY_KIND[self.kind]


def error_body(message, status: int) -> dict:
    return {"error": {"message": message, "status": status}}


async def jobly_error_handler(request: Request, exc: JoblyError) -> JSONResponse:
    return JSONResponse(status_code=exc.status, content=error_body(exc.message, exc.status))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report every violation, not just the first one."""
    messages = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{location}: {err.get('msg')}" if location else err.get("msg"))
    status = STATUS_BY_KIND[ErrorKind.VALIDATION]
    return JSONResponse(status_code=status, content=error_body(messages, status))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    status = STATUS_BY_KIND[ErrorKind.UNHANDLED]
    return JSONResponse(status_code=status, content=error_body("Internal Server Error", status))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(JoblyError, jobly_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
