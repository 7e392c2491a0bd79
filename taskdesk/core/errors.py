"""Error taxonomy and the HTTP handlers that translate it."""

import logging
from typing import Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class TaskdeskError(Exception):
    """Base class for errors raised by the task services."""


class ValidationError(TaskdeskError):
    """A field failed validation. Never retried, reported as HTTP 400."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message

    @property
    def errors(self) -> Dict[str, List[str]]:
        return {self.field: [self.message]}


class RequiredFieldError(ValidationError):
    pass


class LengthExceededError(ValidationError):
    pass


class NotFoundError(TaskdeskError):
    def __init__(self, resource: str, key):
        super().__init__(f"{resource} not found")
        self.resource = resource
        self.key = key


class StoreError(TaskdeskError):
    """The underlying storage failed (I/O, connection, constraint)."""


def validation_response(errors: Dict[str, List[str]]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed", "errors": errors},
    )


def _field_name(loc) -> str:
    # drop the "body"/"query"/"path" prefix FastAPI puts in front of the field
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in ("body", "query", "path"):
        parts = parts[1:]
    return ".".join(parts)


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.info(f"Validation failed on {request.method} {request.url.path}: {exc.errors}")
        return validation_response(exc.errors)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Malformed bodies and query strings get the same 400 shape as title errors."""
        errors: Dict[str, List[str]] = {}
        for error in exc.errors():
            errors.setdefault(_field_name(error["loc"]), []).append(error["msg"])
        logger.info(f"Malformed request on {request.method} {request.url.path}: {errors}")
        return validation_response(errors)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": str(exc)},
        )

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError):
        logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Storage failure"},
        )
