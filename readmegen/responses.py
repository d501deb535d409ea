"""Map generation outcomes onto HTTP responses.

Success becomes ``200 {"readme": ...}``; every failure becomes
``{"error": ...}`` with a status chosen by error type. Errors are logged
with full detail here, before being reduced to a user-facing message.
"""
from __future__ import annotations

import logging

from fastapi.responses import JSONResponse

from readmegen.errors import (
    RepositoryNotFoundError,
    ServiceOverloadedError,
    ValidationError,
)
from readmegen.models import ErrorResponse, ReadmeResponse

LOG = logging.getLogger(__name__)

OVERLOADED_MESSAGE = "The AI model is temporarily overloaded. Please try again in a moment."
GENERIC_ERROR_PREFIX = "Failed to generate README. "


def status_for(exc: BaseException) -> int:
    if isinstance(exc, ValidationError):
        return 400
    if isinstance(exc, RepositoryNotFoundError):
        return 404
    if isinstance(exc, ServiceOverloadedError):
        return 503
    return 500


def error_message(exc: BaseException) -> str:
    """Return the user-facing message for *exc*."""
    if isinstance(exc, (ValidationError, RepositoryNotFoundError)):
        return str(exc)
    if isinstance(exc, ServiceOverloadedError):
        return OVERLOADED_MESSAGE
    return GENERIC_ERROR_PREFIX + str(exc)


def format_error(exc: BaseException) -> JSONResponse:
    status = status_for(exc)
    if status >= 500:
        LOG.error("README generation failed: %s", exc, exc_info=exc)
    else:
        LOG.warning("README generation rejected (%d): %s", status, exc)
    body = ErrorResponse(error=error_message(exc))
    return JSONResponse(status_code=status, content=body.model_dump())


def format_success(readme: str) -> JSONResponse:
    return JSONResponse(status_code=200, content=ReadmeResponse(readme=readme).model_dump())


__all__ = [
    "status_for",
    "error_message",
    "format_error",
    "format_success",
    "OVERLOADED_MESSAGE",
    "GENERIC_ERROR_PREFIX",
]
