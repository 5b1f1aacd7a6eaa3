"""Maps domain errors to HTTP responses with a uniform envelope."""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from events.domain.errors import (
    ConflictError,
    DomainError,
    ForbiddenError,
    InvalidStateError,
    NotFoundError,
    TransactionError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (InvalidStateError, status.HTTP_409_CONFLICT),
    (ConflictError, status.HTTP_409_CONFLICT),
    (TransactionError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def error_body(code: str, message) -> dict:
    return {"error": {"code": code, "message": message}}


def domain_exception_handler(exc, context):
    """DRF exception handler that never exposes internal error details."""
    if isinstance(exc, DomainError):
        http_status = next(
            (code for kind, code in STATUS_BY_ERROR if isinstance(exc, kind)),
            status.HTTP_400_BAD_REQUEST,
        )
        if http_status >= 500:
            logger.error("Request failed: %s", exc.code.value)
        return Response(error_body(exc.code.value, exc.message), status=http_status)

    response = exception_handler(exc, context)
    if response is not None:
        code = getattr(exc, "default_code", "error")
        response.data = error_body(str(code).upper(), response.data)
    return response
