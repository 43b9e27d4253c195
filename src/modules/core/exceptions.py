"""Standardized API error responses.

Every error leaving the API has the same shape::

    {
        "type": "validation_error" | "client_error" | "server_error",
        "errors": [{"code": "...", "detail": "...", "attr": "field" | null}]
    }

Formatting is done by ``drf-standardized-errors``; ``LoggingExceptionHandler``
is plugged in through ``DRF_STANDARDIZED_ERRORS`` to log each error response.
Views translate domain failures by raising ``ServiceError``.
"""

from __future__ import annotations

from typing import Optional

import structlog
from drf_standardized_errors.handler import ExceptionHandler
from rest_framework.exceptions import APIException
from rest_framework.response import Response

logger = structlog.get_logger(__name__)


class ServiceError(APIException):
    """A domain failure reported with its own code and HTTP status."""

    def __init__(self, detail: str, code: str, http_status: int) -> None:
        super().__init__(detail=detail, code=code)
        self.status_code = http_status


class LoggingExceptionHandler(ExceptionHandler):
    def report_exception(self, exc: Exception, response: Response) -> None:
        errors = response.data.get("errors") or [{}]
        code: Optional[str] = errors[0].get("code")
        logger.info(
            "api.error_response",
            status_code=response.status_code,
            error_type=response.data.get("type"),
            code=code,
        )
        # Domain failures are already logged by the service that produced them.
        if not isinstance(exc, ServiceError):
            super().report_exception(exc, response)
