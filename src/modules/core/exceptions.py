"""Project-wide DRF exception handling.

Framework errors (authentication, permission, parsing, serializer
validation, 404 routing) are rendered by ``drf-standardized-errors``::

    {"type": "validation_error"|"client_error"|"server_error",
     "errors": [{"code": ..., "detail": ..., "attr": ...}]}

``ApiExceptionHandler`` adds pydantic errors to the known exceptions and
logs anything unexpected with its traceback before answering a generic 500.
"""

from __future__ import annotations

from typing import Any, Optional

import structlog
from drf_standardized_errors.handler import ExceptionHandler
from pydantic import ValidationError as PydanticValidationError
from rest_framework import exceptions
from rest_framework.response import Response

logger = structlog.get_logger(__name__)


class InternalServerError(exceptions.APIException):
    default_detail = "Internal server error."
    default_code = "error"


class ApiExceptionHandler(ExceptionHandler):
    def convert_known_exceptions(self, exc: Exception) -> Exception:
        if isinstance(exc, PydanticValidationError):
            return exceptions.ValidationError(
                {
                    ".".join(str(p) for p in err["loc"]) or "non_field_errors": [err["msg"]]
                    for err in exc.errors()
                }
            )
        return super().convert_known_exceptions(exc)

    def convert_unhandled_exceptions(self, exc: Exception) -> exceptions.APIException:
        # the original message stays in the log, never in the response
        if not isinstance(exc, exceptions.APIException):
            return InternalServerError()
        return exc

    def report_exception(self, exc: exceptions.APIException, response: Response) -> None:
        if response.status_code >= 500:
            view: Optional[Any] = self.context.get("view")
            logger.error(
                "api.unhandled_exception",
                view=view.__class__.__name__ if view else None,
                error=str(self.exc),
                exc_info=self.exc,
            )
