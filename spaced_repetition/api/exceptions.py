import structlog
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from ..errors import SchedulerError

logger = structlog.get_logger()


def _error_body(code, message, retryable, **extra):
    return {"error": {"code": code, "message": message, "retryable": retryable, **extra}}


def scheduler_exception_handler(exc, context):
    """Render scheduler errors and request validation errors as one error envelope."""
    if isinstance(exc, SchedulerError):
        log = logger.warning if exc.status_code < 500 else logger.error
        log("scheduler_error",
            code=exc.code,
            message=exc.message,
            status=exc.status_code,
            path=context["request"].path if context.get("request") else None,
        )
        return Response(
            _error_body(exc.code, exc.message, exc.retryable),
            status=exc.status_code,
        )

    response = exception_handler(exc, context)
    if response is not None and isinstance(exc, ValidationError):
        response.data = _error_body(
            "invalid_argument", "Invalid request", False, fields=exc.detail
        )
        response.status_code = status.HTTP_400_BAD_REQUEST
    return response
