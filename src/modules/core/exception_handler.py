"""DRF exception handler producing the standard error body.

Every handled error is rendered as::

    {
        "status": 404,
        "error": "Not Found",
        "message": "Product not found with id: 99",
        "path": "/productById/99",
        "timestamp": "2025-06-15T12:00:00+00:00"
    }

Domain ``NotFound`` errors become 404s, Pydantic validation errors raised
while building DTOs become 400s, and DRF ``APIException`` subclasses keep
their own status code.  Anything else is left to Django (HTTP 500).
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Dict, Optional

import structlog
from django.utils import timezone
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from modules.core.exceptions import NotFound

logger = structlog.get_logger(__name__)


def build_error_body(status_code: int, message: str, path: str) -> Dict[str, Any]:
    """Build the JSON error payload for ``status_code``."""
    return {
        "status": status_code,
        "error": HTTPStatus(status_code).phrase,
        "message": message,
        "path": path,
        "timestamp": timezone.now().isoformat(),
    }


def _request_path(context: Dict[str, Any]) -> str:
    request = context.get("request")
    if request is None:
        return ""
    return request.path


def _api_exception_message(detail: Any) -> str:
    if isinstance(detail, dict):
        return "; ".join(
            f"{field}: {_api_exception_message(value)}"
            for field, value in detail.items()
        )
    if isinstance(detail, list):
        return "; ".join(_api_exception_message(item) for item in detail)
    return str(detail)


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """Translate ``exc`` into a structured error response.

    Returns ``None`` for unexpected exceptions so they surface as 500s.
    """
    path = _request_path(context)

    if isinstance(exc, NotFound):
        logger.info("api.not_found", path=path, message=exc.message)
        return Response(
            build_error_body(status.HTTP_404_NOT_FOUND, exc.message, path),
            status=status.HTTP_404_NOT_FOUND,
        )

    if isinstance(exc, PydanticValidationError):
        message = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or 'body'}: {err['msg']}"
            for err in exc.errors()
        )
        logger.info("api.invalid_payload", path=path, message=message)
        return Response(
            build_error_body(status.HTTP_400_BAD_REQUEST, message, path),
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = exception_handler(exc, context)
    if response is None:
        logger.error("api.unhandled_exception", path=path, exc_info=exc)
        return None

    response.data = build_error_body(
        response.status_code,
        _api_exception_message(getattr(exc, "detail", exc)),
        path,
    )
    return response
