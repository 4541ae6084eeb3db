"""
Error boundary of the ESP integrations API.

Every error response has the shape ``{"success": false, "message": ...}``.
Unexpected errors are logged and answered with a generic message so nothing
internal reaches the caller.
"""

import logging

from django.http import JsonResponse
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from espconnect.exceptions import IntegrationError

logger = logging.getLogger(__name__)

SERVER_ERROR_BODY = {"success": False, "message": "Something went wrong!"}
NOT_FOUND_BODY = {"success": False, "message": "Route not found"}


def _error_message(detail) -> str:
    """Return the first message of a DRF error detail."""
    if isinstance(detail, dict):
        if "detail" in detail:
            return _error_message(detail["detail"])
        if not detail:
            return ""
        field, errors = next(iter(detail.items()))
        message = _error_message(errors)
        return message if field == "non_field_errors" else f"{field}: {message}"
    if isinstance(detail, list):
        return _error_message(detail[0]) if detail else ""
    return str(detail)


def api_exception_handler(exc, context):
    """Convert any exception raised by an API view to a JSON error response."""
    if isinstance(exc, IntegrationError):
        set_rollback()
        return Response({"success": False, "message": exc.message, **exc.extra}, status=exc.status_code)

    response = exception_handler(exc, context)
    if response is not None:
        response.data = {"success": False, "message": _error_message(response.data)}
        return response

    view = context.get("view")
    logger.error("Unhandled error in %s", view.__class__.__name__ if view else "API view", exc_info=exc)
    set_rollback()
    return Response(SERVER_ERROR_BODY, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


def route_not_found(request, exception=None):
    """Answer requests matching no route."""
    return JsonResponse(NOT_FOUND_BODY, status=status.HTTP_404_NOT_FOUND)


def server_error(request):
    """Answer requests that failed outside of the API views."""
    return JsonResponse(SERVER_ERROR_BODY, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
