"""
API error types and the project-wide DRF exception handler.

Every error leaves the API as ``{"message": "..."}``. Validation errors also
carry the per-field ``errors`` mapping so form clients can highlight fields.
"""
import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback
from rest_framework_simplejwt.exceptions import InvalidToken

logger = logging.getLogger(__name__)


class OwnershipError(exceptions.PermissionDenied):
    default_detail = "You are not authorized to modify this resource."
    default_code = "not_owner"


class InternalError(exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"
    default_code = "internal_error"


def _first_message(detail):
    # field names stay in ``errors``; the message is shown to users as is
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return ""
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ""
    return str(detail)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.exception("Unhandled error in %s", view.__class__.__name__ if view else "view")
        set_rollback()
        return Response(
            {"message": InternalError.default_detail},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        errors = response.data if isinstance(response.data, dict) else {"non_field_errors": response.data}
        response.data = {"message": _first_message(errors), "errors": errors}
    elif isinstance(exc, exceptions.NotAuthenticated):
        response.data = {"message": "Authorization token missing"}
    elif isinstance(exc, InvalidToken):
        response.data = {"message": "Invalid or expired token"}
    else:
        response.data = {"message": _first_message(response.data)}
    return response
