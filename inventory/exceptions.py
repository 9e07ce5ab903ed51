"""Error types for the inventory app and the REST API exception handler."""

from __future__ import annotations

import enum

from django.core.exceptions import ImproperlyConfigured
from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler


class ConfigurationError(ImproperlyConfigured):
    """A required store setting is missing or inconsistent."""


class GatewayErrorKind(enum.Enum):
    NETWORK = "network"
    AUTHORIZATION = "authorization"
    CONSTRAINT = "constraint"
    REQUEST = "request"


class GatewayError(Exception):
    """A request to the remote store failed."""

    def __init__(self, message: str, kind: GatewayErrorKind = GatewayErrorKind.REQUEST, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.code = code

    def __str__(self) -> str:
        return self.message


class NotFoundError(LookupError):
    """No row matched the requested identifier."""


_GATEWAY_STATUS = {
    GatewayErrorKind.NETWORK: 503,
    GatewayErrorKind.AUTHORIZATION: 502,
    GatewayErrorKind.CONSTRAINT: 409,
    GatewayErrorKind.REQUEST: 502,
}


def custom_exception_handler(exc, context):
    """Translate app errors into REST framework responses.

    Django ``ValidationError`` becomes a 400, missing rows a 404 and store
    failures a 5xx (409 for constraint violations). Everything else follows
    DRF's default behaviour.
    """
    if isinstance(exc, DjangoValidationError):
        if hasattr(exc, "error_dict"):
            exc = DRFValidationError(detail=exc.message_dict)
        else:
            exc = DRFValidationError(detail={"non_field_errors": exc.messages})

    if isinstance(exc, (Http404, NotFoundError)):
        return Response({"detail": "Not found.", "status_code": 404}, status=404)

    if isinstance(exc, GatewayError):
        status = _GATEWAY_STATUS[exc.kind]
        return Response(
            {"detail": exc.message, "kind": exc.kind.value, "status_code": status},
            status=status,
        )

    response = exception_handler(exc, context)

    # If DRF handled the exception, return its response. Otherwise, return None
    # for a 500 server error.
    if response is not None:
        response.data["status_code"] = response.status_code

    return response
