"""Maps domain and request errors to HTTP responses.

Installed as REST_FRAMEWORK["EXCEPTION_HANDLER"].
"""

from rest_framework import status
from rest_framework.exceptions import ParseError, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from trips.domain.errors import DomainError, ErrorCode

# Participant errors answer 400 rather than 404/409 to keep the published
# confirm-participant contract.
STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_TRIP_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PARTICIPANT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.TRIP_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PARTICIPANT_NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorCode.PARTICIPANT_ALREADY_CONFIRMED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.PARTICIPANT_ALREADY_INVITED: status.HTTP_409_CONFLICT,
    ErrorCode.SERVICE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_body(code: ErrorCode, message: str) -> dict[str, str]:
    return {"code": code.value, "message": message}


def exception_handler(exc: Exception, context: dict) -> Response | None:
    if isinstance(exc, DomainError):
        return Response(
            error_body(exc.code, exc.message),
            status=STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST),
        )
    if isinstance(exc, ParseError):
        return Response(
            error_body(ErrorCode.INVALID_INPUT, "invalid JSON"),
            status=status.HTTP_400_BAD_REQUEST,
        )
    if isinstance(exc, ValidationError):
        body = error_body(ErrorCode.INVALID_INPUT, "invalid input")
        return Response(
            {**body, "errors": exc.detail}, status=status.HTTP_400_BAD_REQUEST
        )

    return drf_exception_handler(exc, context)
