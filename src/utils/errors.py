"""
Errors returned to GraphQL clients.

AppSync turns an exception raised by a direct Lambda resolver into an entry
of the response's ``errors`` list, so handlers raise AppError and let it
propagate.
"""

from typing import Any, Dict, Optional

GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again."


class ErrorCode:
    """Error codes carried in ``errorCode``."""

    NOT_FOUND = "NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    INVALID_INPUT = "INVALID_INPUT"
    UNKNOWN_OPERATION = "UNKNOWN_OPERATION"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppError(Exception):
    """
    An expected failure with a machine readable code.

    Args:
        error_code: One of the ErrorCode constants
        message: Human readable message (also the exception text)
        details: Extra keys merged into the error payload
    """

    def __init__(self, error_code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"errorCode": self.error_code, "message": self.message}
        payload.update(self.details)
        return payload


def handle_error(error: Exception) -> Dict[str, Any]:
    """
    Error payload for any exception.

    Unexpected exceptions are reported as INTERNAL_ERROR without their text,
    so internal details never reach the client.
    """
    if isinstance(error, AppError):
        return error.to_dict()
    return {"errorCode": ErrorCode.INTERNAL_ERROR, "message": GENERIC_ERROR_MESSAGE}
