"""
Safe accessors for the direct Lambda resolver event.

API key callers have no ``identity``; Cognito callers carry their claims.
"""

from typing import Any, Dict, Optional

from .errors import AppError, ErrorCode


def get_field_name(event: Dict[str, Any]) -> Optional[str]:
    """GraphQL field being resolved, or None for a malformed event."""
    info = event.get("info") or {}
    return info.get("fieldName")


def get_caller_id(event: Dict[str, Any]) -> Optional[str]:
    """Cognito ``sub`` of the caller; None for API key callers."""
    identity = event.get("identity") or {}
    return identity.get("sub")


def get_argument(event: Dict[str, Any], name: str, default: Any = None) -> Any:
    """GraphQL argument ``name``, or ``default`` when absent."""
    arguments = event.get("arguments") or {}
    return arguments.get(name, default)


def get_argument_required(event: Dict[str, Any], name: str) -> Any:
    """
    GraphQL argument that must be present and non-null.

    Raises:
        AppError: INVALID_INPUT if the argument is missing or null
    """
    value = get_argument(event, name)
    if value is None:
        raise AppError(ErrorCode.INVALID_INPUT, f"Argument '{name}' is required", {"missingFields": [name]})
    return value
