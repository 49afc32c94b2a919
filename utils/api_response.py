"""
Standardized API response helpers.

Every JSON endpoint answers with one of two shapes:

    Success:  {"success": true, "data": {...}, "message": "..."}
    Error:    {"success": false, "error": "Spanish error message"}

Availability rejections also carry the failing night at the top level:

    {"success": false, "error": "...", "category": "...", "date": "...", "remaining": 0}
"""

from flask import jsonify
from typing import Any

from models.exceptions import ReservationError, CapacityExceeded


def api_success(
    data: Any = None,
    message: str | None = None,
    status: int = 200,
    **extra_fields: Any
) -> tuple:
    """
    Build a success response.

    Args:
        data: Payload under 'data' (omitted when None).
        message: Confirmation shown to the member (Spanish).
        status: HTTP status code.
        **extra_fields: Additional top-level fields.

    Returns:
        Tuple of (Response, status_code)
    """
    response = {'success': True}

    if data is not None:
        response['data'] = data

    if message:
        response['message'] = message

    response.update(extra_fields)
    return jsonify(response), status


def api_error(error: str, status: int = 400, **extra_fields: Any) -> tuple:
    """
    Build an error response.

    Args:
        error: Message shown to the member (Spanish).
        status: HTTP status code.
        **extra_fields: Additional top-level fields (e.g., category, remaining).

    Returns:
        Tuple of (Response, status_code)
    """
    response = {'success': False, 'error': error}
    response.update(extra_fields)
    return jsonify(response), status


def api_exception(error: ReservationError) -> tuple:
    """Error response for a domain exception, using its own status code."""
    if isinstance(error, CapacityExceeded):
        return api_error(
            error.message, error.status_code,
            category=error.category, date=error.night, remaining=error.remaining
        )
    return api_error(error.message, error.status_code)
