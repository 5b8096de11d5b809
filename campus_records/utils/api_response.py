"""
Standardized API response utilities.

Write endpoints and error handlers build their bodies here so every
non-read response shares one envelope.
"""

from typing import Any, Dict, Optional


def success_response(message: Optional[str] = None) -> Dict[str, Any]:
    """
    Create a standardized success response.

    Args:
        message: Optional success message

    Returns:
        Dict with standardized success response format
    """
    response = {"success": True}

    if message:
        response["message"] = message

    return response


def error_response(
    message: str,
    code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Create a standardized error response.

    Args:
        message: Error message
        code: Optional error code
        details: Optional additional error details

    Returns:
        Dict with standardized error response format
    """
    response = {"success": False, "error": message}

    if code:
        response["code"] = code

    if details:
        response["details"] = details

    return response
