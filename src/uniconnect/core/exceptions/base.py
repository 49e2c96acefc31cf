"""Base exceptions for uniconnect.

This module defines the base exception hierarchy for the service.
All exceptions inherit from UniConnectError and include error codes, details,
and HTTP status code mappings for API responses.
"""

from typing import Any, Dict, Optional


class UniConnectError(Exception):
    """Base exception for all uniconnect errors.
    
    Carries a short user-facing message, a machine readable error code and
    an optional HTTP status override. When no override is given the status
    comes from the exception-to-status mapping.
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self._status_code = status_code
    
    @property
    def status_code(self) -> int:
        """HTTP-equivalent status code for this error."""
        if self._status_code is not None:
            return self._status_code
        return get_http_status_code(self)


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception using the static mapping.
    
    Args:
        exception: The exception instance
        
    Returns:
        HTTP status code
    """
    from .http_mapping import get_http_status_code as get_mapped_status_code
    return get_mapped_status_code(exception)


def create_error_response(exception: UniConnectError) -> Dict[str, Any]:
    """Create standardized error response from exception.
    
    Args:
        exception: The uniconnect exception
        
    Returns:
        Error response dictionary
    """
    response: Dict[str, Any] = {
        "message": exception.message,
        "error": {
            "code": exception.error_code,
            "type": exception.__class__.__name__,
        },
    }
    if exception.details:
        response["error"]["details"] = exception.details
    return response
