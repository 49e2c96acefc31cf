"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .auth import (
    AuthenticationError,
    AuthenticationFailedError,
    DomainNotAllowedError,
    InvalidAccessTokenError,
    InvalidCredentialError,
    InvalidOrExpiredSessionError,
    MalformedTokenError,
    TokenMismatchError,
)
from .base import UniConnectError
from .domain import (
    ForbiddenError,
    NotFoundError,
    StorageFailureError,
    ValidationFailedError,
)


# Static HTTP Status Code mapping for exceptions
HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    ValidationFailedError: 400,
    
    # 401 Unauthorized
    AuthenticationError: 401,
    AuthenticationFailedError: 401,
    InvalidCredentialError: 401,
    MalformedTokenError: 401,
    InvalidOrExpiredSessionError: 401,
    TokenMismatchError: 401,
    InvalidAccessTokenError: 401,
    
    # 403 Forbidden
    DomainNotAllowedError: 403,
    ForbiddenError: 403,
    
    # 404 Not Found
    NotFoundError: 404,
    
    # 500 Internal Server Error
    StorageFailureError: 500,
    
    # Default for UniConnectError
    UniConnectError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Resolve the status for an exception, walking its MRO.
    
    The most specific class registered in HTTP_STATUS_MAP wins; anything
    outside the hierarchy maps to 500.
    """
    for cls in type(exception).__mro__:
        if cls in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[cls]
    return 500
