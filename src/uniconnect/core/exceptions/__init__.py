"""Exception hierarchy for uniconnect."""

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
from .base import UniConnectError, create_error_response, get_http_status_code
from .domain import (
    ForbiddenError,
    NotFoundError,
    StorageFailureError,
    ValidationFailedError,
)
from .http_mapping import HTTP_STATUS_MAP

__all__ = [
    "UniConnectError",
    "create_error_response",
    "get_http_status_code",
    "HTTP_STATUS_MAP",
    "AuthenticationError",
    "AuthenticationFailedError",
    "DomainNotAllowedError",
    "InvalidAccessTokenError",
    "InvalidCredentialError",
    "InvalidOrExpiredSessionError",
    "MalformedTokenError",
    "TokenMismatchError",
    "ForbiddenError",
    "NotFoundError",
    "StorageFailureError",
    "ValidationFailedError",
]
