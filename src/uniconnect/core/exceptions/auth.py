"""Authentication-specific exceptions for uniconnect."""

from .base import UniConnectError


class AuthenticationError(UniConnectError):
    """Base exception for authentication errors."""
    pass


class InvalidCredentialError(AuthenticationError):
    """Raised when an external identity token cannot be verified."""
    pass


class DomainNotAllowedError(AuthenticationError):
    """Raised when the email/hosted domain is outside the institutional allow-list."""
    pass


class MalformedTokenError(AuthenticationError):
    """Raised when a refresh token string is structurally invalid."""
    pass


class InvalidOrExpiredSessionError(AuthenticationError):
    """Raised when a session is unknown, revoked or past its expiry."""
    pass


class TokenMismatchError(AuthenticationError):
    """Raised when a refresh secret does not match the stored hash.

    The session has already been revoked by the time this is raised.
    """
    pass


class InvalidAccessTokenError(AuthenticationError):
    """Raised when a bearer access token is missing, expired or forged."""
    pass


class AuthenticationFailedError(AuthenticationError):
    """Generic sign-in/refresh failure used when the cause is unexpected."""
    pass
