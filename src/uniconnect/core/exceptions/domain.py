"""Domain-specific exceptions for uniconnect.

This module defines exceptions that relate to business rules and
to the persistent store behind them.
"""

from .base import UniConnectError


# Resource Errors
class NotFoundError(UniConnectError):
    """Raised when a referenced entity does not exist."""
    pass


class ForbiddenError(UniConnectError):
    """Raised when the caller is not allowed to act on an entity."""
    pass


class ValidationFailedError(UniConnectError):
    """Raised when input passes schema validation but breaks a business rule."""
    pass


# Storage Errors
class StorageFailureError(UniConnectError):
    """Raised when the store is unreachable or rejects a write."""
    pass
