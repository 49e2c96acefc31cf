"""User entities."""

from .user import AuthIdentity, AuthProvider, User, UserRole

__all__ = ["AuthIdentity", "AuthProvider", "User", "UserRole"]
