"""Users feature - accounts and linked external identities."""

from .entities import AuthIdentity, AuthProvider, User, UserRole
from .repositories import IdentityRepository, UserRepository

__all__ = [
    "AuthIdentity",
    "AuthProvider",
    "User",
    "UserRole",
    "IdentityRepository",
    "UserRepository",
]
