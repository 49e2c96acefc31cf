"""User repositories."""

from .identity_repository import IdentityRepository
from .user_repository import UserRepository

__all__ = ["IdentityRepository", "UserRepository"]
