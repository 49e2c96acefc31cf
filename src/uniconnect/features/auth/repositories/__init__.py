"""Auth repositories."""

from .auth_store import PostgresAuthStore
from .session_repository import SessionRepository

__all__ = ["PostgresAuthStore", "SessionRepository"]
