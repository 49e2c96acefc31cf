"""User domain entities.

This module defines the User account and the external identities
linked to it.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping, Optional


class UserRole(str, Enum):
    """Account roles carried in access tokens."""
    STUDENT = "student"
    ADMIN = "admin"


class AuthProvider(str, Enum):
    """External identity providers."""
    GOOGLE = "google"


@dataclass
class User:
    """User account.
    
    Created on first successful sign-in and updated when identity claims are
    re-verified or the profile is edited. Never hard-deleted by the auth
    subsystem.
    """
    
    id: str
    email: str
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    role: UserRole = UserRole.STUDENT
    
    # Student profile
    career: Optional[str] = None
    current_semester: Optional[int] = None
    
    # Audit Fields
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    
    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "User":
        """Build a user from a ``users`` row."""
        return cls(
            id=record["id"],
            email=record["email"],
            name=record["name"],
            avatar_url=record["avatar_url"],
            role=UserRole(record["role"]),
            career=record["career"],
            current_semester=record["current_semester"],
            created_at=record["created_at"],
            updated_at=record["updated_at"],
        )

@dataclass(frozen=True)
class AuthIdentity:
    """Link between a user and an identity at an external provider.

    ``(provider, provider_user_id)`` is unique across all users.
    """
    
    id: str
    user_id: str
    provider: AuthProvider
    provider_user_id: str
    email_at_provider: str
    hosted_domain: Optional[str] = None
    
    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "AuthIdentity":
        """Build an identity from an ``auth_identities`` row."""
        return cls(
            id=record["id"],
            user_id=record["user_id"],
            provider=AuthProvider(record["provider"]),
            provider_user_id=record["provider_user_id"],
            email_at_provider=record["email_at_provider"],
            hosted_domain=record["hosted_domain"],
        )
