"""Access token claims and the result of a successful authentication."""

from dataclasses import dataclass, field
from typing import Any, Mapping

from ...users.entities.user import User, UserRole


@dataclass(frozen=True)
class AccessTokenClaims:
    """Claims carried in a signed access token."""
    
    sub: str
    email: str
    role: UserRole
    
    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "AccessTokenClaims":
        return cls(
            sub=payload["sub"],
            email=payload["email"],
            role=UserRole(payload["role"]),
        )
    
    @property
    def user_id(self) -> str:
        return self.sub


@dataclass(frozen=True)
class AuthResult:
    """Token pair plus the authenticated user, returned by sign-in and refresh."""
    
    access_token: str = field(repr=False)
    refresh_token: str = field(repr=False)
    user: User
    session_id: str
