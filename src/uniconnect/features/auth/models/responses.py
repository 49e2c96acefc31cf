"""Authentication API response models."""

from typing import Optional

from pydantic import Field

from ...users.entities.user import User, UserRole
from ..entities.access_token import AuthResult
from ....models.base import CamelModel


class UserResponse(CamelModel):
    """Public view of a user account."""
    
    id: str
    email: str
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    role: UserRole = UserRole.STUDENT
    
    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            avatar_url=user.avatar_url,
            role=user.role,
        )


class AuthResponse(CamelModel):
    """Token pair returned by sign-in and refresh."""
    
    access_token: str = Field(..., description="Signed access token")
    refresh_token: str = Field(..., description="Opaque refresh token <sessionId>.<secret>")
    user: UserResponse
    
    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthResponse":
        return cls(
            access_token=result.access_token,
            refresh_token=result.refresh_token,
            user=UserResponse.from_user(result.user),
        )
