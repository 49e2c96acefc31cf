"""Authentication API request models."""

from pydantic import EmailStr, Field, field_validator

from ....models.base import CamelModel


class GoogleSignInRequest(CamelModel):
    """Google sign-in request."""
    
    id_token: str = Field(..., min_length=1, description="Google ID token")


class SimpleSignInRequest(CamelModel):
    """Unverified sign-in request."""
    
    email: EmailStr = Field(..., description="User email address")
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    
    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()


class RefreshTokenRequest(CamelModel):
    """Token refresh request."""
    
    refresh_token: str = Field(..., min_length=1, description="Refresh token")


class LogoutRequest(RefreshTokenRequest):
    """Logout request."""
    pass
