"""Auth API models."""

from .requests import (
    GoogleSignInRequest,
    LogoutRequest,
    RefreshTokenRequest,
    SimpleSignInRequest,
)
from .responses import AuthResponse, UserResponse

__all__ = [
    "GoogleSignInRequest",
    "LogoutRequest",
    "RefreshTokenRequest",
    "SimpleSignInRequest",
    "AuthResponse",
    "UserResponse",
]
