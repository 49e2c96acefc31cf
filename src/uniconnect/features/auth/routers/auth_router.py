"""Authentication API router."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from ....core.exceptions.domain import NotFoundError
from ...users.repositories.user_repository import UserRepository
from ..dependencies import CurrentUser, get_auth_gateway, get_device_context, get_user_repository
from ..entities.device_context import DeviceContext
from ..models.requests import (
    GoogleSignInRequest,
    LogoutRequest,
    RefreshTokenRequest,
    SimpleSignInRequest,
)
from ..models.responses import AuthResponse, UserResponse
from ..services.auth_gateway import AuthGateway

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])

Gateway = Annotated[AuthGateway, Depends(get_auth_gateway)]
Device = Annotated[DeviceContext, Depends(get_device_context)]


@router.post("/google", response_model=AuthResponse)
async def sign_in_with_google(body: GoogleSignInRequest, gateway: Gateway, device: Device) -> AuthResponse:
    """Sign in with a Google ID token."""
    result = await gateway.sign_in_with_google(body.id_token, device)
    return AuthResponse.from_result(result)


@router.post("/simple", response_model=AuthResponse)
async def sign_in_simple(body: SimpleSignInRequest, gateway: Gateway, device: Device) -> AuthResponse:
    """Sign in by email and name without proof of identity."""
    result = await gateway.sign_in_simple(body.email, body.name, device)
    return AuthResponse.from_result(result)


@router.post("/refresh", response_model=AuthResponse)
async def refresh(body: RefreshTokenRequest, gateway: Gateway, device: Device) -> AuthResponse:
    """Rotate a refresh token into a new token pair."""
    result = await gateway.refresh(body.refresh_token, device)
    return AuthResponse.from_result(result)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(body: LogoutRequest, gateway: Gateway) -> Response:
    """Revoke the session behind a refresh token."""
    await gateway.logout(body.refresh_token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", response_model=UserResponse)
async def me(
    current_user: CurrentUser,
    users: Annotated[UserRepository, Depends(get_user_repository)],
) -> UserResponse:
    """Return the account behind the bearer token."""
    user = await users.get_by_id(current_user.user_id)
    if user is None:
        raise NotFoundError("User not found")
    return UserResponse.from_user(user)
