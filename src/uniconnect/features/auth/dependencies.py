"""FastAPI authentication dependencies."""

import logging
from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ...core.exceptions.auth import InvalidAccessTokenError
from ..users.repositories.user_repository import UserRepository
from .entities.access_token import AccessTokenClaims
from .entities.device_context import DeviceContext
from .services.auth_gateway import AuthGateway
from .services.token_issuer import TokenIssuer

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme; missing headers are reported as InvalidAccessTokenError
security = HTTPBearer(auto_error=False)


def get_auth_gateway(request: Request) -> AuthGateway:
    """Get the auth gateway wired at startup."""
    return request.app.state.services.auth_gateway


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.services.token_issuer


def get_user_repository(request: Request) -> UserRepository:
    return request.app.state.services.users


def get_device_context(request: Request) -> DeviceContext:
    """Client IP (first X-Forwarded-For hop, else peer) and user agent."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        ip = forwarded_for.split(",")[0].strip() or None
    else:
        ip = request.client.host if request.client else None
    return DeviceContext(ip=ip, user_agent=request.headers.get("user-agent"))


async def get_current_claims(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    token_issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> AccessTokenClaims:
    """Get the caller's claims from a bearer access token."""
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise InvalidAccessTokenError("Missing or invalid token")
    return token_issuer.decode_access_token(credentials.credentials)


CurrentUser = Annotated[AccessTokenClaims, Depends(get_current_claims)]
