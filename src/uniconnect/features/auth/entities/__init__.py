"""Auth entities."""

from .access_token import AccessTokenClaims, AuthResult
from .device_context import DeviceContext
from .identity_claims import VerifiedIdentity
from .protocols import (
    AuthRepositories,
    AuthStoreProtocol,
    CredentialVerifierProtocol,
    IdentityRepositoryProtocol,
    SessionRepositoryProtocol,
    UserRepositoryProtocol,
)
from .refresh_token import (
    REFRESH_TOKEN_SEPARATOR,
    IssuedRefreshSecret,
    RefreshTokenParts,
    compose_refresh_token,
    extract_session_id,
    parse_refresh_token,
)
from .session import Session, SessionState

__all__ = [
    "AccessTokenClaims",
    "AuthResult",
    "DeviceContext",
    "VerifiedIdentity",
    "AuthRepositories",
    "AuthStoreProtocol",
    "CredentialVerifierProtocol",
    "IdentityRepositoryProtocol",
    "SessionRepositoryProtocol",
    "UserRepositoryProtocol",
    "REFRESH_TOKEN_SEPARATOR",
    "IssuedRefreshSecret",
    "RefreshTokenParts",
    "compose_refresh_token",
    "extract_session_id",
    "parse_refresh_token",
    "Session",
    "SessionState",
]
