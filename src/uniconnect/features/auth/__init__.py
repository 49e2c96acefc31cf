"""Auth feature - Google/simple sign-in and refresh-token sessions.

Components, leaf to root:

- GoogleCredentialVerifier: verifies Google ID tokens and the domain policy
- GoogleIdentityResolver / SimpleIdentityResolver: map identities to users
- TokenIssuer: signed access tokens, peppered refresh secrets
- SessionRepository / PostgresAuthStore: session persistence
- SessionRotationEngine: refresh rotation, reuse detection, logout
- AuthGateway: boundary operations used by the /auth router

Refresh tokens travel as ``<sessionId>.<secret>``; only
HMAC-SHA256(pepper, secret) is stored and every successful refresh revokes
the presented session and opens a new one.
"""

from .adapters.google_verifier import GOOGLE_ISSUERS, GoogleCredentialVerifier
from .entities import (
    AccessTokenClaims,
    AuthRepositories,
    AuthResult,
    DeviceContext,
    Session,
    SessionState,
    VerifiedIdentity,
    compose_refresh_token,
    extract_session_id,
    parse_refresh_token,
)
from .repositories import PostgresAuthStore, SessionRepository
from .services import (
    AuthGateway,
    GoogleIdentityResolver,
    SessionRotationEngine,
    SimpleIdentityResolver,
    TokenIssuer,
)

__all__ = [
    "GOOGLE_ISSUERS",
    "GoogleCredentialVerifier",
    "AccessTokenClaims",
    "AuthRepositories",
    "AuthResult",
    "DeviceContext",
    "Session",
    "SessionState",
    "VerifiedIdentity",
    "compose_refresh_token",
    "extract_session_id",
    "parse_refresh_token",
    "PostgresAuthStore",
    "SessionRepository",
    "AuthGateway",
    "GoogleIdentityResolver",
    "SessionRotationEngine",
    "SimpleIdentityResolver",
    "TokenIssuer",
]
