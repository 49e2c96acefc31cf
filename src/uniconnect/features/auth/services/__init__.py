"""Auth services."""

from .auth_gateway import AuthGateway
from .identity_resolver import GoogleIdentityResolver
from .session_rotation import SessionRotationEngine
from .simple_identity_resolver import SimpleIdentityResolver
from .token_issuer import TokenIssuer

__all__ = [
    "AuthGateway",
    "GoogleIdentityResolver",
    "SessionRotationEngine",
    "SimpleIdentityResolver",
    "TokenIssuer",
]
