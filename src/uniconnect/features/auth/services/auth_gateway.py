"""Auth gateway: the boundary operations behind the /auth routes."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from ....core.exceptions.auth import AuthenticationFailedError
from ....core.exceptions.base import UniConnectError
from ..entities.access_token import AuthResult
from ..entities.device_context import DeviceContext
from ..entities.protocols import AuthStoreProtocol, CredentialVerifierProtocol
from .identity_resolver import GoogleIdentityResolver
from .session_rotation import SessionRotationEngine
from .simple_identity_resolver import SimpleIdentityResolver

logger = logging.getLogger(__name__)


class AuthGateway:
    """Sign-in, refresh and logout.

    Typed errors pass through untouched. Anything unexpected on the sign-in
    and refresh paths becomes a generic 401 so internals never leak.
    """
    
    def __init__(
        self,
        store: AuthStoreProtocol,
        credential_verifier: CredentialVerifierProtocol,
        rotation_engine: SessionRotationEngine,
        google_resolver: Optional[GoogleIdentityResolver] = None,
        simple_resolver: Optional[SimpleIdentityResolver] = None,
    ):
        self.store = store
        self.credential_verifier = credential_verifier
        self.rotation_engine = rotation_engine
        self.google_resolver = google_resolver or GoogleIdentityResolver()
        self.simple_resolver = simple_resolver or SimpleIdentityResolver()
    
    async def sign_in_with_google(
        self, id_token: str, device: Optional[DeviceContext] = None
    ) -> AuthResult:
        """Verify a Google ID token, resolve the user and open a session."""
        async with self._unexpected_errors_as("Authentication failed"):
            identity = await self.credential_verifier.verify(id_token, device)
            async with self.store.transaction() as repos:
                user = await self.google_resolver.resolve(identity, repos)
                result = await self.rotation_engine.start_session(repos, user, device)
        
        logger.info(f"Google sign-in for user {result.user.id}, session {result.session_id}")
        return result
    
    async def sign_in_simple(
        self, email: str, name: str, device: Optional[DeviceContext] = None
    ) -> AuthResult:
        """Open a session for an unverified email/name pair (low-trust path)."""
        async with self._unexpected_errors_as("Authentication failed"):
            async with self.store.transaction() as repos:
                user = await self.simple_resolver.resolve(email, name, repos)
                result = await self.rotation_engine.start_session(repos, user, device)
        
        logger.info(f"Unverified sign-in for user {result.user.id}, session {result.session_id}")
        return result
    
    async def refresh(
        self, refresh_token: str, device: Optional[DeviceContext] = None
    ) -> AuthResult:
        async with self._unexpected_errors_as("Refresh failed"):
            return await self.rotation_engine.refresh(refresh_token, device)
    
    async def logout(self, refresh_token: str) -> None:
        await self.rotation_engine.logout(refresh_token)
    
    @asynccontextmanager
    async def _unexpected_errors_as(self, message: str):
        try:
            yield
        except UniConnectError:
            raise
        except Exception as e:
            logger.error(f"Unexpected auth failure: {type(e).__name__}: {e}", exc_info=True)
            raise AuthenticationFailedError(message) from e
