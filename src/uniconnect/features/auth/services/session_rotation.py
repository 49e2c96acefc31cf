"""Session rotation engine: sign-in, refresh-token rotation and logout.

Session states::

    active --(refresh ok)--> revoked   (a new active child is created)
    active --(mismatch)----> revoked   (defensive, no child)
    active --(logout)------> revoked
    active --(time)--------> expired

``revoked`` and ``expired`` are terminal. There is no stored link between a
session and the one it replaced.
"""

import asyncio
import logging
from typing import Optional

from ....core.exceptions.auth import InvalidOrExpiredSessionError, TokenMismatchError
from ...users.entities.user import User
from ..entities.access_token import AuthResult
from ..entities.device_context import DeviceContext
from ..entities.protocols import AuthRepositories, AuthStoreProtocol
from ..entities.refresh_token import (
    compose_refresh_token,
    extract_session_id,
    parse_refresh_token,
)
from ..entities.session import Session
from .token_issuer import TokenIssuer

logger = logging.getLogger(__name__)


class SessionRotationEngine:
    """Owns every transition of a session's lifecycle."""
    
    def __init__(self, store: AuthStoreProtocol, token_issuer: TokenIssuer):
        self.store = store
        self.token_issuer = token_issuer
    
    async def start_session(
        self,
        repos: AuthRepositories,
        user: User,
        device: Optional[DeviceContext] = None,
    ) -> AuthResult:
        """Create a fresh session for ``user`` inside the caller's transaction."""
        device = device or DeviceContext()
        issued = self.token_issuer.issue_refresh_token()
        session = await repos.sessions.create(
            user_id=user.id,
            refresh_token_hash=issued.hash,
            expires_at=self.token_issuer.refresh_expiry(),
            user_agent=device.user_agent,
            ip=device.ip,
        )
        return AuthResult(
            access_token=self.token_issuer.issue_access_token(user.id, user.email, user.role),
            refresh_token=compose_refresh_token(session.id, issued.secret),
            user=user,
            session_id=session.id,
        )
    
    async def refresh(
        self, refresh_token: str, device: Optional[DeviceContext] = None
    ) -> AuthResult:
        """Exchange a refresh token for a new token pair, exactly once.

        Raises:
            MalformedTokenError: token is not ``<sessionId>.<secret>``
            InvalidOrExpiredSessionError: unknown, revoked or expired session,
                or a concurrent refresh consumed it first
            TokenMismatchError: secret does not match; the session is revoked
        """
        parts = parse_refresh_token(refresh_token)
        
        async with self.store.transaction() as repos:
            session = await repos.sessions.find_by_id(parts.session_id)
        
        now = self.token_issuer.now()
        # Revoked or expired wins over a hash mismatch
        if session is None or not session.is_usable(now):
            raise InvalidOrExpiredSessionError("Refresh session is invalid or expired")
        
        if not self.token_issuer.verify_refresh_secret(parts.secret, session.refresh_token_hash):
            await asyncio.shield(self._revoke_on_mismatch(session))
            raise TokenMismatchError("Refresh token mismatch")
        
        device = (device or DeviceContext()).fallback_to(session.ip, session.user_agent)
        async with self.store.transaction() as repos:
            if not await repos.sessions.revoke_if_active(session.id, now):
                logger.warning(f"Session {session.id} was consumed by a concurrent refresh")
                raise InvalidOrExpiredSessionError("Refresh session is invalid or expired")
            
            user = await repos.users.get_by_id(session.user_id)
            if user is None:
                raise InvalidOrExpiredSessionError("Refresh session is invalid or expired")
            
            result = await self.start_session(repos, user, device)
        
        logger.info(f"Rotated session {session.id} -> {result.session_id} for user {user.id}")
        return result
    
    async def logout(self, refresh_token: str) -> None:
        """Revoke the session named by the token prefix. Idempotent."""
        session_id = extract_session_id(refresh_token)
        async with self.store.transaction() as repos:
            revoked = await repos.sessions.revoke(session_id, self.token_issuer.now())
        
        if revoked:
            logger.info(f"Session {session_id} revoked on logout")
        else:
            logger.debug(f"Logout for unknown or already revoked session {session_id}")
    
    async def _revoke_on_mismatch(self, session: Session) -> None:
        """Commit the defensive revocation before the error leaves the engine."""
        async with self.store.transaction() as repos:
            await repos.sessions.revoke(session.id, self.token_issuer.now())
        logger.warning(
            f"Refresh secret mismatch for session {session.id} (user {session.user_id}); session revoked"
        )
