"""Protocol interfaces for the auth feature."""

from abc import abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, AsyncContextManager, Optional, Protocol, runtime_checkable

from ...users.entities.user import AuthIdentity, AuthProvider, User
from .device_context import DeviceContext
from .identity_claims import VerifiedIdentity
from .session import Session


@runtime_checkable
class CredentialVerifierProtocol(Protocol):
    """Protocol for external identity token verification."""
    
    @abstractmethod
    async def verify(
        self, id_token: str, device: Optional[DeviceContext] = None
    ) -> VerifiedIdentity:
        """Verify an ID token and return its claims."""
        ...


@runtime_checkable
class SessionRepositoryProtocol(Protocol):
    """Protocol for the session store.

    Every operation is keyed by session id; the store never sees a raw secret.
    """
    
    @abstractmethod
    async def create(
        self,
        user_id: str,
        refresh_token_hash: str,
        expires_at: datetime,
        user_agent: Optional[str] = None,
        ip: Optional[str] = None,
    ) -> Session:
        ...
    
    @abstractmethod
    async def find_by_id(self, session_id: str) -> Optional[Session]:
        ...
    
    @abstractmethod
    async def revoke(self, session_id: str, now: datetime) -> bool:
        """Set ``revoked_at`` if not already revoked. Returns whether a row changed."""
        ...
    
    @abstractmethod
    async def revoke_if_active(self, session_id: str, now: datetime) -> bool:
        """Revoke only if not revoked and not expired at ``now``."""
        ...


@runtime_checkable
class UserRepositoryProtocol(Protocol):
    """Protocol for the user operations needed by sign-in."""
    
    async def get_by_id(self, user_id: str) -> Optional[User]: ...
    
    async def get_by_email(self, email: str) -> Optional[User]: ...
    
    async def create(
        self, email: str, name: Optional[str] = None, avatar_url: Optional[str] = None
    ) -> User: ...
    
    async def update_identity_fields(
        self, user_id: str, email: str, name: Optional[str], avatar_url: Optional[str]
    ) -> User: ...


@runtime_checkable
class IdentityRepositoryProtocol(Protocol):
    """Protocol for provider identity links."""
    
    async def find_by_provider(
        self, provider: AuthProvider, provider_user_id: str
    ) -> Optional[AuthIdentity]: ...
    
    async def create(
        self,
        user_id: str,
        provider: AuthProvider,
        provider_user_id: str,
        email_at_provider: str,
        hosted_domain: Optional[str] = None,
    ) -> AuthIdentity: ...


@dataclass(frozen=True)
class AuthRepositories:
    """Repositories bound to one open transaction."""
    
    users: UserRepositoryProtocol
    identities: IdentityRepositoryProtocol
    sessions: SessionRepositoryProtocol


@runtime_checkable
class AuthStoreProtocol(Protocol):
    """Unit of work over the auth tables."""
    
    def transaction(self) -> AsyncContextManager[AuthRepositories]:
        """Open a transaction; commit on normal exit, roll back on error."""
        ...
    
    async def health_check(self) -> Any:
        ...
