"""Auth identity repository for database operations."""

import logging
from typing import Optional
from uuid import uuid4

from ..entities.user import AuthIdentity, AuthProvider

logger = logging.getLogger(__name__)


class IdentityRepository:
    """Repository for ``auth_identities`` rows."""
    
    def __init__(self, executor):
        if executor is None:
            raise ValueError("Database executor is required")
        self.executor = executor
    
    async def find_by_provider(
        self,
        provider: AuthProvider,
        provider_user_id: str,
    ) -> Optional[AuthIdentity]:
        """Look up an identity by its unique (provider, subject) pair."""
        row = await self.executor.fetchrow(
            """
            SELECT id, user_id, provider, provider_user_id, email_at_provider, hosted_domain
            FROM auth_identities
            WHERE provider = $1 AND provider_user_id = $2
            """,
            provider.value, provider_user_id,
        )
        return AuthIdentity.from_record(row) if row else None
    
    async def create(
        self,
        user_id: str,
        provider: AuthProvider,
        provider_user_id: str,
        email_at_provider: str,
        hosted_domain: Optional[str] = None,
    ) -> AuthIdentity:
        """Attach a provider identity to a user."""
        row = await self.executor.fetchrow(
            """
            INSERT INTO auth_identities
                (id, user_id, provider, provider_user_id, email_at_provider, hosted_domain)
            VALUES ($1, $2, $3, $4, $5, $6)
            RETURNING id, user_id, provider, provider_user_id, email_at_provider, hosted_domain
            """,
            str(uuid4()), user_id, provider.value, provider_user_id, email_at_provider, hosted_domain,
        )
        identity = AuthIdentity.from_record(row)
        logger.info(f"Linked {provider.value} identity to user {user_id}")
        return identity
