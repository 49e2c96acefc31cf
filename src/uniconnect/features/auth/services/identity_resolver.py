"""Maps verified external identities to local user accounts."""

import logging

from ...users.entities.user import AuthProvider, User
from ..entities.identity_claims import VerifiedIdentity
from ..entities.protocols import AuthRepositories

logger = logging.getLogger(__name__)


class GoogleIdentityResolver:
    """Find, link or create the user behind a verified Google identity.

    Resolution order:

    1. identity already linked -> refresh the user's email/name/avatar
    2. a user with the same email exists -> refresh name/avatar and link the
       identity to that user (any verified Google account with the stored
       email is treated as the same person)
    3. otherwise create the user and its first identity

    Claim values override stored ones; missing claims keep what is stored.
    Callers run this inside a transaction so steps 2 and 3 are atomic.
    """
    
    provider = AuthProvider.GOOGLE
    
    async def resolve(self, identity: VerifiedIdentity, repos: AuthRepositories) -> User:
        linked = await repos.identities.find_by_provider(self.provider, identity.subject_id)
        if linked:
            user = await repos.users.get_by_id(linked.user_id)
            if user is not None:
                logger.debug(f"Google identity already linked to user {user.id}")
                return await repos.users.update_identity_fields(
                    user.id,
                    email=identity.email,
                    name=identity.name or user.name,
                    avatar_url=identity.avatar_url or user.avatar_url,
                )
        
        existing = await repos.users.get_by_email(identity.email)
        if existing:
            user = await repos.users.update_identity_fields(
                existing.id,
                email=existing.email,
                name=identity.name or existing.name,
                avatar_url=identity.avatar_url or existing.avatar_url,
            )
            await self._link(user, identity, repos)
            logger.info(f"Linked Google identity to existing user {user.id} by email match")
            return user
        
        user = await repos.users.create(
            email=identity.email,
            name=identity.name,
            avatar_url=identity.avatar_url,
        )
        await self._link(user, identity, repos)
        return user
    
    async def _link(self, user: User, identity: VerifiedIdentity, repos: AuthRepositories) -> None:
        await repos.identities.create(
            user_id=user.id,
            provider=self.provider,
            provider_user_id=identity.subject_id,
            email_at_provider=identity.email,
            hosted_domain=identity.hosted_domain,
        )
