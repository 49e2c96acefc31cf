"""Low-trust sign-in by bare email and name.

Nothing here proves the caller owns the email address. This path is an
intentional product decision for environments without Google sign-in and is
kept in its own module so it is never mistaken for the verified path.
"""

import logging
from typing import Optional

from ...users.entities.user import User
from ..entities.protocols import AuthRepositories

logger = logging.getLogger(__name__)


class SimpleIdentityResolver:
    """Find or create a user from an unverified ``(email, name)`` pair."""
    
    async def resolve(self, email: str, name: Optional[str], repos: AuthRepositories) -> User:
        name = (name or "").strip() or None
        
        existing = await repos.users.get_by_email(email)
        if existing:
            if name and name != existing.name:
                return await repos.users.update_identity_fields(
                    existing.id,
                    email=existing.email,
                    name=name,
                    avatar_url=existing.avatar_url,
                )
            return existing
        
        user = await repos.users.create(email=email, name=name)
        logger.info(f"Created user {user.id} through unverified sign-in")
        return user
