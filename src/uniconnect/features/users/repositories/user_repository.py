"""User repository for database operations."""

import logging
from typing import Iterable, Optional, Set
from uuid import uuid4

from ..entities.user import User

logger = logging.getLogger(__name__)

USER_COLUMNS = """
    id, email, name, avatar_url, role, career, current_semester,
    created_at, updated_at
"""


class UserRepository:
    """Repository for ``users`` rows.

    ``executor`` is anything exposing asyncpg's ``fetchrow``/``fetch``/``execute``:
    the pooled DatabaseManager or a connection inside an open transaction.
    """
    
    def __init__(self, executor):
        """Initialize user repository."""
        if executor is None:
            raise ValueError("Database executor is required")
        self.executor = executor
    
    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get a user by ID."""
        row = await self.executor.fetchrow(
            f"SELECT {USER_COLUMNS} FROM users WHERE id = $1",
            user_id,
        )
        return User.from_record(row) if row else None
    
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email address."""
        row = await self.executor.fetchrow(
            f"SELECT {USER_COLUMNS} FROM users WHERE email = $1",
            email,
        )
        return User.from_record(row) if row else None
    
    async def create(
        self,
        email: str,
        name: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> User:
        """Insert a new user with the default role."""
        row = await self.executor.fetchrow(
            f"""
            INSERT INTO users (id, email, name, avatar_url)
            VALUES ($1, $2, $3, $4)
            RETURNING {USER_COLUMNS}
            """,
            str(uuid4()), email, name, avatar_url,
        )
        user = User.from_record(row)
        logger.info(f"Created user {user.id}")
        return user
    
    async def update_identity_fields(
        self,
        user_id: str,
        email: str,
        name: Optional[str],
        avatar_url: Optional[str],
    ) -> User:
        """Overwrite email, name and avatar with already-merged values."""
        row = await self.executor.fetchrow(
            f"""
            UPDATE users
            SET email = $2, name = $3, avatar_url = $4, updated_at = NOW()
            WHERE id = $1
            RETURNING {USER_COLUMNS}
            """,
            user_id, email, name, avatar_url,
        )
        return User.from_record(row)
    
    async def update_student_fields(
        self,
        user_id: str,
        career: Optional[str],
        current_semester: Optional[int],
    ) -> Optional[User]:
        """Update career and semester; ``None`` keeps the stored value."""
        row = await self.executor.fetchrow(
            f"""
            UPDATE users
            SET career = COALESCE($2, career),
                current_semester = COALESCE($3, current_semester),
                updated_at = NOW()
            WHERE id = $1
            RETURNING {USER_COLUMNS}
            """,
            user_id, career, current_semester,
        )
        return User.from_record(row) if row else None
    
    async def find_existing_ids(self, user_ids: Iterable[str]) -> Set[str]:
        """Return the subset of ``user_ids`` that exist."""
        rows = await self.executor.fetch(
            "SELECT id FROM users WHERE id = ANY($1::text[])",
            list(user_ids),
        )
        return {row["id"] for row in rows}
