"""Session store backed by the ``sessions`` table."""

import logging
from datetime import datetime
from typing import Optional
from uuid import uuid4

from ..entities.protocols import SessionRepositoryProtocol
from ..entities.session import Session

logger = logging.getLogger(__name__)

SESSION_COLUMNS = "id, user_id, refresh_token_hash, user_agent, ip, expires_at, revoked_at, created_at"


class SessionRepository(SessionRepositoryProtocol):
    """Repository for refresh-token sessions."""
    
    def __init__(self, executor):
        if executor is None:
            raise ValueError("Database executor is required")
        self.executor = executor
    
    async def create(
        self,
        user_id: str,
        refresh_token_hash: str,
        expires_at: datetime,
        user_agent: Optional[str] = None,
        ip: Optional[str] = None,
    ) -> Session:
        """Insert a new active session."""
        row = await self.executor.fetchrow(
            f"""
            INSERT INTO sessions (id, user_id, refresh_token_hash, user_agent, ip, expires_at)
            VALUES ($1, $2, $3, $4, $5, $6)
            RETURNING {SESSION_COLUMNS}
            """,
            str(uuid4()), user_id, refresh_token_hash, user_agent, ip, expires_at,
        )
        return Session.from_record(row)
    
    async def find_by_id(self, session_id: str) -> Optional[Session]:
        row = await self.executor.fetchrow(
            f"SELECT {SESSION_COLUMNS} FROM sessions WHERE id = $1",
            session_id,
        )
        return Session.from_record(row) if row else None
    
    async def revoke(self, session_id: str, now: datetime) -> bool:
        """Revoke a session unless it is already revoked."""
        revoked_id = await self.executor.fetchval(
            """
            UPDATE sessions SET revoked_at = $2
            WHERE id = $1 AND revoked_at IS NULL
            RETURNING id
            """,
            session_id, now,
        )
        return revoked_id is not None
    
    async def revoke_if_active(self, session_id: str, now: datetime) -> bool:
        """Conditionally revoke a session that is still active at ``now``.

        The row lock taken by the UPDATE makes a concurrent rotation of the
        same session wait, re-check the condition and match nothing.
        """
        revoked_id = await self.executor.fetchval(
            """
            UPDATE sessions SET revoked_at = $2
            WHERE id = $1 AND revoked_at IS NULL AND expires_at > $2
            RETURNING id
            """,
            session_id, now,
        )
        return revoked_id is not None
