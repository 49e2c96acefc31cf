"""Subject repository for database operations."""

import logging
from typing import List, Sequence
from uuid import uuid4

from ..entities.student import Subject

logger = logging.getLogger(__name__)


class SubjectRepository:
    """Repository for subjects and the user-subject link table."""
    
    def __init__(self, database):
        """Initialize subject repository."""
        if not database:
            raise ValueError("Database service is required")
        self.database = database
    
    async def list_all(self) -> List[Subject]:
        """All subjects ordered by name."""
        rows = await self.database.fetch(
            "SELECT id, name, code, credits FROM subjects ORDER BY name ASC"
        )
        return [Subject.from_record(row) for row in rows]
    
    async def list_for_user(self, user_id: str) -> List[Subject]:
        rows = await self.database.fetch(
            """
            SELECT s.id, s.name, s.code, s.credits
            FROM subjects s
            JOIN user_subjects us ON us.subject_id = s.id
            WHERE us.user_id = $1
            ORDER BY s.name ASC
            """,
            user_id,
        )
        return [Subject.from_record(row) for row in rows]
    
    async def replace_for_user(self, user_id: str, names: Sequence[str]) -> List[Subject]:
        """Replace a user's subjects with ``names``, creating unknown subjects."""
        unique_names = list(dict.fromkeys(name.strip() for name in names if name.strip()))
        
        async with self.database.transaction() as conn:
            await conn.execute("DELETE FROM user_subjects WHERE user_id = $1", user_id)
            if unique_names:
                await conn.executemany(
                    "INSERT INTO subjects (id, name) VALUES ($1, $2) ON CONFLICT (name) DO NOTHING",
                    [(str(uuid4()), name) for name in unique_names],
                )
                await conn.execute(
                    """
                    INSERT INTO user_subjects (user_id, subject_id)
                    SELECT $1, id FROM subjects WHERE name = ANY($2::text[])
                    ON CONFLICT DO NOTHING
                    """,
                    user_id, unique_names,
                )
        
        logger.debug(f"User {user_id} now has {len(unique_names)} subjects")
        return await self.list_for_user(user_id)
