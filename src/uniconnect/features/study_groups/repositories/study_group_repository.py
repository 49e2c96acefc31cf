"""Study group repository for database operations."""

import logging
from typing import Any, Dict, List, Optional, Sequence
from uuid import uuid4

from ..entities.study_group import MemberSummary, StudyGroup

logger = logging.getLogger(__name__)

# Columns a caller may change through ``update``
UPDATABLE_FIELDS = ("name", "description")

GROUP_COLUMNS = "g.id, g.name, g.description, g.owner_id, g.created_at, g.updated_at"


class StudyGroupRepository:
    """Repository for study groups and their membership."""
    
    def __init__(self, database):
        """Initialize study group repository."""
        if not database:
            raise ValueError("Database service is required")
        self.database = database
    
    async def create(self, owner_id: str, name: str, description: Optional[str] = None) -> StudyGroup:
        """Create a group and enroll its owner in the same transaction."""
        group_id = str(uuid4())
        
        async with self.database.transaction() as conn:
            await conn.execute(
                """
                INSERT INTO study_groups (id, name, description, owner_id)
                VALUES ($1, $2, $3, $4)
                """,
                group_id, name, description, owner_id,
            )
            await conn.execute(
                "INSERT INTO study_group_members (group_id, user_id) VALUES ($1, $2)",
                group_id, owner_id,
            )
        
        logger.info(f"Created study group {group_id} owned by {owner_id}")
        return await self.get_by_id(group_id)
    
    async def get_by_id(self, group_id: str, with_members: bool = True) -> Optional[StudyGroup]:
        row = await self.database.fetchrow(
            f"SELECT {GROUP_COLUMNS} FROM study_groups g WHERE g.id = $1", group_id
        )
        if not row:
            return None
        
        group = StudyGroup.from_record(row)
        if with_members:
            await self._attach_people([group])
        return group
    
    async def list_for_member(self, user_id: str) -> List[StudyGroup]:
        """Groups the user belongs to, newest first."""
        rows = await self.database.fetch(
            f"""
            SELECT {GROUP_COLUMNS}
            FROM study_groups g
            JOIN study_group_members m ON m.group_id = g.id
            WHERE m.user_id = $1
            ORDER BY g.created_at DESC
            """,
            user_id,
        )
        groups = [StudyGroup.from_record(row) for row in rows]
        await self._attach_people(groups)
        return groups
    
    async def update(self, group_id: str, changes: Dict[str, Any]) -> Optional[StudyGroup]:
        """Apply a partial update limited to ``UPDATABLE_FIELDS``."""
        fields = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
        if fields:
            assignments = ", ".join(
                f"{column} = ${index}" for index, column in enumerate(fields, start=2)
            )
            await self.database.execute(
                f"UPDATE study_groups SET {assignments}, updated_at = NOW() WHERE id = $1",
                group_id, *fields.values(),
            )
        return await self.get_by_id(group_id)
    
    async def add_members(self, group_id: str, user_ids: Sequence[str]) -> Optional[StudyGroup]:
        """Add members; users already in the group are left alone."""
        if user_ids:
            await self.database.execute(
                """
                INSERT INTO study_group_members (group_id, user_id)
                SELECT $1, unnest($2::text[])
                ON CONFLICT DO NOTHING
                """,
                group_id, list(user_ids),
            )
        return await self.get_by_id(group_id)
    
    async def _attach_people(self, groups: List[StudyGroup]) -> None:
        if not groups:
            return
        
        by_id = {group.id: group for group in groups}
        rows = await self.database.fetch(
            """
            SELECT m.group_id, u.id, u.email, u.name, u.career, u.current_semester
            FROM study_group_members m
            JOIN users u ON u.id = m.user_id
            WHERE m.group_id = ANY($1::text[])
            ORDER BY u.name ASC NULLS LAST
            """,
            list(by_id),
        )
        for row in rows:
            group = by_id[row["group_id"]]
            member = MemberSummary.from_record(row)
            group.members.append(member)
            if member.id == group.owner_id:
                group.owner = member
