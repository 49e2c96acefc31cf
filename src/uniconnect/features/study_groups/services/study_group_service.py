"""Study group service."""

import logging
from typing import Any, Dict, List, Optional, Sequence

from ....core.exceptions.domain import ForbiddenError, NotFoundError, ValidationFailedError
from ...users.repositories.user_repository import UserRepository
from ..entities.study_group import StudyGroup
from ..repositories.study_group_repository import StudyGroupRepository

logger = logging.getLogger(__name__)


class StudyGroupService:
    """Creates study groups and enforces owner-only edits."""
    
    def __init__(self, groups: StudyGroupRepository, users: UserRepository):
        self.groups = groups
        self.users = users
    
    async def create_group(self, owner_id: str, name: str, description: Optional[str] = None) -> StudyGroup:
        return await self.groups.create(owner_id, name, description)
    
    async def list_for_student(self, student_id: str) -> List[StudyGroup]:
        return await self.groups.list_for_member(student_id)
    
    async def update_group(self, group_id: str, requester_id: str, changes: Dict[str, Any]) -> StudyGroup:
        """Update name/description.

        Raises:
            NotFoundError: the group does not exist
            ForbiddenError: the requester is not the owner
        """
        await self._owned_group(group_id, requester_id, "Only the owner can edit this group")
        group = await self.groups.update(group_id, changes)
        logger.info(f"Study group {group_id} updated by owner {requester_id}")
        return group
    
    async def add_members(self, group_id: str, requester_id: str, member_ids: Sequence[str]) -> StudyGroup:
        """Add existing users to a group owned by the requester."""
        await self._owned_group(group_id, requester_id, "Only the owner can add members")
        
        wanted = list(dict.fromkeys(member_ids))
        if not wanted:
            raise ValidationFailedError("At least one member id is required")
        
        existing = await self.users.find_existing_ids(wanted)
        missing = [user_id for user_id in wanted if user_id not in existing]
        if missing:
            raise NotFoundError("Some users were not found", details={"missing_ids": missing})
        
        group = await self.groups.add_members(group_id, wanted)
        logger.info(f"Added {len(wanted)} members to study group {group_id}")
        return group
    
    async def _owned_group(self, group_id: str, requester_id: str, denial: str) -> StudyGroup:
        group = await self.groups.get_by_id(group_id, with_members=False)
        if group is None:
            raise NotFoundError("Study group not found")
        if not group.is_owned_by(requester_id):
            raise ForbiddenError(denial)
        return group
