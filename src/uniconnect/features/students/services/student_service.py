"""Student profile service."""

import logging
from typing import List, Optional, Sequence

from ....core.exceptions.domain import NotFoundError
from ...users.repositories.user_repository import UserRepository
from ..entities.student import StudentProfile, Subject
from ..repositories.subject_repository import SubjectRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Reads and edits the academic side of a user account."""
    
    def __init__(self, users: UserRepository, subjects: SubjectRepository):
        self.users = users
        self.subjects = subjects
    
    async def get_profile(self, user_id: str) -> StudentProfile:
        """Get a student's profile with subjects.

        Raises:
            NotFoundError: if the user does not exist
        """
        user = await self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        
        return StudentProfile(
            id=user.id,
            email=user.email,
            name=user.name,
            avatar_url=user.avatar_url,
            career=user.career,
            current_semester=user.current_semester,
            subjects=await self.subjects.list_for_user(user.id),
        )
    
    async def update_profile(
        self,
        user_id: str,
        career: Optional[str] = None,
        current_semester: Optional[int] = None,
        subjects: Optional[Sequence[str]] = None,
    ) -> StudentProfile:
        """Update career/semester; a given subject list replaces the current one."""
        user = await self.users.update_student_fields(user_id, career, current_semester)
        if user is None:
            raise NotFoundError("User not found")
        
        if subjects is not None:
            linked = await self.subjects.replace_for_user(user_id, subjects)
        else:
            linked = await self.subjects.list_for_user(user_id)
        
        logger.info(f"Updated student profile for user {user_id}")
        return StudentProfile(
            id=user.id,
            email=user.email,
            name=user.name,
            avatar_url=user.avatar_url,
            career=user.career,
            current_semester=user.current_semester,
            subjects=linked,
        )
    
    async def list_subjects(self) -> List[Subject]:
        return await self.subjects.list_all()
