"""Study group API models."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from ....models.base import CamelModel
from ..entities.study_group import MemberSummary, StudyGroup


class CreateStudyGroupRequest(CamelModel):
    name: str = Field(..., min_length=3, max_length=100)
    description: Optional[str] = Field(None, max_length=500)


class UpdateStudyGroupRequest(CamelModel):
    name: Optional[str] = Field(None, min_length=3, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    
    @field_validator("name", "description")
    @classmethod
    def reject_null(cls, v: Optional[str]) -> str:
        # Fields may be omitted but not cleared
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class AddMembersRequest(CamelModel):
    member_ids: List[str] = Field(..., description="Ids of users to add")


class MemberResponse(CamelModel):
    id: str
    email: str
    name: Optional[str] = None
    career: Optional[str] = None
    current_semester: Optional[int] = None
    
    @classmethod
    def from_member(cls, member: MemberSummary) -> "MemberResponse":
        return cls(
            id=member.id,
            email=member.email,
            name=member.name,
            career=member.career,
            current_semester=member.current_semester,
        )


class StudyGroupResponse(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    owner_id: str
    owner: Optional[MemberResponse] = None
    members: List[MemberResponse] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    
    @classmethod
    def from_group(cls, group: StudyGroup) -> "StudyGroupResponse":
        return cls(
            id=group.id,
            name=group.name,
            description=group.description,
            owner_id=group.owner_id,
            owner=MemberResponse.from_member(group.owner) if group.owner else None,
            members=[MemberResponse.from_member(m) for m in group.members],
            created_at=group.created_at,
            updated_at=group.updated_at,
        )
