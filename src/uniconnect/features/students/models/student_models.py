"""Student API request and response models."""

from typing import List, Optional

from pydantic import Field

from ....models.base import CamelModel
from ..entities.student import StudentProfile, Subject


class UpdateProfileRequest(CamelModel):
    """Partial profile update; omitted fields are left as they are."""
    
    career: Optional[str] = Field(None, max_length=200)
    current_semester: Optional[int] = Field(None, ge=1, le=20)
    subjects: Optional[List[str]] = Field(None, description="Subject names; replaces the current list")


class SubjectResponse(CamelModel):
    id: str
    name: str
    code: Optional[str] = None
    credits: Optional[int] = None
    
    @classmethod
    def from_subject(cls, subject: Subject) -> "SubjectResponse":
        return cls(id=subject.id, name=subject.name, code=subject.code, credits=subject.credits)


class StudentProfileResponse(CamelModel):
    id: str
    email: str
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    career: Optional[str] = None
    current_semester: Optional[int] = None
    subjects: List[SubjectResponse] = Field(default_factory=list)
    
    @classmethod
    def from_profile(cls, profile: StudentProfile) -> "StudentProfileResponse":
        return cls(
            id=profile.id,
            email=profile.email,
            name=profile.name,
            avatar_url=profile.avatar_url,
            career=profile.career,
            current_semester=profile.current_semester,
            subjects=[SubjectResponse.from_subject(s) for s in profile.subjects],
        )
