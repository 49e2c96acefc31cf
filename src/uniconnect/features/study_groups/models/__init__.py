"""Study group API models."""

from .study_group_models import (
    AddMembersRequest,
    CreateStudyGroupRequest,
    MemberResponse,
    StudyGroupResponse,
    UpdateStudyGroupRequest,
)

__all__ = [
    "AddMembersRequest",
    "CreateStudyGroupRequest",
    "MemberResponse",
    "StudyGroupResponse",
    "UpdateStudyGroupRequest",
]
