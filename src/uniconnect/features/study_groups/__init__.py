"""Study groups feature - groups owned by a student, with members."""

from .entities import MemberSummary, StudyGroup
from .repositories import StudyGroupRepository
from .services import StudyGroupService

__all__ = ["MemberSummary", "StudyGroup", "StudyGroupRepository", "StudyGroupService"]
