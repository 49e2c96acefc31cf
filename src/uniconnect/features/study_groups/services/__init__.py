"""Study group services."""

from .study_group_service import StudyGroupService

__all__ = ["StudyGroupService"]
