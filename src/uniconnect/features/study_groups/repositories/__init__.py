"""Study group repositories."""

from .study_group_repository import StudyGroupRepository

__all__ = ["StudyGroupRepository"]
