"""Study group entities."""

from .study_group import MemberSummary, StudyGroup

__all__ = ["MemberSummary", "StudyGroup"]
