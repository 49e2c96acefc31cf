"""Student repositories."""

from .subject_repository import SubjectRepository

__all__ = ["SubjectRepository"]
