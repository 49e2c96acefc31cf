"""Students feature - academic profile and subjects."""

from .entities import StudentProfile, Subject
from .repositories import SubjectRepository
from .services import StudentService

__all__ = ["StudentProfile", "Subject", "SubjectRepository", "StudentService"]
