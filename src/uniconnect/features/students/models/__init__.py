"""Student API models."""

from .student_models import StudentProfileResponse, SubjectResponse, UpdateProfileRequest

__all__ = ["StudentProfileResponse", "SubjectResponse", "UpdateProfileRequest"]
