"""Student entities."""

from .student import StudentProfile, Subject

__all__ = ["StudentProfile", "Subject"]
