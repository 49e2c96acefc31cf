"""Student profile entities."""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional


@dataclass(frozen=True)
class Subject:
    """A course a student can be enrolled in. Names are unique."""
    
    id: str
    name: str
    code: Optional[str] = None
    credits: Optional[int] = None
    
    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Subject":
        return cls(
            id=record["id"],
            name=record["name"],
            code=record["code"],
            credits=record["credits"],
        )


@dataclass
class StudentProfile:
    """User account seen through its academic details."""
    
    id: str
    email: str
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    career: Optional[str] = None
    current_semester: Optional[int] = None
    subjects: List[Subject] = field(default_factory=list)
