"""Study group domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Mapping, Optional


@dataclass(frozen=True)
class MemberSummary:
    """Public view of a group member or owner."""
    
    id: str
    email: str
    name: Optional[str] = None
    career: Optional[str] = None
    current_semester: Optional[int] = None
    
    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "MemberSummary":
        return cls(
            id=record["id"],
            email=record["email"],
            name=record["name"],
            career=record.get("career"),
            current_semester=record.get("current_semester"),
        )


@dataclass
class StudyGroup:
    """A study group. The owner is always one of its members."""
    
    id: str
    name: str
    owner_id: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    owner: Optional[MemberSummary] = None
    members: List[MemberSummary] = field(default_factory=list)
    
    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "StudyGroup":
        return cls(
            id=record["id"],
            name=record["name"],
            owner_id=record["owner_id"],
            description=record["description"],
            created_at=record["created_at"],
            updated_at=record["updated_at"],
        )
    
    def is_owned_by(self, user_id: str) -> bool:
        return self.owner_id == user_id
