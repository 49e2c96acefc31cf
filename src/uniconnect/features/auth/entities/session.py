"""Session entity: one link in a refresh-token rotation lineage."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional


class SessionState(str, Enum):
    """Lifecycle states. ``expired`` and ``revoked`` are terminal."""
    ACTIVE = "active"
    EXPIRED = "expired"
    REVOKED = "revoked"


@dataclass(frozen=True)
class Session:
    """Persisted refresh-token state.

    Only the keyed hash of the refresh secret is stored. The id doubles as
    the public half of the refresh token. Apart from ``revoked_at`` being set
    once, a session is never modified; rotation creates a new one.
    """
    
    id: str
    user_id: str
    refresh_token_hash: str
    expires_at: datetime
    user_agent: Optional[str] = None
    ip: Optional[str] = None
    revoked_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    
    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Session":
        """Build a session from a ``sessions`` row."""
        return cls(
            id=record["id"],
            user_id=record["user_id"],
            refresh_token_hash=record["refresh_token_hash"],
            expires_at=record["expires_at"],
            user_agent=record["user_agent"],
            ip=record["ip"],
            revoked_at=record["revoked_at"],
            created_at=record["created_at"],
        )
    
    def state(self, now: datetime) -> SessionState:
        """Current state; explicit revocation wins over expiry."""
        if self.revoked_at is not None:
            return SessionState.REVOKED
        if self.expires_at <= now:
            return SessionState.EXPIRED
        return SessionState.ACTIVE
    
    def is_usable(self, now: datetime) -> bool:
        return self.state(now) is SessionState.ACTIVE
