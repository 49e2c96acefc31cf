"""Client device context recorded on sessions."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DeviceContext:
    """User agent and IP of the client that presented a credential."""
    
    ip: Optional[str] = None
    user_agent: Optional[str] = None
    
    def fallback_to(self, ip: Optional[str], user_agent: Optional[str]) -> "DeviceContext":
        """Fill missing values from a previously recorded context."""
        return DeviceContext(
            ip=self.ip or ip,
            user_agent=self.user_agent or user_agent,
        )
