"""Verified external identity claims."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class VerifiedIdentity:
    """Claim set extracted from an ID token that passed every verification check."""
    
    subject_id: str
    email: str
    email_verified: bool
    issuer: str
    hosted_domain: Optional[str] = None
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    
    @property
    def email_domain(self) -> str:
        """Lower-cased domain part of the email."""
        _, _, domain = self.email.rpartition("@")
        return domain.lower()
