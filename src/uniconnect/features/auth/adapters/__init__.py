"""Auth adapters for external identity providers."""

from .google_verifier import GOOGLE_ISSUERS, GoogleCredentialVerifier

__all__ = ["GOOGLE_ISSUERS", "GoogleCredentialVerifier"]
