"""Google ID token verification."""

import asyncio
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from google.auth.exceptions import GoogleAuthError
from google.auth.transport import requests as google_requests
from google.oauth2 import id_token as google_id_token

from ....core.exceptions.auth import DomainNotAllowedError, InvalidCredentialError
from ..entities.device_context import DeviceContext
from ..entities.identity_claims import VerifiedIdentity
from ..entities.protocols import CredentialVerifierProtocol

logger = logging.getLogger(__name__)

GOOGLE_ISSUERS = frozenset({"accounts.google.com", "https://accounts.google.com"})

TokenVerifier = Callable[[str, Sequence[str]], Dict[str, Any]]


def _google_token_verifier() -> TokenVerifier:
    """Signature/audience/expiry check against Google's published certs."""
    request = google_requests.Request()
    
    def verify(id_token: str, audience: Sequence[str]) -> Dict[str, Any]:
        return google_id_token.verify_token(id_token, request, audience=list(audience))
    
    return verify


def _is_true(value: Any) -> bool:
    return value is True or (isinstance(value, str) and value.lower() == "true")


class GoogleCredentialVerifier(CredentialVerifierProtocol):
    """Turns a Google ID token into a VerifiedIdentity.

    Checks run in order and stop at the first failure:

    1. signature, expiry and audience (any accepted client id)
    2. ``sub`` and ``email`` present
    3. ``email_verified`` is true
    4. issuer is one of GOOGLE_ISSUERS
    5. email domain or ``hd`` claim in the allow-list, when one is configured

    Steps 1-4 fail with InvalidCredentialError, step 5 with DomainNotAllowedError.
    """
    
    def __init__(
        self,
        client_ids: Sequence[str],
        allowed_domains: Iterable[str] = (),
        token_verifier: Optional[TokenVerifier] = None,
    ):
        self.client_ids: List[str] = [cid for cid in client_ids if cid]
        if not self.client_ids:
            raise ValueError("At least one Google client id is required")
        self.allowed_domains = frozenset(d.strip().lower() for d in allowed_domains if d.strip())
        self._token_verifier = token_verifier or _google_token_verifier()
    
    async def verify(
        self, id_token: str, device: Optional[DeviceContext] = None
    ) -> VerifiedIdentity:
        try:
            # google-auth does blocking HTTP for the signing certs
            claims = await asyncio.to_thread(self._token_verifier, id_token, self.client_ids)
        except (ValueError, GoogleAuthError) as e:
            logger.info(f"Google token verification failed from {device.ip if device else 'unknown'}: {e}")
            raise InvalidCredentialError(f"Invalid Google token: {e}") from e
        
        subject_id = claims.get("sub")
        email = claims.get("email")
        if not subject_id or not email:
            raise InvalidCredentialError("Invalid Google payload")
        
        if not _is_true(claims.get("email_verified")):
            raise InvalidCredentialError("Google email is not verified")
        
        issuer = claims.get("iss")
        if issuer not in GOOGLE_ISSUERS:
            raise InvalidCredentialError("Invalid Google issuer")
        
        identity = VerifiedIdentity(
            subject_id=subject_id,
            email=email,
            email_verified=True,
            issuer=issuer,
            hosted_domain=claims.get("hd"),
            name=claims.get("name"),
            avatar_url=claims.get("picture"),
        )
        self.ensure_allowed_domain(identity)
        return identity
    
    def ensure_allowed_domain(self, identity: VerifiedIdentity) -> None:
        """Enforce the institutional allow-list; an empty list allows everyone."""
        if not self.allowed_domains:
            return
        
        hosted_domain = (identity.hosted_domain or "").lower()
        if identity.email_domain in self.allowed_domains or (
            hosted_domain and hosted_domain in self.allowed_domains
        ):
            return
        
        logger.warning(f"Rejected sign-in for domain {identity.email_domain!r} (hd={hosted_domain or None!r})")
        raise DomainNotAllowedError("Institutional domain is not allowed")
