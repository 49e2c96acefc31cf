"""Access and refresh token issuing."""

import hashlib
import hmac
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from jose import ExpiredSignatureError, JWTError, jwt

from ....config.settings import AppSettings
from ....core.exceptions.auth import InvalidAccessTokenError
from ...users.entities.user import UserRole
from ..entities.access_token import AccessTokenClaims
from ..entities.refresh_token import IssuedRefreshSecret

logger = logging.getLogger(__name__)

REFRESH_SECRET_BYTES = 48


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenIssuer:
    """Mints signed access tokens and peppered refresh secrets.

    Access tokens are HS256 JWTs carrying ``sub``, ``email`` and ``role``.
    Refresh secrets are random URL-safe strings; only their HMAC-SHA256
    under the server pepper is ever persisted.
    """
    
    ALGORITHM = "HS256"
    
    def __init__(
        self,
        access_secret: str,
        refresh_pepper: str,
        access_token_ttl: timedelta = timedelta(minutes=15),
        refresh_token_ttl: timedelta = timedelta(days=30),
        clock: Callable[[], datetime] = utc_now,
    ):
        if not access_secret:
            raise ValueError("Access token secret is required")
        if not refresh_pepper:
            raise ValueError("Refresh token pepper is required")
        self._access_secret = access_secret
        self._refresh_pepper = refresh_pepper.encode("utf-8")
        self.access_token_ttl = access_token_ttl
        self.refresh_token_ttl = refresh_token_ttl
        self._clock = clock
    
    @classmethod
    def from_settings(cls, settings: AppSettings) -> "TokenIssuer":
        return cls(
            access_secret=settings.jwt_access_secret.get_secret_value(),
            refresh_pepper=settings.refresh_token_pepper.get_secret_value(),
            access_token_ttl=settings.access_token_ttl_delta,
            refresh_token_ttl=timedelta(days=settings.refresh_token_ttl_days),
        )
    
    def issue_access_token(self, user_id: str, email: str, role: UserRole) -> str:
        """Sign a short-lived access token."""
        issued_at = self._clock()
        payload = {
            "sub": user_id,
            "email": email,
            "role": UserRole(role).value,
            "iat": issued_at,
            "exp": issued_at + self.access_token_ttl,
        }
        return jwt.encode(payload, self._access_secret, algorithm=self.ALGORITHM)
    
    def decode_access_token(self, token: str) -> AccessTokenClaims:
        """Verify signature and expiry of an access token.

        Raises:
            InvalidAccessTokenError: on any verification failure
        """
        try:
            payload = jwt.decode(
                token, self._access_secret, algorithms=[self.ALGORITHM], options={"verify_exp": False}
            )
            # Expiry is judged by the issuer clock
            if int(payload["exp"]) <= self._clock().timestamp():
                raise ExpiredSignatureError("Signature has expired.")
            return AccessTokenClaims.from_payload(payload)
        except (JWTError, KeyError, TypeError, ValueError) as e:
            logger.debug(f"Access token rejected: {type(e).__name__}")
            raise InvalidAccessTokenError("Invalid or expired token") from e
    
    def issue_refresh_token(self) -> IssuedRefreshSecret:
        """Generate a refresh secret and its keyed hash."""
        secret = secrets.token_urlsafe(REFRESH_SECRET_BYTES)
        return IssuedRefreshSecret(secret=secret, hash=self.hash_refresh_secret(secret))
    
    def hash_refresh_secret(self, secret: str) -> str:
        return hmac.new(self._refresh_pepper, secret.encode("utf-8"), hashlib.sha256).hexdigest()
    
    def verify_refresh_secret(self, secret: str, stored_hash: str) -> bool:
        """Constant-time comparison of a presented secret against a stored hash."""
        presented = self.hash_refresh_secret(secret)
        return hmac.compare_digest(presented.encode("ascii"), (stored_hash or "").encode("ascii", "replace"))
    
    def refresh_expiry(self, now: Optional[datetime] = None) -> datetime:
        """Expiry for a session created at ``now``."""
        return (now or self._clock()) + self.refresh_token_ttl
    
    def now(self) -> datetime:
        return self._clock()
